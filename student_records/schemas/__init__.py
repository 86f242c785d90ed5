"""
Schemas module - pydantic models describing stored documents.

Difference from models:
- Schemas: field types, constraints and messages (pure metadata)
- Models: a schema registered under a name and bound to a collection
"""

from student_records.schemas.messages import MessageCatalog, render_message
from student_records.schemas.student import (
    BloodGroup,
    Gender,
    Guardian,
    LocalGuardian,
    Student,
    StudentStatus,
    STUDENT_MESSAGES,
    UserName,
)

__all__ = [
    "BloodGroup",
    "Gender",
    "Guardian",
    "LocalGuardian",
    "MessageCatalog",
    "render_message",
    "Student",
    "StudentStatus",
    "STUDENT_MESSAGES",
    "UserName",
]
