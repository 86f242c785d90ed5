"""
Models module - registered document models.

Importing this package registers every model once for the process:
- Student -> "students" collection, unique on id and email
"""

from student_records.models.registry import (
    ModelDefinition,
    get_model,
    register_model,
    registered_models,
)
from student_records.schemas.student import STUDENT_MESSAGES, Student

StudentModel = register_model(
    "Student",
    Student,
    messages=STUDENT_MESSAGES,
    unique=("id", "email"),
)

__all__ = [
    "ModelDefinition",
    "StudentModel",
    "get_model",
    "register_model",
    "registered_models",
]
