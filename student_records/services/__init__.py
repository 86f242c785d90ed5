"""
Services module - collection-level operations on registered models.
"""
from student_records.services.student_service import StudentService

__all__ = ["StudentService"]
