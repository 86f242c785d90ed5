"""
Student Service - CRUD operations for the students collection.

Every write goes through StudentModel.validate first, so nothing reaches
the collection unless the whole record passes. The store itself guards
uniqueness of id and email; a duplicate surfaces as ConstraintViolation.
"""

import logging
from typing import Any, Dict, List, Optional

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from student_records.core.errors import ConstraintViolation
from student_records.models import StudentModel

logger = logging.getLogger(__name__)


# ============================================================
# HELPER: Convert ObjectId to string for JSON serialization
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs) -> list:
    """Convert MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def constraint_violation(error: DuplicateKeyError) -> ConstraintViolation:
    """Name the unique field that collided, from the server's keyValue detail."""
    key_value = (error.details or {}).get("keyValue") or {}
    if key_value:
        field, value = next(iter(key_value.items()))
    else:
        field, value = "unknown", None
    return ConstraintViolation(field, value)


# ============================================================
# STUDENTS COLLECTION
# ============================================================

class StudentService:
    """
    Handles Student document storage.
    Documents are keyed by the `id` field (not Mongo's _id).
    """

    def __init__(self, collection: Collection = None):
        if collection is None:
            # Deferred so importing this module never opens a client
            from student_records.db.mongodb import get_collection
            collection = get_collection(StudentModel.collection_name)
        self.collection: Collection = collection

    def create(self, record: Dict[str, Any]) -> dict:
        """
        Validate and insert a Student.

        Returns:
            The stored document, with _id as string

        Raises:
            ValidationError: record rejected, nothing written
            ConstraintViolation: id or email already taken
        """
        doc = StudentModel.validate(record)
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError as e:
            violation = constraint_violation(e)
            logger.warning("Student create rejected: duplicate %s", violation.field)
            raise violation from e
        doc["_id"] = result.inserted_id
        logger.info("Student %s created", doc["id"])
        return serialize_doc(doc)

    def get_by_id(self, student_id: str) -> Optional[dict]:
        doc = self.collection.find_one({"id": student_id})
        return serialize_doc(doc)

    def get_by_email(self, email: str) -> Optional[dict]:
        doc = self.collection.find_one({"email": email.strip()})
        return serialize_doc(doc)

    def list(self, filters: Optional[dict] = None, limit: int = 0, skip: int = 0) -> List[dict]:
        """Fetch Students matching a raw MongoDB filter, in insertion order."""
        cursor = self.collection.find(filters or {}, skip=skip, limit=limit)
        return serialize_docs(cursor)

    def update(self, student_id: str, changes: Dict[str, Any]) -> Optional[dict]:
        """
        Apply top-level changes and re-validate the whole record.

        Sub-records (name, guardian, localGuardian) are replaced as wholes.

        Returns:
            The updated document, or None if no Student has this id
        """
        StudentModel.require_mapping(changes)

        existing = self.collection.find_one({"id": student_id})
        if existing is None:
            return None

        mongo_id = existing.pop("_id", None)
        merged = {**existing, **changes}
        doc = StudentModel.validate(merged)

        unset = {key: "" for key in existing if key not in doc}
        update = {"$set": doc}
        if unset:
            update["$unset"] = unset

        try:
            self.collection.update_one({"id": student_id}, update)
        except DuplicateKeyError as e:
            violation = constraint_violation(e)
            logger.warning("Student %s update rejected: duplicate %s", student_id, violation.field)
            raise violation from e

        logger.info("Student %s updated", student_id)
        result = dict(doc)
        if mongo_id is not None:
            result["_id"] = mongo_id
        return serialize_doc(result)

    def delete(self, student_id: str) -> bool:
        result = self.collection.delete_one({"id": student_id})
        return result.deleted_count > 0
