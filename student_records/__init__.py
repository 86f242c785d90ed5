"""
Student Records
Validated Student documents for a MongoDB-backed school system.

Architecture:
- Schemas: pydantic models describing the Student document and its sub-records
- Models: process-wide registry binding a schema name to a collection
- MongoDB: storage, querying and uniqueness of id/email (via pymongo)
"""

__version__ = "1.0.0"
