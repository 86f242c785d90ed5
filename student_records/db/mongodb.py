"""
MongoDB Connection Utility

MongoDB stores:
- Student documents (one collection per registered model)

Uniqueness of id/email lives here as unique indexes: a duplicate is
rejected by the server at write time, never checked by a read-then-write.
"""
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from student_records.core.config import get_settings
from student_records.models import registered_models

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """Get the configured database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str) -> Collection:
    db = get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.error("MongoDB connection failed: %s", e)
        return False


def init_mongo_indexes(db: Database = None):
    """
    Create one unique index per unique field of every registered model.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    for model in registered_models():
        for field in model.unique:
            db[model.collection_name].create_index([(field, ASCENDING)], unique=True)
            logger.info("Unique index on %s.%s ensured", model.collection_name, field)
