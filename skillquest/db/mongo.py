# skillquest/db/mongo.py
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from skillquest.core.config import settings

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
JOBS_COLLECTION = "jobs"
TESTS_COLLECTION = "test_configs"
SESSIONS_COLLECTION = "test_sessions"

_mongo_client: Optional[AsyncIOMotorClient] = None


def get_mongo_client() -> AsyncIOMotorClient:
    """
    Returns a cached Motor client.
    """
    global _mongo_client
    if _mongo_client is None:
        _mongo_client = AsyncIOMotorClient(settings.MONGODB_URI)
    return _mongo_client


def get_db() -> AsyncIOMotorDatabase:
    """FastAPI dependency; tests override it with an in-memory database."""
    client = get_mongo_client()
    return client[settings.MONGODB_DB]


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    await db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    await db[JOBS_COLLECTION].create_index([("company", ASCENDING)])
    await db[JOBS_COLLECTION].create_index([("isActive", ASCENDING)])
    await db[TESTS_COLLECTION].create_index([("testId", ASCENDING)], unique=True)
    await db[SESSIONS_COLLECTION].create_index([("sessionId", ASCENDING)], unique=True)


async def init_db() -> None:
    db = get_db()
    await ensure_indexes(db)
    logger.info("Connected to MongoDB database %s", settings.MONGODB_DB)


def close_db() -> None:
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
