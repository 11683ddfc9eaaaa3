"""
Database connection management for MongoDB.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.config import get_settings

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
        logger.info("MongoDB client created")
    return _mongo_client


async def close_connections():
    """Close the MongoDB connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        logger.info("MongoDB client closed")


async def get_database(db_name: str) -> AsyncIOMotorDatabase:
    """Get a specific MongoDB database by name."""
    client = await get_mongo_client()
    return client[db_name]
