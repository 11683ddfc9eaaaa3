"""
Database registry management.
Registers every database on startup and creates the indexes the services rely on.
"""
import logging
from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorClient

from app.database.databases import auth_db, collections_db, reference_db, system_db

logger = logging.getLogger(__name__)

# All database manifests
ALL_DB_MANIFESTS = [
    auth_db.DB_MANIFEST,
    collections_db.DB_MANIFEST,
    reference_db.DB_MANIFEST,
    system_db.DB_MANIFEST,
]


async def sync_registry(client: AsyncIOMotorClient) -> None:
    """
    Synchronize the database registry on application startup.
    Ensures all databases are registered in system_db.db_registry.
    """
    registry_collection = client[system_db.DB_NAME][system_db.Collections.DB_REGISTRY]
    now = datetime.now(timezone.utc)

    for manifest in ALL_DB_MANIFESTS:
        db_name = manifest["db_name"]

        await registry_collection.update_one(
            {"_id": db_name},
            {
                "$set": {
                    "purpose": manifest["purpose"],
                    "collections": manifest["collections"],
                    "access_level": manifest["access_level"],
                    "schema_version": system_db.SCHEMA_VERSION,
                    "updated_at": now,
                },
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )

        await client[db_name]["_metadata"].update_one(
            {"_id": "db_metadata"},
            {
                "$set": {"db_name": db_name, "last_updated_at": now},
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )

    logger.info("Registry synced for %d databases", len(ALL_DB_MANIFESTS))


async def create_indexes(client: AsyncIOMotorClient) -> None:
    """Create necessary indexes for all databases."""

    # Email uniqueness is enforced here, not by a lookup before insert
    users = client[auth_db.DB_NAME][auth_db.Collections.USERS]
    await users.create_index("email", unique=True)

    requests = client[collections_db.DB_NAME][collections_db.Collections.REQUESTS]
    await requests.create_index([("created_at", -1), ("_id", -1)])
    await requests.create_index([("user_id", 1), ("created_at", -1), ("_id", -1)])

    reference = client[reference_db.DB_NAME]
    await reference[reference_db.Collections.CENTERS].create_index("name")
    await reference[reference_db.Collections.TUTORIALS].create_index("category")
