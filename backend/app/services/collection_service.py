"""
Collection ledger: storage and retrieval of waste collection requests.
"""
import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.core.errors import PersistenceFailure
from app.database.databases import collections_db
from app.models.collection import CollectionRequest
from app.schemas.collection import CollectionResponse
from app.services.validation import validate_collection_request

logger = logging.getLogger(__name__)

# Most recent first; _id breaks ties between identical timestamps
NEWEST_FIRST = [("created_at", -1), ("_id", -1)]


class CollectionLedger:
    """Service for collection request operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with collections database."""
        self.db = db
        self.requests = db[collections_db.Collections.REQUESTS]

    async def schedule(self, raw: dict[str, Any]) -> CollectionResponse:
        """
        Validate a raw request body and store it as a new pending request.

        Raises:
            MissingFields: If a required field is missing
            InvalidFields: If a field can't be coerced
            PersistenceFailure: If the insert fails
        """
        logger.debug("Received collection data: %s", raw)
        record = validate_collection_request(raw)
        created = await self.create(record)
        logger.info(
            "Collection %s scheduled for user %s (%s kg, %s points)",
            created.id,
            created.user_id,
            created.kilograms,
            created.reward_points,
        )
        return created

    async def create(self, record: CollectionRequest) -> CollectionResponse:
        """Insert a validated record and return it with its generated ID."""
        doc = record.to_document()
        try:
            result = await self.requests.insert_one(doc)
        except PyMongoError as e:
            logger.error("Collection creation error: %s", e)
            raise PersistenceFailure(str(e)) from e

        doc["_id"] = result.inserted_id
        return self._doc_to_response(doc)

    async def list_all(self) -> list[CollectionResponse]:
        """All collection requests, most recent first."""
        return await self._find({})

    async def list_by_user(self, user_id: str) -> list[CollectionResponse]:
        """Collection requests owned by ``user_id``, most recent first."""
        return await self._find({"user_id": user_id})

    async def _find(self, query: dict) -> list[CollectionResponse]:
        try:
            cursor = self.requests.find(query).sort(NEWEST_FIRST)
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("Get collections error: %s", e)
            raise PersistenceFailure(str(e)) from e

        return [self._doc_to_response(doc) for doc in docs]

    def _doc_to_response(self, doc: dict) -> CollectionResponse:
        """Convert MongoDB document to CollectionResponse."""
        return CollectionResponse(
            id=str(doc["_id"]),
            user_id=doc["user_id"],
            user_name=doc["user_name"],
            waste_type=doc["waste_type"],
            location=doc["location"],
            address=doc["address"],
            date_time=doc["date_time"],
            kilograms=doc["kilograms"],
            reward_points=doc["reward_points"],
            status=doc["status"],
            created_at=doc["created_at"],
        )
