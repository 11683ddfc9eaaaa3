"""
Reference data service for recycling centers and tutorials.

Both tables are read-only for API callers. An empty table is filled with the
sample rows on first read.
"""
import copy
import logging

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import get_settings
from app.core.errors import PersistenceFailure
from app.database.databases import reference_db
from app.database.seed_data import SAMPLE_CENTERS, SAMPLE_TUTORIALS
from app.models.reference import RecyclingCenter, Tutorial
from app.schemas.reference import CenterResponse, TutorialResponse

logger = logging.getLogger(__name__)


class ReferenceService:
    """Service for reference data lookups."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with reference database."""
        self.db = db
        self.centers = db[reference_db.Collections.CENTERS]
        self.tutorials = db[reference_db.Collections.TUTORIALS]
        self.seed_enabled = get_settings().seed_reference_data

    async def list_centers(self) -> list[CenterResponse]:
        """All recycling centers."""
        docs = await self._list(self.centers, SAMPLE_CENTERS, "centers")
        centers = [RecyclingCenter(**doc) for doc in docs]
        return [CenterResponse(**center.model_dump()) for center in centers]

    async def list_tutorials(self) -> list[TutorialResponse]:
        """All tutorials."""
        docs = await self._list(self.tutorials, SAMPLE_TUTORIALS, "tutorials")
        tutorials = [Tutorial(**doc) for doc in docs]
        return [TutorialResponse(**tutorial.model_dump()) for tutorial in tutorials]

    async def seed_if_empty(
        self, collection: AsyncIOMotorCollection, samples: list[dict], label: str
    ) -> bool:
        """
        Insert ``samples`` if ``collection`` has no documents.

        Two concurrent first reads can both see an empty table and seed it
        twice; that is tolerated.

        Returns:
            True if the sample rows were inserted
        """
        if await collection.count_documents({}) > 0:
            return False

        # insert_many adds _id to each dict, so never hand it the module constants
        await collection.insert_many(copy.deepcopy(samples))
        logger.info("Seeded %d sample rows into %s", len(samples), label)
        return True

    async def _list(
        self, collection: AsyncIOMotorCollection, samples: list[dict], label: str
    ) -> list[dict]:
        try:
            if self.seed_enabled:
                await self.seed_if_empty(collection, samples, label)
            docs = await collection.find({}).to_list(length=None)
        except PyMongoError as e:
            logger.error("Get %s error: %s", label, e)
            raise PersistenceFailure(str(e)) from e

        for doc in docs:
            doc["_id"] = str(doc["_id"])
        return docs
