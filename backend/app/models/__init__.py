"""
Pydantic models for database documents.
"""
from app.models.user import User
from app.models.collection import CollectionRequest, CollectionStatus
from app.models.reference import RecyclingCenter, Tutorial

__all__ = [
    "User",
    "CollectionRequest",
    "CollectionStatus",
    "RecyclingCenter",
    "Tutorial",
]
