"""
Collection request schemas.
"""
from datetime import datetime

from pydantic import Field

from app.models.collection import CollectionStatus
from app.schemas.common import CamelModel, Envelope

# Example body for the OpenAPI docs
COLLECTION_CREATE_EXAMPLE = {
    "userId": "665f1c2e8b3e4a0012345678",
    "userName": "Abebe",
    "wasteType": "Plastic",
    "location": "Bole",
    "address": "Bole Road, Addis Ababa",
    "dateTime": "2024-06-01T09:30:00Z",
    "kilograms": 12.5,
    "rewardPoints": 25,
}


class CollectionResponse(CamelModel):
    """A stored collection request."""
    id: str = Field(..., alias="_id", description="Collection request ID")
    user_id: str = Field(..., description="Owning user ID")
    user_name: str = Field(..., description="Owning user name as supplied")
    waste_type: str
    location: str
    address: str
    date_time: datetime = Field(..., description="Scheduled pickup time")
    kilograms: float
    reward_points: float
    status: CollectionStatus
    created_at: datetime


class CollectionCreatedResponse(Envelope):
    """Response for a newly scheduled collection."""
    message: str = Field(default="Collection scheduled successfully")
    collection: CollectionResponse


class CollectionListResponse(Envelope):
    """Collection requests, most recent first."""
    collections: list[CollectionResponse]
