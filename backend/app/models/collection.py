"""
Collection request model for collections database.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CollectionStatus(str, Enum):
    """Collection request status.

    Only PENDING is ever written by this service; the other values can be
    set on a document directly by operators.
    """
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class CollectionRequest(BaseModel):
    """
    Collection request document model for MongoDB collections_db.requests.

    ``user_id`` and ``user_name`` are copied from the caller and never checked
    against auth_db.users.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    user_id: str = Field(..., description="Owning user ID (not enforced)")
    user_name: str = Field(..., description="Owning user name (denormalized copy)")
    waste_type: str = Field(..., description="Waste category, free text")
    location: str = Field(..., description="Location label")
    address: str = Field(..., description="Street or postal address")
    date_time: datetime = Field(..., description="Scheduled pickup date and time")
    kilograms: float = Field(..., ge=0, description="Weight in kilograms")
    reward_points: float = Field(..., description="Reward points supplied by the caller")
    status: CollectionStatus = Field(
        default=CollectionStatus.PENDING.value,
        description="Request status"
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When this record was created"
    )

    class Config:
        populate_by_name = True
        use_enum_values = True

    def to_document(self) -> dict:
        """MongoDB document for insertion (without ``_id``)."""
        return self.model_dump(exclude={"id"})
