"""
User model for authentication database.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    User document model for MongoDB auth_db.users collection.

    Email is kept exactly as given at registration and is unique across users.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Unique email address")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    phone: str = Field(..., min_length=1, description="Contact phone number")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp"
    )

    class Config:
        populate_by_name = True
