"""
Reference data models: recycling centers and tutorials.
"""
from typing import Optional

from pydantic import BaseModel, Field


class RecyclingCenter(BaseModel):
    """Recycling center document in reference_db.centers."""
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    name: str
    address: str
    phone: str
    latitude: float
    longitude: float
    accepted_waste_types: list[str]
    operating_hours: str

    class Config:
        populate_by_name = True


class Tutorial(BaseModel):
    """Tutorial document in reference_db.tutorials."""
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    title: str
    description: str
    image_url: str
    video_url: Optional[str] = None
    steps: list[str]
    category: str

    class Config:
        populate_by_name = True
