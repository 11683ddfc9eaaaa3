"""
Reference data schemas.
"""
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, Envelope


class CenterResponse(CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    address: str
    phone: str
    latitude: float
    longitude: float
    accepted_waste_types: list[str]
    operating_hours: str


class TutorialResponse(CamelModel):
    id: str = Field(..., alias="_id")
    title: str
    description: str
    image_url: str
    video_url: Optional[str] = None
    steps: list[str]
    category: str


class CenterListResponse(Envelope):
    centers: list[CenterResponse]


class TutorialListResponse(Envelope):
    tutorials: list[TutorialResponse]
