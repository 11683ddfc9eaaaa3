"""
Reference data router: recycling centers and tutorials.
"""
from fastapi import APIRouter, Depends

from app.database.connections import get_database
from app.database.databases import reference_db
from app.schemas.reference import CenterListResponse, TutorialListResponse
from app.services.reference_service import ReferenceService

router = APIRouter(prefix="/api", tags=["Reference"])


async def get_reference_service() -> ReferenceService:
    """Dependency to get ReferenceService instance."""
    db = await get_database(reference_db.DB_NAME)
    return ReferenceService(db)


@router.get(
    "/centers",
    response_model=CenterListResponse,
    summary="List recycling centers",
)
async def list_centers(service: ReferenceService = Depends(get_reference_service)):
    """List recycling centers. Sample centers are created if none exist."""
    return CenterListResponse(centers=await service.list_centers())


@router.get(
    "/tutorials",
    response_model=TutorialListResponse,
    summary="List tutorials",
)
async def list_tutorials(service: ReferenceService = Depends(get_reference_service)):
    """List recycling tutorials. Sample tutorials are created if none exist."""
    return TutorialListResponse(tutorials=await service.list_tutorials())
