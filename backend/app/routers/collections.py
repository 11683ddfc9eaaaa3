"""
Collections router for scheduling and listing waste pickups.
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, status

from app.database.connections import get_database
from app.database.databases import collections_db
from app.schemas.collection import (
    COLLECTION_CREATE_EXAMPLE,
    CollectionCreatedResponse,
    CollectionListResponse,
)
from app.services.collection_service import CollectionLedger

router = APIRouter(prefix="/api/collections", tags=["Collections"])


async def get_collection_ledger() -> CollectionLedger:
    """Dependency to get CollectionLedger instance."""
    db = await get_database(collections_db.DB_NAME)
    return CollectionLedger(db)


@router.post(
    "",
    response_model=CollectionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Schedule a collection",
)
async def create_collection(
    body: Optional[dict[str, Any]] = Body(None, examples=[COLLECTION_CREATE_EXAMPLE]),
    ledger: CollectionLedger = Depends(get_collection_ledger),
):
    """
    Schedule a waste pickup.

    Required: **userId**, **userName**, **wasteType**, **location**, **address**,
    **dateTime** (ISO-8601), **kilograms**. **rewardPoints** must be numeric.

    The request is stored with status `pending`. On a validation failure the
    received body is echoed back as `receivedData`; a missing body counts as `{}`.
    """
    collection = await ledger.schedule(body or {})
    return CollectionCreatedResponse(collection=collection)


@router.get(
    "",
    response_model=CollectionListResponse,
    summary="List all collections",
)
async def list_collections(ledger: CollectionLedger = Depends(get_collection_ledger)):
    """List every collection request, most recent first."""
    return CollectionListResponse(collections=await ledger.list_all())


@router.get(
    "/user/{user_id}",
    response_model=CollectionListResponse,
    summary="List a user's collections",
)
async def list_user_collections(
    user_id: str,
    ledger: CollectionLedger = Depends(get_collection_ledger),
):
    """List the collection requests of one user, most recent first."""
    return CollectionListResponse(collections=await ledger.list_by_user(user_id))
