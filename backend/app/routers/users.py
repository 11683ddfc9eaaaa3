"""
Users router.
"""
from fastapi import APIRouter, Depends

from app.routers.auth import get_auth_service
from app.schemas.auth import UserListResponse
from app.services.auth_service import AuthService

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
)
async def list_users(auth_service: AuthService = Depends(get_auth_service)):
    """List every registered user. Password hashes are never included."""
    return UserListResponse(users=await auth_service.list_users())
