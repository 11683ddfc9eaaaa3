"""
Authentication router for registration and login.
"""
from fastapi import APIRouter, Depends, status

from app.database.connections import get_database
from app.database.databases import auth_db
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
)
from app.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


async def get_auth_service() -> AuthService:
    """Dependency to get AuthService instance."""
    db = await get_database(auth_db.DB_NAME)
    return AuthService(db)


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **name**: Display name
    - **email**: Email address (must be unique)
    - **password**: Password, stored only as a bcrypt hash
    - **phone**: Contact phone number
    """
    return await auth_service.register_user(body)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token valid for one day.
    """
    return await auth_service.login(body)
