"""
Authentication request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.common import CamelModel, Envelope


class RegisterRequest(CamelModel):
    """Registration request body."""
    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, description="Email address (must be unique)")
    password: str = Field(..., min_length=1, description="Plain text password, hashed before storage")
    phone: str = Field(..., min_length=1, description="Contact phone number")


class LoginRequest(CamelModel):
    """Login request body."""
    email: str = Field(..., min_length=1, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class UserPublic(CamelModel):
    """User information safe to return to callers (never includes the password hash)."""
    id: str = Field(..., alias="_id", description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    phone: str = Field(..., description="Contact phone number")
    created_at: Optional[datetime] = Field(None, description="Account creation timestamp")


class RegisterResponse(Envelope):
    """Registration response."""
    message: str = Field(default="User registered successfully")
    user: UserPublic


class LoginResponse(Envelope):
    """Login response with JWT token."""
    token: str = Field(..., description="JWT access token, valid for one day")
    user: UserPublic


class UserListResponse(Envelope):
    """All registered users, public fields only."""
    users: list[UserPublic]
