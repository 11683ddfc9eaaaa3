"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserListResponse,
    UserPublic,
)
from app.schemas.collection import (
    CollectionCreatedResponse,
    CollectionListResponse,
    CollectionResponse,
)
from app.schemas.reference import (
    CenterListResponse,
    CenterResponse,
    TutorialListResponse,
    TutorialResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UserListResponse",
    "UserPublic",
    # Collections
    "CollectionCreatedResponse",
    "CollectionListResponse",
    "CollectionResponse",
    # Reference
    "CenterListResponse",
    "CenterResponse",
    "TutorialListResponse",
    "TutorialResponse",
]
