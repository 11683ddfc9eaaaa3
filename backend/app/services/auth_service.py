"""
Authentication service for user registration and login.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import DuplicateIdentity, InvalidCredentials, PersistenceFailure
from app.core.security import create_access_token, hash_password, verify_password
from app.database.databases import auth_db
from app.models.user import User
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserPublic,
)

logger = logging.getLogger(__name__)

# Projection that keeps the password hash out of every read
PUBLIC_PROJECTION = {"hashed_password": 0}


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """
        Register a new user.

        The unique index on ``email`` decides whether the address is taken,
        so two concurrent registrations can't both succeed.

        Args:
            request: Registration request with name, email, password and phone

        Returns:
            RegisterResponse with the public view of the created user

        Raises:
            DuplicateIdentity: If the email is already registered
            PersistenceFailure: If the insert fails for any other reason
        """
        user = User(
            name=request.name,
            email=request.email,
            hashed_password=hash_password(request.password),
            phone=request.phone,
            created_at=datetime.now(timezone.utc),
        )
        user_doc = user.model_dump(exclude={"id"})

        try:
            result = await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.info("Registration rejected, email already registered")
            raise DuplicateIdentity()
        except PyMongoError as e:
            logger.error("Registration error: %s", e)
            raise PersistenceFailure(str(e)) from e

        user_doc["_id"] = result.inserted_id
        logger.info("User %s registered", result.inserted_id)

        return RegisterResponse(user=self._doc_to_public(user_doc))

    async def login(self, request: LoginRequest) -> LoginResponse:
        """
        Authenticate user and return JWT token.

        Unknown email and wrong password raise the same error so callers can't
        tell which one was wrong.

        Raises:
            InvalidCredentials: If credentials don't match a user
            PersistenceFailure: If the lookup fails
        """
        user = await self.get_user_by_email(request.email)

        if user is None or not verify_password(request.password, user.hashed_password):
            raise InvalidCredentials()

        token = create_access_token(user_id=user.id)

        return LoginResponse(token=token, user=self._user_to_public(user))

    async def list_users(self) -> list[UserPublic]:
        """All users, without password hashes."""
        try:
            cursor = self.users_collection.find({}, PUBLIC_PROJECTION)
            docs = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("Get users error: %s", e)
            raise PersistenceFailure(str(e)) from e

        return [self._doc_to_public(doc) for doc in docs]

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email address, matched exactly

        Returns:
            User model or None if not found
        """
        user_doc = await self._find_by_email(email)

        if not user_doc:
            return None

        user_doc["_id"] = str(user_doc["_id"])
        return User(**user_doc)

    async def _find_by_email(self, email: str) -> Optional[dict]:
        try:
            return await self.users_collection.find_one({"email": email})
        except PyMongoError as e:
            logger.error("User lookup error: %s", e)
            raise PersistenceFailure(str(e)) from e

    def _doc_to_public(self, doc: dict) -> UserPublic:
        """Convert MongoDB document to the public user view."""
        return UserPublic(
            id=str(doc["_id"]),
            name=doc["name"],
            email=doc["email"],
            phone=doc["phone"],
            created_at=doc.get("created_at"),
        )

    def _user_to_public(self, user: User) -> UserPublic:
        return UserPublic(
            id=user.id,
            name=user.name,
            email=user.email,
            phone=user.phone,
            created_at=user.created_at,
        )
