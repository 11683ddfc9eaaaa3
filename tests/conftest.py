"""
Global test fixtures for EcoCollect.

This module provides shared fixtures for all tests including:
- Test settings (JWT secret set before the app is imported)
- Mock MongoDB (mongomock-motor)
- User and collection payload factories
- FastAPI test clients wired to the mock database
"""

import os
import sys
from pathlib import Path
from typing import Generator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Settings fail fast without a secret, so provide one before anything imports app.config
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    Each test gets its own in-memory server.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
    except ImportError:
        pytest.skip("mongomock-motor not installed")
    return AsyncMongoMockClient()


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database with the unique email index."""
    db = mock_async_mongo_client["auth_db"]
    await db.users.create_index("email", unique=True)
    yield db


@pytest_asyncio.fixture
async def mock_collections_db(mock_async_mongo_client):
    """Provide mock collections_db database."""
    db = mock_async_mongo_client["collections_db"]
    await db.requests.create_index([("created_at", -1), ("_id", -1)])
    yield db


@pytest.fixture
def mock_reference_db(mock_async_mongo_client):
    """Provide mock reference_db database."""
    return mock_async_mongo_client["reference_db"]


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "name": "Abebe Kebede",
        "email": "abebe@example.com",
        "password": "SecurePassword123!",
        "phone": "0911000000",
    }


@pytest.fixture
def collection_payload() -> dict:
    """A complete collection request body as a client would post it."""
    return {
        "userId": "665f1c2e8b3e4a0012345678",
        "userName": "Abebe Kebede",
        "wasteType": "Plastic",
        "location": "Bole",
        "address": "Bole Road, Addis Ababa",
        "dateTime": "2024-06-01T09:30:00Z",
        "kilograms": 12.5,
        "rewardPoints": 25,
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app():
    """Import the FastAPI app."""
    from app.main import app
    return app


@pytest.fixture
def client(app, mock_async_mongo_client) -> Generator:
    """
    TestClient whose services all run against the mock MongoDB.

    The lifespan hook also runs against the mock, so startup index creation
    (including the unique email index) is exercised.
    """
    from app.database.databases import auth_db, collections_db, reference_db
    from app.routers.auth import get_auth_service
    from app.routers.collections import get_collection_ledger
    from app.routers.reference import get_reference_service
    from app.services import AuthService, CollectionLedger, ReferenceService

    def _auth_service():
        return AuthService(mock_async_mongo_client[auth_db.DB_NAME])

    def _collection_ledger():
        return CollectionLedger(mock_async_mongo_client[collections_db.DB_NAME])

    def _reference_service():
        return ReferenceService(mock_async_mongo_client[reference_db.DB_NAME])

    app.dependency_overrides[get_auth_service] = _auth_service
    app.dependency_overrides[get_collection_ledger] = _collection_ledger
    app.dependency_overrides[get_reference_service] = _reference_service

    with patch("app.main.get_mongo_client", new=AsyncMock(return_value=mock_async_mongo_client)), \
         patch("app.main.close_connections", new=AsyncMock()):
        with TestClient(app) as c:
            yield c

    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client, test_user_data) -> dict:
    """Register the test user through the API and return the response body."""
    response = client.post("/api/auth/register", json=test_user_data)
    assert response.status_code == 201
    return response.json()


# =============================================================================
# Utility Fixtures
# =============================================================================

@pytest.fixture
def assert_envelope_error():
    """Helper to assert the failure envelope."""
    def _assert(response, status_code: int, message_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert data["success"] is False
        assert "message" in data
        if message_contains:
            assert message_contains.lower() in data["message"].lower()
        return data
    return _assert
