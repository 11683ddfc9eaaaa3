"""
Backend-specific test fixtures.

These fixtures build services directly on the mock databases so service
behaviour can be tested without going through HTTP.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio
from bson import ObjectId
from fastapi.testclient import TestClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def auth_service(mock_auth_db):
    """AuthService on the mock auth_db (unique email index in place)."""
    from app.services.auth_service import AuthService
    return AuthService(mock_auth_db)


@pytest_asyncio.fixture
async def collection_ledger(mock_collections_db):
    """CollectionLedger on the mock collections_db."""
    from app.services.collection_service import CollectionLedger
    return CollectionLedger(mock_collections_db)


@pytest.fixture
def reference_service(mock_reference_db):
    """ReferenceService on the mock reference_db."""
    from app.services.reference_service import ReferenceService
    return ReferenceService(mock_reference_db)


@pytest.fixture
def register_request(test_user_data):
    """RegisterRequest built from the test user data."""
    from app.schemas.auth import RegisterRequest
    return RegisterRequest(**test_user_data)


@pytest.fixture
def make_collection(collection_payload):
    """
    Factory for collection payloads with overrides.

    Usage:
        payload = make_collection(userId="u2", kilograms=3)
    """
    def _make(**overrides):
        payload = dict(collection_payload)
        payload.update(overrides)
        return payload
    return _make


# =============================================================================
# Mocked Service Fixtures
# =============================================================================

@pytest.fixture
def mock_auth_service():
    """
    Create a fully mocked AuthService.

    All methods are AsyncMock, allowing you to configure return values:

        mock_auth_service.register_user.return_value = RegisterResponse(...)
    """
    service = MagicMock()
    service.register_user = AsyncMock()
    service.login = AsyncMock()
    service.list_users = AsyncMock(return_value=[])
    service.get_user_by_email = AsyncMock()
    return service


@pytest.fixture
def mock_reference_service():
    """Create a fully mocked ReferenceService."""
    service = MagicMock()
    service.list_centers = AsyncMock(return_value=[])
    service.list_tutorials = AsyncMock(return_value=[])
    return service


@pytest.fixture
def mock_requests_collection():
    """
    Mocked Motor collection for collections_db.requests.

    insert_one hands out a fresh ObjectId per call; find() returns a cursor
    whose sort() chains and whose to_list() returns ``[]`` unless configured.
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock(
        side_effect=lambda doc: MagicMock(inserted_id=ObjectId())
    )
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value = cursor
    return collection


@pytest.fixture
def mocked_ledger(mock_requests_collection):
    """Real CollectionLedger running on the mocked requests collection."""
    from app.services.collection_service import CollectionLedger

    db = MagicMock()
    db.__getitem__.return_value = mock_requests_collection
    return CollectionLedger(db)


@pytest.fixture
def mocked_client(app, mock_auth_service, mocked_ledger, mock_reference_service):
    """
    TestClient with no database at all.

    Auth and reference services are mocks; collection requests go through the
    real validator and ledger on a mocked collection.
    """
    from app.routers.auth import get_auth_service
    from app.routers.collections import get_collection_ledger
    from app.routers.reference import get_reference_service

    app.dependency_overrides[get_auth_service] = lambda: mock_auth_service
    app.dependency_overrides[get_collection_ledger] = lambda: mocked_ledger
    app.dependency_overrides[get_reference_service] = lambda: mock_reference_service

    with patch("app.main.get_mongo_client", new=AsyncMock()), \
         patch("app.main.sync_registry", new=AsyncMock()), \
         patch("app.main.create_indexes", new=AsyncMock()), \
         patch("app.main.close_connections", new=AsyncMock()):
        with TestClient(app) as c:
            yield c

    app.dependency_overrides.clear()
