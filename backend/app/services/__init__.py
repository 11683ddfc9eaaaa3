"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.collection_service import CollectionLedger
from app.services.reference_service import ReferenceService
from app.services.validation import validate_collection_request

__all__ = [
    "AuthService",
    "CollectionLedger",
    "ReferenceService",
    "validate_collection_request",
]
