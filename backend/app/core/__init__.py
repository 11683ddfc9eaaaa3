"""
Core module - Security, error taxonomy and logging setup.
"""
from app.core.errors import (
    DuplicateIdentity,
    InvalidCredentials,
    InvalidFields,
    MissingFields,
    PersistenceFailure,
    ServiceError,
    Unknown,
)
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)

__all__ = [
    "DuplicateIdentity",
    "InvalidCredentials",
    "InvalidFields",
    "MissingFields",
    "PersistenceFailure",
    "ServiceError",
    "Unknown",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
]
