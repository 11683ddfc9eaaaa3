"""
Service-level error taxonomy.

Services raise these; the API layer turns them into the uniform
``{"success": false, ...}`` envelope with the matching HTTP status.
"""
from typing import Any, Optional

from fastapi import status


class ServiceError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_envelope(self) -> dict[str, Any]:
        """Response body for this error."""
        return {"success": False, "message": self.message}


class DuplicateIdentity(ServiceError):
    """A user with the same email is already registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class InvalidCredentials(ServiceError):
    """Unknown email or wrong password (deliberately indistinguishable)."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class MissingFields(ServiceError):
    """Required collection request fields are absent or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"
    fields_key = "missingFields"

    def __init__(
        self,
        fields: list[str],
        received_data: dict[str, Any],
        message: Optional[str] = None,
    ):
        super().__init__(message)
        self.fields = fields
        self.received_data = received_data

    def to_envelope(self) -> dict[str, Any]:
        envelope = super().to_envelope()
        envelope[self.fields_key] = self.fields
        envelope["receivedData"] = self.received_data
        return envelope


class InvalidFields(MissingFields):
    """Fields are present but cannot be coerced to their declared type."""

    default_message = "Invalid field values"
    fields_key = "invalidFields"


class PersistenceFailure(ServiceError):
    """The document store rejected or failed an operation."""

    def __init__(self, detail: str):
        super().__init__(f"Server error: {detail}")
        self.detail = detail


class Unknown(ServiceError):
    """Any failure not covered by the other error types."""
