"""
Validation and normalization of inbound collection requests.

Turns the raw JSON body posted by clients into a ``CollectionRequest`` ready
for insertion. Presence is checked on truthiness, so ``""``, ``0`` and
``None`` all count as missing for the required fields.
"""
import math
from datetime import datetime, timezone
from typing import Any, Optional

from app.core.errors import InvalidFields, MissingFields
from app.models.collection import CollectionRequest, CollectionStatus

# Wire name -> model field name, in the order they are reported
REQUIRED_FIELDS = {
    "userId": "user_id",
    "userName": "user_name",
    "wasteType": "waste_type",
    "location": "location",
    "address": "address",
    "dateTime": "date_time",
    "kilograms": "kilograms",
}

# Stored as strings; objects and arrays are rejected rather than stringified
TEXT_FIELDS = ("userId", "userName", "wasteType", "location", "address")


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 string (or pass through a datetime).

    Naive values are taken as UTC. Returns None if the value can't be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def coerce_number(value: Any) -> Optional[float]:
    """Coerce to a finite float, or None if that isn't possible."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number


def validate_collection_request(
    raw: dict[str, Any],
    now: Optional[datetime] = None,
) -> CollectionRequest:
    """
    Validate a raw collection payload and build the record to store.

    Args:
        raw: Request body using the camelCase wire names
        now: Creation time override (defaults to the current UTC time)

    Returns:
        CollectionRequest with status ``pending`` and ``created_at`` set by
        the server, whatever the caller sent for those two fields

    Raises:
        MissingFields: If any required field is absent or falsy
        InvalidFields: If a text field is an object or array, or dateTime,
            kilograms or rewardPoints can't be coerced
    """
    missing = [name for name in REQUIRED_FIELDS if not raw.get(name)]
    if missing:
        raise MissingFields(missing, raw)

    date_time = parse_datetime(raw["dateTime"])
    kilograms = coerce_number(raw["kilograms"])
    reward_points = coerce_number(raw.get("rewardPoints"))

    invalid = [name for name in TEXT_FIELDS if not isinstance(raw[name], (str, int, float))]
    if date_time is None:
        invalid.append("dateTime")
    if kilograms is None or kilograms < 0:
        invalid.append("kilograms")
    if reward_points is None:
        invalid.append("rewardPoints")
    if invalid:
        raise InvalidFields(invalid, raw)

    return CollectionRequest(
        user_id=str(raw["userId"]),
        user_name=str(raw["userName"]),
        waste_type=str(raw["wasteType"]),
        location=str(raw["location"]),
        address=str(raw["address"]),
        date_time=date_time,
        kilograms=kilograms,
        reward_points=reward_points,
        status=CollectionStatus.PENDING,
        created_at=now or datetime.now(timezone.utc),
    )
