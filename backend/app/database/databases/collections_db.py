"""
Collections database configuration.
Stores scheduled waste collection requests and their reward points.
"""

DB_NAME = "collections_db"


class Collections:
    """Collection names in collections_db."""
    REQUESTS = "requests"
    METADATA = "_metadata"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Waste collection requests and reward points",
    "collections": [Collections.REQUESTS, Collections.METADATA],
    "access_level": "standard",
}
