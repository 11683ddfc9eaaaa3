"""
System database configuration.
Holds the registry of every EcoCollect database and its collections.
"""

DB_NAME = "system_db"

# Bumped whenever a manifest's collections or indexes change
SCHEMA_VERSION = "1.0"


class Collections:
    """Collection names in system_db."""
    DB_REGISTRY = "db_registry"
    METADATA = "_metadata"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Database registry for EcoCollect",
    "collections": [Collections.DB_REGISTRY, Collections.METADATA],
    "access_level": "system",
}
