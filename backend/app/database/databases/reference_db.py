"""
Reference database configuration.
Read-only lookup tables: recycling centers and educational tutorials.
"""

DB_NAME = "reference_db"


class Collections:
    """Collection names in reference_db."""
    CENTERS = "centers"
    TUTORIALS = "tutorials"
    METADATA = "_metadata"


# Manifest for registry
DB_MANIFEST = {
    "db_name": DB_NAME,
    "purpose": "Recycling centers and tutorials reference data",
    "collections": [Collections.CENTERS, Collections.TUTORIALS, Collections.METADATA],
    "access_level": "public",
}
