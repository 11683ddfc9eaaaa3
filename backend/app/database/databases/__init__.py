"""
Database definitions and collection constants.
"""
from app.database.databases import auth_db, collections_db, reference_db, system_db

__all__ = ["auth_db", "collections_db", "reference_db", "system_db"]
