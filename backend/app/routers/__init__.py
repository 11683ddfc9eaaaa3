"""
API Routers module.
"""
from app.routers import auth, collections, health, reference, users

__all__ = ["auth", "collections", "health", "reference", "users"]
