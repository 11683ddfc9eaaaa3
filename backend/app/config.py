"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"

    # JWT Configuration (no default secret: startup fails if JWT_SECRET_KEY is unset)
    jwt_secret_key: str = Field(..., min_length=1)
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 24 * 60

    # Password hashing cost
    bcrypt_rounds: int = 10

    # HTTP
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Reference data
    seed_reference_data: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
