"""
Shared schema base classes.
"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, populated by field name or alias."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class Envelope(CamelModel):
    """Uniform response wrapper: every body carries ``success``."""
    success: bool = Field(default=True, description="Whether the operation succeeded")
