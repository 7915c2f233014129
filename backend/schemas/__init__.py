"""Pydantic schemas for stored records and API requests."""

from .records import StoredSchema
from .requests import SchemaCreate

__all__ = [
    "SchemaCreate",
    "StoredSchema",
]
