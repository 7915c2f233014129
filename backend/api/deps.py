"""FastAPI dependencies and require-helpers for routes."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from api.helpers import http_error
from config import get_settings
from errors import SchemaStorageError
from repositories import build_store
from schema_storage import SchemaStorage
from schemas.records import StoredSchema


@lru_cache(maxsize=1)
def get_schema_storage() -> SchemaStorage:
    """Return the process-wide schema storage facade. Use in Depends()."""
    return SchemaStorage(build_store(get_settings()))


def require_schema(
    schema_id: str,
    storage: Annotated[SchemaStorage, Depends(get_schema_storage)],
) -> StoredSchema:
    """Load schema by id or raise (404 when absent). Use as Depends(require_schema) with schema_id in path."""
    try:
        return storage.get_schema(schema_id)
    except SchemaStorageError as e:
        raise http_error(e) from e
