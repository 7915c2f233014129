"""
Schema storage facade.
Typed store/get/list/delete for schema records over a namespaced key-value backend.
Records are persisted as UTF-8 JSON: {"id": ..., "schema": {...}, "token": ...},
with "token" omitted when unset.
"""

import json
import logging
from typing import Optional

from errors import (
    BackendError,
    InvalidConfigurationError,
    RecordNotFoundError,
    RecordSerializationError,
    RecordValidationError,
    SchemaStorageError,
)
from repositories.base import StoreProtocol
from schemas.records import StoredSchema

NAMESPACE = "schema"


def encode_record(record: StoredSchema) -> bytes:
    """Serialize a record. Raises ValueError/TypeError when the document is not plain JSON."""
    return json.dumps(record.to_payload(), ensure_ascii=False, allow_nan=False).encode("utf-8")


def decode_record(data: bytes) -> StoredSchema:
    """Deserialize a record. Raises ValueError (pydantic ValidationError) on malformed input."""
    return StoredSchema.model_validate_json(data)


def _try_decode(data: bytes) -> Optional[StoredSchema]:
    try:
        return decode_record(data)
    except ValueError:
        return None


class SchemaStorage:
    """Persistence facade for schema records. Holds no state besides the backend."""

    def __init__(self, db: StoreProtocol, logger: Optional[logging.Logger] = None):
        if db is None:
            raise InvalidConfigurationError("schema storage backend reference is missing", "new")
        if not isinstance(db, StoreProtocol):
            raise InvalidConfigurationError(
                f"{type(db).__name__} does not implement the storage backend contract", "new"
            )
        self._db = db
        self._logger = logger or logging.getLogger(__name__)

    @property
    def namespace(self) -> str:
        return NAMESPACE

    def _fail(self, err: SchemaStorageError, cause: Optional[BaseException] = None) -> SchemaStorageError:
        self._logger.error("Schema storage failure: %s", err, exc_info=cause)
        return err

    def store_schema(self, record: StoredSchema, *, timeout: Optional[float] = None) -> None:
        """Write `record` under its id, fully replacing any prior value."""
        schema_id = record.id
        if not schema_id:
            raise self._fail(RecordValidationError("could not store schema without an ID", "store"))
        try:
            data = encode_record(record)
        except (TypeError, ValueError) as e:
            raise self._fail(
                RecordSerializationError(f"could not encode schema: {e}", "store", schema_id), e
            ) from e
        try:
            self._db.write(NAMESPACE, schema_id, data, timeout=timeout)
        except Exception as e:
            raise self._fail(BackendError(f"could not store schema: {e}", "store", schema_id), e) from e

    def get_schema(self, schema_id: str, *, timeout: Optional[float] = None) -> StoredSchema:
        """Read one record. Raises RecordNotFoundError when nothing is stored under `schema_id`."""
        try:
            data = self._db.read(NAMESPACE, schema_id, timeout=timeout)
        except Exception as e:
            raise self._fail(BackendError(f"could not get schema: {e}", "get", schema_id), e) from e
        # empty bytes count as absent, same as None
        if not data:
            raise self._fail(RecordNotFoundError(f"schema not found with id: {schema_id}", "get", schema_id))
        try:
            return decode_record(data)
        except ValueError as e:
            raise self._fail(
                RecordSerializationError(f"could not decode stored schema: {e}", "get", schema_id), e
            ) from e

    def list_schemas(self, *, timeout: Optional[float] = None) -> list[StoredSchema]:
        """Return every record that decodes, in backend scan order.

        Entries that fail to decode are skipped rather than failing the whole
        listing. Only a failed scan raises.
        """
        try:
            blobs = self._db.read_all(NAMESPACE, timeout=timeout)
        except Exception as e:
            raise self._fail(BackendError(f"could not get all schemas: {e}", "list"), e) from e
        if not blobs:
            self._logger.info("No schemas to get")
            return []

        stored: list[StoredSchema] = []
        for data in blobs:
            record = _try_decode(data)
            if record is not None:
                stored.append(record)
        skipped = len(blobs) - len(stored)
        if skipped:
            self._logger.debug("Skipped %d undecodable schema record(s)", skipped)
        return stored

    def delete_schema(self, schema_id: str, *, timeout: Optional[float] = None) -> None:
        """Delete one record. Deleting an absent id behaves however the backend does."""
        try:
            self._db.delete(NAMESPACE, schema_id, timeout=timeout)
        except Exception as e:
            raise self._fail(BackendError(f"could not delete schema: {e}", "delete", schema_id), e) from e
