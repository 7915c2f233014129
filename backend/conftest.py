from typing import Optional

import pytest

from repositories import MemoryStore
from schema_storage import SchemaStorage
from schemas.records import StoredSchema


class RecordingStore(MemoryStore):
    """MemoryStore that remembers every call made to it."""

    def __init__(self):
        super().__init__()
        self.calls: list[tuple] = []

    def write(self, namespace, key, data, *, timeout: Optional[float] = None):
        self.calls.append(("write", namespace, key, timeout))
        super().write(namespace, key, data, timeout=timeout)

    def read(self, namespace, key, *, timeout: Optional[float] = None):
        self.calls.append(("read", namespace, key, timeout))
        return super().read(namespace, key, timeout=timeout)

    def read_all(self, namespace, *, timeout: Optional[float] = None):
        self.calls.append(("read_all", namespace, None, timeout))
        return super().read_all(namespace, timeout=timeout)

    def delete(self, namespace, key, *, timeout: Optional[float] = None):
        self.calls.append(("delete", namespace, key, timeout))
        super().delete(namespace, key, timeout=timeout)


class FailingStore:
    """Backend whose every operation fails."""

    def __init__(self, exc: Exception = None):
        self.exc = exc or OSError("disk on fire")

    def write(self, namespace, key, data, *, timeout=None):
        raise self.exc

    def read(self, namespace, key, *, timeout=None):
        raise self.exc

    def read_all(self, namespace, *, timeout=None):
        raise self.exc

    def delete(self, namespace, key, *, timeout=None):
        raise self.exc


@pytest.fixture
def backend() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def storage(backend) -> SchemaStorage:
    return SchemaStorage(backend)


@pytest.fixture
def make_record():
    """Return a helper building a StoredSchema with a small JSON schema document."""
    def _make(schema_id: str = "schema-1", name: str = "Email", token: str = None) -> StoredSchema:
        document = {
            "$schema": "https://json-schema.org/draft/2020-12/schema",
            "name": name,
            "type": "object",
            "properties": {"emailAddress": {"type": "string", "format": "email"}},
            "required": ["emailAddress"],
            "additionalProperties": False,
        }
        return StoredSchema(id=schema_id, document=document, token=token)
    return _make
