"""
Schema storage errors.
Every failure raised by the facade is a SchemaStorageError carrying a kind,
the operation that failed and the offending schema id.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_CONFIGURATION = "InvalidConfiguration"
    VALIDATION_ERROR = "ValidationError"
    NOT_FOUND = "NotFound"
    SERIALIZATION_ERROR = "SerializationError"
    BACKEND_ERROR = "BackendError"


class SchemaStorageError(Exception):
    """Base error for schema storage. Callers branch on `kind` or on the subclass."""

    kind: ErrorKind = ErrorKind.BACKEND_ERROR

    def __init__(self, message: str, operation: str, record_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.record_id = record_id

    def __str__(self) -> str:
        if self.record_id is None:
            return f"{self.operation}: {self.message}"
        return f"{self.operation} [{self.record_id}]: {self.message}"


class InvalidConfigurationError(SchemaStorageError):
    kind = ErrorKind.INVALID_CONFIGURATION


class RecordValidationError(SchemaStorageError):
    kind = ErrorKind.VALIDATION_ERROR


class RecordNotFoundError(SchemaStorageError):
    kind = ErrorKind.NOT_FOUND


class RecordSerializationError(SchemaStorageError):
    kind = ErrorKind.SERIALIZATION_ERROR


class BackendError(SchemaStorageError):
    kind = ErrorKind.BACKEND_ERROR
