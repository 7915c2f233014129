"""Shared helpers for API routes (error translation)."""

from fastapi import HTTPException

from errors import ErrorKind, SchemaStorageError

STATUS_BY_KIND = {
    ErrorKind.VALIDATION_ERROR: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.SERIALIZATION_ERROR: 500,
    ErrorKind.BACKEND_ERROR: 503,
    ErrorKind.INVALID_CONFIGURATION: 500,
}


def http_error(err: SchemaStorageError) -> HTTPException:
    """Map a storage error onto an HTTPException by kind."""
    return HTTPException(STATUS_BY_KIND.get(err.kind, 500), str(err))
