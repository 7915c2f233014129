"""Schema create, get, list, delete."""

import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from api.deps import get_schema_storage, require_schema
from api.helpers import http_error
from errors import SchemaStorageError
from schema_storage import SchemaStorage
from schemas.records import StoredSchema
from schemas.requests import SchemaCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/schemas", tags=["schemas"])

Storage = Annotated[SchemaStorage, Depends(get_schema_storage)]


@router.post("")
async def create_schema(data: SchemaCreate, storage: Storage):
    record = StoredSchema(
        id=data.id if data.id is not None else str(uuid.uuid4()),
        document=data.document,
        token=data.token,
    )
    try:
        storage.store_schema(record)
    except SchemaStorageError as e:
        raise http_error(e) from e
    logger.info("Stored schema %s", record.id)
    return JSONResponse(record.to_payload(), status_code=201)


@router.get("")
async def list_schemas(storage: Storage):
    try:
        records = storage.list_schemas()
    except SchemaStorageError as e:
        raise http_error(e) from e
    return JSONResponse({"schemas": [r.to_payload() for r in records]})


@router.get("/{schema_id}")
async def get_schema(record: Annotated[StoredSchema, Depends(require_schema)]):
    return JSONResponse(record.to_payload())


@router.delete("/{schema_id}", status_code=204)
async def delete_schema(schema_id: str, storage: Storage):
    try:
        storage.delete_schema(schema_id)
    except SchemaStorageError as e:
        raise http_error(e) from e
    return Response(status_code=204)
