"""Liveness plus a schema backend scan."""

import logging
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from api.deps import get_schema_storage
from config import get_settings
from errors import BackendError
from schema_storage import SchemaStorage

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/health")
async def health(storage: Annotated[SchemaStorage, Depends(get_schema_storage)]):
    settings = get_settings()
    try:
        schema_count = len(storage.list_schemas())
        status = "ok"
    except BackendError:
        logger.warning("Health check: %s backend scan failed", settings.SCHEMA_STORAGE)
        schema_count = None
        status = "degraded"
    return {
        "status": status,
        "checked_at": datetime.now(timezone.utc).isoformat(),
        "version": settings.APP_VERSION,
        "storage": settings.SCHEMA_STORAGE,
        "schema_count": schema_count,
    }
