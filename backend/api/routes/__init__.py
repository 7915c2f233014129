"""API route modules."""

from .health import router as health_router
from .schemas import router as schemas_router

__all__ = [
    "health_router",
    "schemas_router",
]
