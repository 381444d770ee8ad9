"""API endpoints for catalog search."""

from .search import router as search_router
from .sessions import router as sessions_router
from .catalog import router as catalog_router
from .health import router as health_router

__all__ = [
    "search_router",
    "sessions_router",
    "catalog_router",
    "health_router",
]
