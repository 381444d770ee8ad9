"""Catalog management API endpoints."""

from fastapi import APIRouter, HTTPException
import structlog

from ..models.request import CatalogLoadRequest
from ..models.response import CatalogResponse

router = APIRouter(prefix="/api/v1", tags=["catalog"])
logger = structlog.get_logger(__name__)

# Import the global search engine instance
from ..engine_instance import catalog, sessions


def _catalog_response() -> CatalogResponse:
    items = catalog.items()
    categories = sorted({item.category for item in items if item.category})
    return CatalogResponse(total_items=len(items), categories=categories)


@router.post(
    "/catalog",
    response_model=CatalogResponse,
    summary="Load catalog items",
    description="Load or extend the items the search engine ranks"
)
async def load_catalog(request: CatalogLoadRequest) -> CatalogResponse:
    """
    Load catalog items into the service.
    
    Cached results in every session are dropped because they may refer to
    items that changed.
    """
    try:
        catalog.load(request.items, replace=request.replace)
        sessions.clear_caches()
        logger.info("Catalog loaded", total_items=len(request.items), replace=request.replace)
        return _catalog_response()
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to load catalog: {str(e)}"
        )


@router.get(
    "/catalog",
    response_model=CatalogResponse,
    summary="Get catalog statistics",
    description="Get the number of items and categories currently loaded"
)
async def get_catalog() -> CatalogResponse:
    """Get statistics about the loaded catalog."""
    return _catalog_response()
