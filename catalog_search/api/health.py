"""Health check and monitoring API endpoints."""

import time

from fastapi import APIRouter, HTTPException, Query

from ..models.response import HealthResponse
from ..core.relevance import RelevanceEngine
from ..models.search import SearchableItem
from ..config import get_settings

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import catalog, search_engine, sessions

# Track application start time
app_start_time = time.time()

_PROBE_ITEM = SearchableItem(id="__probe__", title="Health Probe")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the search service.
    
    Scores a probe item with the relevance engine and asks the typo
    suggester to correct a misspelling of it. Neither step touches engine
    statistics, analytics or session state.
    """
    try:
        uptime = time.time() - app_start_time
        
        dependencies = {
            "search_engine": "healthy",
            "catalog": "healthy" if catalog.items() else "empty",
        }
        
        try:
            score = RelevanceEngine(search_engine.options).score(
                _PROBE_ITEM.title, _PROBE_ITEM
            )
            corrections = search_engine.typo_suggester.suggest("helth", [_PROBE_ITEM])
            if score < 1.0 or not corrections:
                dependencies["search_engine"] = "degraded"
        except Exception:
            dependencies["search_engine"] = "unhealthy"
        
        if dependencies["search_engine"] == "unhealthy":
            status = "unhealthy"
        elif dependencies["search_engine"] == "healthy":
            status = "healthy"
        else:
            status = "degraded"
        
        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/stats",
    summary="Get engine statistics",
    description="Query counts, match rates and timings of the search engine"
)
async def get_stats() -> dict:
    """Get engine statistics plus catalog and session counts."""
    stats = search_engine.get_stats()
    stats["catalog_size"] = len(catalog.items())
    stats["active_sessions"] = len(sessions)
    return stats


@router.get(
    "/analytics",
    summary="Get search analytics",
    description="Popular, failed and trending queries"
)
async def get_analytics(
    current_query: str = Query("", description="Filter suggestions to this input")
) -> dict:
    """Get query analytics and search box suggestions."""
    insights = search_engine.analytics.insights()
    insights["suggestions"] = search_engine.analytics.suggestions(current_query)
    return insights
