"""Search API endpoints."""

import time
from typing import List, Optional

from fastapi import APIRouter, Header, HTTPException, Path, Query

from ..config import get_settings
from ..core.context import SearchContext
from ..models.request import SearchRequest
from ..models.response import SearchResponse
from ..models.search import MatchType, SearchOptions, SearchResult

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import catalog, search_engine, sessions


def _run_search(
    query: str,
    options: Optional[SearchOptions],
    context: SearchContext,
) -> SearchResponse:
    """Run a search against the loaded catalog and build the response."""
    start_time = time.time()
    
    if len(query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )
    
    items = catalog.items()
    
    # Only default-option searches are cached; options change the ranking
    cached: Optional[List[SearchResult]] = None
    if options is None:
        cached = context.cached_results(query)
    
    if cached is not None:
        results = cached
    else:
        results = search_engine.search(query, items, options, context)
        if options is None:
            context.cache_results(query, results)
    
    suggestions = None
    if not results:
        threshold = options.fuzzy_threshold if options is not None else search_engine.options.fuzzy_threshold
        suggestions = search_engine.did_you_mean(query, items, threshold)
    
    return SearchResponse(
        query=query,
        execution_time_ms=(time.time() - start_time) * 1000,
        exact_match=any(result.type == MatchType.EXACT for result in results),
        total_results=len(results),
        results=results,
        explanations=[search_engine.explain(result) for result in results],
        cache_hit=cached is not None,
        suggestions=suggestions,
    )


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search the catalog using a structured request body"
)
async def search_with_body(
    request: SearchRequest,
    x_session_id: Optional[str] = Header(None),
) -> SearchResponse:
    """
    Search the catalog using a structured request body.
    
    The session is taken from the body or the X-Session-ID header and drives
    contextual re-ranking.
    """
    session_id = request.session_id or x_session_id or settings.default_session_id
    try:
        return _run_search(request.query, request.options, sessions.get(session_id))
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/search/{query}",
    response_model=SearchResponse,
    summary="Search the catalog",
    description="Search catalog items matching a free-text query"
)
async def search_query(
    query: str = Path(..., description="The text to search for", min_length=1, max_length=100),
    max_results: Optional[int] = Query(
        None,
        ge=1,
        le=100,
        description="Maximum number of results to return"
    ),
    min_score: Optional[float] = Query(
        None,
        ge=0.0,
        le=1.0,
        description="Minimum relevance score (0.0-1.0)"
    ),
    x_session_id: Optional[str] = Header(None),
) -> SearchResponse:
    """
    Search catalog items for a query.
    
    Supports exact, fuzzy, phonetic, semantic and abbreviation matching.
    Returns ranked results with scores, match tiers and explanations.
    """
    options = None
    if max_results is not None or min_score is not None:
        overrides = {}
        if max_results is not None:
            overrides["max_results"] = max_results
        if min_score is not None:
            overrides["min_score"] = min_score
        options = search_engine.options.merged(**overrides)
    
    try:
        return _run_search(
            query.strip(), options, sessions.get(x_session_id or settings.default_session_id)
        )
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )


@router.get(
    "/did-you-mean/{query}",
    response_model=list[str],
    summary="Get typo corrections",
    description="Get 'did you mean' corrections for a misspelled query"
)
async def did_you_mean(
    query: str = Path(..., description="The query to correct", min_length=1),
    threshold: float = Query(0.6, ge=0.0, le=1.0, description="Minimum similarity to the query")
) -> list[str]:
    """
    Get corrections for a query drawn from the catalog vocabulary.
    
    Useful when a search came back empty.
    """
    try:
        return search_engine.did_you_mean(query, catalog.items(), threshold)
        
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to get suggestions: {str(e)}"
        )
