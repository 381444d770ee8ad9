"""Session interaction API endpoints."""

from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Path
from fastapi.responses import JSONResponse
import structlog

from ..config import get_settings
from ..models.request import InteractionRequest

router = APIRouter(prefix="/api/v1", tags=["sessions"])
settings = get_settings()
logger = structlog.get_logger(__name__)

# Import the global search engine instance
from ..engine_instance import catalog, search_engine, sessions


@router.post(
    "/interactions",
    summary="Record an interaction",
    description="Record a query and the item the user selected for it"
)
async def record_interaction(
    request: InteractionRequest,
    x_session_id: Optional[str] = Header(None),
) -> JSONResponse:
    """
    Record what a user searched for and picked.
    
    Selections raise the contextual score of the item and its category in
    later searches of the same session.
    """
    session_id = request.session_id or x_session_id or settings.default_session_id
    
    selected = None
    if request.item_id is not None:
        selected = catalog.get(request.item_id)
        if selected is None:
            raise HTTPException(
                status_code=404,
                detail=f"Item '{request.item_id}' not found in catalog"
            )
    
    search_engine.record_interaction(request.query, selected, sessions.get(session_id))
    logger.info(
        "Interaction recorded",
        session_id=session_id,
        item_id=request.item_id,
    )
    
    return JSONResponse(
        status_code=200,
        content={
            "message": "Interaction recorded",
            "session_id": session_id,
            "item_id": request.item_id,
        }
    )


@router.get(
    "/sessions/{session_id}/suggestions",
    response_model=list[str],
    summary="Get session suggestions",
    description="Recent queries and favourite categories of a session"
)
async def session_suggestions(
    session_id: str = Path(..., description="Session identifier", min_length=1)
) -> list[str]:
    """Get suggestions for pre-populating a search box."""
    return search_engine.session_suggestions(sessions.get(session_id))
