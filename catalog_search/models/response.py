"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .search import SearchResult


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResponse(BaseModel):
    """Response for search queries."""
    
    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    exact_match: bool = Field(..., description="Whether an exact match was found")
    total_results: int = Field(..., description="Total number of results")
    results: List[SearchResult] = Field(..., description="Ranked search results")
    explanations: List[str] = Field(..., description="User-facing sentence per result")
    cache_hit: bool = Field(..., description="Whether result was served from the session cache")
    suggestions: Optional[List[str]] = Field(None, description="Did-you-mean suggestions if no match")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class CatalogResponse(BaseModel):
    """Response describing the loaded catalog."""
    
    total_items: int = Field(..., description="Number of items in the catalog")
    categories: List[str] = Field(..., description="Distinct categories in the catalog")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")
    request_id: Optional[str] = Field(None, description="Request identifier for tracking")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")
