"""Data models for catalog search."""

from .search import (
    MatchType,
    SearchableItem,
    SearchOptions,
    SearchResult,
)
from .request import SearchRequest, CatalogLoadRequest, InteractionRequest
from .response import (
    SearchResponse,
    CatalogResponse,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "MatchType",
    "SearchableItem",
    "SearchOptions",
    "SearchResult",
    "SearchRequest",
    "CatalogLoadRequest",
    "InteractionRequest",
    "SearchResponse",
    "CatalogResponse",
    "ErrorResponse",
    "HealthResponse",
]
