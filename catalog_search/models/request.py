"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from .search import SearchableItem, SearchOptions


class SearchRequest(BaseModel):
    """Request model for search queries."""
    
    query: str = Field(..., min_length=1, max_length=100, description="Search query")
    options: Optional[SearchOptions] = Field(
        None, description="Search options overriding the service defaults"
    )
    session_id: Optional[str] = Field(
        None, description="Session whose history drives contextual ranking"
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate and normalize query input."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v.strip()


class CatalogLoadRequest(BaseModel):
    """Request model for loading the searchable catalog."""
    
    items: List[SearchableItem] = Field(..., description="Catalog items")
    replace: bool = Field(default=True, description="Replace the catalog instead of extending it")

    @field_validator('items')
    @classmethod
    def validate_unique_ids(cls, v: List[SearchableItem]) -> List[SearchableItem]:
        """Reject catalogs with duplicate item ids."""
        seen = set()
        for item in v:
            if item.id in seen:
                raise ValueError(f"Duplicate item id: {item.id}")
            seen.add(item.id)
        return v


class InteractionRequest(BaseModel):
    """Request model for recording a user's query and selection."""
    
    query: str = Field(..., min_length=1, max_length=100, description="Query the user typed")
    item_id: Optional[str] = Field(None, description="Id of the selected catalog item")
    session_id: Optional[str] = Field(None, description="Session the interaction belongs to")

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate and normalize query input."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v.strip()
