"""Core search models shared by the engine and the API layer."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MatchType(str, Enum):
    """Tier a search result was classified into."""
    
    EXACT = "exact"
    PARTIAL = "partial"
    FUZZY = "fuzzy"
    SEMANTIC = "semantic"
    PHONETIC = "phonetic"
    CONTEXTUAL = "contextual"
    SUGGESTED = "suggested"


# Tie-break order when two scores are practically equal
MATCH_TYPE_ORDER = {
    MatchType.EXACT: 0,
    MatchType.PARTIAL: 1,
    MatchType.FUZZY: 2,
    MatchType.SEMANTIC: 3,
    MatchType.SUGGESTED: 4,
    MatchType.PHONETIC: 5,
    MatchType.CONTEXTUAL: 6,
}


class SearchableItem(BaseModel):
    """Catalog entry the engine matches against. Never mutated by the engine."""
    
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    id: str = Field(..., min_length=1, description="Unique item key")
    title: str = Field(..., description="Primary matched field")
    category: Optional[str] = Field(None, description="Item category")
    tags: List[str] = Field(default_factory=list, description="Ordered tags")
    summary: Optional[str] = Field(None, description="Short description")
    searchable_text: Optional[str] = Field(
        None, alias="searchableText", description="Free-form auxiliary text"
    )


class SearchOptions(BaseModel):
    """Tunable search behaviour. Every option has a default."""
    
    model_config = ConfigDict(populate_by_name=True)
    
    fuzzy_threshold: float = Field(default=0.6, alias="fuzzyThreshold")
    max_results: int = Field(default=10, alias="maxResults")
    min_score: float = Field(default=0.1, alias="minScore")
    highlight_matches: bool = Field(default=True, alias="highlightMatches")
    suggest_typos: bool = Field(default=True, alias="suggestTypos")
    max_suggestion_distance: int = Field(default=2, alias="maxSuggestionDistance")
    enable_semantic_search: bool = Field(default=True, alias="enableSemanticSearch")
    enable_phonetic_search: bool = Field(default=True, alias="enablePhoneticSearch")
    enable_contextual_search: bool = Field(default=True, alias="enableContextualSearch")
    enable_abbreviation_search: bool = Field(default=True, alias="enableAbbreviationSearch")
    enable_synonym_search: bool = Field(default=True, alias="enableSynonymSearch")
    early_truncation: bool = Field(default=True, alias="earlyTruncation")
    
    @classmethod
    def from_settings(cls, settings: Any) -> "SearchOptions":
        """Build default options from application settings."""
        return cls(
            fuzzy_threshold=settings.fuzzy_threshold,
            max_results=settings.max_results,
            min_score=settings.min_score,
            max_suggestion_distance=settings.max_suggestion_distance,
            early_truncation=settings.early_truncation,
        )
    
    def merged(self, **overrides: Any) -> "SearchOptions":
        """Return a copy with the given options replaced."""
        return self.model_copy(update=overrides)


class SearchResult(BaseModel):
    """A ranked match for a query."""
    
    item: SearchableItem = Field(..., description="The matched catalog item")
    score: float = Field(..., ge=0.0, le=1.0, description="Relevance score (0-1)")
    type: MatchType = Field(..., description="Match tier")
    matches: Optional[List[str]] = Field(None, description="Fields that contributed")
    explanation: Optional[str] = Field(None, description="Why this tier was assigned")
    signals: List[str] = Field(
        default_factory=list, description="Advanced signal families that raised the score"
    )
