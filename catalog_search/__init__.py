"""
Catalog Search - multi-signal fuzzy search and ranking for item catalogs.

This package ranks catalog items for free-text queries, tolerating typos,
abbreviations, synonyms, phonetic variance and word-order differences, and
explains why each match was returned. Session context re-ranks results
based on what the user picked before.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.context import SearchContext
from .core.string_metrics import (
    double_metaphone,
    levenshtein,
    ngram_similarity,
    similarity,
    soundex,
)
from .models.search import MatchType, SearchableItem, SearchOptions, SearchResult

__all__ = [
    "SearchEngine",
    "SearchContext",
    "MatchType",
    "SearchableItem",
    "SearchOptions",
    "SearchResult",
    "double_metaphone",
    "levenshtein",
    "ngram_similarity",
    "similarity",
    "soundex",
]
