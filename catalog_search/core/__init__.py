"""Core search engine functionality."""

from .engine import SearchEngine
from .context import SearchContext, SessionRegistry
from .analytics import SearchAnalytics
from .relevance import RelevanceEngine, ScoreBreakdown
from .typo_suggester import TypoSuggester
from .normalizer import TextNormalizer
from .string_metrics import (
    double_metaphone,
    levenshtein,
    ngram_similarity,
    similarity,
    soundex,
)

__all__ = [
    "SearchEngine",
    "SearchContext",
    "SessionRegistry",
    "SearchAnalytics",
    "RelevanceEngine",
    "ScoreBreakdown",
    "TypoSuggester",
    "TextNormalizer",
    "double_metaphone",
    "levenshtein",
    "ngram_similarity",
    "similarity",
    "soundex",
]
