"""Main search engine implementation."""

import math
import re
import time
from typing import Any, Dict, List, Optional, Sequence

import structlog

from ..models.search import (
    MATCH_TYPE_ORDER,
    MatchType,
    SearchableItem,
    SearchOptions,
    SearchResult,
)
from . import scorers
from .analytics import SearchAnalytics
from .context import SearchContext
from .normalizer import TextNormalizer
from .relevance import RelevanceEngine, classify, explanation_for
from .typo_suggester import TypoSuggester

logger = structlog.get_logger(__name__)

SHORT_QUERY_LENGTH = 2
SUGGESTION_DISCOUNT = 0.8
EARLY_TRUNCATION_FACTOR = 1.5

RESULT_TYPE_EXPLANATIONS = {
    MatchType.EXACT: "Exact match found in title or content",
    MatchType.PARTIAL: "Partial match found",
    MatchType.FUZZY: "Similar match found using fuzzy matching",
    MatchType.SEMANTIC: "Found through advanced semantic analysis",
    MatchType.PHONETIC: "Found through phonetic matching (sounds similar)",
    MatchType.CONTEXTUAL: "Suggested based on your search history and preferences",
}

_DIGITS = re.compile(r"\d")
_SPECIAL_CHARS = re.compile(r"[^a-zA-Z0-9\s]")


class SearchEngine:
    """Main search engine: ranks catalog items for free-text queries."""
    
    def __init__(
        self,
        options: Optional[SearchOptions] = None,
        context: Optional[SearchContext] = None,
        analytics: Optional[SearchAnalytics] = None,
    ) -> None:
        """
        Initialize the search engine.
        
        Args:
            options: Default search options
            context: Default session context used when a call passes none
            analytics: Query analytics sink
        """
        self.options = options or SearchOptions()
        self.context = context if context is not None else SearchContext()
        self.analytics = analytics if analytics is not None else SearchAnalytics()
        self.typo_suggester = TypoSuggester()
        self.normalizer = TextNormalizer()
        
        # Performance tracking
        self._stats = self._empty_stats()
    
    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "exact_matches": 0,
            "fuzzy_matches": 0,
            "suggested_matches": 0,
            "no_matches": 0,
            "early_truncations": 0,
            "total_execution_time": 0.0,
        }
    
    def search(
        self,
        query: str,
        items: Sequence[SearchableItem],
        options: Optional[SearchOptions] = None,
        context: Optional[SearchContext] = None,
    ) -> List[SearchResult]:
        """
        Search a catalog for a query.
        
        Very short queries take a fast path that only checks titles and
        categories. Longer queries are scored with every enabled signal; if
        nothing matches, typo corrections of the query are searched instead.
        
        Args:
            query: Free-text query
            items: Catalog to search
            options: Search options (engine defaults when None)
            context: Session context (engine default context when None)
            
        Returns:
            Results sorted by descending score, without duplicate items,
            at most `max_results` long
        """
        start_time = time.time()
        
        # Validate input
        if not query or not query.strip() or not items:
            return []
        
        query = query.strip()
        opts = self._sanitize_options(options if options is not None else self.options)
        ctx = context if context is not None else self.context
        
        self._stats["total_queries"] += 1
        
        results = self._rank(query, items, opts, ctx)
        
        if not results and opts.suggest_typos and len(query) > SHORT_QUERY_LENGTH:
            results = self._typo_fallback(query, items, opts, ctx)
        
        results = results[:opts.max_results]
        
        execution_time = (time.time() - start_time) * 1000
        self._stats["total_execution_time"] += execution_time
        self._update_match_stats(results)
        self.analytics.track_query(query, len(results))
        
        return results
    
    def super_search(
        self,
        query: str,
        items: Sequence[SearchableItem],
        context: Optional[SearchContext] = None,
        **overrides: Any,
    ) -> List[SearchResult]:
        """Search with every signal enabled and a lower score floor."""
        options = self.options.merged(
            enable_semantic_search=True,
            enable_phonetic_search=True,
            enable_contextual_search=True,
            enable_abbreviation_search=True,
            enable_synonym_search=True,
            max_results=15,
            min_score=0.05,
        ).merged(**overrides)
        return self.search(query, items, options, context)
    
    def smart_search(
        self,
        query: str,
        items: Sequence[SearchableItem],
        context: Optional[SearchContext] = None,
        **overrides: Any,
    ) -> List[SearchResult]:
        """
        Search with options chosen from the shape of the query.
        
        Short queries favour exact matching, upper-case acronyms favour
        abbreviations, technical queries with digits or symbols skip synonyms
        and natural language enables the broad signals.
        """
        options = self.options.merged(**overrides)
        stripped = query.strip() if query else ""
        
        if len(stripped) <= 3:
            options = options.merged(
                fuzzy_threshold=0.9,
                enable_semantic_search=False,
                enable_phonetic_search=False,
            )
        elif len(query) <= 5 and query == query.upper():
            options = options.merged(
                enable_abbreviation_search=True,
                enable_phonetic_search=False,
            )
        elif _DIGITS.search(query) or _SPECIAL_CHARS.search(query):
            options = options.merged(
                enable_semantic_search=True,
                enable_abbreviation_search=True,
                enable_synonym_search=False,
            )
        else:
            options = options.merged(
                enable_semantic_search=True,
                enable_synonym_search=True,
                enable_phonetic_search=True,
            )
        
        return self.search(query, items, options, context)
    
    def did_you_mean(
        self,
        query: str,
        items: Sequence[SearchableItem],
        threshold: float = 0.6,
    ) -> List[str]:
        """
        Get "did you mean?" corrections for a query.
        
        Args:
            query: Possibly misspelled query
            items: Catalog to draw corrections from
            threshold: Minimum similarity of a correction to the query
            
        Returns:
            Up to three corrections
        """
        return self.typo_suggester.did_you_mean(
            query, items, threshold, self.options.max_suggestion_distance
        )
    
    def record_interaction(
        self,
        query: str,
        selected: Optional[SearchableItem] = None,
        context: Optional[SearchContext] = None,
    ) -> None:
        """
        Record a query and the item the user picked, if any.
        
        Args:
            query: Query the user typed
            selected: Item the user selected from the results
            context: Session context (engine default context when None)
        """
        ctx = context if context is not None else self.context
        ctx.record_interaction(query, selected)
        if selected is not None:
            self.analytics.track_selection(query, selected)
    
    def session_suggestions(self, context: Optional[SearchContext] = None) -> List[str]:
        """Recent queries and top categories for pre-populating a search box."""
        ctx = context if context is not None else self.context
        return ctx.session_suggestions()
    
    @staticmethod
    def explain(result: SearchResult) -> str:
        """Map a result to a user-facing sentence explaining the match."""
        if result.explanation:
            return result.explanation
        return RESULT_TYPE_EXPLANATIONS.get(result.type, "Match found")
    
    def _rank(
        self,
        query: str,
        items: Sequence[SearchableItem],
        opts: SearchOptions,
        ctx: SearchContext,
    ) -> List[SearchResult]:
        """Score, sort and truncate without the typo fallback."""
        if len(query) <= SHORT_QUERY_LENGTH:
            results = self._fast_search(query, items, opts)
        else:
            results = self._full_search(query, items, opts, ctx)
        return self._finalize(results, opts.max_results)
    
    def _fast_search(
        self,
        query: str,
        items: Sequence[SearchableItem],
        opts: SearchOptions,
    ) -> List[SearchResult]:
        """
        Match very short queries against titles and categories only.
        
        Args:
            query: Query of at most two characters
            items: Catalog to search
            opts: Search options
            
        Returns:
            Unsorted results, at most `max_results`
        """
        lower_query = self.normalizer.normalize(query)
        results: List[SearchResult] = []
        
        for item in items:
            lower_title = self.normalizer.normalize(item.title)
            
            if lower_title == lower_query:
                score, match_type, field = 1.0, MatchType.EXACT, "title"
            elif lower_title.startswith(lower_query):
                score, match_type, field = 0.9, MatchType.EXACT, "title"
            elif lower_query in self.normalizer.normalize(item.category):
                score, match_type, field = 0.7, MatchType.PARTIAL, "category"
            else:
                continue
            
            results.append(
                SearchResult(
                    item=item,
                    score=score,
                    type=match_type,
                    matches=[field] if opts.highlight_matches else None,
                )
            )
            
            # Limit results for performance
            if len(results) >= opts.max_results:
                break
        
        return results
    
    def _full_search(
        self,
        query: str,
        items: Sequence[SearchableItem],
        opts: SearchOptions,
        ctx: SearchContext,
    ) -> List[SearchResult]:
        """
        Score every item with the fused relevance policy.
        
        With early truncation enabled the scan stops once the results exceed
        1.5x `max_results`, after sorting and truncating what was found.
        """
        relevance_engine = RelevanceEngine(opts)
        results: List[SearchResult] = []
        truncation_limit = opts.max_results * EARLY_TRUNCATION_FACTOR
        
        for scanned, item in enumerate(items, start=1):
            breakdown = relevance_engine.evaluate(query, item, ctx)
            if breakdown.score < opts.min_score:
                continue
            
            match_type = classify(breakdown.score)
            results.append(
                SearchResult(
                    item=item,
                    score=breakdown.score,
                    type=match_type,
                    matches=scorers.matched_fields(query, item) if opts.highlight_matches else None,
                    explanation=explanation_for(
                        match_type, breakdown.signals, breakdown.base_score
                    ),
                    signals=list(breakdown.signals),
                )
            )
            
            if opts.early_truncation and len(results) > truncation_limit:
                results = self._finalize(results, opts.max_results)
                self._stats["early_truncations"] += 1
                logger.debug(
                    "Stopped catalog scan early",
                    query=query,
                    scanned=scanned,
                    catalog_size=len(items),
                    max_results=opts.max_results,
                )
                break
        
        return results
    
    def _typo_fallback(
        self,
        query: str,
        items: Sequence[SearchableItem],
        opts: SearchOptions,
        ctx: SearchContext,
    ) -> List[SearchResult]:
        """
        Search typo corrections of a query that matched nothing.
        
        Each correction is ranked once with typo suggestions disabled, so
        the fallback never recurses.
        """
        suggestions = self.typo_suggester.suggest(query, items, opts.max_suggestion_distance)
        if not suggestions:
            return []
        
        logger.debug("Searching typo corrections", query=query, suggestions=suggestions)
        
        sub_options = opts.merged(
            suggest_typos=False,
            max_results=math.ceil(opts.max_results / 2),
        )
        merged: Dict[str, SearchResult] = {}
        
        for suggestion in suggestions:
            change = self.typo_suggester.describe_edit(
                self.normalizer.normalize(query), self.normalizer.normalize(suggestion)
            )
            for result in self._rank(suggestion, items, sub_options, ctx):
                corrected = result.model_copy(
                    update={
                        "type": MatchType.SUGGESTED,
                        "score": result.score * SUGGESTION_DISCOUNT,
                        "explanation": f"Showing results for '{suggestion}' ({change})",
                    }
                )
                existing = merged.get(result.item.id)
                if existing is None or corrected.score > existing.score:
                    merged[result.item.id] = corrected
        
        return self._finalize(list(merged.values()), opts.max_results)
    
    @staticmethod
    def _finalize(results: List[SearchResult], max_results: int) -> List[SearchResult]:
        """Sort by score, drop duplicate items and truncate."""
        results = sorted(
            results, key=lambda result: (-result.score, MATCH_TYPE_ORDER[result.type])
        )
        
        unique: List[SearchResult] = []
        seen_ids = set()
        for result in results:
            if result.item.id in seen_ids:
                continue
            seen_ids.add(result.item.id)
            unique.append(result)
        
        return unique[:max_results]
    
    def _sanitize_options(self, options: SearchOptions) -> SearchOptions:
        """Clamp malformed options to safe values."""
        defaults = SearchOptions()
        updates: Dict[str, Any] = {}
        
        if options.max_results < 1:
            updates["max_results"] = defaults.max_results
        if not 0.0 <= options.min_score <= 1.0:
            updates["min_score"] = min(max(options.min_score, 0.0), 1.0)
        if not 0.0 <= options.fuzzy_threshold <= 1.0:
            updates["fuzzy_threshold"] = min(max(options.fuzzy_threshold, 0.0), 1.0)
        if options.max_suggestion_distance < 0:
            updates["max_suggestion_distance"] = 0
        
        if updates:
            logger.debug("Clamped search options", **updates)
            return options.merged(**updates)
        return options
    
    def _update_match_stats(self, results: List[SearchResult]) -> None:
        if not results:
            self._stats["no_matches"] += 1
        elif any(result.type == MatchType.EXACT for result in results):
            self._stats["exact_matches"] += 1
        elif results[0].type == MatchType.SUGGESTED:
            self._stats["suggested_matches"] += 1
        else:
            self._stats["fuzzy_matches"] += 1
    
    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()
        
        # Calculate averages
        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
            stats["exact_match_rate"] = stats["exact_matches"] / stats["total_queries"]
            stats["fuzzy_match_rate"] = stats["fuzzy_matches"] / stats["total_queries"]
            stats["no_match_rate"] = stats["no_matches"] / stats["total_queries"]
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["exact_match_rate"] = 0.0
            stats["fuzzy_match_rate"] = 0.0
            stats["no_match_rate"] = 0.0
        
        stats["cache"] = self.context.cache_stats()
        
        return stats
    
    def clear(self) -> None:
        """Reset statistics, the default context and analytics."""
        self.context.clear()
        self.analytics.clear()
        self._stats = self._empty_stats()
