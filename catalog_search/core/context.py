"""Session-scoped search context used for contextual re-ranking."""

import threading
from collections import Counter, OrderedDict, deque
from typing import Dict, List, Optional

from ..models.search import SearchableItem, SearchResult

ITEM_BOOST_STEP = 0.1
ITEM_BOOST_CAP = 0.3
CATEGORY_BOOST_STEP = 0.05
CATEGORY_BOOST_CAP = 0.2
HISTORY_BOOST_STEP = 0.02
HISTORY_BOOST_CAP = 0.1


class SearchContext:
    """
    Mutable per-session state: recent queries and selection frequencies.
    
    One instance belongs to one user session. All reads and writes go
    through a lock so a context may be shared by concurrent requests of the
    same session.
    """
    
    def __init__(self, history_size: int = 50, cache_size: int = 100) -> None:
        """
        Initialize an empty context.
        
        Args:
            history_size: Number of recent queries to remember
            cache_size: Maximum number of cached result lists
        """
        self._lock = threading.Lock()
        self._history: deque = deque(maxlen=history_size)
        self._item_usage: Counter = Counter()
        self._category_usage: Counter = Counter()
        self._cache: "OrderedDict[str, List[SearchResult]]" = OrderedDict()
        self._cache_size = cache_size
        self._cache_hits = 0
        self._cache_misses = 0
    
    def record_interaction(
        self, query: str, selected: Optional[SearchableItem] = None
    ) -> None:
        """
        Record a query and, optionally, the item the user picked for it.
        
        Cached results are dropped since the contextual boost has changed.
        """
        normalized = query.lower().strip() if query else ""
        with self._lock:
            if normalized:
                self._history.appendleft(normalized)
            if selected is not None:
                self._item_usage[selected.id] += 1
                if selected.category:
                    self._category_usage[selected.category] += 1
            self._cache.clear()
    
    def contextual_boost(self, item: SearchableItem, query: str) -> float:
        """
        Calculate the boost an item earns from this session's behaviour.
        
        Args:
            item: Catalog item being scored
            query: Current query
            
        Returns:
            Boost in [0, 0.6]
        """
        lower_query = query.lower()
        with self._lock:
            item_usage = self._item_usage.get(item.id, 0)
            category_usage = (
                self._category_usage.get(item.category, 0) if item.category else 0
            )
            related_searches = sum(
                1 for past in self._history
                if past in lower_query or lower_query in past
            )
        
        boost = min(item_usage * ITEM_BOOST_STEP, ITEM_BOOST_CAP)
        boost += min(category_usage * CATEGORY_BOOST_STEP, CATEGORY_BOOST_CAP)
        boost += min(related_searches * HISTORY_BOOST_STEP, HISTORY_BOOST_CAP)
        return boost
    
    def session_suggestions(self) -> List[str]:
        """Return recent queries followed by the most used categories."""
        with self._lock:
            recent = list(self._history)[:10]
            categories = [category for category, _ in self._category_usage.most_common(5)]
        return recent + categories
    
    @property
    def recent_queries(self) -> List[str]:
        """Recent queries, newest first."""
        with self._lock:
            return list(self._history)
    
    def item_usage(self, item_id: str) -> int:
        """Number of times an item was selected in this session."""
        with self._lock:
            return self._item_usage.get(item_id, 0)
    
    def category_usage(self, category: str) -> int:
        """Number of selections that fell into a category."""
        with self._lock:
            return self._category_usage.get(category, 0)
    
    def cache_results(self, query: str, results: List[SearchResult]) -> None:
        """
        Cache a result list for a query.
        
        Very short queries and empty result lists are not cached. When the
        cache is full the 20 oldest entries are evicted.
        """
        normalized = query.lower().strip()
        if len(normalized) < 2 or not results:
            return
        
        with self._lock:
            if len(self._cache) >= self._cache_size:
                for _ in range(min(20, len(self._cache))):
                    self._cache.popitem(last=False)
            self._cache[normalized] = list(results)
    
    def cached_results(self, query: str) -> Optional[List[SearchResult]]:
        """Return a copy of the cached results for a query, if any."""
        normalized = query.lower().strip()
        with self._lock:
            cached = self._cache.get(normalized)
            if cached is not None:
                self._cache_hits += 1
                return list(cached)
            self._cache_misses += 1
            return None
    
    def cache_stats(self) -> Dict[str, float]:
        """Get cache hit/miss statistics."""
        with self._lock:
            total = self._cache_hits + self._cache_misses
            return {
                "hits": self._cache_hits,
                "misses": self._cache_misses,
                "ratio": self._cache_hits / total if total > 0 else 0.0,
            }
    
    def clear_cache(self) -> None:
        """Drop all cached result lists."""
        with self._lock:
            self._cache.clear()
    
    def clear(self) -> None:
        """Reset history, usage counters and the result cache."""
        with self._lock:
            self._history.clear()
            self._item_usage.clear()
            self._category_usage.clear()
            self._cache.clear()
            self._cache_hits = 0
            self._cache_misses = 0


class SessionRegistry:
    """
    Thread-safe mapping of session ids to their SearchContext.
    
    Holds at most `max_sessions` contexts; the least recently used session
    is evicted when a new one would exceed the bound.
    """
    
    def __init__(
        self, history_size: int = 50, cache_size: int = 100, max_sessions: int = 1000
    ) -> None:
        self._lock = threading.Lock()
        self._sessions: "OrderedDict[str, SearchContext]" = OrderedDict()
        self._history_size = history_size
        self._cache_size = cache_size
        self._max_sessions = max(1, max_sessions)
    
    def get(self, session_id: str) -> SearchContext:
        """Get the context for a session, creating it on first use."""
        with self._lock:
            context = self._sessions.get(session_id)
            if context is not None:
                self._sessions.move_to_end(session_id)
                return context
            
            while len(self._sessions) >= self._max_sessions:
                self._sessions.popitem(last=False)
            context = SearchContext(self._history_size, self._cache_size)
            self._sessions[session_id] = context
            return context
    
    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions
    
    def clear_caches(self) -> None:
        """Drop cached results in every session."""
        with self._lock:
            contexts = list(self._sessions.values())
        for context in contexts:
            context.clear_cache()
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
