"""Query analytics: popular, failed and trending searches."""

import threading
import time
from collections import Counter, deque
from typing import Any, Dict, List, Optional

from ..models.search import SearchableItem
from .lexicon import CATEGORY_QUERIES


class SearchAnalytics:
    """Aggregates query statistics across sessions."""
    
    def __init__(self, max_timeline: int = 1000) -> None:
        """
        Initialize analytics.
        
        Args:
            max_timeline: Number of timestamped queries kept for trending
        """
        self._lock = threading.Lock()
        self._queries: Counter = Counter()
        self._failed: Counter = Counter()
        self._selections: Counter = Counter()
        self._query_selections: Counter = Counter()
        self._timeline: deque = deque(maxlen=max_timeline)
    
    def track_query(
        self, query: str, result_count: int, timestamp: Optional[float] = None
    ) -> None:
        """Record a query and how many results it produced."""
        normalized = query.lower().strip() if query else ""
        if len(normalized) < 2:
            return
        
        with self._lock:
            self._queries[normalized] += 1
            if result_count == 0:
                self._failed[normalized] += 1
            self._timeline.append(
                (normalized, timestamp if timestamp is not None else time.time(), result_count)
            )
    
    def track_selection(self, query: str, item: SearchableItem) -> None:
        """Record that an item was picked from the results of a query."""
        normalized = query.lower().strip() if query else ""
        with self._lock:
            self._selections[item.id] += 1
            if normalized:
                self._query_selections[(normalized, item.id)] += 1
    
    def selections_for(self, query: str, limit: int = 5) -> List[Dict[str, Any]]:
        """Items most often picked for a query, best first."""
        normalized = query.lower().strip() if query else ""
        with self._lock:
            pairs = [
                (item_id, count)
                for (past, item_id), count in self._query_selections.most_common()
                if past == normalized
            ]
        return [{"item_id": item_id, "count": count} for item_id, count in pairs[:limit]]
    
    def popular_queries(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Most frequent queries."""
        with self._lock:
            return [
                {"query": query, "count": count}
                for query, count in self._queries.most_common(limit)
            ]
    
    def failed_queries(self, limit: int = 10) -> List[Dict[str, Any]]:
        """Most frequent queries that returned nothing."""
        with self._lock:
            return [
                {"query": query, "count": count}
                for query, count in self._failed.most_common(limit)
            ]
    
    def trending_queries(
        self, hours_back: float = 24, now: Optional[float] = None
    ) -> List[Dict[str, Any]]:
        """Top 10 queries issued within the last `hours_back` hours."""
        cutoff = (now if now is not None else time.time()) - hours_back * 3600
        with self._lock:
            counts = Counter(query for query, ts, _ in self._timeline if ts > cutoff)
        return [{"query": query, "count": count} for query, count in counts.most_common(10)]
    
    def suggestions(self, current_query: str = "") -> List[str]:
        """
        Suggest queries for a search box.
        
        Popular queries come first, then trending ones, then curated
        category queries; all filtered to those containing the current input.
        """
        needle = current_query.lower()
        candidates = (
            [entry["query"] for entry in self.popular_queries(20)]
            + [entry["query"] for entry in self.trending_queries(48)]
            + CATEGORY_QUERIES
        )
        
        suggestions: List[str] = []
        for candidate in candidates:
            if needle and needle not in candidate:
                continue
            if candidate not in suggestions:
                suggestions.append(candidate)
        return suggestions[:8]
    
    def insights(self) -> Dict[str, Any]:
        """Summary statistics over all tracked queries."""
        with self._lock:
            total_queries = sum(self._queries.values())
            total_failed = sum(self._failed.values())
            unique_queries = len(self._queries)
            top_selections = [
                {"item_id": item_id, "count": count}
                for item_id, count in self._selections.most_common(5)
            ]
            top_query_selections = [
                {"query": query, "item_id": item_id, "count": count}
                for (query, item_id), count in self._query_selections.most_common(5)
            ]
        
        success_rate = (
            (total_queries - total_failed) / total_queries * 100 if total_queries > 0 else 100.0
        )
        return {
            "total_queries": total_queries,
            "total_failed": total_failed,
            "success_rate": round(success_rate, 2),
            "unique_queries": unique_queries,
            "most_popular": self.popular_queries(5),
            "most_failed": self.failed_queries(5),
            "trending": self.trending_queries(24),
            "top_selections": top_selections,
            "top_query_selections": top_query_selections,
        }
    
    def clear(self) -> None:
        """Forget all tracked queries and selections."""
        with self._lock:
            self._queries.clear()
            self._failed.clear()
            self._selections.clear()
            self._query_selections.clear()
            self._timeline.clear()
