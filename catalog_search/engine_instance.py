"""Global search engine, catalog and session registry to avoid circular imports."""

import threading
from typing import Dict, List

from .config import get_settings
from .core.context import SessionRegistry
from .core.engine import SearchEngine
from .models.search import SearchableItem, SearchOptions

settings = get_settings()


class CatalogStore:
    """Thread-safe holder of the catalog the service searches."""
    
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: List[SearchableItem] = []
    
    def load(self, items: List[SearchableItem], replace: bool = True) -> None:
        """Load items, replacing or extending the catalog. Later ids win."""
        with self._lock:
            current: Dict[str, SearchableItem] = {} if replace else {
                item.id: item for item in self._items
            }
            for item in items:
                current[item.id] = item
            self._items = list(current.values())
    
    def items(self) -> List[SearchableItem]:
        """Snapshot of the catalog."""
        with self._lock:
            return list(self._items)
    
    def get(self, item_id: str):
        """Find an item by id."""
        with self._lock:
            for item in self._items:
                if item.id == item_id:
                    return item
        return None
    
    def clear(self) -> None:
        with self._lock:
            self._items = []


# Global instances
search_engine = SearchEngine(options=SearchOptions.from_settings(settings))
catalog = CatalogStore()
sessions = SessionRegistry(
    history_size=settings.history_size,
    cache_size=settings.result_cache_size,
    max_sessions=settings.max_sessions,
)
