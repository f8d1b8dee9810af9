"""In-process caching utilities."""

from typing import Any, Callable, Hashable, Optional

from cachetools import LRUCache

from src.config import settings
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


class MemoryCache:
    """Bounded in-memory cache for values derived from immutable inputs."""

    def __init__(self, maxsize: int = None):
        """Initialize memory cache."""
        self.maxsize = maxsize or settings.permutation_cache_size
        self.cache = LRUCache(maxsize=self.maxsize)

    def get(self, key: Hashable) -> Optional[Any]:
        """Get value from cache."""
        return self.cache.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        """Store value in cache."""
        self.cache[key] = value

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return the cached value for key, computing and storing it on a miss."""
        value = self.cache.get(key)
        if value is None:
            logger.debug(f"Cache miss for {key!r}")
            value = compute()
            self.cache[key] = value
        return value

    def clear(self) -> None:
        """Drop all cached values."""
        self.cache.clear()


# Global cache instance
permutation_cache = MemoryCache()
