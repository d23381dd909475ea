"""Public interface re-exports for cachebridge_core."""

from cachebridge_core.interfaces.cache import CacheClient

__all__ = [
    "CacheClient",
]
