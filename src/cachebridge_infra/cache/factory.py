"""Factory functions for creating cache clients from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cachebridge_core.interfaces.cache import CacheClient
from cachebridge_infra.cache.memcached_cache import MemcachedCacheClient

if TYPE_CHECKING:
    from cachebridge_core.config.settings import Settings


def create_cache_client(settings: Settings) -> CacheClient:
    """Create a Memcached-backed cache client bound to ``settings.memcached_host``."""
    return MemcachedCacheClient.from_host(
        settings.memcached_host,
        socket_timeout=settings.socket_timeout_seconds,
    )
