"""Integration test fixtures: a real Memcached on localhost."""

from __future__ import annotations

import socket
import time
from collections.abc import Generator

import pytest

from cachebridge_infra.cache.memcached_cache import MemcachedCacheClient


def _tcp_reachable(
    host: str,
    port: int,
    timeout: float = 1.0,
    retries: int = 5,
    delay: float = 1.0,
) -> bool:
    """Check if a TCP service is reachable, retrying on failure."""
    for attempt in range(retries):
        try:
            with socket.create_connection((host, port), timeout=timeout):
                return True
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay)
    return False


_memcached_up = _tcp_reachable("localhost", 11211, retries=3)

require_memcached = pytest.mark.skipif(
    not _memcached_up,
    reason="Memcached not reachable on localhost:11211; run `docker run -p 11211:11211 memcached`",
)


@pytest.fixture
def memcached_cache() -> Generator[MemcachedCacheClient, None, None]:
    """Cache client against the local server, flushed before and after each test."""
    if not _memcached_up:
        pytest.skip("Memcached not available")

    cache = MemcachedCacheClient.from_host("127.0.0.1")
    cache.clear()
    yield cache
    cache.clear()
