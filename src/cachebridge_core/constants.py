"""Shared constants for cachebridge."""

from __future__ import annotations

# Standard Memcached port; not configurable
MEMCACHED_PORT = 11211

DEFAULT_MEMCACHED_HOST = "127.0.0.1"

DEFAULT_SOCKET_TIMEOUT_SECONDS = 3.0
