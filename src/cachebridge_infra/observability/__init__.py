"""Observability: structured logging."""

from cachebridge_infra.observability.logging import (
    bind_cache_context,
    clear_cache_context,
    configure_logging,
)

__all__ = [
    "bind_cache_context",
    "clear_cache_context",
    "configure_logging",
]
