"""Custom exception hierarchy for cachebridge."""

from __future__ import annotations


class CacheBridgeError(Exception):
    """Base exception for all cachebridge errors."""


class InvalidArgumentError(CacheBridgeError):
    """Raised when a key, value, or TTL fails local validation.

    Always raised before the underlying cache client is called.
    """
