"""Abstract cache interface."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheClient(Protocol):
    """Generic cache contract; implementations can be swapped.

    Keys and values are strings. Every operation that takes keys or values
    raises ``InvalidArgumentError`` before touching the backing store when
    an argument has the wrong type.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve a value by key, or ``default`` on a miss."""
        ...

    def set(self, key: str, value: str, ttl: int | None = None) -> bool:
        """Store a value; ``ttl=None`` uses the store's default expiry."""
        ...

    def delete(self, key: str) -> bool:
        """Delete a key from the cache."""
        ...

    def clear(self) -> bool:
        """Remove every entry from the cache."""
        ...

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Retrieve many keys; every requested key is present in the result."""
        ...

    def set_multiple(self, values: Mapping[str, str], ttl: int | None = None) -> bool:
        """Store many key/value pairs; returns an aggregate success flag."""
        ...

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete many keys; returns an aggregate success flag."""
        ...

    def has(self, key: str) -> bool:
        """Check if a key exists in the cache."""
        ...
