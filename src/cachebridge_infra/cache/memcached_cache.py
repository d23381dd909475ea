"""Memcached-backed implementation of CacheClient."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, NoReturn, Protocol, runtime_checkable

import structlog

from cachebridge_core.constants import DEFAULT_MEMCACHED_HOST, MEMCACHED_PORT
from cachebridge_core.exceptions import InvalidArgumentError

logger = structlog.get_logger()


@runtime_checkable
class MemcacheBackend(Protocol):
    """The subset of ``memcache.Client`` (python-memcached) this adapter uses.

    ``get`` returns ``None`` on a miss and ``get_multi`` omits missing keys.
    Write methods report success as ``True``/``1`` and failure as
    ``False``/``0``, except ``set_multi`` which returns the keys it could not
    store. Each entry of ``servers`` has ``connect()``, which returns a falsy
    value when the server cannot be reached.
    """

    @property
    def servers(self) -> Sequence[Any]: ...

    def get(self, key: str) -> Any: ...
    def set(self, key: str, val: Any, time: int = 0) -> Any: ...
    def delete(self, key: str) -> Any: ...
    def flush_all(self) -> Any: ...
    def get_multi(self, keys: list[str]) -> dict[str, Any]: ...
    def set_multi(self, mapping: dict[str, Any], time: int = 0) -> list[str]: ...
    def delete_multi(self, keys: list[str]) -> Any: ...


class MemcachedCacheClient:
    """Cache backed by a single Memcached server.

    Validates arguments locally, forwards to the injected backend and
    post-processes its raw results. A string value can never come back as
    ``None``, so ``None`` from the backend is always a miss; stored falsy
    strings such as ``""`` are hits.

    Backend failures are not translated: whatever python-memcached raises
    or returns (it marks unreachable servers dead and soft-fails) reaches
    the caller unchanged.
    """

    def __init__(self, backend: MemcacheBackend) -> None:
        """Initialize with a python-memcached compatible client."""
        self._backend = backend

    @classmethod
    def from_host(
        cls, host: str = DEFAULT_MEMCACHED_HOST, **client_kwargs: Any
    ) -> MemcachedCacheClient:
        """Bind to ``host`` on the standard Memcached port.

        The server is not contacted here; connection errors surface on the
        first operation.
        """
        import memcache

        backend = memcache.Client([f"{host}:{MEMCACHED_PORT}"], **client_kwargs)
        return cls(backend)

    def get(self, key: str, default: Any = None) -> Any:
        """Retrieve a value by key, or ``default`` on a miss."""
        _require_key(key)
        value = self._backend.get(key)
        logger.debug("cache_get", key=key, hit=value is not None)
        if value is None:
            return default
        return value

    def set(self, key: str, value: str, ttl: int | None = None) -> bool:
        """Store a value; ``ttl=None`` keeps the backend's default expiry."""
        if not isinstance(key, str) or not isinstance(value, str):
            _reject("Key and value must be str")
        _require_ttl(ttl)
        if ttl is None:
            result = self._backend.set(key, value)
        else:
            result = self._backend.set(key, value, time=ttl)
        success = bool(result)
        logger.debug("cache_set", key=key, ttl=ttl, success=success)
        return success

    def delete(self, key: str) -> bool:
        """Delete a key from the cache."""
        _require_key(key)
        success = bool(self._backend.delete(key))
        logger.debug("cache_delete", key=key, success=success)
        return success

    def clear(self) -> bool:
        """Flush the whole server, not only keys written by this client.

        python-memcached reports nothing for ``flush_all`` and silently skips
        servers it cannot reach, so success means at least one server
        accepted a connection. The flush is forwarded either way.
        """
        flushed = any([server.connect() for server in self._backend.servers])
        self._backend.flush_all()
        logger.debug("cache_clear", success=flushed)
        return flushed

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Retrieve many keys at once.

        The result has an entry for every requested key, in request order;
        keys the server does not return map to ``default``.
        """
        key_list = _require_keys(keys)
        found = self._backend.get_multi(key_list) if key_list else {}
        result = {key: found.get(key, default) for key in key_list}
        logger.debug("cache_get_multiple", requested=len(key_list), hits=len(found))
        return result

    def set_multiple(self, values: Mapping[str, str], ttl: int | None = None) -> bool:
        """Store many pairs; ``True`` only if the backend stored all of them."""
        if not isinstance(values, Mapping):
            _reject("Values must be a mapping of str to str")
        pairs = dict(values)
        for key, value in pairs.items():
            if not isinstance(key, str) or not isinstance(value, str):
                _reject("Keys and values in mapping must be str")
        _require_ttl(ttl)
        if not pairs:
            return True
        if ttl is None:
            failed = self._backend.set_multi(pairs)
        else:
            failed = self._backend.set_multi(pairs, time=ttl)
        success = not failed
        logger.debug("cache_set_multiple", count=len(pairs), ttl=ttl, success=success)
        return success

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete many keys; ``True`` only if every delete succeeded."""
        key_list = _require_keys(keys)
        if not key_list:
            return True
        success = bool(self._backend.delete_multi(key_list))
        logger.debug("cache_delete_multiple", count=len(key_list), success=success)
        return success

    def has(self, key: str) -> bool:
        """Check presence with a plain lookup."""
        _require_key(key)
        present = self._backend.get(key) is not None
        logger.debug("cache_has", key=key, present=present)
        return present


def _reject(message: str) -> NoReturn:
    """Log and raise a validation failure."""
    logger.warning("cache_invalid_argument", reason=message)
    raise InvalidArgumentError(message)


def _require_key(key: object) -> None:
    if not isinstance(key, str):
        _reject("Key must be str")


def _require_keys(keys: Iterable[str]) -> list[str]:
    """Materialize ``keys`` and check every element before any lookup."""
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        _reject("Keys must be an iterable of str")
    key_list = list(keys)
    for key in key_list:
        if not isinstance(key, str):
            _reject("Each key in keys must be str")
    return key_list


def _require_ttl(ttl: object) -> None:
    if ttl is None:
        return
    if isinstance(ttl, bool) or not isinstance(ttl, int) or ttl < 0:
        _reject("TTL must be a non-negative int or None")
