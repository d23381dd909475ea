"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from unittest.mock import MagicMock

import pytest
import structlog

from cachebridge_infra.cache.memcached_cache import MemcacheBackend, MemcachedCacheClient
from tests.mocks.mock_memcache import FakeMemcacheBackend
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def fake_backend() -> FakeMemcacheBackend:
    """Return an empty in-memory memcache backend."""
    return FakeMemcacheBackend()


@pytest.fixture
def cache(fake_backend: FakeMemcacheBackend) -> MemcachedCacheClient:
    """Return a cache client over the in-memory backend."""
    return MemcachedCacheClient(fake_backend)


@pytest.fixture
def strict_backend() -> MagicMock:
    """Return a backend mock for asserting that nothing was forwarded."""
    return MagicMock(spec=MemcacheBackend)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Save and restore root logger handlers around tests that configure logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.level = original_level
    structlog.contextvars.clear_contextvars()
