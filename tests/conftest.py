"""Shared pytest fixtures for the test suite."""

import logging
from datetime import UTC, datetime

import pytest

from payment_families.infrastructure.config import get_settings
from payment_families.infrastructure.registry import FAMILY_REGISTRY
from payment_families.infrastructure.sinks import CollectingSink
from payment_families.infrastructure.time_provider import FixedTimeProvider
from payment_families.infrastructure.token_provider import SequenceTokenProvider


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic log lines."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def token_provider() -> SequenceTokenProvider:
    """A deterministic token provider: tok00001, tok00002, ..."""
    return SequenceTokenProvider()


@pytest.fixture
def sink() -> CollectingSink:
    """An in-memory sink capturing every notice and log line."""
    return CollectingSink()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep PAYMENT_FAMILIES_* from the host environment out of tests."""
    monkeypatch.delenv("PAYMENT_FAMILIES_DEFAULT_FAMILY", raising=False)
    monkeypatch.delenv("PAYMENT_FAMILIES_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PAYMENT_FAMILIES_LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_registry():
    """Undo any register_family() calls made by a test."""
    snapshot = dict(FAMILY_REGISTRY)
    yield
    FAMILY_REGISTRY.clear()
    FAMILY_REGISTRY.update(snapshot)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging() (CLI and logging tests)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
