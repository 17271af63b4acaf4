"""Root test fixtures shared across all test types.

Unit tests use the in-memory fake repository; integration tests run the real
repository against an in-memory SQLite database (see tests/integration/conftest.py).
"""

import os

# Settings must be resolvable before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-characters")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest

from src.monitor_service.core.config import get_settings
from src.monitor_service.services import MonitorService
from tests.fakes import InMemoryMonitorRepository

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def fake_repo() -> InMemoryMonitorRepository:
    """In-memory implementation of the monitor repository contract."""
    return InMemoryMonitorRepository()


@pytest.fixture
def service(fake_repo: InMemoryMonitorRepository) -> MonitorService:
    """MonitorService wired to the in-memory repository."""
    return MonitorService(fake_repo)
