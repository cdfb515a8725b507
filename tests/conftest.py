"""Shared pytest configuration and fixtures.

The environment is switched to ``testing`` before anything imports
``campus_events.core.config``, so the settings singleton (JSON logs, schema
creation on startup) is built for tests.

Fixtures:
    database: Fresh SQLite database file per test (integration tests)
    admin / alice / bob: Caller identities
    make_event: Event entity factory
"""

import os
from collections.abc import Callable
from datetime import date, timedelta
from typing import Any

os.environ["ENVIRONMENT"] = "testing"
os.environ.setdefault("CAMPUS_TIMEZONE", "UTC")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from campus_events.domain.entities import Event  # noqa: E402
from campus_events.domain.enums import EventCategory, EventStatus, UserRole  # noqa: E402
from campus_events.domain.value_objects import UserIdentity  # noqa: E402
from campus_events.infrastructure.persistence.database import Database  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "integration: Integration tests with a real database")
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")


# =============================================================================
# Identities
# =============================================================================


@pytest.fixture
def admin() -> UserIdentity:
    """Administrator caller."""
    return UserIdentity(email="dean@campus.edu", full_name="Dean Admin", role=UserRole.ADMIN)


@pytest.fixture
def alice() -> UserIdentity:
    """Regular user."""
    return UserIdentity(email="alice@campus.edu", full_name="Alice Student")


@pytest.fixture
def bob() -> UserIdentity:
    """Another regular user."""
    return UserIdentity(email="bob@campus.edu", full_name="Bob Student")


# =============================================================================
# Entities
# =============================================================================


@pytest.fixture
def make_event() -> Callable[..., Event]:
    """Factory for upcoming events two weeks out, overridable per field."""

    def _make(**overrides: Any) -> Event:
        fields: dict[str, Any] = {
            "id": uuid7(),
            "title": "Robotics Workshop",
            "date": date.today() + timedelta(days=14),
            "category": EventCategory.WORKSHOP,
            "status": EventStatus.UPCOMING,
            "venue": "Engineering Hall 101",
        }
        fields.update(overrides)
        return Event(**fields)

    return _make


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def database(tmp_path):
    """Fresh SQLite database with the schema created.

    Each test gets its own file, so no state leaks between tests.
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'campus_events.db'}")
    await db.create_all()
    yield db
    await db.close()
