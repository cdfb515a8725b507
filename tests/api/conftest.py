"""Fixtures for HTTP tests.

The app runs against a fresh SQLite file per test. App-scoped singletons
(database, cache, admission locks) are rebuilt so no state leaks between
tests; the lifespan creates the schema on startup in the testing
environment.
"""

import pytest
from fastapi.testclient import TestClient

from campus_events.core.config import settings
from campus_events.core.container import get_admission_locks, get_cache, get_database
from campus_events.main import app

ADMIN_HEADERS = {
    "X-User-Email": "dean@campus.edu",
    "X-User-Name": "Dean Admin",
    "X-User-Role": "admin",
}
ALICE_HEADERS = {"X-User-Email": "Alice@Campus.edu", "X-User-Name": "Alice Student"}
BOB_HEADERS = {"X-User-Email": "bob@campus.edu", "X-User-Role": "student"}


def _reset_singletons() -> None:
    get_database.cache_clear()
    get_cache.cache_clear()
    get_admission_locks.cache_clear()


@pytest.fixture
def client(tmp_path, monkeypatch):
    """TestClient bound to an isolated database."""
    monkeypatch.setattr(
        settings, "database_url", f"sqlite+aiosqlite:///{tmp_path / 'api.db'}"
    )
    _reset_singletons()
    with TestClient(app) as test_client:
        yield test_client
    _reset_singletons()


@pytest.fixture
def create_event(client):
    """POST an event as the administrator and return the response body."""

    def _create(**fields):
        body = {"title": "Robotics Workshop", "date": "2099-05-01", "category": "workshop"}
        body.update(fields)
        response = client.post("/api/v1/events", json=body, headers=ADMIN_HEADERS)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
