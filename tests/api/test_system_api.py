"""API tests for system endpoints, stats, tracing and problem responses."""

import pytest

from tests.api.conftest import ADMIN_HEADERS, ALICE_HEADERS


@pytest.mark.api
class TestSystemEndpoints:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "operational"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": "connected"}


@pytest.mark.api
class TestTracing:
    def test_trace_id_generated(self, client):
        response = client.get("/health")

        assert response.headers["X-Trace-Id"]

    def test_trace_id_echoed_into_problem_body(self, client):
        response = client.get(
            "/api/v1/registrations/me", headers={"X-Trace-Id": "trace-abc-123"}
        )

        assert response.status_code == 401
        assert response.headers["X-Trace-Id"] == "trace-abc-123"
        assert response.json()["trace_id"] == "trace-abc-123"

    def test_unknown_route_is_problem_404(self, client):
        response = client.get("/api/v1/nowhere")

        assert response.status_code == 404
        assert response.json()["status"] == 404
        assert response.json()["instance"] == "/api/v1/nowhere"


@pytest.mark.api
class TestStats:
    def test_admin_sees_ledger_totals(self, client, create_event):
        event = create_event()
        create_event(title="Finished", status="completed")
        client.post(f"/api/v1/events/{event['id']}/registrations", headers=ALICE_HEADERS)

        admin_view = client.get("/api/v1/stats", headers=ADMIN_HEADERS).json()
        alice_view = client.get("/api/v1/stats", headers=ALICE_HEADERS).json()

        assert admin_view["total_events"] == 2
        assert admin_view["upcoming_events"] == 1
        assert admin_view["completed_events"] == 1
        assert admin_view["confirmed_registrations"] == 1
        assert admin_view["distinct_registrants"] == 1
        assert admin_view["my_active_registrations"] == 0
        assert alice_view["my_active_registrations"] == 1
        assert alice_view.get("confirmed_registrations") is None

    def test_stats_require_identity(self, client):
        assert client.get("/api/v1/stats").status_code == 401
