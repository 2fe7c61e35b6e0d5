"""End-to-end tests for the dashboard endpoint."""

import pytest
from fastapi.testclient import TestClient

from showcase.interface.api.app import create_app
from showcase.util.di.container import setup_di
from tests.conftest import issue_session_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


class TestDashboardEndpoint:
    def test_dashboard_without_session_returns_401(self, client):
        response = client.get("/api/dashboard")

        assert response.status_code == 401

    def test_dashboard_lists_projects_and_stats(self, client):
        client.post("/api/users", json={"authId": "u1", "email": "alice@x.com"})
        client.cookies.set("session_token", issue_session_token("u1"))

        first = client.post(
            "/api/projects", json={"title": "First", "description": "One"}
        ).json()["project"]
        client.post("/api/projects", json={"title": "Second", "description": "Two"})
        client.post(f"/api/projects/{first['id']}/view")
        client.post(f"/api/projects/{first['id']}/view")

        response = client.get("/api/dashboard")

        assert response.status_code == 200
        data = response.json()
        assert data["profile"]["handle"] == "alice"
        assert {p["title"] for p in data["projects"]} == {"First", "Second"}
        assert data["stats"] == {"project_count": 2, "total_views": 2}

    def test_dashboard_for_unprovisioned_subject_returns_404(self, client):
        client.cookies.set("session_token", issue_session_token("ghost"))

        response = client.get("/api/dashboard")

        assert response.status_code == 404
