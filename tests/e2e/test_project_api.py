"""End-to-end tests for project endpoints."""

from uuid import uuid4

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


def sign_in(
    client: TestClient, auth_id: str, email: str, role: str = "submitter"
) -> None:
    """Provision the account and attach a session cookie to the client."""
    response = client.post(
        "/api/users", json={"authId": auth_id, "email": email, "role": role}
    )
    assert response.status_code == 200
    client.cookies.set("session_token", issue_session_token(auth_id))


def submit(client: TestClient, title: str = "Open Wallet Kit") -> dict:
    response = client.post(
        "/api/projects",
        json={"title": title, "description": "A wallet toolkit"},
    )
    assert response.status_code == 201
    return response.json()["project"]


class TestSubmitProject:
    """End-to-end tests for POST /api/projects."""

    def test_submit_without_session_returns_401(self, client):
        response = client.post(
            "/api/projects", json={"title": "Kit", "description": "A kit"}
        )

        assert response.status_code == 401

    def test_submit_with_invalid_token_returns_401(self, client):
        client.cookies.set("session_token", "invalid-token")

        response = client.post(
            "/api/projects", json={"title": "Kit", "description": "A kit"}
        )

        assert response.status_code == 401

    def test_submit_without_account_returns_404(self, client):
        """A valid session whose subject was never provisioned."""
        client.cookies.set("session_token", issue_session_token("ghost"))

        response = client.post(
            "/api/projects", json={"title": "Kit", "description": "A kit"}
        )

        assert response.status_code == 404

    def test_submit_creates_project(self, client):
        sign_in(client, "u1", "alice@x.com")

        project = submit(client, "Open Wallet Kit")

        assert project["slug"] == "open-wallet-kit"
        assert project["views"] == 0

    def test_duplicate_titles_get_distinct_slugs(self, client):
        sign_in(client, "u1", "alice@x.com")

        first = submit(client, "Open Wallet Kit")
        second = submit(client, "Open Wallet Kit")

        assert first["slug"] == "open-wallet-kit"
        assert second["slug"] == "open-wallet-kit-1"

    def test_empty_title_rejected(self, client):
        sign_in(client, "u1", "alice@x.com")

        response = client.post(
            "/api/projects", json={"title": "", "description": "A kit"}
        )

        assert response.status_code == 422


class TestIncrementViews:
    """End-to-end tests for POST /api/projects/{id}/view."""

    def test_each_call_counts_one_view(self, client):
        sign_in(client, "u1", "alice@x.com")
        project = submit(client)

        first = client.post(f"/api/projects/{project['id']}/view")
        second = client.post(f"/api/projects/{project['id']}/view")

        assert first.status_code == 200
        assert first.json()["views"] == 1
        assert second.json()["views"] == 2
        assert second.json()["success"] is True
        assert second.json()["consistency"] == "atomic"

    def test_view_needs_no_session(self, client):
        sign_in(client, "u1", "alice@x.com")
        project = submit(client)
        client.cookies.clear()

        response = client.post(f"/api/projects/{project['id']}/view")

        assert response.status_code == 200

    def test_unknown_project_returns_404(self, client):
        response = client.post(f"/api/projects/{uuid4()}/view")

        assert response.status_code == 404

    def test_malformed_id_returns_404(self, client):
        response = client.post("/api/projects/not-a-uuid/view")

        assert response.status_code == 404


def create_category(client: TestClient, slug: str) -> None:
    """Create a category as a separate admin, keeping the client's session."""
    session = client.cookies.get("session_token")
    sign_in(client, f"admin-{slug}", f"admin-{slug}@x.com", role="admin")
    response = client.post("/api/categories", json={"name": slug, "slug": slug})
    assert response.status_code == 201
    client.cookies.set("session_token", session)


class TestSubmitWithCategory:
    """End-to-end tests for POST /api/projects with a category."""

    def test_category_slug_links_project(self, client):
        sign_in(client, "u1", "alice@x.com")
        create_category(client, "defi")

        response = client.post(
            "/api/projects",
            json={"title": "Pool", "description": "Loans", "category_slug": "defi"},
        )

        assert response.status_code == 201
        assert response.json()["project"]["category_id"] is not None

    def test_unknown_category_returns_404(self, client):
        sign_in(client, "u1", "alice@x.com")

        response = client.post(
            "/api/projects",
            json={"title": "Pool", "description": "Loans", "category_slug": "nope"},
        )

        assert response.status_code == 404


class TestListProjects:
    """End-to-end tests for GET /api/projects."""

    def test_newest_first_with_pagination(self, client):
        sign_in(client, "u1", "alice@x.com")
        titles = [f"Project {i}" for i in range(3)]
        for title in titles:
            submit(client, title)
        client.cookies.clear()

        first = client.get("/api/projects", params={"limit": 2})
        last = client.get("/api/projects", params={"limit": 2, "offset": 2})

        assert first.status_code == 200
        body = first.json()
        assert [p["title"] for p in body["projects"]] == ["Project 2", "Project 1"]
        assert body["total"] == 3
        assert body["has_more"] is True
        assert [p["title"] for p in last.json()["projects"]] == ["Project 0"]
        assert last.json()["has_more"] is False

    def test_filters_by_username(self, client):
        sign_in(client, "u1", "alice@x.com")
        submit(client, "Alice Kit")
        sign_in(client, "u2", "bob@x.com")
        submit(client, "Bob Kit")

        response = client.get("/api/projects", params={"username": "alice"})

        assert [p["title"] for p in response.json()["projects"]] == ["Alice Kit"]

    def test_filters_by_category(self, client):
        sign_in(client, "u1", "alice@x.com")
        create_category(client, "defi")
        client.post(
            "/api/projects",
            json={"title": "Pool", "description": "Loans", "category_slug": "defi"},
        )
        submit(client, "Uncategorised")

        response = client.get("/api/projects", params={"category": "defi"})

        assert [p["title"] for p in response.json()["projects"]] == ["Pool"]

    def test_unknown_username_gives_empty_page(self, client):
        response = client.get("/api/projects", params={"username": "nobody"})

        assert response.status_code == 200
        assert response.json()["projects"] == []
        assert response.json()["total"] == 0

    @pytest.mark.parametrize(
        "params", [{"limit": 0}, {"limit": 101}, {"offset": -1}]
    )
    def test_invalid_pagination_returns_400(self, client, params):
        response = client.get("/api/projects", params=params)

        assert response.status_code == 400


class TestGetProject:
    """End-to-end tests for GET /api/projects/{id}."""

    def test_returns_project(self, client):
        sign_in(client, "u1", "alice@x.com")
        project = submit(client)
        client.cookies.clear()

        response = client.get(f"/api/projects/{project['id']}")

        assert response.status_code == 200
        assert response.json()["project"]["slug"] == project["slug"]

    @pytest.mark.parametrize("project_id", ["not-a-uuid", str(uuid4())])
    def test_unknown_or_malformed_id_returns_404(self, client, project_id):
        response = client.get(f"/api/projects/{project_id}")

        assert response.status_code == 404
