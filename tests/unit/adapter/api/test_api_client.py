"""Unit tests for ShowcaseApiClient."""

import json

import httpx
import pytest

from showcase.adapter.api import ShowcaseApiClient
from showcase.adapter.error import ApiClientError, ApiNotFoundError
from showcase.domain.value import ViewConsistency


def client_with(handler) -> ShowcaseApiClient:
    return ShowcaseApiClient(
        base_url="http://api.test/", transport=httpx.MockTransport(handler)
    )


class TestIncrementViews:
    @pytest.mark.asyncio
    async def test_posts_to_view_endpoint(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, request.url.path))
            return httpx.Response(
                200,
                json={
                    "success": True,
                    "project_id": "p1",
                    "views": 12,
                    "consistency": "atomic",
                },
            )

        result = await client_with(handler).increment_views("p1")

        assert seen == [("POST", "/api/projects/p1/view")]
        assert result.views == 12
        assert result.consistency == ViewConsistency.ATOMIC

    @pytest.mark.asyncio
    async def test_404_raises_not_found(self):
        client = client_with(lambda request: httpx.Response(404, json={}))

        with pytest.raises(ApiNotFoundError):
            await client.increment_views("missing")

    @pytest.mark.asyncio
    async def test_server_error_raises_with_status(self):
        client = client_with(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(ApiClientError) as exc_info:
            await client.increment_views("p1")

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_transport_error_raises_without_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiClientError) as exc_info:
            await client_with(handler).increment_views("p1")

        assert exc_info.value.status_code is None


class TestProvisionAccount:
    @pytest.mark.asyncio
    async def test_sends_camel_case_payload(self):
        bodies = []

        def handler(request: httpx.Request) -> httpx.Response:
            bodies.append(json.loads(request.content))
            return httpx.Response(
                200, json={"success": True, "account": {"handle": "alice"}}
            )

        account = await client_with(handler).provision_account(
            "u1", "alice@x.com", display_name="Alice"
        )

        assert account == {"handle": "alice"}
        assert bodies == [
            {"authId": "u1", "email": "alice@x.com", "displayName": "Alice"}
        ]

    @pytest.mark.asyncio
    async def test_conflict_raises(self):
        client = client_with(lambda request: httpx.Response(409, json={}))

        with pytest.raises(ApiClientError) as exc_info:
            await client.provision_account("u1", "alice@x.com")

        assert exc_info.value.status_code == 409


class TestResponseShape:
    @pytest.mark.asyncio
    async def test_minimal_view_body_is_accepted(self):
        """A body with only success and views still yields a count."""
        client = client_with(
            lambda request: httpx.Response(200, json={"success": True, "views": 3})
        )

        result = await client.increment_views("p1")

        assert result.project_id == "p1"
        assert result.views == 3
        assert result.consistency is None

    @pytest.mark.asyncio
    async def test_non_json_body_raises_client_error(self):
        client = client_with(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ApiClientError) as exc_info:
            await client.increment_views("p1")

        assert exc_info.value.status_code == 200

    @pytest.mark.parametrize(
        "body",
        [
            {"success": True},
            {"success": True, "views": "many"},
            {"success": True, "views": 3, "consistency": "eventual"},
            [1, 2, 3],
        ],
    )
    @pytest.mark.asyncio
    async def test_unexpected_view_body_raises_client_error(self, body):
        client = client_with(lambda request: httpx.Response(200, json=body))

        with pytest.raises(ApiClientError):
            await client.increment_views("p1")

    @pytest.mark.asyncio
    async def test_provision_without_account_raises_client_error(self):
        client = client_with(lambda request: httpx.Response(200, json={"success": True}))

        with pytest.raises(ApiClientError):
            await client.provision_account("u1", "alice@x.com")
