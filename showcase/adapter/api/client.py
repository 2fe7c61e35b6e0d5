"""HTTP client for the showcase API."""

from typing import Any, Optional

import httpx
import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from showcase.adapter.error import ApiClientError, ApiNotFoundError
from showcase.domain.value import ViewConsistency


class ViewCountResult(BaseModel):
    """Server answer to a view increment.

    Only `views` is required of the server; `consistency` is None when the
    server does not report which counting path it took.
    """

    project_id: str
    views: int
    consistency: Optional[ViewConsistency] = None


class ShowcaseApiClient:
    """Thin async client over the showcase API.

    A new `httpx.AsyncClient` is opened per call. Pass `transport` to route
    requests somewhere other than the network (tests use
    `httpx.MockTransport` or `httpx.ASGITransport`).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: API base URL, e.g. "http://localhost:8000"
            timeout: Per-request timeout in seconds
            transport: Optional custom transport
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def increment_views(self, project_id: str) -> ViewCountResult:
        """Count one view of a project.

        Raises:
            ApiNotFoundError: If the project does not exist
            ApiClientError: On any other failure
        """
        path = f"/api/projects/{project_id}/view"
        data = await self._post(path)
        try:
            return ViewCountResult(
                project_id=data.get("project_id", project_id),
                views=data.get("views"),
                consistency=data.get("consistency"),
            )
        except PydanticValidationError as e:
            logfire.warn("Unexpected view count response", path=path, error=str(e))
            raise ApiClientError(f"Unexpected response from {path}: {e}") from e

    async def provision_account(
        self,
        auth_id: str,
        email: str,
        handle: str | None = None,
        display_name: str | None = None,
        avatar_url: str | None = None,
    ) -> dict[str, Any]:
        """Provision the account for a signed-in subject.

        Returns:
            The account as returned by the API

        Raises:
            ApiClientError: If the API rejects the request or is unreachable
        """
        payload = {"authId": auth_id, "email": email}
        if handle:
            payload["handle"] = handle
        if display_name:
            payload["displayName"] = display_name
        if avatar_url:
            payload["avatarUrl"] = avatar_url

        data = await self._post("/api/users", json=payload)
        account = data.get("account")
        if not isinstance(account, dict):
            raise ApiClientError("Unexpected response from /api/users: no account")
        return account

    async def _post(self, path: str, json: dict | None = None) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport,
            ) as client:
                response = await client.post(path, json=json)
        except httpx.HTTPError as e:
            logfire.warn("Showcase API request failed", path=path, error=str(e))
            raise ApiClientError(f"HTTP error calling {path}: {e}") from e

        if response.status_code == 404:
            raise ApiNotFoundError(f"Not found: {path}", status_code=404)

        if response.status_code >= 400:
            logfire.warn(
                "Showcase API returned an error",
                path=path,
                status_code=response.status_code,
                error=response.text,
            )
            raise ApiClientError(
                f"{path} failed with {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logfire.warn("Showcase API returned a non-JSON body", path=path)
            raise ApiClientError(
                f"{path} returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise ApiClientError(
                f"{path} returned {type(data).__name__}, expected an object",
                status_code=response.status_code,
            )
        return data
