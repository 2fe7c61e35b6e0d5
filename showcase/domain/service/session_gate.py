"""Session-gated routing policy."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlencode

import logfire

from showcase.config import RoutingSettings
from showcase.domain.error import SessionResolutionError

from .base import Service
from .session_service import SessionService


class RouteClass(str, Enum):
    """How a path is gated."""

    PROTECTED = "protected"
    AUTH_ONLY = "auth_only"
    PUBLIC = "public"


class GateAction(str, Enum):
    """What to do with a request."""

    PASS = "pass"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class GateDecision:
    """Outcome of `SessionGate.admit`.

    `refreshed_token` is set when the session was re-issued and must be
    written back to the client whatever the action.
    """

    action: GateAction
    location: Optional[str] = None
    refreshed_token: Optional[str] = None

    @classmethod
    def pass_through(cls, refreshed_token: Optional[str] = None) -> "GateDecision":
        return cls(action=GateAction.PASS, refreshed_token=refreshed_token)

    @classmethod
    def redirect(
        cls, location: str, refreshed_token: Optional[str] = None
    ) -> "GateDecision":
        return cls(
            action=GateAction.REDIRECT,
            location=location,
            refreshed_token=refreshed_token,
        )


def _matches(path: str, prefix: str) -> bool:
    """Segment-aware prefix match."""
    prefix = prefix.rstrip("/") or "/"
    if prefix == "/":
        return True
    return path == prefix or path.startswith(prefix + "/")


class SessionGate(Service):
    """Decides whether a request may reach its route.

    | path class | session valid? | outcome                          |
    |------------|----------------|----------------------------------|
    | protected  | no             | redirect to sign-in              |
    | protected  | yes            | pass                             |
    | auth-only  | yes            | redirect to landing page         |
    | auth-only  | no             | pass                             |
    | public     | any            | pass                             |

    Any failure to resolve the session counts as "no valid session".
    """

    def __init__(
        self, session_service: SessionService, routing: RoutingSettings
    ) -> None:
        """Initialize session gate.

        Args:
            session_service: Session resolution service
            routing: Protected and auth-only path configuration
        """
        self.session_service = session_service
        self.routing = routing

    def classify(self, path: str) -> RouteClass:
        """Classify a path. Protected wins if both sets match."""
        if any(_matches(path, p) for p in self.routing.protected_prefixes):
            return RouteClass.PROTECTED
        if any(_matches(path, p) for p in self.routing.auth_only_prefixes):
            return RouteClass.AUTH_ONLY
        return RouteClass.PUBLIC

    def admit(self, path: str, token: Optional[str]) -> GateDecision:
        """Decide what happens to a request for `path`.

        Args:
            path: Request path (without query string)
            token: Session token from the request cookies, if any

        Returns:
            Pass or redirect, with a refreshed token when one was issued
        """
        route_class = self.classify(path)
        if route_class == RouteClass.PUBLIC:
            return GateDecision.pass_through()

        refreshed_token = None
        try:
            resolution = self.session_service.resolve(token)
            authenticated = True
            refreshed_token = resolution.refreshed_token
        except SessionResolutionError as e:
            authenticated = False
            if token:
                logfire.info("Session rejected at gate", path=path, error=str(e))

        if route_class == RouteClass.PROTECTED and not authenticated:
            location = self.sign_in_location(path)
            logfire.debug("Gate redirect to sign-in", path=path, location=location)
            return GateDecision.redirect(location)

        if route_class == RouteClass.AUTH_ONLY and authenticated:
            logfire.debug("Gate redirect to landing", path=path)
            return GateDecision.redirect(
                self.routing.landing_path, refreshed_token=refreshed_token
            )

        return GateDecision.pass_through(refreshed_token=refreshed_token)

    def sign_in_location(self, path: str) -> str:
        """Sign-in URL carrying the original path."""
        query = urlencode({self.routing.redirect_param: path}, safe="/")
        return f"{self.routing.sign_in_path}?{query}"
