"""Session gate middleware.

Runs the session gate on every request before it reaches a route: page
paths that need a session are redirected to sign-in, sign-in pages are
redirected away from when a session exists, and refreshed session tokens
are written back on the response.
"""

from typing import Callable

from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from showcase.config import AuthSettings
from showcase.domain.service import GateAction, SessionGate
from showcase.interface.api.session import read_session_token, set_session_cookie
from showcase.util.logging import get_logger

logger = get_logger(__name__)


class SessionGateMiddleware(BaseHTTPMiddleware):
    """Apply `SessionGate.admit` to each request.

    The gate and settings come from the application-scope DI container,
    so this middleware works with whatever container the app was set up
    with.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        container = request.app.state.dishka_container
        gate = await container.get(SessionGate)
        auth_settings = await container.get(AuthSettings)

        token = read_session_token(request, auth_settings)
        decision = gate.admit(request.url.path, token)

        if decision.action == GateAction.REDIRECT:
            logger.debug(
                "Redirecting %s to %s", request.url.path, decision.location
            )
            response: Response = RedirectResponse(
                url=decision.location, status_code=307
            )
        else:
            response = await call_next(request)

        if decision.refreshed_token:
            set_session_cookie(response, decision.refreshed_token, auth_settings)

        return response
