"""Session cookie helpers shared by the gate middleware and routes."""

from fastapi import HTTPException, Request, Response, status

from showcase.config import AuthSettings
from showcase.domain.error import SessionResolutionError
from showcase.domain.service import SessionService


def read_session_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Session token from the request cookies, if any."""
    return request.cookies.get(auth_settings.session_cookie_name)


def set_session_cookie(
    response: Response, token: str, auth_settings: AuthSettings
) -> None:
    """Write a (refreshed) session token to the outgoing response.

    Args:
        response: Outgoing response
        token: Session token
        auth_settings: Cookie name, lifetime and security flags
    """
    response.set_cookie(
        key=auth_settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=auth_settings.session_cookie_secure,
        samesite="lax",
        max_age=auth_settings.session_lifetime_minutes * 60,
    )


def require_session(
    request: Request,
    response: Response,
    session_service: SessionService,
    auth_settings: AuthSettings,
) -> str:
    """Resolve the request's session or fail with 401.

    A refreshed token is written to `response`.

    Returns:
        Auth subject of the session

    Raises:
        HTTPException: 401 if there is no valid session
    """
    token = read_session_token(request, auth_settings)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    try:
        resolution = session_service.resolve(token)
    except SessionResolutionError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )

    if resolution.refreshed_token:
        set_session_cookie(response, resolution.refreshed_token, auth_settings)
    return resolution.session.auth_id
