"""Session resolution domain service."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import logfire

from showcase.config import AuthSettings
from showcase.domain.error import SessionResolutionError
from showcase.domain.model import Session
from showcase.util.jwt import JWTError, create_token, verify_token

from .base import Service


@dataclass(frozen=True)
class SessionResolution:
    """A valid session, plus a replacement token if it was refreshed."""

    session: Session
    refreshed_token: Optional[str] = None


class SessionService(Service):
    """Resolves session tokens issued by the auth collaborator.

    Stateless: every call verifies the token on its own.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize session service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, auth_id: str, now: Optional[datetime] = None) -> str:
        """Issue a session token for an auth subject.

        Args:
            auth_id: External auth subject
            now: Issue time (defaults to the current UTC time)

        Returns:
            Signed session token
        """
        with logfire.span("session_service.issue", auth_id=auth_id):
            return create_token(auth_id, self.auth_settings, now=now)

    def resolve(
        self, token: Optional[str], now: Optional[datetime] = None
    ) -> SessionResolution:
        """Resolve a session token.

        Tokens with less than the refresh window left are re-issued; the
        caller is expected to write the new token back to the client.

        Args:
            token: Session token from the request (may be missing)
            now: Current time (defaults to the current UTC time)

        Returns:
            Resolved session

        Raises:
            SessionResolutionError: If the token is missing, invalid or expired
        """
        if not token:
            raise SessionResolutionError("No session token")

        try:
            payload = verify_token(token, self.auth_settings)
        except JWTError as e:
            raise SessionResolutionError(str(e)) from e

        session = Session(
            auth_id=payload.sub,
            issued_at=payload.iat,
            expires_at=payload.exp,
        )

        current = now or datetime.now(timezone.utc)
        window = timedelta(minutes=self.auth_settings.session_refresh_window_minutes)
        if session.expires_at - current >= window:
            return SessionResolution(session=session)

        refreshed = create_token(session.auth_id, self.auth_settings, now=current)
        logfire.info("Session refreshed", auth_id=session.auth_id)
        return SessionResolution(
            session=Session(
                auth_id=session.auth_id,
                issued_at=current,
                expires_at=current
                + timedelta(minutes=self.auth_settings.session_lifetime_minutes),
            ),
            refreshed_token=refreshed,
        )

    def get_auth_id(self, token: Optional[str]) -> Optional[str]:
        """Resolve a token without raising.

        Args:
            token: Session token (optional)

        Returns:
            Auth subject if the token is valid, None otherwise
        """
        try:
            return self.resolve(token).session.auth_id
        except SessionResolutionError as e:
            logfire.debug(
                "Session resolution failed, treating as unauthenticated", error=str(e)
            )
            return None
