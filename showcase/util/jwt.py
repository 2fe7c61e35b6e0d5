"""JWT session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from showcase.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    `sub` is the auth subject (Account.auth_id) the session is bound to.
    """

    sub: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    auth_id: str, settings: AuthSettings, now: datetime | None = None
) -> str:
    """Create a session token for an auth subject.

    Args:
        auth_id: External auth subject
        settings: Authentication settings
        now: Issue time (defaults to the current UTC time)

    Returns:
        Encoded JWT token
    """
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(minutes=settings.session_lifetime_minutes)

    payload = {
        "sub": auth_id,
        "iat": issued_at,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
    except PydanticValidationError as e:
        # Signature checked out but the claims have the wrong shape
        raise JWTError(f"Malformed token claims: {e.errors()[0]['msg']}") from e
