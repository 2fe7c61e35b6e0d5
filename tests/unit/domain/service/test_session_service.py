"""Unit tests for SessionService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from showcase.config import AuthSettings
from showcase.domain.error import SessionResolutionError
from showcase.domain.service import SessionService


@pytest.fixture
def session_service() -> SessionService:
    return SessionService(AuthSettings(jwt_secret="test-secret"))


class TestResolve:
    """Tests for resolve."""

    def test_resolves_fresh_token(self, session_service):
        """A fresh token resolves to its subject without refresh."""
        token = session_service.issue("u1")

        resolution = session_service.resolve(token)

        assert resolution.session.auth_id == "u1"
        assert resolution.refreshed_token is None

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token_raises(self, session_service, token):
        """No token means no session."""
        with pytest.raises(SessionResolutionError):
            session_service.resolve(token)

    def test_tampered_token_raises(self, session_service):
        """A token with a modified signature is rejected."""
        header, payload, _ = session_service.issue("u1").split(".")

        with pytest.raises(SessionResolutionError):
            session_service.resolve(f"{header}.{payload}.forged-signature")

    def test_claims_of_wrong_shape_raise(self, session_service, monkeypatch):
        """Verified claims that do not fit the payload model fail closed."""
        token = session_service.issue("u1")
        monkeypatch.setattr(
            jwt,
            "decode",
            lambda *args, **kwargs: {"sub": None, "iat": "soon", "exp": "later"},
        )

        with pytest.raises(SessionResolutionError, match="Malformed"):
            session_service.resolve(token)

    def test_expired_token_raises(self, session_service):
        """Expired tokens do not resolve."""
        token = session_service.issue(
            "u1", now=datetime.now(timezone.utc) - timedelta(days=8)
        )

        with pytest.raises(SessionResolutionError, match="expired"):
            session_service.resolve(token)

    def test_token_inside_refresh_window_is_reissued(self, session_service):
        """Less than the refresh window left yields a new full-length token."""
        now = datetime.now(timezone.utc)
        settings = session_service.auth_settings
        token = session_service.issue(
            "u1", now=now - timedelta(minutes=settings.session_lifetime_minutes - 10)
        )

        resolution = session_service.resolve(token, now=now)

        assert resolution.refreshed_token is not None
        assert resolution.session.expires_at == now + timedelta(
            minutes=settings.session_lifetime_minutes
        )


class TestGetAuthId:
    """Tests for get_auth_id."""

    def test_returns_subject_for_valid_token(self, session_service):
        assert session_service.get_auth_id(session_service.issue("u7")) == "u7"

    def test_returns_none_for_invalid_token(self, session_service):
        assert session_service.get_auth_id("garbage") is None
