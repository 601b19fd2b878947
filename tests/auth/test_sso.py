from __future__ import annotations

from datetime import datetime, timezone

import pytest
from jose import jwt

from src.rrhh_system.rrhh_system.auth.sso import SessionState, SsoSession, SsoUser, resolve_session

NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def _token(**claims) -> str:
    return jwt.encode(claims, "secret", algorithm="HS256")


def test_no_token_is_unauthenticated():
    out = resolve_session(None, None, now=NOW)
    assert out.state == SessionState.UNAUTHENTICATED
    assert out.needs_redirect


def test_valid_token_authenticates():
    token = _token(sub="u1", email="jefa@somyl.cl", role="admin", exp=NOW.timestamp() + 3600)
    out = resolve_session(token, None, now=NOW)

    assert out.state == SessionState.AUTHENTICATED
    assert not out.needs_redirect
    assert out.from_query
    assert out.user == SsoUser(id="u1", email="jefa@somyl.cl", role="admin", full_name="jefa")


def test_expired_token():
    token = _token(sub="u1", exp=NOW.timestamp() - 1)
    out = resolve_session(None, token, now=NOW)
    assert out.state == SessionState.EXPIRED
    assert out.needs_redirect


def test_malformed_token():
    assert resolve_session("not-a-jwt", None, now=NOW).state == SessionState.UNAUTHENTICATED
    assert resolve_session(_token(sub="u1", exp="soon"), None, now=NOW).state == SessionState.UNAUTHENTICATED


def test_query_token_wins_over_stored():
    stored = _token(sub="old", exp=NOW.timestamp() + 60)
    fresh = _token(sub="new", exp=NOW.timestamp() + 60)

    out = resolve_session(fresh, stored, now=NOW)
    assert out.user.id == "new"
    assert out.token == fresh

    out = resolve_session("", stored, now=NOW)
    assert out.user.id == "old"
    assert not out.from_query


def test_user_fallbacks():
    user = SsoUser.from_claims({"sub": "abc"})
    assert (user.email, user.full_name, user.role) == ("abc", "Usuario", "authenticated")

    user = SsoUser.from_claims({"sub": "abc", "user_email": "x@y.cl", "full_name": "Ana Pérez"})
    assert (user.email, user.full_name) == ("x@y.cl", "Ana Pérez")


def test_invalid_transition_raises():
    session = SsoSession()
    with pytest.raises(ValueError):
        session.transition(SessionState.AUTHENTICATED)
