"""Single sign-on session handshake with the access portal.

The portal hands a bearer token to this app (``?token=`` on the first hit,
then the token kept in the session). Claims are read without verifying the
signature; the portal is the issuer of record. Decoding never redirects:
the controller performs the redirect when the resulting state asks for it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from jose import jwt
from jose.exceptions import JWTError

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    VALIDATING = "validating"
    AUTHENTICATED = "authenticated"
    EXPIRED = "expired"


_TRANSITIONS = {
    SessionState.UNAUTHENTICATED: {SessionState.VALIDATING},
    SessionState.VALIDATING: {SessionState.AUTHENTICATED, SessionState.EXPIRED, SessionState.UNAUTHENTICATED},
    SessionState.AUTHENTICATED: {SessionState.VALIDATING, SessionState.UNAUTHENTICATED},
    SessionState.EXPIRED: {SessionState.VALIDATING, SessionState.UNAUTHENTICATED},
}


@dataclass(frozen=True)
class SsoUser:
    id: str
    email: str
    role: str
    full_name: str

    @classmethod
    def from_claims(cls, claims: dict) -> "SsoUser":
        sub = str(claims.get("sub") or "")
        email = claims.get("email") or claims.get("user_email") or sub
        if claims.get("full_name"):
            full_name = claims["full_name"]
        elif claims.get("email"):
            full_name = str(claims["email"]).split("@")[0]
        else:
            full_name = "Usuario"
        return cls(id=sub, email=str(email), role=str(claims.get("role") or "authenticated"), full_name=str(full_name))


@dataclass(frozen=True)
class SessionOutcome:
    state: SessionState
    user: Optional[SsoUser] = None
    token: Optional[str] = None
    from_query: bool = False

    @property
    def needs_redirect(self) -> bool:
        return self.state in (SessionState.UNAUTHENTICATED, SessionState.EXPIRED)


class SsoSession:
    """Explicit state holder; every change goes through ``transition``."""

    def __init__(self, state: SessionState = SessionState.UNAUTHENTICATED):
        self.state = state

    def transition(self, new_state: SessionState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise ValueError(f"Invalid session transition {self.state.value} -> {new_state.value}")
        self.state = new_state

    def resolve(
        self,
        *,
        query_token: Optional[str],
        stored_token: Optional[str],
        now: Optional[datetime] = None,
    ) -> SessionOutcome:
        token = (query_token or "").strip() or (stored_token or "").strip() or None
        if token is None:
            if self.state != SessionState.UNAUTHENTICATED:
                self.transition(SessionState.UNAUTHENTICATED)
            return SessionOutcome(state=self.state)

        self.transition(SessionState.VALIDATING)
        try:
            claims = jwt.get_unverified_claims(token)
            exp = float(claims["exp"]) if claims.get("exp") is not None else None
        except (JWTError, TypeError, ValueError) as e:
            logger.warning("Rejected malformed SSO token: %s", e)
            self.transition(SessionState.UNAUTHENTICATED)
            return SessionOutcome(state=self.state)

        now = now or datetime.now(timezone.utc)
        if exp is not None and exp < now.timestamp():
            logger.info("SSO token expired for sub=%s", claims.get("sub"))
            self.transition(SessionState.EXPIRED)
            return SessionOutcome(state=self.state)

        self.transition(SessionState.AUTHENTICATED)
        return SessionOutcome(
            state=self.state,
            user=SsoUser.from_claims(claims),
            token=token,
            from_query=bool((query_token or "").strip()),
        )


def resolve_session(
    query_token: Optional[str],
    stored_token: Optional[str],
    now: Optional[datetime] = None,
) -> SessionOutcome:
    return SsoSession().resolve(query_token=query_token, stored_token=stored_token, now=now)
