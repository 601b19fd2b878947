from __future__ import annotations

import logging
from urllib.parse import urlencode

from flask import Flask, g, redirect, request, session

from ..container import Container
from .sso import SessionState, resolve_session

logger = logging.getLogger(__name__)

# Endpoints reachable without a portal session (kiosk clock and uploaded files).
PUBLIC_ENDPOINTS = {"static", "kiosk_clock", "files", "logout"}

SESSION_TOKEN_KEY = "sso_token"


def register(app: Flask, container: Container) -> None:
    portal_url = app.config.get("PORTAL_URL") or "/"

    @app.before_request
    def require_sso_session():
        if request.endpoint in PUBLIC_ENDPOINTS or request.endpoint is None:
            return None

        outcome = resolve_session(request.args.get("token"), session.get(SESSION_TOKEN_KEY))

        if outcome.needs_redirect:
            session.pop(SESSION_TOKEN_KEY, None)
            if outcome.state == SessionState.EXPIRED:
                logger.info("SSO session expired, redirecting to portal")
            return redirect(portal_url)

        session[SESSION_TOKEN_KEY] = outcome.token
        g.user = outcome.user

        if outcome.from_query:
            # Drop ?token= from the address bar once it is stored.
            args = {k: v for k, v in request.args.items() if k != "token"}
            target = request.path + (f"?{urlencode(args)}" if args else "")
            return redirect(target)
        return None

    @app.context_processor
    def inject_user():
        return {"current_user": g.get("user"), "company_name": app.config.get("COMPANY_NAME")}

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        session.pop(SESSION_TOKEN_KEY, None)
        return redirect(portal_url)
