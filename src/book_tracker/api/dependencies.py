"""Request-scoped dependencies shared by the routers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from book_tracker.domain.auth import AuthUser, SessionState
from book_tracker.services.auth import AuthService

if TYPE_CHECKING:
    from book_tracker.containers import AppContainer

_BEARER_PREFIX = "bearer "


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def session_token(request: Request) -> str | None:
    """Read the access token from the session cookie or a bearer header."""
    container = get_container(request)
    token = request.cookies.get(container.settings.session_cookie_name)
    if token:
        return token
    authorization = request.headers.get("authorization")
    if authorization and authorization.lower().startswith(_BEARER_PREFIX):
        return authorization[len(_BEARER_PREFIX) :].strip() or None
    return None


def get_session(
    request: Request, token: str | None = Depends(session_token)
) -> SessionState:
    """Resolve the caller's session for this request."""
    return get_container(request).auth_service.resolve(token)


def require_user(state: SessionState = Depends(get_session)) -> AuthUser:
    """Gate a route on an authenticated session."""
    return AuthService.require_user(state)
