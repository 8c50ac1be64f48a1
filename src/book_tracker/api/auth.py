"""Account endpoints: sign in, sign up, refresh, sign out, current session."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, Response, status

from book_tracker.api.dependencies import get_session, session_token
from book_tracker.api.schemas import Credentials, SignupRequest
from book_tracker.domain.auth import AuthSession, AuthUser, SessionState
from book_tracker.services.auth import AuthService

if TYPE_CHECKING:
    from book_tracker.config import Settings
    from book_tracker.containers import AppContainer

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login")
async def login(
    payload: Credentials,
    request: Request,
    response: Response,
    current: SessionState = Depends(get_session),
) -> dict[str, object]:
    """Sign in and set the session cookies."""
    container: AppContainer = request.app.state.container
    session = container.auth_service.login(payload.email, payload.password)
    _set_session_cookies(response, container.settings, session)
    return serialize_state(current.logged_in(session.user))


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    payload: SignupRequest,
    request: Request,
    response: Response,
    current: SessionState = Depends(get_session),
) -> dict[str, object]:
    """Create an account; cookies are set only when a session is issued."""
    container: AppContainer = request.app.state.container
    user, session = container.auth_service.signup(
        payload.email, payload.password, payload.name
    )
    state = current
    if session is not None:
        _set_session_cookies(response, container.settings, session)
        state = current.logged_in(user)
    return {"status": state.status.value, "user": serialize_user(user)}


@router.post("/refresh")
async def refresh(
    request: Request,
    response: Response,
    current: SessionState = Depends(get_session),
) -> dict[str, object]:
    """Exchange the refresh cookie for a new access token."""
    container: AppContainer = request.app.state.container
    settings = container.settings
    session = container.auth_service.refresh(
        request.cookies.get(settings.session_refresh_cookie_name)
    )
    _set_session_cookies(response, settings, session)
    return serialize_state(current.logged_in(session.user))


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    token: str | None = Depends(session_token),
    current: SessionState = Depends(get_session),
) -> dict[str, object]:
    """Revoke the session and clear the cookies."""
    container: AppContainer = request.app.state.container
    container.auth_service.logout(token)
    response.delete_cookie(container.settings.session_cookie_name)
    response.delete_cookie(container.settings.session_refresh_cookie_name)
    return {"message": "Logged out", "status": current.logged_out().status.value}


@router.get("/session")
async def current_session(
    state: SessionState = Depends(get_session),
) -> dict[str, object]:
    """Return the user behind the current session."""
    AuthService.require_user(state)
    return serialize_state(state)


def serialize_user(user: AuthUser) -> dict[str, object]:
    return {"id": str(user.id), "email": user.email, "name": user.name}


def serialize_state(state: SessionState) -> dict[str, object]:
    return {
        "status": state.status.value,
        "user": serialize_user(state.user) if state.user else None,
    }


def _set_session_cookies(
    response: Response, settings: Settings, session: AuthSession
) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.access_token,
        max_age=session.expires_in or settings.session_cookie_max_age,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    if session.refresh_token:
        response.set_cookie(
            key=settings.session_refresh_cookie_name,
            value=session.refresh_token,
            max_age=settings.session_refresh_max_age,
            httponly=True,
            secure=settings.session_cookie_secure,
            samesite="lax",
        )
