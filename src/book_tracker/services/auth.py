"""Session resolution and account actions."""

from dataclasses import dataclass
from typing import Protocol

from book_tracker.domain.auth import AuthSession, AuthUser, SessionState
from book_tracker.domain.errors import Unauthorized


class SessionStore(Protocol):
    """Interface to the hosted identity provider."""

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for a session."""

    def sign_up(
        self, email: str, password: str, name: str | None
    ) -> tuple[AuthUser, AuthSession | None]:
        """Register a user; the session is None until the email is confirmed."""

    def refresh(self, refresh_token: str) -> AuthSession:
        """Issue a new session from a refresh token."""

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for a valid access token, otherwise None."""


@dataclass
class AuthService:
    """Resolves request sessions and proxies account actions to the store."""

    session_store: SessionStore

    def current_user(self, access_token: str | None) -> AuthUser | None:
        """Return the user behind the token, or None when there is no session."""
        if not access_token:
            return None
        return self.session_store.get_user(access_token)

    def resolve(self, access_token: str | None) -> SessionState:
        """Resolve a fresh session state from a request token."""
        return SessionState().resolved(self.current_user(access_token))

    @staticmethod
    def require_user(state: SessionState) -> AuthUser:
        """Return the authenticated user or raise Unauthorized."""
        if not state.is_authenticated or state.user is None:
            raise Unauthorized
        return state.user

    def login(self, email: str, password: str) -> AuthSession:
        """Sign in with email and password."""
        return self.session_store.sign_in(email, password)

    def signup(
        self, email: str, password: str, name: str | None = None
    ) -> tuple[AuthUser, AuthSession | None]:
        """Create an account with an optional display name."""
        return self.session_store.sign_up(email, password, name)

    def refresh(self, refresh_token: str | None) -> AuthSession:
        """Renew an expiring session from its refresh token."""
        if not refresh_token:
            raise Unauthorized
        return self.session_store.refresh(refresh_token)

    def logout(self, access_token: str | None) -> None:
        """Revoke the current session, if any."""
        if access_token:
            self.session_store.sign_out(access_token)
