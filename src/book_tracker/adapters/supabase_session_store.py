"""Supabase Auth implementation of the session store."""

import logging
from dataclasses import dataclass
from uuid import UUID

import httpx
from supabase import AuthError, Client

from book_tracker.domain.auth import AuthSession, AuthUser
from book_tracker.domain.errors import StoreError, Unauthorized, ValidationError
from book_tracker.services.auth import SessionStore

logger = logging.getLogger(__name__)


@dataclass
class SupabaseSessionStore(SessionStore):
    """Session store backed by Supabase Auth.

    Use a client built with the anon key and reserved for auth calls; signing
    in rebinds the credentials a Supabase client sends with table queries.
    """

    client: Client

    def sign_in(self, email: str, password: str) -> AuthSession:
        """Exchange credentials for a session."""
        try:
            response = self.client.auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            logger.info("Sign-in rejected for %s: %s", email, exc.message)
            raise Unauthorized(exc.message) from exc
        except httpx.HTTPError as exc:
            raise StoreError(str(exc)) from exc
        if response.session is None or response.user is None:
            raise Unauthorized
        return _to_session(response.session)

    def sign_up(
        self, email: str, password: str, name: str | None
    ) -> tuple[AuthUser, AuthSession | None]:
        """Register a user with the display name stored in user metadata."""
        credentials: dict[str, object] = {"email": email, "password": password}
        if name:
            credentials["options"] = {"data": {"name": name}}
        try:
            response = self.client.auth.sign_up(credentials)
        except AuthError as exc:
            logger.info("Sign-up rejected for %s: %s", email, exc.message)
            raise ValidationError(exc.message) from exc
        except httpx.HTTPError as exc:
            raise StoreError(str(exc)) from exc
        if response.user is None:
            raise StoreError("Sign-up did not return a user")
        session = _to_session(response.session) if response.session else None
        return _to_user(response.user), session

    def refresh(self, refresh_token: str) -> AuthSession:
        """Issue a new session from a refresh token."""
        try:
            response = self.client.auth.refresh_session(refresh_token)
        except AuthError as exc:
            logger.info("Refresh rejected: %s", exc.message)
            raise Unauthorized(exc.message) from exc
        except httpx.HTTPError as exc:
            raise StoreError(str(exc)) from exc
        if response.session is None:
            raise Unauthorized
        return _to_session(response.session)

    def sign_out(self, access_token: str) -> None:
        """Revoke the session behind an access token."""
        try:
            self.client.auth.admin.sign_out(access_token)
        except AuthError as exc:
            logger.info("Sign-out ignored for stale token: %s", exc.message)
        except httpx.HTTPError as exc:
            raise StoreError(str(exc)) from exc

    def get_user(self, access_token: str) -> AuthUser | None:
        """Return the user for a valid access token, otherwise None."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            logger.info("Rejected session token: %s", exc.message)
            return None
        except httpx.HTTPError as exc:
            raise StoreError(str(exc)) from exc
        if response is None or response.user is None:
            return None
        return _to_user(response.user)


def _to_user(user: object) -> AuthUser:
    metadata = getattr(user, "user_metadata", None) or {}
    name = metadata.get("name") if isinstance(metadata, dict) else None
    return AuthUser(
        id=UUID(str(user.id)),
        email=getattr(user, "email", None),
        name=name,
    )


def _to_session(session: object) -> AuthSession:
    return AuthSession(
        access_token=session.access_token,
        refresh_token=getattr(session, "refresh_token", None),
        expires_in=getattr(session, "expires_in", None),
        user=_to_user(session.user),
    )
