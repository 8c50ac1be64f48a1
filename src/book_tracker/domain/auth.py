"""Authentication domain models."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


@dataclass(frozen=True)
class AuthUser:
    """The identity behind a session."""

    id: UUID
    email: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class AuthSession:
    """Tokens issued by the session store at sign-in or sign-up."""

    access_token: str
    refresh_token: str | None
    expires_in: int | None
    user: AuthUser


class SessionStatus(Enum):
    """Lifecycle of a session lookup."""

    UNKNOWN = "unknown"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class SessionState:
    """Immutable view of the caller's session.

    Starts ``UNKNOWN`` while the lookup is pending and resolves exactly once to
    ``AUTHENTICATED`` or ``ANONYMOUS``. Login and logout move between the two
    resolved states afterwards.
    """

    status: SessionStatus = SessionStatus.UNKNOWN
    user: AuthUser | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.status is SessionStatus.AUTHENTICATED

    def resolved(self, user: AuthUser | None) -> "SessionState":
        """Finish the initial lookup."""
        if self.status is not SessionStatus.UNKNOWN:
            raise ValueError(f"Session already resolved as {self.status.value}")
        if user is None:
            return SessionState(status=SessionStatus.ANONYMOUS)
        return SessionState(status=SessionStatus.AUTHENTICATED, user=user)

    def logged_in(self, user: AuthUser) -> "SessionState":
        """Apply a login event."""
        if self.status is SessionStatus.UNKNOWN:
            raise ValueError("Cannot log in before the session is resolved")
        return SessionState(status=SessionStatus.AUTHENTICATED, user=user)

    def logged_out(self) -> "SessionState":
        """Apply a logout event."""
        return SessionState(status=SessionStatus.ANONYMOUS)
