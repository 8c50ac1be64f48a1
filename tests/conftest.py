"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from book_tracker.config import Settings
from book_tracker.containers import AppContainer
from book_tracker.domain.auth import AuthSession, AuthUser
from book_tracker.domain.entries import Entry, RatingDetails
from book_tracker.domain.errors import StoreError, Unauthorized, ValidationError
from book_tracker.domain.wishlist import WishlistItem
from book_tracker.services.auth import AuthService, SessionStore
from book_tracker.services.entries import EntryRepository, EntryService
from book_tracker.services.wishlist import WishlistRepository, WishlistService


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entries table for tests."""

    rows: dict[str, Entry] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    fail_with: str | None = None

    def _check(self, action: str) -> None:
        self.calls.append(action)
        if self.fail_with:
            raise StoreError(self.fail_with)

    def list_entries(self, user_id: UUID, entry_id: str | None) -> list[Entry]:
        self._check("select")
        return [
            entry
            for entry in self.rows.values()
            if entry.user_id == user_id and (entry_id is None or entry.id == entry_id)
        ]

    def create_entry(self, user_id: UUID, columns: dict[str, object]) -> Entry:
        self._check("insert")
        details = columns.get("rating_details")
        entry = Entry(
            id=str(uuid4()),
            user_id=user_id,
            **{
                **columns,
                "rating_details": RatingDetails(**details)
                if isinstance(details, dict)
                else None,
            },
        )
        self.rows[entry.id] = entry
        return entry

    def delete_entry(self, user_id: UUID, entry_id: str) -> int:
        self._check("delete")
        entry = self.rows.get(entry_id)
        if entry is None or entry.user_id != user_id:
            return 0
        del self.rows[entry_id]
        return 1


@dataclass
class InMemoryWishlistRepository(WishlistRepository):
    """In-memory items table for tests."""

    rows: dict[str, WishlistItem] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)

    def list_items(self, user_id: UUID, item_id: str | None) -> list[WishlistItem]:
        self.calls.append("select")
        return [
            item
            for item in self.rows.values()
            if item.user_id == user_id and (item_id is None or item.id == item_id)
        ]

    def create_item(self, user_id: UUID, columns: dict[str, object]) -> WishlistItem:
        self.calls.append("insert")
        item = WishlistItem(id=str(uuid4()), user_id=user_id, **columns)
        self.rows[item.id] = item
        return item

    def delete_item(self, user_id: UUID, item_id: str) -> int:
        self.calls.append("delete")
        item = self.rows.get(item_id)
        if item is None or item.user_id != user_id:
            return 0
        del self.rows[item_id]
        return 1


@dataclass
class FakeSessionStore(SessionStore):
    """Session store that maps tokens to known users."""

    users_by_token: dict[str, AuthUser] = field(default_factory=dict)
    passwords: dict[str, tuple[str, AuthUser]] = field(default_factory=dict)
    signed_out: list[str] = field(default_factory=list)
    refresh_tokens: dict[str, AuthUser] = field(default_factory=dict)

    def add_user(self, email: str, password: str, token: str) -> AuthUser:
        user = AuthUser(id=uuid4(), email=email)
        self.users_by_token[token] = user
        self.passwords[email] = (password, user)
        return user

    def sign_in(self, email: str, password: str) -> AuthSession:
        stored = self.passwords.get(email)
        if stored is None or stored[0] != password:
            raise Unauthorized("Invalid login credentials")
        user = stored[1]
        token = next(t for t, u in self.users_by_token.items() if u == user)
        return self._issue(token, user)

    def _issue(self, token: str, user: AuthUser) -> AuthSession:
        refresh_token = f"refresh-{token}"
        self.refresh_tokens[refresh_token] = user
        return AuthSession(
            access_token=token, refresh_token=refresh_token, expires_in=3600, user=user
        )

    def sign_up(
        self, email: str, password: str, name: str | None
    ) -> tuple[AuthUser, AuthSession | None]:
        if email in self.passwords:
            raise ValidationError("User already registered")
        user = AuthUser(id=uuid4(), email=email, name=name)
        token = f"token-{user.id}"
        self.users_by_token[token] = user
        self.passwords[email] = (password, user)
        session = AuthSession(
            access_token=token, refresh_token=None, expires_in=None, user=user
        )
        return user, session

    def refresh(self, refresh_token: str) -> AuthSession:
        user = self.refresh_tokens.pop(refresh_token, None)
        if user is None:
            raise Unauthorized("Invalid Refresh Token")
        token = f"renewed-{uuid4()}"
        self.users_by_token[token] = user
        return self._issue(token, user)

    def sign_out(self, access_token: str) -> None:
        self.signed_out.append(access_token)
        self.users_by_token.pop(access_token, None)

    def get_user(self, access_token: str) -> AuthUser | None:
        return self.users_by_token.get(access_token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service.key.signature",
        supabase_anon_key="anon.key.signature",
        session_cookie_secure=False,
    )


@pytest.fixture
def session_store() -> FakeSessionStore:
    return FakeSessionStore()


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def wishlist_repository() -> InMemoryWishlistRepository:
    return InMemoryWishlistRepository()


@pytest.fixture
def container(
    settings: Settings,
    session_store: FakeSessionStore,
    entry_repository: InMemoryEntryRepository,
    wishlist_repository: InMemoryWishlistRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        auth_service=AuthService(session_store),
        entry_service=EntryService(entry_repository),
        wishlist_service=WishlistService(wishlist_repository),
    )


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
