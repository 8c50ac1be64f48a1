"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client
from supabase.client import ClientOptions

from book_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from book_tracker.adapters.supabase_session_store import SupabaseSessionStore
from book_tracker.adapters.supabase_wishlist_repository import (
    SupabaseWishlistRepository,
)
from book_tracker.config import Settings
from book_tracker.services.auth import AuthService
from book_tracker.services.entries import EntryService
from book_tracker.services.wishlist import WishlistService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    entry_service: EntryService
    wishlist_service: WishlistService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    data_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    auth_client = create_client(
        resolved_settings.supabase_url,
        resolved_settings.supabase_anon_key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )
    return AppContainer(
        settings=resolved_settings,
        auth_service=AuthService(SupabaseSessionStore(auth_client)),
        entry_service=EntryService(SupabaseEntryRepository(data_client)),
        wishlist_service=WishlistService(SupabaseWishlistRepository(data_client)),
    )
