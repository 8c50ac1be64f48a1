"""Supabase implementation for wishlist items."""

from dataclasses import dataclass
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from book_tracker.domain.errors import StoreError
from book_tracker.domain.wishlist import WishlistItem
from book_tracker.services.wishlist import WishlistRepository

ITEMS_TABLE = "items"


@dataclass
class SupabaseWishlistRepository(WishlistRepository):
    """Supabase-backed repository for the items table."""

    client: Client

    def list_items(self, user_id: UUID, item_id: str | None) -> list[WishlistItem]:
        """Return items owned by the user, optionally narrowed to one id."""
        query = (
            self.client.table(ITEMS_TABLE).select("*").eq("user_id", str(user_id))
        )
        if item_id:
            query = query.eq("id", item_id)
        try:
            response = query.execute()
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(getattr(exc, "message", None) or str(exc)) from exc
        return [_parse_item(row) for row in response.data or []]

    def create_item(self, user_id: UUID, columns: dict[str, object]) -> WishlistItem:
        """Insert an item row and return the stored version."""
        try:
            response = (
                self.client.table(ITEMS_TABLE)
                .insert({"user_id": str(user_id), **columns})
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(getattr(exc, "message", None) or str(exc)) from exc
        if not response.data:
            raise StoreError("Failed to create wishlist item")
        return _parse_item(response.data[0])

    def delete_item(self, user_id: UUID, item_id: str) -> int:
        """Delete by id and owner; returns how many rows were removed."""
        try:
            response = (
                self.client.table(ITEMS_TABLE)
                .delete()
                .eq("id", item_id)
                .eq("user_id", str(user_id))
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(getattr(exc, "message", None) or str(exc)) from exc
        return len(response.data or [])


def _parse_item(row: dict[str, object]) -> WishlistItem:
    return WishlistItem(
        id=str(row["id"]),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title") or ""),
        author=str(row.get("author") or ""),
        note=row.get("note"),
    )
