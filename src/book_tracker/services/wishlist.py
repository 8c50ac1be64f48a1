"""Services for the wishlist."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from book_tracker.domain.errors import Unauthorized, ValidationError
from book_tracker.domain.wishlist import WishlistItem
from book_tracker.services.entries import require_title_and_author

logger = logging.getLogger(__name__)

WISHLIST_FIELDS = ("title", "author", "note")


class WishlistRepository(Protocol):
    """Persistence interface for wishlist items."""

    def list_items(self, user_id: UUID, item_id: str | None) -> list[WishlistItem]:
        """Return items owned by the user, optionally narrowed to one id."""

    def create_item(self, user_id: UUID, columns: dict[str, object]) -> WishlistItem:
        """Insert one item row and return it."""

    def delete_item(self, user_id: UUID, item_id: str) -> int:
        """Delete the user's item with this id and return the affected row count."""


@dataclass
class WishlistService:
    """Owner-scoped operations on wishlist items."""

    repository: WishlistRepository

    def list(
        self, owner_id: UUID | None, item_id: str | None = None
    ) -> list[WishlistItem]:
        """Return the owner's wishlist, or the single matching item when filtered."""
        if owner_id is None:
            raise Unauthorized
        return self.repository.list_items(owner_id, item_id or None)

    def create(
        self, owner_id: UUID | None, fields: Mapping[str, object]
    ) -> WishlistItem:
        """Validate and insert a new wishlist item."""
        if owner_id is None:
            raise Unauthorized
        require_title_and_author(fields)
        columns = {name: fields.get(name) for name in WISHLIST_FIELDS}
        return self.repository.create_item(owner_id, columns)

    def delete(self, owner_id: UUID | None, item_id: str | None) -> None:
        """Delete one of the owner's items; unknown or foreign ids are a no-op."""
        if owner_id is None:
            raise Unauthorized
        if not item_id:
            raise ValidationError("Item ID is required")
        if not self.repository.delete_item(owner_id, item_id):
            logger.info("Delete of item %s by %s matched no rows", item_id, owner_id)
