"""Domain models for the wishlist."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class WishlistItem:
    """A book the user wants to read."""

    id: str
    user_id: UUID
    title: str
    author: str
    note: str | None = None
