"""Services for the read-books list."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from book_tracker.domain.entries import Entry, fields_to_columns
from book_tracker.domain.errors import Unauthorized, ValidationError

logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for read-book entries."""

    def list_entries(self, user_id: UUID, entry_id: str | None) -> list[Entry]:
        """Return entries owned by the user, optionally narrowed to one id."""

    def create_entry(self, user_id: UUID, columns: dict[str, object]) -> Entry:
        """Insert one entry row and return it."""

    def delete_entry(self, user_id: UUID, entry_id: str) -> int:
        """Delete the user's entry with this id and return the affected row count."""


def require_title_and_author(fields: Mapping[str, object]) -> None:
    """Reject payloads without a usable title and author."""
    for name in ("title", "author"):
        value = fields.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError("Title and author are required")


@dataclass
class EntryService:
    """Owner-scoped operations on read-book entries."""

    repository: EntryRepository

    def list(self, owner_id: UUID | None, entry_id: str | None = None) -> list[Entry]:
        """Return the owner's entries, or the single matching one when filtered."""
        if owner_id is None:
            raise Unauthorized
        return self.repository.list_entries(owner_id, entry_id or None)

    def create(self, owner_id: UUID | None, fields: Mapping[str, object]) -> Entry:
        """Validate and insert a new entry for the owner."""
        if owner_id is None:
            raise Unauthorized
        require_title_and_author(fields)
        return self.repository.create_entry(owner_id, fields_to_columns(fields))

    def delete(self, owner_id: UUID | None, entry_id: str | None) -> None:
        """Delete one of the owner's entries.

        An id that does not exist or belongs to someone else is a no-op.
        """
        if owner_id is None:
            raise Unauthorized
        if not entry_id:
            raise ValidationError("Entry ID is required")
        deleted = self.repository.delete_entry(owner_id, entry_id)
        if not deleted:
            logger.info("Delete of entry %s by %s matched no rows", entry_id, owner_id)
