"""Supabase implementation for read-book entries."""

from dataclasses import dataclass
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from book_tracker.domain.entries import Entry, RatingDetails
from book_tracker.domain.errors import StoreError
from book_tracker.services.entries import EntryRepository

ENTRIES_TABLE = "entries"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase-backed repository for the entries table."""

    client: Client

    def list_entries(self, user_id: UUID, entry_id: str | None) -> list[Entry]:
        """Return entries owned by the user, optionally narrowed to one id."""
        query = (
            self.client.table(ENTRIES_TABLE).select("*").eq("user_id", str(user_id))
        )
        if entry_id:
            query = query.eq("id", entry_id)
        try:
            response = query.execute()
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(_error_message(exc)) from exc
        return [_parse_entry(row) for row in response.data or []]

    def create_entry(self, user_id: UUID, columns: dict[str, object]) -> Entry:
        """Insert a full entry row and return the stored version."""
        try:
            response = (
                self.client.table(ENTRIES_TABLE)
                .insert({"user_id": str(user_id), **columns})
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(_error_message(exc)) from exc
        if not response.data:
            raise StoreError("Failed to create entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, user_id: UUID, entry_id: str) -> int:
        """Delete by id and owner; returns how many rows were removed."""
        try:
            response = (
                self.client.table(ENTRIES_TABLE)
                .delete()
                .eq("id", entry_id)
                .eq("user_id", str(user_id))
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StoreError(_error_message(exc)) from exc
        return len(response.data or [])


def _error_message(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc)


def _parse_rating_details(raw: object) -> RatingDetails | None:
    if not isinstance(raw, dict):
        return None
    return RatingDetails(
        romance=raw.get("romance"),
        sadness=raw.get("sadness"),
        spicy=raw.get("spicy"),
        final=raw.get("final"),
    )


def _parse_entry(row: dict[str, object]) -> Entry:
    """Parse an entries row into a domain model."""
    phrases = row.get("fav_phrases")
    return Entry(
        id=str(row["id"]),
        user_id=UUID(str(row["user_id"])),
        title=str(row.get("title") or ""),
        author=str(row.get("author") or ""),
        recommended=row.get("recommended"),
        rating=row.get("rating"),
        formato=row.get("formato"),
        page_number=row.get("page_number"),
        start_date=row.get("start_date"),
        end_date=row.get("end_date"),
        fav_character=row.get("fav_character"),
        hated_character=row.get("hated_character"),
        rating_details=_parse_rating_details(row.get("rating_details")),
        genre=row.get("genre"),
        fav_phrases=[str(phrase) for phrase in phrases]
        if isinstance(phrases, list)
        else None,
        review=row.get("review"),
    )
