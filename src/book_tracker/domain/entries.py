"""Domain models for read-book entries."""

from collections.abc import Mapping
from dataclasses import dataclass
from uuid import UUID

from book_tracker.domain.errors import ValidationError

# Request field name -> stored column name.
ENTRY_FIELD_COLUMNS: dict[str, str] = {
    "title": "title",
    "author": "author",
    "recommended": "recommended",
    "rating": "rating",
    "formato": "formato",
    "pageNumber": "page_number",
    "startDate": "start_date",
    "endDate": "end_date",
    "favCharacter": "fav_character",
    "hatedCharacter": "hated_character",
    "ratingDetails": "rating_details",
    "genre": "genre",
    "favPhrases": "fav_phrases",
    "review": "review",
}


@dataclass(frozen=True)
class RatingDetails:
    """Per-aspect scores, each 0-5."""

    romance: int | None = None
    sadness: int | None = None
    spicy: int | None = None
    final: int | None = None


@dataclass(frozen=True)
class Entry:
    """A book the user has read."""

    id: str
    user_id: UUID
    title: str
    author: str
    recommended: bool | None = None
    rating: int | None = None
    formato: str | None = None
    page_number: int | None = None
    start_date: str | None = None
    end_date: str | None = None
    fav_character: str | None = None
    hated_character: str | None = None
    rating_details: RatingDetails | None = None
    genre: str | None = None
    fav_phrases: list[str] | None = None
    review: str | None = None


def fields_to_columns(fields: Mapping[str, object]) -> dict[str, object]:
    """Translate request fields to a full column row.

    Every known column is present in the result; absent fields become None.
    Unknown field names raise ValidationError instead of being dropped.
    """
    unknown = set(fields) - set(ENTRY_FIELD_COLUMNS)
    if unknown:
        raise ValidationError(f"Unknown entry fields: {', '.join(sorted(unknown))}")
    return {column: fields.get(name) for name, column in ENTRY_FIELD_COLUMNS.items()}

