"""Pydantic models for request payloads."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

Score = int | None


class RatingDetailsPayload(BaseModel):
    """Per-aspect scores attached to an entry."""

    model_config = ConfigDict(extra="forbid")

    romance: Score = Field(default=None, ge=0, le=5)
    sadness: Score = Field(default=None, ge=0, le=5)
    spicy: Score = Field(default=None, ge=0, le=5)
    final: Score = Field(default=None, ge=0, le=5)


class EntryCreate(BaseModel):
    """Body of ``POST /entries``.

    Aliases are the request field names; title and author are checked by the
    service so that missing and empty values share one error.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str | None = None
    author: str | None = None
    recommended: bool | None = None
    rating: Score = Field(default=None, ge=0, le=5)
    formato: str | None = None
    page_number: int | None = Field(default=None, alias="pageNumber", ge=0)
    start_date: date | None = Field(default=None, alias="startDate")
    end_date: date | None = Field(default=None, alias="endDate")
    fav_character: str | None = Field(default=None, alias="favCharacter")
    hated_character: str | None = Field(default=None, alias="hatedCharacter")
    rating_details: RatingDetailsPayload | None = Field(
        default=None, alias="ratingDetails"
    )
    genre: str | None = None
    fav_phrases: list[str] | None = Field(default=None, alias="favPhrases")
    review: str | None = None

    def to_fields(self) -> dict[str, object]:
        """Return JSON-ready values keyed by request field name."""
        return self.model_dump(mode="json", by_alias=True)


class WishlistItemCreate(BaseModel):
    """Body of ``POST /wishlist``."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    author: str | None = None
    note: str | None = None


class DeleteRequest(BaseModel):
    """Body of the delete endpoints."""

    id: str | int | None = None

    def record_id(self) -> str | None:
        return None if self.id in (None, "") else str(self.id)


class Credentials(BaseModel):
    """Email and password login payload."""

    email: str
    password: str


class SignupRequest(Credentials):
    """Signup payload with an optional display name."""

    name: str | None = None
