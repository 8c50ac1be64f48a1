"""Owner-scoped endpoints for read-book entries."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from book_tracker.api.dependencies import require_user
from book_tracker.api.schemas import DeleteRequest, EntryCreate
from book_tracker.domain.auth import AuthUser
from book_tracker.domain.entries import Entry

if TYPE_CHECKING:
    from book_tracker.containers import AppContainer

router = APIRouter(prefix="/entries", tags=["entries"])


@router.get("")
async def list_entries(
    request: Request,
    entry_id: str | None = Query(default=None, alias="id"),
    user: AuthUser = Depends(require_user),
) -> list[dict[str, object]]:
    """Return the caller's entries, optionally filtered to one id."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.list(user.id, entry_id)
    return [serialize_entry(entry) for entry in entries]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_entry(
    payload: EntryCreate,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> dict[str, object]:
    """Record a book the caller has read."""
    container: AppContainer = request.app.state.container
    entry = container.entry_service.create(user.id, payload.to_fields())
    return serialize_entry(entry)


@router.delete("")
async def delete_entry(
    payload: DeleteRequest,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> dict[str, str]:
    """Delete one of the caller's entries."""
    container: AppContainer = request.app.state.container
    container.entry_service.delete(user.id, payload.record_id())
    return {"message": "Entry deleted successfully"}


def serialize_entry(entry: Entry) -> dict[str, object]:
    """Render an entry in stored column shape."""
    row = asdict(entry)
    row["user_id"] = str(entry.user_id)
    return row
