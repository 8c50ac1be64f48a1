"""Owner-scoped endpoints for wishlist items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Query, Request, status

from book_tracker.api.dependencies import require_user
from book_tracker.api.schemas import DeleteRequest, WishlistItemCreate
from book_tracker.domain.auth import AuthUser
from book_tracker.domain.wishlist import WishlistItem

if TYPE_CHECKING:
    from book_tracker.containers import AppContainer

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


@router.get("")
async def list_items(
    request: Request,
    item_id: str | None = Query(default=None, alias="id"),
    user: AuthUser = Depends(require_user),
) -> list[dict[str, object]]:
    """Return the caller's wishlist, optionally filtered to one id."""
    container: AppContainer = request.app.state.container
    items = container.wishlist_service.list(user.id, item_id)
    return [_serialize_item(item) for item in items]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_item(
    payload: WishlistItemCreate,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> dict[str, object]:
    """Add a book to the caller's wishlist."""
    container: AppContainer = request.app.state.container
    item = container.wishlist_service.create(user.id, payload.model_dump())
    return _serialize_item(item)


@router.delete("")
async def delete_item(
    payload: DeleteRequest,
    request: Request,
    user: AuthUser = Depends(require_user),
) -> dict[str, str]:
    """Remove a book from the caller's wishlist."""
    container: AppContainer = request.app.state.container
    container.wishlist_service.delete(user.id, payload.record_id())
    return {"message": "Item deleted successfully"}


def _serialize_item(item: WishlistItem) -> dict[str, object]:
    return {
        "id": item.id,
        "user_id": str(item.user_id),
        "title": item.title,
        "author": item.author,
        "note": item.note,
    }
