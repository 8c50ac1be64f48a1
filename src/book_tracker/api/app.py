"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from book_tracker.api.auth import router as auth_router
from book_tracker.api.dependencies import session_token
from book_tracker.api.entries import router as entries_router
from book_tracker.api.wishlist import router as wishlist_router
from book_tracker.app_logging import configure_logging
from book_tracker.containers import AppContainer
from book_tracker.domain.errors import (
    BookTrackerError,
    StoreError,
    Unauthorized,
    ValidationError,
)

_ERROR_STATUS: dict[type[BookTrackerError], int] = {
    Unauthorized: 401,
    ValidationError: 400,
    StoreError: 500,
}
# Routes whose bodies are only looked at once the caller is signed in.
_GATED_PREFIXES = (entries_router.prefix, wishlist_router.prefix)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Book Tracker")
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(entries_router)
    app.include_router(wishlist_router)

    @app.exception_handler(BookTrackerError)
    async def handle_app_error(request: Request, exc: BookTrackerError) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= 500:
            logger.error(
                "%s %s failed: %s", request.method, request.url.path, exc.message
            )
        return JSONResponse(status_code=status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_request(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # Undecodable bodies fail before dependencies run.
        if request.url.path.startswith(_GATED_PREFIXES):
            state = container.auth_service.resolve(session_token(request))
            if not state.is_authenticated:
                return await handle_app_error(request, Unauthorized())
        return JSONResponse(
            status_code=400, content={"error": _describe_errors(exc.errors())}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: BookTrackerError) -> int:
    for cls in type(exc).__mro__:
        if cls in _ERROR_STATUS:
            return _ERROR_STATUS[cls]
    return 500


def _describe_errors(errors: list[dict]) -> str:
    """Flatten pydantic error details into one readable line."""
    parts = []
    for error in errors:
        location = ".".join(
            str(part) for part in error.get("loc", ()) if part != "body"
        )
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"
