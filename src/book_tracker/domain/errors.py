"""Error taxonomy shared by services, adapters and the HTTP layer."""


class BookTrackerError(Exception):
    """Base class for expected application failures."""

    message: str = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class Unauthorized(BookTrackerError):  # noqa: N818
    """No authenticated user could be resolved for the caller."""

    message = "Unauthorized"


class ValidationError(BookTrackerError):
    """Input failed validation before reaching the record store."""

    message = "Invalid request"


class StoreError(BookTrackerError):
    """The record store rejected or failed a query."""

    message = "Record store request failed"
