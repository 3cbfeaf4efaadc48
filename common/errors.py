from __future__ import annotations


class AppError(Exception):
    """Base class for failures the HTTP layer turns into an error envelope."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required field is missing or empty. Correctable by the caller."""

    status_code = 400


class StorageError(AppError):
    """The backing medium is unreachable, unwritable or reported a fault."""

    status_code = 500


class NotFoundError(AppError):
    status_code = 404
