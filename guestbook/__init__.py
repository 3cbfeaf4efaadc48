"""Append-only guestbook log with pluggable storage backends."""

from common.errors import AppError, NotFoundError, StorageError, ValidationError
from guestbook.core.entry import Entry, validate_fields

__all__ = [
    "AppError",
    "Entry",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "validate_fields",
]
