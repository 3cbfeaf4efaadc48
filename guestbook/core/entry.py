from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from common.errors import ValidationError


REQUIRED_FIELDS_MESSAGE = "name dan message wajib diisi"


def _required_text(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    return value.strip()


def validate_fields(name: Any, message: Any) -> Tuple[str, str]:
    """Return ``(name, message)`` trimmed, or raise ValidationError.

    Absent values, non-strings and strings that are blank after trimming are
    all rejected with the same user-facing message.
    """
    return _required_text(name), _required_text(message)


class Entry(BaseModel):
    """One guestbook message. Immutable once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    message: str
    # Accepts created_at (remote rows, older files) as well as createdAt.
    created_at: datetime = Field(..., alias="createdAt")

    @field_validator("name", "message", mode="before")
    @classmethod
    def _non_blank(cls, value: Any) -> str:
        # Raised as-is by pydantic, so callers see the domain error.
        return _required_text(value)

    @field_validator("created_at")
    @classmethod
    def _aware_utc(cls, value: datetime) -> datetime:
        # Timestamps without an offset are taken as UTC so entries stay comparable.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
