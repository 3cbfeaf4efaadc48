from __future__ import annotations

import time
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Iterable, List

from guestbook.core.entry import Entry


class GuestbookStore(ABC):
    """Ordered, append-only guestbook log.

    ``list()`` always returns entries newest-first. ``append()`` validates its
    inputs, assigns id and timestamp, persists the entry and returns it.
    """

    backend: str = "abstract"

    @abstractmethod
    def list(self) -> List[Entry]:
        ...

    @abstractmethod
    def append(self, name: str, message: str) -> Entry:
        ...


def newest_first(entries: Iterable[Entry]) -> List[Entry]:
    return sorted(entries, key=lambda entry: (entry.created_at, entry.id), reverse=True)


def next_entry_id(last_id: int) -> int:
    """Millisecond clock id, bumped past ``last_id`` so it never repeats."""
    return max(int(time.time() * 1000), last_id + 1)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
