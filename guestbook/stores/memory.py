from __future__ import annotations

import logging
import threading
from typing import List

from guestbook.core.entry import Entry, validate_fields
from guestbook.stores.base import GuestbookStore, newest_first, next_entry_id, utc_now


logger = logging.getLogger("portfolio.guestbook")


class InMemoryGuestbookStore(GuestbookStore):
    """Process-local store. Everything is lost when the process exits."""

    backend = "memory"

    def __init__(self) -> None:
        self._entries: List[Entry] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def list(self) -> List[Entry]:
        with self._lock:
            snapshot = list(self._entries)
        return newest_first(snapshot)

    def append(self, name: str, message: str) -> Entry:
        name, message = validate_fields(name, message)
        with self._lock:
            self._last_id = next_entry_id(self._last_id)
            entry = Entry(id=self._last_id, name=name, message=message, created_at=utc_now())
            self._entries.append(entry)
            total = len(self._entries)
        logger.info("Guestbook entry %s stored in memory (total=%s)", entry.id, total)
        return entry
