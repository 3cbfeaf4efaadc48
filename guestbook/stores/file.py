from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import List, Union

from pydantic import ValidationError as PydanticValidationError

from common.errors import StorageError, ValidationError
from guestbook.core.entry import Entry, validate_fields
from guestbook.stores.base import GuestbookStore, newest_first, next_entry_id, utc_now


logger = logging.getLogger("portfolio.guestbook")


class JsonFileGuestbookStore(GuestbookStore):
    """Keeps the whole guestbook as one JSON array on disk.

    Every append rewrites the full file. Appends on one instance are
    serialized by a lock; separate processes (or separate instances over the
    same path) are not coordinated and the last writer wins.
    """

    backend = "file"

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def list(self) -> List[Entry]:
        return newest_first(self._read())

    def append(self, name: str, message: str) -> Entry:
        name, message = validate_fields(name, message)
        with self._lock:
            entries = self._read()
            last_id = max((entry.id for entry in entries), default=0)
            entry = Entry(
                id=next_entry_id(last_id),
                name=name,
                message=message,
                created_at=utc_now(),
            )
            entries.append(entry)
            self._write(entries)
        logger.info("Guestbook entry %s written to %s (total=%s)", entry.id, self.path, len(entries))
        return entry

    def _read(self) -> List[Entry]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw) if raw.strip() else []
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Guestbook file %s unreadable, treating as empty: %s", self.path, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Guestbook file %s does not hold a JSON array, treating as empty", self.path)
            return []

        entries: List[Entry] = []
        for item in data:
            try:
                entries.append(Entry.model_validate(item))
            except (PydanticValidationError, ValidationError) as exc:
                logger.warning("Skipping malformed guestbook record in %s: %s", self.path, exc)
        return entries

    def _write(self, entries: List[Entry]) -> None:
        payload = [entry.to_json() for entry in entries]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fp:
                    json.dump(payload, fp, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise StorageError(f"Gagal menyimpan guestbook ke {self.path}: {exc}") from exc
