from __future__ import annotations

from guestbook.stores.base import GuestbookStore, newest_first
from guestbook.stores.file import JsonFileGuestbookStore
from guestbook.stores.memory import InMemoryGuestbookStore
from guestbook.stores.remote import RemoteTableGuestbookStore

from config.settings import Settings


def build_store(settings: Settings) -> GuestbookStore:
    """Pick the guestbook backend named by ``GUESTBOOK_BACKEND``."""
    backend = (settings.guestbook_backend or "memory").strip().lower()
    if backend == "memory":
        return InMemoryGuestbookStore()
    if backend == "file":
        return JsonFileGuestbookStore(settings.guestbook_file)
    if backend == "remote":
        if not settings.supabase_url or not settings.supabase_key:
            raise RuntimeError(
                "GUESTBOOK_BACKEND=remote needs SUPABASE_URL and SUPABASE_KEY in environment or .env"
            )
        return RemoteTableGuestbookStore(
            base_url=settings.supabase_url,
            api_key=settings.supabase_key,
            table=settings.guestbook_table,
            timeout=settings.remote_timeout,
        )
    raise RuntimeError(f"Unknown GUESTBOOK_BACKEND '{settings.guestbook_backend}' (use memory, file or remote)")


__all__ = [
    "GuestbookStore",
    "InMemoryGuestbookStore",
    "JsonFileGuestbookStore",
    "RemoteTableGuestbookStore",
    "build_store",
    "newest_first",
]
