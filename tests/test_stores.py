from __future__ import annotations

import logging
import threading

import pytest

from common.errors import ValidationError
from guestbook.stores import (
    InMemoryGuestbookStore,
    JsonFileGuestbookStore,
    RemoteTableGuestbookStore,
    build_store,
)


@pytest.fixture(params=["memory", "file"])
def local_store(request, tmp_path):
    if request.param == "memory":
        return InMemoryGuestbookStore()
    return JsonFileGuestbookStore(tmp_path / "guestbook.json")


class TestLocalStores:
    def test_empty_store_lists_nothing(self, local_store):
        assert local_store.list() == []

    def test_append_returns_trimmed_entry(self, local_store):
        entry = local_store.append("  Ada ", " Hello ")
        assert entry.name == "Ada"
        assert entry.message == "Hello"
        assert isinstance(entry.id, int)
        assert entry.created_at.tzinfo is not None

    @pytest.mark.parametrize("name, message", [("", "x"), ("Ada", ""), (None, "x"), ("  ", "x")])
    def test_invalid_append_persists_nothing(self, local_store, name, message):
        local_store.append("Grace", "first")
        before = local_store.list()
        with pytest.raises(ValidationError):
            local_store.append(name, message)
        assert local_store.list() == before

    def test_list_is_idempotent(self, local_store):
        local_store.append("Ada", "one")
        local_store.append("Grace", "two")
        assert local_store.list() == local_store.list()

    def test_list_is_newest_first(self, local_store):
        for i in range(5):
            local_store.append(f"user{i}", f"message {i}")
        entries = local_store.list()
        assert [e.name for e in entries] == ["user4", "user3", "user2", "user1", "user0"]
        for newer, older in zip(entries, entries[1:]):
            assert newer.created_at >= older.created_at
            assert newer.id > older.id

    def test_appended_entry_is_listed_first(self, local_store):
        local_store.append("Grace", "before")
        entry = local_store.append("Ada", "Hello")
        assert local_store.list()[0] == entry

    def test_ids_are_unique_for_rapid_appends(self, local_store):
        ids = [local_store.append("Ada", str(i)).id for i in range(50)]
        assert len(set(ids)) == 50
        assert ids == sorted(ids)

    def test_concurrent_appends_are_all_kept(self, local_store):
        def worker(n):
            for i in range(10):
                local_store.append(f"w{n}", f"m{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        entries = local_store.list()
        assert len(entries) == 80
        assert len({e.id for e in entries}) == 80


def test_memory_stores_are_independent():
    first, second = InMemoryGuestbookStore(), InMemoryGuestbookStore()
    first.append("Ada", "Hello")
    assert second.list() == []


class TestBuildStore:
    def test_memory_backend(self, settings):
        settings.guestbook_backend = "memory"
        assert isinstance(build_store(settings), InMemoryGuestbookStore)

    def test_file_backend(self, settings):
        settings.guestbook_backend = "FILE"
        store = build_store(settings)
        assert isinstance(store, JsonFileGuestbookStore)
        assert str(store.path) == settings.guestbook_file

    def test_remote_backend(self, settings):
        settings.guestbook_backend = "remote"
        settings.supabase_url = "https://example.supabase.co/"
        settings.supabase_key = "anon-key"
        store = build_store(settings)
        assert isinstance(store, RemoteTableGuestbookStore)
        assert store.endpoint == "https://example.supabase.co/rest/v1/guestbook"

    def test_remote_backend_requires_credentials(self, settings):
        settings.guestbook_backend = "remote"
        settings.supabase_url = None
        settings.supabase_key = None
        with pytest.raises(RuntimeError, match="SUPABASE_URL"):
            build_store(settings)

    def test_unknown_backend(self, settings):
        settings.guestbook_backend = "redis"
        with pytest.raises(RuntimeError, match="Unknown GUESTBOOK_BACKEND"):
            build_store(settings)


def test_memory_append_logs_running_total(caplog):
    caplog.set_level(logging.INFO, logger="portfolio.guestbook")
    store = InMemoryGuestbookStore()
    store.append("Ada", "one")
    store.append("Grace", "two")
    assert "total=2" in caplog.messages[-1]
