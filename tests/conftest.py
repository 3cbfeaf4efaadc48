from __future__ import annotations

import json
from typing import List

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from config.settings import Settings
from guestbook.stores import InMemoryGuestbookStore
from portfolio.profile import ProfileSource


PROFILE = {
    "profile": {"name": "Ada Lovelace", "role": "Engineer", "bio": "Writes programs."},
    "links": [{"title": "GitHub", "url": "https://github.com/ada"}],
    "skills": [{"name": "Python", "level": "Advanced"}],
}


class FakeAssistant:
    def __init__(self, reply: str = "Halo!") -> None:
        self.reply = reply
        self.prompts: List[str] = []

    def generate_reply(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.reply


@pytest.fixture
def settings(tmp_path) -> Settings:
    s = Settings()
    s.app_env = "test"
    s.guestbook_backend = "memory"
    s.guestbook_file = str(tmp_path / "guestbook.json")
    s.profile_file = str(tmp_path / "profile.json")
    s.public_dir = str(tmp_path / "public")
    s.google_api_key = None
    s.expose_error_details = True
    return s


@pytest.fixture
def profile_file(settings):
    with open(settings.profile_file, "w", encoding="utf-8") as fp:
        json.dump(PROFILE, fp)
    return settings.profile_file


@pytest.fixture
def store() -> InMemoryGuestbookStore:
    return InMemoryGuestbookStore()


@pytest.fixture
def assistant() -> FakeAssistant:
    return FakeAssistant()


@pytest.fixture
def client(settings, store, assistant, profile_file) -> TestClient:
    app = create_app(
        settings=settings,
        store=store,
        assistant=assistant,
        profile=ProfileSource(profile_file),
    )
    return TestClient(app)
