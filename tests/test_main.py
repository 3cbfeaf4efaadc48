from __future__ import annotations

import importlib
import logging

import app.main
from app.main import configure_logging
from config.settings import Settings, get_settings


def test_importing_main_does_not_build_the_app(monkeypatch):
    monkeypatch.setattr(Settings, "guestbook_backend", "remote")
    monkeypatch.setattr(Settings, "supabase_url", None)
    monkeypatch.setattr(Settings, "supabase_key", None)
    monkeypatch.setattr(Settings, "log_level", "NOT-A-LEVEL")
    get_settings.cache_clear()
    try:
        module = importlib.reload(app.main)
    finally:
        get_settings.cache_clear()
    assert callable(module.create_app)
    assert not hasattr(module, "app")


def test_unknown_log_level_falls_back_to_info(settings, caplog):
    settings.log_level = "LOUD"
    with caplog.at_level(logging.WARNING, logger="portfolio"):
        configure_logging(settings)
    assert "Unknown LOG_LEVEL 'LOUD'" in caplog.text


def test_known_log_level_is_accepted(settings, caplog):
    settings.log_level = "debug"
    with caplog.at_level(logging.WARNING, logger="portfolio"):
        configure_logging(settings)
    assert "Unknown LOG_LEVEL" not in caplog.text
