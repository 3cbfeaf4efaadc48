from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables.

    Keep all credentials and config centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Guestbook storage
    guestbook_backend: str = os.getenv("GUESTBOOK_BACKEND", "memory")
    guestbook_file: str = os.getenv("GUESTBOOK_FILE", "data/guestbook.json")
    supabase_url: Optional[str] = os.getenv("SUPABASE_URL")
    supabase_key: Optional[str] = os.getenv("SUPABASE_KEY")
    guestbook_table: str = os.getenv("GUESTBOOK_TABLE", "guestbook")
    remote_timeout: float = float(os.getenv("REMOTE_TIMEOUT", "10.0"))
    expose_error_details: bool = _env_flag("EXPOSE_ERROR_DETAILS", "true")

    # Site content
    profile_file: str = os.getenv("PROFILE_FILE", "data/profile.json")
    public_dir: str = os.getenv("PUBLIC_DIR", "public")

    # Chat model
    google_api_key: Optional[str] = os.getenv("GOOGLE_API_KEY")
    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    temperature: float = float(os.getenv("MODEL_TEMPERATURE", "0.3"))
    top_p: float = float(os.getenv("MODEL_TOP_P", "0.9"))

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() in {"dev", "development", "local"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
