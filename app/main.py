from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.routes import router
from app.static import SinglePageApp
from assistant import AssistantError, AssistantUnavailableError, ChatAssistant, GeminiAssistant
from common.errors import AppError
from config.settings import Settings, get_settings
from guestbook.stores import GuestbookStore, build_store
from portfolio.profile import ProfileSource


logger = logging.getLogger("portfolio")

GENERIC_ERROR_MESSAGE = "Terjadi kesalahan pada server"


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, (settings.log_level or "").upper(), None)
    known = isinstance(level, int)
    logging.basicConfig(
        level=level if known else logging.INFO,
        format="[%(asctime)s] %(levelname)s - %(message)s",
    )
    if not known:
        logger.warning("Unknown LOG_LEVEL %r, using INFO", settings.log_level)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


async def _app_error(request: Request, exc: AppError) -> JSONResponse:
    message = exc.message
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        if not request.app.state.settings.expose_error_details:
            message = GENERIC_ERROR_MESSAGE
    return _error(exc.status_code, message)


async def _assistant_error(request: Request, exc: AssistantError) -> JSONResponse:
    if isinstance(exc, AssistantUnavailableError):
        return _error(503, str(exc))
    message = str(exc) if request.app.state.settings.expose_error_details else GENERIC_ERROR_MESSAGE
    return _error(502, message)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg") if errors else "Permintaan tidak valid"
    return _error(400, str(message))


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[GuestbookStore] = None,
    assistant: Optional[ChatAssistant] = None,
    profile: Optional[ProfileSource] = None,
) -> FastAPI:
    """Build the API with one store instance shared by every request."""
    settings = settings or get_settings()
    configure_logging(settings)
    store = store if store is not None else build_store(settings)
    profile = profile or ProfileSource(settings.profile_file)
    assistant = assistant or GeminiAssistant(settings, profile=profile)

    app = FastAPI(title="Portfolio Backend", version="1.0.0")
    app.state.settings = settings
    app.state.store = store
    app.state.profile = profile
    app.state.assistant = assistant

    # CORS: allow local frontend during development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(AppError, _app_error)
    app.add_exception_handler(AssistantError, _assistant_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)

    # The site's frontend calls /api/...; plain paths stay available too.
    app.include_router(router, prefix="/api")
    app.include_router(router, include_in_schema=False)

    public_dir = Path(settings.public_dir)
    if public_dir.is_dir():
        app.mount("/", SinglePageApp(directory=str(public_dir)), name="site")
        logger.info("Serving static site from %s", public_dir)

    logger.info("Guestbook backend: %s", store.backend)
    return app

