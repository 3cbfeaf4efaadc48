from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from assistant import ChatAssistant
from common.errors import ValidationError
from guestbook.core.entry import REQUIRED_FIELDS_MESSAGE
from guestbook.stores import GuestbookStore
from portfolio.profile import ProfileSource


logger = logging.getLogger("portfolio")

router = APIRouter()


def get_store(request: Request) -> GuestbookStore:
    return request.app.state.store


def get_assistant(request: Request) -> ChatAssistant:
    return request.app.state.assistant


def get_profile_source(request: Request) -> ProfileSource:
    return request.app.state.profile


@router.get("/health")
def health(store: GuestbookStore = Depends(get_store)) -> Dict[str, Any]:
    return {"status": "ok", "backend": store.backend}


@router.get("/guestbook", tags=["guestbook"])
def list_guestbook(store: GuestbookStore = Depends(get_store)) -> Dict[str, Any]:
    entries = store.list()
    return {"status": "success", "data": [entry.to_json() for entry in entries]}


@router.post("/guestbook", status_code=201, tags=["guestbook"])
def add_guestbook_entry(
    payload: Any = Body(None),
    store: GuestbookStore = Depends(get_store),
) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    entry = store.append(payload.get("name"), payload.get("message"))
    return {"status": "success", "data": entry.to_json()}


@router.get("/profile", tags=["profile"])
def get_profile(profile: ProfileSource = Depends(get_profile_source)) -> Dict[str, Any]:
    return {"status": "success", "data": profile.get_profile()}


def _reply(prompt: Optional[str], assistant: ChatAssistant) -> Dict[str, Any]:
    text = (prompt or "").strip() if isinstance(prompt, str) else ""
    if not text:
        raise ValidationError("prompt wajib diisi")
    reply = assistant.generate_reply(text)
    # Same shape the chat widget reads: json.message.content
    return {"message": {"role": "assistant", "content": reply}}


@router.get("/chat", tags=["chat"])
def chat_get(
    prompt: Optional[str] = Query(None),
    assistant: ChatAssistant = Depends(get_assistant),
) -> Dict[str, Any]:
    return _reply(prompt, assistant)


@router.post("/chat", tags=["chat"])
def chat_post(
    payload: Any = Body(None),
    assistant: ChatAssistant = Depends(get_assistant),
) -> Dict[str, Any]:
    prompt = payload.get("prompt") if isinstance(payload, dict) else None
    return _reply(prompt, assistant)
