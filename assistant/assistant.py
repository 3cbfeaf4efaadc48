from __future__ import annotations

import json
import logging
from typing import Any, Optional, Protocol

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI

from assistant.core.prompt import SYSTEM_PROMPT
from common.errors import AppError
from config.settings import Settings
from portfolio.profile import ProfileSource


logger = logging.getLogger("portfolio.assistant")


class AssistantError(Exception):
    """The chat model call failed."""


class AssistantUnavailableError(AssistantError):
    """The chat model is not configured (e.g. no API key)."""


class ChatAssistant(Protocol):
    def generate_reply(self, prompt: str) -> str:
        ...


def _content_to_text(content: Any) -> str:
    # Gemini can answer with a list of content parts instead of a plain string.
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return str(content or "")


class GeminiAssistant:
    """Answers visitor questions with a Gemini chat model via LangChain."""

    def __init__(
        self,
        settings: Settings,
        profile: Optional[ProfileSource] = None,
        llm: Optional[BaseChatModel] = None,
    ) -> None:
        self.settings = settings
        self.profile = profile
        self._llm = llm
        self._prompt = ChatPromptTemplate.from_messages(
            [
                ("system", f"{SYSTEM_PROMPT}\n\nProfil:\n{{profile}}"),
                ("human", "{input}"),
            ]
        )

    def _get_llm(self) -> BaseChatModel:
        if self._llm is not None:
            return self._llm
        if not self.settings.google_api_key:
            raise AssistantUnavailableError(
                "GOOGLE_API_KEY not set. Please configure it in environment or .env"
            )
        self._llm = ChatGoogleGenerativeAI(
            model=self.settings.gemini_model,
            google_api_key=self.settings.google_api_key,
            temperature=self.settings.temperature,
            top_p=self.settings.top_p,
        )
        return self._llm

    def _profile_context(self) -> str:
        if self.profile is None:
            return "(tidak ada)"
        try:
            return json.dumps(self.profile.get_profile(), ensure_ascii=False)
        except AppError as exc:
            logger.warning("Profile unavailable for chat context: %s", exc)
            return "(tidak ada)"

    def generate_reply(self, prompt: str) -> str:
        llm = self._get_llm()
        chain = self._prompt | llm
        logger.info("Chat request: model=%s prompt_len=%s", self.settings.gemini_model, len(prompt))
        try:
            result = chain.invoke({"input": prompt, "profile": self._profile_context()})
        except Exception as exc:
            logger.exception("Chat model call failed: %s", exc)
            raise AssistantError(f"Chat model call failed: {exc}") from exc
        reply = _content_to_text(getattr(result, "content", result)).strip()
        logger.info("Model responded with %s chars", len(reply))
        return reply
