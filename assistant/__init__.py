from assistant.assistant import (
    AssistantError,
    AssistantUnavailableError,
    ChatAssistant,
    GeminiAssistant,
)

__all__ = ["AssistantError", "AssistantUnavailableError", "ChatAssistant", "GeminiAssistant"]
