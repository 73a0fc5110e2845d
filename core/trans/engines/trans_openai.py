"""OpenAI chat-completions provider (last resort in the default chain)."""

from __future__ import annotations

from core.trans.engines.chat_completion import ChatCompletionTranslation

__all__: list[str] = ["OpenAITranslation"]


class OpenAITranslation(ChatCompletionTranslation):
    @staticmethod
    def fetch_engine_name() -> str:
        return "openai"
