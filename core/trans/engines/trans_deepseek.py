"""DeepSeek chat-completions provider.

The primary provider: strongest on Chinese output, so its prompt carries the full football glossary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from core.terms.football_terms import PROMPT_GLOSSARY, PROMPT_LEAGUE_GLOSSARY
from core.trans.engines.chat_completion import ChatCompletionTranslation

if TYPE_CHECKING:
    from models.translation_models import TranslationRequest

__all__: list[str] = ["DeepSeekTranslation"]


class DeepSeekTranslation(ChatCompletionTranslation):
    SYSTEM_PROMPT: ClassVar[str] = (
        "你是一位专业的足球新闻翻译专家，擅长将各种语言的足球新闻准确翻译成中文。"
    )

    @staticmethod
    def fetch_engine_name() -> str:
        """Fetch the distinguished name of the provider.

        Returns:
            str: Provider name 'deepseek'.
        """
        return "deepseek"

    def build_prompt(self, request: TranslationRequest) -> str:
        terms: str = "\n".join(f"- {source} → {target}" for source, target in PROMPT_GLOSSARY)
        leagues: str = "\n".join(f"- {source} → {target}" for source, target in PROMPT_LEAGUE_GLOSSARY)
        return (
            f"{super().build_prompt(request)}\n\n"
            f"常用术语对照：\n{terms}\n\n"
            f"联赛名称对照：\n{leagues}"
        )
