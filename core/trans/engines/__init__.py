"""Translation provider implementations.

This package contains concrete implementations of the TransInterface for the supported
language-model providers. Importing it registers every provider with TransInterface.

Modules:
- ChatCompletionTranslation: Shared base for chat-completions style APIs.
- ClaudeTranslation: Anthropic messages API.
- DeepSeekTranslation: DeepSeek chat completions, the primary provider.
- OpenAITranslation: OpenAI chat completions.
"""

from core.trans.engines.chat_completion import ChatCompletionTranslation
from core.trans.engines.llm_base import LLMTranslationBase
from core.trans.engines.trans_claude import ClaudeTranslation
from core.trans.engines.trans_deepseek import DeepSeekTranslation
from core.trans.engines.trans_openai import OpenAITranslation

__all__: list[str] = [
    "ChatCompletionTranslation",
    "ClaudeTranslation",
    "DeepSeekTranslation",
    "LLMTranslationBase",
    "OpenAITranslation",
]
