"""Common base for providers that speak the OpenAI chat-completions protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from marshmallow.exceptions import ValidationError

from core.trans.engines.llm_base import LLMTranslationBase
from core.trans.interface import ProviderResponseError
from models.provider_models import ChatCompletionResponse
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.translation_models import TranslationRequest

__all__: list[str] = ["ChatCompletionTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class ChatCompletionTranslation(LLMTranslationBase):
    """Sends a system and a user message and reads ``choices[0].message.content``."""

    SYSTEM_PROMPT: ClassVar[str] = (
        "你是一位专业的足球新闻翻译专家，精通足球术语和中文表达。"
    )

    def build_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}"}

    def build_payload(self, request: TranslationRequest) -> dict[str, Any]:
        return {
            "model": self.settings.MODEL,
            "messages": [
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": self.build_prompt(request)},
            ],
            "temperature": self.settings.TEMPERATURE,
            "max_tokens": self.settings.MAX_TOKENS,
            "stream": False,
        }

    def parse_response(self, response: Any) -> str:
        try:
            parsed: ChatCompletionResponse = ChatCompletionResponse.from_dict(response, infer_missing=True)
            content: str | None = parsed.first_content
        except (ValidationError, TypeError, AttributeError) as err:
            msg: str = f"The response data from '{self.fetch_engine_name()}' is invalid: {err}"
            logger.error(msg)
            raise ProviderResponseError(msg) from err
        except KeyError as err:
            msg = f"The response data from '{self.fetch_engine_name()}' is missing expected fields: {err}"
            logger.error(msg)
            raise ProviderResponseError(msg) from err

        if content is None:
            msg = f"The response data from '{self.fetch_engine_name()}' contains no message content"
            raise ProviderResponseError(msg)
        return content
