"""Anthropic messages API provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from marshmallow.exceptions import ValidationError

from core.trans.engines.llm_base import LLMTranslationBase
from core.trans.interface import ProviderResponseError
from models.provider_models import MessagesResponse
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.translation_models import TranslationRequest

__all__: list[str] = ["ClaudeTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ANTHROPIC_VERSION: Final[str] = "2023-06-01"


class ClaudeTranslation(LLMTranslationBase):
    """Claude provider.

    The messages API takes no system message in this mode, so the expert role is stated at the
    top of the user prompt. The translation is read from the first text content block.
    """

    @staticmethod
    def fetch_engine_name() -> str:
        """Fetch the distinguished name of the provider.

        Returns:
            str: Provider name 'claude'.
        """
        return "claude"

    def build_headers(self) -> dict[str, str]:
        return {"x-api-key": self.api_key, "anthropic-version": ANTHROPIC_VERSION}

    def build_prompt(self, request: TranslationRequest) -> str:
        return f"你是一位专业的足球新闻翻译专家。{super().build_prompt(request)}"

    def build_payload(self, request: TranslationRequest) -> dict[str, Any]:
        return {
            "model": self.settings.MODEL,
            "max_tokens": self.settings.MAX_TOKENS,
            "temperature": self.settings.TEMPERATURE,
            "messages": [{"role": "user", "content": self.build_prompt(request)}],
        }

    def parse_response(self, response: Any) -> str:
        try:
            parsed: MessagesResponse = MessagesResponse.from_dict(response, infer_missing=True)
            text: str | None = parsed.first_text
        except (ValidationError, TypeError, AttributeError) as err:
            msg: str = f"The response data from 'claude' is invalid: {err}"
            logger.error(msg)
            raise ProviderResponseError(msg) from err
        except KeyError as err:
            msg = f"The response data from 'claude' is missing expected fields: {err}"
            logger.error(msg)
            raise ProviderResponseError(msg) from err

        if text is None:
            msg = "The response data from 'claude' contains no text block"
            raise ProviderResponseError(msg)
        return text
