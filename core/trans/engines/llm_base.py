"""Shared machinery for HTTP language-model translation providers.

Concrete providers supply the request body, headers and response parsing; this base class handles
credentials, transport errors, timing and quality scoring.
"""

from __future__ import annotations

import time
from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Final

from core.terms import FootballTermLibrary
from core.trans.interface import (
    ProviderAttributes,
    ProviderError,
    ProviderHTTPError,
    ProviderRateLimitError,
    ProviderResponseError,
    ProviderTimeoutError,
    TransInterface,
)
from core.trans.quality import QualityScorer, QualityWeights
from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncCommTimeoutError, AsyncHttp
from models.translation_models import TranslationResult
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from models.config_models import Config, ProviderSettings
    from models.translation_models import TranslationRequest

__all__: list[str] = ["DOMAIN_LABELS", "LLMTranslationBase"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HTTP_TOO_MANY_REQUESTS: Final[int] = 429

DOMAIN_LABELS: Final[dict[str, str]] = {
    "football": "足球新闻",
    "sports": "体育新闻",
    "news": "新闻",
}


class LLMTranslationBase(TransInterface):
    """Base class for providers reached over HTTP with a JSON request body.

    Args:
        term_library (FootballTermLibrary | None): Shared vocabulary. A private instance is built if omitted.
    """

    def __init__(self, *, term_library: FootballTermLibrary | None = None) -> None:
        super().__init__(term_library=term_library)
        self.term_library: FootballTermLibrary = self.shared_term_library or FootballTermLibrary()
        self.__settings: ProviderSettings | None = None
        self.__api_key: str = ""
        self.__http: AsyncHttp | None = None
        self.request_timeout: float = 30.0
        self.scorer: QualityScorer = QualityScorer(self.term_library)

    @staticmethod
    def fetch_engine_name() -> str:
        return ""

    @property
    def settings(self) -> ProviderSettings:
        if self.__settings is None:
            msg = f"'{self.__class__.__name__}' is not initialised"
            raise ProviderError(msg)
        return self.__settings

    @property
    def api_key(self) -> str:
        return self.__api_key

    @property
    def http(self) -> AsyncHttp:
        if self.__http is None:
            self.__http = AsyncHttp()
        return self.__http

    @http.setter
    def http(self, client: AsyncHttp) -> None:
        self.__http = client

    def initialize(self, config: Config) -> None:
        """Load endpoint settings and the credential for this provider.

        Args:
            config (Config): Application configuration.

        Raises:
            ProviderError: If the credential environment variable is not set.
        """
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        api_key: str = self.get_authentication_key()
        if not api_key:
            msg: str = (
                f"Credential for '{self.fetch_engine_name()}' is not set "
                f"({self.fetch_engine_name().upper()}_API_KEY)"
            )
            raise ProviderError(msg)

        settings: ProviderSettings = config.provider_settings(self.fetch_engine_name())
        self.__api_key = api_key
        self.__settings = settings
        self.request_timeout = config.TRANSLATION.REQUEST_TIMEOUT
        self.scorer = QualityScorer(self.term_library, QualityWeights(base_score=settings.BASE_SCORE))
        self.provider_attributes = ProviderAttributes(
            name=self.fetch_engine_name(),  # type: ignore[arg-type]
            model=settings.MODEL,
            confidence=settings.CONFIDENCE,
        )

    async def translation(self, request: TranslationRequest) -> TranslationResult:
        start: float = time.perf_counter()
        response: Any = await self._post(self.build_payload(request))
        translated_text: str = self.parse_response(response).strip()
        if not translated_text:
            msg: str = f"'{self.fetch_engine_name()}' returned an empty translation"
            raise ProviderResponseError(msg)

        processing_time: int = int((time.perf_counter() - start) * 1000)
        quality_score: float = self.scorer.score(request.text, translated_text)
        logger.debug(
            "'%s' translated in %d ms (quality %.2f): '%s'",
            self.fetch_engine_name(),
            processing_time,
            quality_score,
            StringUtils.truncate(translated_text),
        )
        return TranslationResult(
            translated_text=translated_text,
            confidence=self.confidence,
            quality_score=quality_score,
            model=self.provider_attributes.model,
            processing_time=processing_time,
            original_text=request.text,
            source_lang=request.source_lang,
            target_lang=request.target_lang,
        )

    async def _post(self, payload: dict[str, Any]) -> Any:
        """Send the request and translate transport errors into ProviderError subclasses.

        Raises:
            ProviderTimeoutError: If the server does not respond in time.
            ProviderRateLimitError: If the server answers 429.
            ProviderResponseError: If the body cannot be decoded.
            ProviderHTTPError: For any other transport or status error.
        """
        name: str = self.fetch_engine_name()
        try:
            return await self.http.post(
                url=self.settings.ENDPOINT,
                data=payload,
                headers=self.build_headers(),
                total_timeout=self.request_timeout,
            )
        except AsyncCommTimeoutError as err:
            msg: str = f"'{name}' request timed out"
            raise ProviderTimeoutError(msg) from err
        except AsyncCommInvalidContentTypeError as err:
            msg = f"'{name}' returned an unreadable body: {err}"
            raise ProviderResponseError(msg) from err
        except AsyncCommError as err:
            if err.status == HTTP_TOO_MANY_REQUESTS:
                msg = f"'{name}' rate limit exceeded"
                raise ProviderRateLimitError(msg) from err
            msg = f"'{name}' API error: {err}"
            raise ProviderHTTPError(msg) from err

    def build_prompt(self, request: TranslationRequest) -> str:
        """Build the user prompt: task line, football context and the source text."""
        domain_label: str = DOMAIN_LABELS.get(request.domain, DOMAIN_LABELS["football"])
        return (
            f"请将以下{request.source_lang}{domain_label}翻译成{request.target_language_name}。\n\n"
            f"{self.term_library.build_context_hint(request.text)}\n\n"
            f"原文：{request.text}\n\n"
            "请直接返回翻译结果，不要添加任何解释或说明。"
        )

    @abstractmethod
    def build_headers(self) -> dict[str, str]:
        """Return the authentication headers for a request."""
        raise NotImplementedError

    @abstractmethod
    def build_payload(self, request: TranslationRequest) -> dict[str, Any]:
        """Return the JSON request body for a translation request."""
        raise NotImplementedError

    @abstractmethod
    def parse_response(self, response: Any) -> str:
        """Extract the translated text from a decoded response body.

        Raises:
            ProviderResponseError: If the body does not have the expected shape.
        """
        raise NotImplementedError

    async def close(self) -> None:
        if self.__http is not None:
            await self.http.close()
        logger.debug("'%s' closed", self.__class__.__name__)
