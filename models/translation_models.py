"""Models for translation requests, results and service status.

TranslationRequest is validated on construction; TranslationResult and TranslationStatus
serialise to camelCase dictionaries for HTTP-facing collaborators.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Final, Literal, TypeAlias, get_args

from dataclasses_json import DataClassJsonMixin, LetterCase, config, dataclass_json

from models.cache_models import CacheStatistics

__all__: list[str] = [
    "CACHE_MODEL_NAME",
    "ERROR_MODEL_NAME",
    "MAX_TEXT_LENGTH",
    "PROVIDER_KINDS",
    "ProviderKind",
    "TranslationRequest",
    "TranslationResult",
    "TranslationStatus",
    "TranslationValidationError",
]

TargetLanguage: TypeAlias = Literal["zh-CN", "zh-TW"]
Domain: TypeAlias = Literal["football", "sports", "news"]
Priority: TypeAlias = Literal["high", "medium", "low"]
ProviderKind: TypeAlias = Literal["deepseek", "claude", "openai"]

TARGET_LANGUAGES: Final[tuple[str, ...]] = get_args(TargetLanguage)
DOMAINS: Final[tuple[str, ...]] = get_args(Domain)
PRIORITIES: Final[tuple[str, ...]] = get_args(Priority)
PROVIDER_KINDS: Final[tuple[str, ...]] = get_args(ProviderKind)

MAX_TEXT_LENGTH: Final[int] = 10000
SOURCE_LANG_MIN_LENGTH: Final[int] = 2
SOURCE_LANG_MAX_LENGTH: Final[int] = 10

CACHE_MODEL_NAME: Final[str] = "cache"
CACHE_CONFIDENCE: Final[float] = 0.99
ERROR_MODEL_NAME: Final[str] = "error"
ERROR_PLACEHOLDER_TEXT: Final[str] = "翻译失败"


class TranslationValidationError(ValueError):
    """A translation request is malformed and was rejected before any provider was contacted."""


def _now_iso() -> str:
    return datetime.now().astimezone().isoformat()


@dataclass(frozen=True)
class TranslationRequest:
    """A single translation job.

    Attributes:
        text (str): Text to translate. Must contain non-whitespace and be at most MAX_TEXT_LENGTH characters.
        source_lang (str): Free-form source locale tag such as "en" or "es-ES".
        target_lang (TargetLanguage): "zh-CN" (simplified) or "zh-TW" (traditional).
        domain (Domain): Content domain, used to steer prompts.
        priority (Priority): "high" routes to the primary provider first.

    Raises:
        TranslationValidationError: If any field is out of range.
    """

    text: str
    source_lang: str
    target_lang: TargetLanguage
    domain: Domain = "football"
    priority: Priority = "medium"

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            msg = "Text to translate must not be empty."
            raise TranslationValidationError(msg)
        if len(self.text) > MAX_TEXT_LENGTH:
            msg = f"Text exceeds the maximum length of {MAX_TEXT_LENGTH} characters ({len(self.text)})."
            raise TranslationValidationError(msg)
        if not isinstance(self.source_lang, str) or not (
            SOURCE_LANG_MIN_LENGTH <= len(self.source_lang.strip()) <= SOURCE_LANG_MAX_LENGTH
        ):
            msg = f"Invalid source language: {self.source_lang!r}"
            raise TranslationValidationError(msg)
        if self.target_lang not in TARGET_LANGUAGES:
            msg = f"Unsupported target language: {self.target_lang!r}. Expected one of {TARGET_LANGUAGES}."
            raise TranslationValidationError(msg)
        if self.domain not in DOMAINS:
            msg = f"Unsupported domain: {self.domain!r}. Expected one of {DOMAINS}."
            raise TranslationValidationError(msg)
        if self.priority not in PRIORITIES:
            msg = f"Unsupported priority: {self.priority!r}. Expected one of {PRIORITIES}."
            raise TranslationValidationError(msg)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TranslationRequest:
        """Build a request from a camelCase payload as sent by the HTTP layer.

        Missing ``domain`` and ``priority`` fall back to their defaults.

        Raises:
            TranslationValidationError: If required keys are missing or values are invalid.
        """
        try:
            return cls(
                text=data["text"],
                source_lang=data["sourceLanguage"],
                target_lang=data["targetLanguage"],
                domain=data.get("domain") or "football",
                priority=data.get("priority") or "medium",
            )
        except KeyError as err:
            msg = f"Missing required field: {err}"
            raise TranslationValidationError(msg) from None

    @property
    def target_language_name(self) -> str:
        """Human-readable target variant used inside prompts."""
        return "简体中文" if self.target_lang == "zh-CN" else "繁体中文"


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass(frozen=True)
class TranslationResult(DataClassJsonMixin):
    """Outcome of a translation, produced by a provider or synthesised from the cache.

    Attributes:
        translated_text (str): Translated text.
        confidence (float): Static trust level of the producing provider (0.0-1.0).
        quality_score (float): Heuristic domain-fidelity score (0.0-1.0).
        model (str): Model identifier, "cache" for cache hits or "error" for batch sentinels.
        processing_time (int): Wall-clock milliseconds spent, 0 for cache hits.
        original_text (str): Echo of the request text.
        source_lang (str): Echo of the request source language.
        target_lang (str): Echo of the request target language.
        timestamp (str): ISO-8601 creation time.
    """

    translated_text: str
    confidence: float
    quality_score: float
    model: str
    processing_time: int
    original_text: str
    source_lang: str = field(metadata=config(field_name="sourceLanguage"))
    target_lang: str = field(metadata=config(field_name="targetLanguage"))
    timestamp: str = field(default_factory=_now_iso)

    @classmethod
    def from_cache(cls, request: TranslationRequest, translated_text: str) -> TranslationResult:
        """Synthesise a result for a cache hit."""
        return cls(
            translated_text=translated_text,
            confidence=CACHE_CONFIDENCE,
            quality_score=1.0,
            model=CACHE_MODEL_NAME,
            processing_time=0,
            original_text=request.text,
            source_lang=request.source_lang,
            target_lang=request.target_lang,
        )

    @classmethod
    def error_sentinel(cls) -> TranslationResult:
        """Zero-confidence placeholder used by batch translation for failed items."""
        return cls(
            translated_text=ERROR_PLACEHOLDER_TEXT,
            confidence=0.0,
            quality_score=0.0,
            model=ERROR_MODEL_NAME,
            processing_time=0,
            original_text="",
            source_lang="",
            target_lang="",
        )

    @property
    def is_error(self) -> bool:
        return self.model == ERROR_MODEL_NAME and self.confidence == 0.0

    @property
    def is_cached(self) -> bool:
        return self.model == CACHE_MODEL_NAME


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass(frozen=True)
class TranslationStatus(DataClassJsonMixin):
    """Introspection snapshot for health-check callers."""

    available_providers: list[str]
    total_providers: int
    fallback_chain: list[str]
    cache_stats: CacheStatistics
    timestamp: str = field(default_factory=_now_iso)
