"""Data models for the translation engine.

This package contains dataclass definitions for configuration, translation requests and results,
cache entries and statistics, and provider API responses.
"""

from __future__ import annotations

from models.cache_models import CacheStatistics, TranslationCacheEntry
from models.config_models import Config
from models.provider_models import ChatCompletionResponse, MessagesResponse
from models.translation_models import (
    TranslationRequest,
    TranslationResult,
    TranslationStatus,
    TranslationValidationError,
)

__all__: list[str] = [
    "CacheStatistics",
    "ChatCompletionResponse",
    "Config",
    "MessagesResponse",
    "TranslationCacheEntry",
    "TranslationRequest",
    "TranslationResult",
    "TranslationStatus",
    "TranslationValidationError",
]
