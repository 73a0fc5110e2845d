"""Translation provider management and interfaces.

This package provides translation through pluggable language-model providers,
with quality scoring, fallback between providers and result caching.
"""

from core.trans.interface import (
    NoProviderAvailableError,
    ProviderError,
    ProviderFailure,
    ProviderHTTPError,
    ProviderRateLimitError,
    ProviderResponseError,
    ProviderSuccess,
    ProviderTimeoutError,
    TransInterface,
)
from core.trans.manager import TransManager
from core.trans.quality import QualityScorer, QualityWeights

__all__: list[str] = [
    "NoProviderAvailableError",
    "ProviderError",
    "ProviderFailure",
    "ProviderHTTPError",
    "ProviderRateLimitError",
    "ProviderResponseError",
    "ProviderSuccess",
    "ProviderTimeoutError",
    "QualityScorer",
    "QualityWeights",
    "TransInterface",
    "TransManager",
]
