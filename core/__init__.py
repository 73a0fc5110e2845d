"""Core components of the translation engine.

This package contains the football term library, the result cache, the provider adapters
and the orchestrating TransManager.
"""

from core.cache import CacheError, TranslationCacheManager
from core.terms import DetectedEntities, FootballTermLibrary
from core.trans import NoProviderAvailableError, TransManager

__all__: list[str] = [
    "CacheError",
    "DetectedEntities",
    "FootballTermLibrary",
    "NoProviderAvailableError",
    "TransManager",
    "TranslationCacheManager",
]
