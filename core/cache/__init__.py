"""Translation cache package.

Provides in-memory caching of translation results.
"""

from __future__ import annotations

from core.cache.manager import CacheError, TranslationCacheManager

__all__: list[str] = ["CacheError", "TranslationCacheManager"]
