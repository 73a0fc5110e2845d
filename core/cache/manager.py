"""Translation cache manager.

Keeps translation results in memory keyed by a hash of the normalised (text, source, target) triple.
Provides TTL-based expiry, capacity-bounded eviction of the oldest entry and usage statistics.
"""

from __future__ import annotations

import asyncio
import math
import time
from dataclasses import replace
from typing import TYPE_CHECKING

from models.cache_models import CacheStatistics, TranslationCacheEntry
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

    from models.config_models import Config

__all__: list[str] = ["CacheError", "TranslationCacheManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class CacheError(Exception):
    """The cache rejected an operation, e.g. a non-positive TTL."""


class TranslationCacheManager:
    """In-memory manager for translation results.

    Every mutation (insert, eviction, hit counting, sweeping) runs under a single asyncio.Lock held
    only for dictionary work, never across a network call.

    Args:
        config (Config): Application configuration; CACHE.TTL_SEC and CACHE.MAX_ENTRIES are used.
        clock (Callable[[], float] | None): Time source in seconds. Defaults to time.time.
    """

    def __init__(self, config: Config, *, clock: Callable[[], float] | None = None) -> None:
        self.config: Config = config
        self.default_ttl: float = float(config.CACHE.TTL_SEC)
        self.max_entries: int = config.CACHE.MAX_ENTRIES
        self._clock: Callable[[], float] = clock if clock is not None else time.time
        self._entries: dict[str, TranslationCacheEntry] = {}
        self._lock: asyncio.Lock = asyncio.Lock()
        logger.debug(
            "TranslationCacheManager instance created (capacity=%d, ttl=%.0f)", self.max_entries, self.default_ttl
        )

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def _generate_cache_key(source_text: str, source_lang: str, target_lang: str) -> str:
        return StringUtils.generate_translation_hash_key(
            source_text=source_text, source_lang=source_lang, target_lang=target_lang
        )

    async def get(self, source_text: str, source_lang: str, target_lang: str) -> TranslationCacheEntry | None:
        """Look up a translation.

        A found-but-expired entry is removed and reported as a miss. A hit increments the entry's
        hit counter.

        Args:
            source_text (str): Original text.
            source_lang (str): Source language tag.
            target_lang (str): Target language tag.

        Returns:
            TranslationCacheEntry | None: A copy of the entry, or None on a miss.
        """
        cache_key: str = self._generate_cache_key(source_text, source_lang, target_lang)
        async with self._lock:
            entry: TranslationCacheEntry | None = self._entries.get(cache_key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._entries[cache_key]
                logger.debug("Expired cache entry removed: '%s'", cache_key[:16])
                return None
            entry.hit_count += 1
            logger.debug("Cache hit (%d): '%s'", entry.hit_count, StringUtils.truncate(source_text))
            return replace(entry)

    async def set(
        self,
        source_text: str,
        translated_text: str,
        source_lang: str,
        target_lang: str,
        ttl: float | None = None,
    ) -> None:
        """Store a translation.

        When the cache is full and the key is new, the entry with the oldest creation time is evicted
        first. Storing an existing key replaces it without evicting anything.

        Args:
            source_text (str): Original text.
            translated_text (str): Translation to store.
            source_lang (str): Source language tag.
            target_lang (str): Target language tag.
            ttl (float | None): Lifetime in seconds. Defaults to CACHE.TTL_SEC.

        Raises:
            CacheError: If ttl is not a positive finite number.
        """
        lifetime: float = self.default_ttl if ttl is None else float(ttl)
        if not math.isfinite(lifetime) or lifetime <= 0:
            msg: str = f"Cache TTL must be a positive finite number: {lifetime}"
            raise CacheError(msg)

        cache_key: str = self._generate_cache_key(source_text, source_lang, target_lang)
        async with self._lock:
            if cache_key not in self._entries and len(self._entries) >= self.max_entries:
                self._evict_oldest()

            now: float = self._clock()
            self._entries[cache_key] = TranslationCacheEntry(
                cache_key=cache_key,
                source_text=source_text,
                translated_text=translated_text,
                source_lang=source_lang,
                target_lang=target_lang,
                created_at=now,
                expires_at=now + lifetime,
            )
        logger.debug(
            "Cached translation: '%s' -> '%s'",
            StringUtils.truncate(source_text),
            StringUtils.truncate(translated_text),
        )

    def _evict_oldest(self) -> None:
        # Caller holds the lock.
        if not self._entries:
            return
        oldest_key: str = min(self._entries, key=lambda key: self._entries[key].created_at)
        del self._entries[oldest_key]
        logger.debug("Evicted oldest cache entry: '%s'", oldest_key[:16])

    async def cleanup_expired_entries(self) -> int:
        """Remove every expired entry.

        Returns:
            int: Number of entries removed.
        """
        async with self._lock:
            now: float = self._clock()
            expired: list[str] = [key for key, entry in self._entries.items() if entry.is_expired(now)]
            for key in expired:
                del self._entries[key]
        logger.info("Deleted %d expired translation cache entries", len(expired))
        return len(expired)

    async def stats(self) -> CacheStatistics:
        """Summarise cache usage.

        hit_rate is the average number of hits per stored entry.
        """
        async with self._lock:
            entry_count: int = len(self._entries)
            total_hits: int = sum(entry.hit_count for entry in self._entries.values())
            total_size: int = sum(
                len(entry.source_text) + len(entry.translated_text) for entry in self._entries.values()
            )
        return CacheStatistics(
            entry_count=entry_count,
            total_hits=total_hits,
            hit_rate=total_hits / entry_count if entry_count else 0.0,
            capacity=self.max_entries,
            total_size=total_size,
        )

    async def clear(self) -> None:
        """Remove all entries."""
        async with self._lock:
            self._entries.clear()
        logger.info("Translation cache cleared")
