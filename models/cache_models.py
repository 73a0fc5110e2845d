"""Models for translation cache data.

Defines data classes for translation cache entries and cache statistics.
"""

from __future__ import annotations

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = [
    "CacheStatistics",
    "TranslationCacheEntry",
]


@dataclass
class TranslationCacheEntry:
    """Translation cache entry data.

    Timestamps are epoch seconds taken from the cache's clock.

    Attributes:
        cache_key (str): Hash of the normalised (text, source_lang, target_lang) triple.
        source_text (str): Original text.
        translated_text (str): Cached translation.
        source_lang (str): Source language tag.
        target_lang (str): Target language tag.
        created_at (float): Creation time.
        expires_at (float): Expiry time, always later than created_at.
        hit_count (int): Number of lookups served by this entry.
    """

    cache_key: str
    source_text: str
    translated_text: str
    source_lang: str
    target_lang: str
    created_at: float
    expires_at: float
    hit_count: int = 0

    def is_expired(self, now: float) -> bool:
        return self.expires_at <= now


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class CacheStatistics(DataClassJsonMixin):
    """Cache usage statistics.

    Attributes:
        entry_count (int): Number of entries currently held (expired ones not yet swept included).
        total_hits (int): Sum of hit counters across entries.
        hit_rate (float): Average hits per entry, 0.0 when empty.
        capacity (int): Maximum number of entries.
        total_size (int): Characters stored across source and translated texts.
    """

    entry_count: int = 0
    total_hits: int = 0
    hit_rate: float = 0.0
    capacity: int = 0
    total_size: int = 0
