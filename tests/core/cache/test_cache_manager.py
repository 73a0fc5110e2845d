"""Tests for TranslationCacheManager.

Tests lookup, registration, TTL expiry, capacity eviction and statistics.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import pytest

from core.cache.manager import CacheError, TranslationCacheManager
from models.config_models import Config

if TYPE_CHECKING:
    from models.cache_models import CacheStatistics, TranslationCacheEntry


class FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now: float = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def config() -> Config:
    config = Config()
    config.CACHE.TTL_SEC = 100
    config.CACHE.MAX_ENTRIES = 3
    return config


@pytest.fixture
def cache_manager(config: Config, clock: FakeClock) -> TranslationCacheManager:
    return TranslationCacheManager(config, clock=clock)


@pytest.mark.asyncio
async def test_translation_cache_miss(cache_manager: TranslationCacheManager) -> None:
    assert await cache_manager.get("Hello world", "en", "zh-CN") is None


@pytest.mark.asyncio
async def test_translation_cache_hit_counts(cache_manager: TranslationCacheManager) -> None:
    await cache_manager.set("Goal", "进球", "en", "zh-CN")

    first: TranslationCacheEntry | None = await cache_manager.get("Goal", "en", "zh-CN")
    second: TranslationCacheEntry | None = await cache_manager.get("Goal", "EN", "zh-cn")

    assert first is not None
    assert second is not None
    assert first.translated_text == "进球"
    assert first.hit_count == 1
    assert second.hit_count == 2


@pytest.mark.asyncio
async def test_returned_entry_is_a_copy(cache_manager: TranslationCacheManager) -> None:
    await cache_manager.set("Goal", "进球", "en", "zh-CN")
    entry: TranslationCacheEntry | None = await cache_manager.get("Goal", "en", "zh-CN")
    assert entry is not None

    entry.translated_text = "tampered"

    again: TranslationCacheEntry | None = await cache_manager.get("Goal", "en", "zh-CN")
    assert again is not None
    assert again.translated_text == "进球"


@pytest.mark.asyncio
async def test_target_language_is_part_of_the_key(cache_manager: TranslationCacheManager) -> None:
    await cache_manager.set("Goal", "进球", "en", "zh-CN")

    assert await cache_manager.get("Goal", "en", "zh-TW") is None


@pytest.mark.asyncio
async def test_entry_expires_after_ttl(cache_manager: TranslationCacheManager, clock: FakeClock) -> None:
    await cache_manager.set("Goal", "进球", "en", "zh-CN")

    clock.advance(99)
    assert await cache_manager.get("Goal", "en", "zh-CN") is not None

    clock.advance(1)
    assert await cache_manager.get("Goal", "en", "zh-CN") is None
    assert len(cache_manager) == 0


@pytest.mark.asyncio
async def test_custom_ttl(cache_manager: TranslationCacheManager, clock: FakeClock) -> None:
    await cache_manager.set("Goal", "进球", "en", "zh-CN", ttl=500)

    clock.advance(400)

    assert await cache_manager.get("Goal", "en", "zh-CN") is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("ttl", [0, -1, -0.5, math.nan, math.inf])
async def test_invalid_ttl_is_rejected(cache_manager: TranslationCacheManager, ttl: float) -> None:
    with pytest.raises(CacheError):
        await cache_manager.set("Goal", "进球", "en", "zh-CN", ttl=ttl)

    assert len(cache_manager) == 0


@pytest.mark.asyncio
async def test_capacity_evicts_oldest_entry(cache_manager: TranslationCacheManager, clock: FakeClock) -> None:
    for text in ("one", "two", "three"):
        await cache_manager.set(text, f"{text}-zh", "en", "zh-CN")
        clock.advance(1)

    await cache_manager.set("four", "four-zh", "en", "zh-CN")

    assert len(cache_manager) == 3
    assert await cache_manager.get("one", "en", "zh-CN") is None
    assert await cache_manager.get("four", "en", "zh-CN") is not None


@pytest.mark.asyncio
async def test_capacity_tie_evicts_first_inserted(cache_manager: TranslationCacheManager) -> None:
    for text in ("one", "two", "three", "four"):
        await cache_manager.set(text, f"{text}-zh", "en", "zh-CN")

    assert await cache_manager.get("one", "en", "zh-CN") is None
    assert await cache_manager.get("two", "en", "zh-CN") is not None


@pytest.mark.asyncio
async def test_overwrite_at_capacity_does_not_evict(cache_manager: TranslationCacheManager) -> None:
    for text in ("one", "two", "three"):
        await cache_manager.set(text, f"{text}-zh", "en", "zh-CN")

    await cache_manager.set("one", "updated", "en", "zh-CN")

    assert len(cache_manager) == 3
    entry: TranslationCacheEntry | None = await cache_manager.get("one", "en", "zh-CN")
    assert entry is not None
    assert entry.translated_text == "updated"


@pytest.mark.asyncio
async def test_cleanup_expired_entries(cache_manager: TranslationCacheManager, clock: FakeClock) -> None:
    await cache_manager.set("short", "短", "en", "zh-CN", ttl=10)
    await cache_manager.set("long", "长", "en", "zh-CN", ttl=1_000)

    clock.advance(50)
    removed: int = await cache_manager.cleanup_expired_entries()

    assert removed == 1
    assert len(cache_manager) == 1
    assert await cache_manager.cleanup_expired_entries() == 0


@pytest.mark.asyncio
async def test_stats(cache_manager: TranslationCacheManager) -> None:
    empty: CacheStatistics = await cache_manager.stats()
    assert empty.entry_count == 0
    assert empty.hit_rate == 0.0
    assert empty.capacity == 3

    await cache_manager.set("Goal", "进球", "en", "zh-CN")
    await cache_manager.set("Offside", "越位", "en", "zh-CN")
    await cache_manager.get("Goal", "en", "zh-CN")
    await cache_manager.get("Goal", "en", "zh-CN")
    await cache_manager.get("Goal", "en", "zh-CN")

    stats: CacheStatistics = await cache_manager.stats()

    assert stats.entry_count == 2
    assert stats.total_hits == 3
    assert stats.hit_rate == pytest.approx(1.5)
    assert stats.total_size == len("Goal进球Offside越位")


@pytest.mark.asyncio
async def test_clear(cache_manager: TranslationCacheManager) -> None:
    await cache_manager.set("Goal", "进球", "en", "zh-CN")

    await cache_manager.clear()

    assert len(cache_manager) == 0
    assert await cache_manager.get("Goal", "en", "zh-CN") is None
