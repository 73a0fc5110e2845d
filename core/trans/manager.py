from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, ClassVar

from core.cache.manager import CacheError, TranslationCacheManager
from core.terms import FootballTermLibrary
from core.terms.football_terms import WARMUP_TERMS
from core.trans.engines import (
    ClaudeTranslation,  # noqa: F401
    DeepSeekTranslation,  # noqa: F401
    OpenAITranslation,  # noqa: F401
)
from core.trans.interface import (
    NoProviderAvailableError,
    ProviderError,
    ProviderFailure,
    TransInterface,
)
from models.translation_models import TranslationRequest, TranslationResult, TranslationStatus
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans.interface import ProviderOutcome
    from models.cache_models import CacheStatistics, TranslationCacheEntry
    from models.config_models import Config


__all__: list[str] = ["TransManager"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

HEALTH_CHECK_TEXT: str = "Hello"
HEALTH_CHECK_MIN_CONFIDENCE: float = 0.5


class TransManager:
    """Manager for translation providers.

    Consults the result cache, picks providers by priority and availability, gates results on their
    quality score and walks the fallback chain until a result is accepted.

    Attributes:
        WARMUP_SOURCE_LANG (ClassVar[str]): Source language of the warm-up seed terms.
        WARMUP_TARGET_LANG (ClassVar[str]): Target language of the warm-up seed terms.
    """

    WARMUP_SOURCE_LANG: ClassVar[str] = "en"
    WARMUP_TARGET_LANG: ClassVar[str] = "zh-CN"

    def __init__(
        self,
        config: Config,
        cache_manager: TranslationCacheManager | None = None,
        term_library: FootballTermLibrary | None = None,
    ) -> None:
        """Initialize the TransManager with the given configuration.

        Args:
            config (Config): The configuration object containing provider settings.
            cache_manager (TranslationCacheManager | None): Result cache. A new one is created if omitted.
            term_library (FootballTermLibrary | None): Vocabulary shared with every provider.
        """
        self.config: Config = config
        self.cache_manager: TranslationCacheManager = (
            cache_manager if cache_manager is not None else TranslationCacheManager(config)
        )
        self.term_library: FootballTermLibrary = term_library if term_library is not None else FootballTermLibrary()
        self._trans_instance: dict[str, TransInterface] = {}
        logger.debug("Registered translation providers: %s", TransInterface.registered)

    @property
    def fallback_chain(self) -> list[str]:
        return list(self.config.TRANSLATION.FALLBACK_CHAIN)

    @property
    def primary_provider(self) -> str:
        return self.config.TRANSLATION.PRIMARY_PROVIDER

    def _configured_names(self) -> list[str]:
        names: list[str] = self.fallback_chain
        if self.primary_provider not in names:
            names.append(self.primary_provider)
        return names

    async def initialize(self) -> None:
        """Create the providers whose credentials are present in the environment.

        A missing credential is not an error; that provider is simply not registered.
        """
        logger.info("TransManager initialization started")

        for _name in self._configured_names():
            if _name in self._trans_instance:
                continue
            _cls: type[TransInterface] | None = TransInterface.registered.get(_name)
            if _cls is None:
                logger.critical("Translation class not found: '%s'", _name)
                continue
            _instance: TransInterface = _cls(term_library=self.term_library)
            try:
                _instance.initialize(self.config)
            except ProviderError as err:
                logger.info("Translation provider not registered: '%s' (%s)", _name, err)
                continue
            self._trans_instance[_name] = _instance
            logger.info("Translation provider initialized: '%s'", _name)
            logger.debug("Provider attributes: %s", _instance.provider_attributes)

        if not self._trans_instance:
            logger.warning("No translation providers are configured; only cached translations can be served.")

    def register_provider(self, instance: TransInterface) -> None:
        """Register an already initialised provider under its distinguished name."""
        self._trans_instance[instance.fetch_engine_name()] = instance

    def fetch_engine_names(self) -> list[str]:
        """Get the names of the registered providers in fallback-chain order.

        Returns:
            list[str]: Registered provider names.
        """
        return [name for name in self._configured_names() if name in self._trans_instance]

    def available_engine_names(self) -> list[str]:
        return [name for name in self.fetch_engine_names() if self._trans_instance[name].is_available]

    def select_candidates(self, request: TranslationRequest) -> list[str]:
        """Order the providers that may serve a request.

        High-priority requests try the primary provider first when it is registered and available.
        Everything else follows the fallback chain. Providers in a rate-limit cooldown are skipped.

        Args:
            request (TranslationRequest): The request to route.

        Returns:
            list[str]: Provider names in the order they should be attempted, without duplicates.
        """
        candidates: list[str] = [name for name in self.fallback_chain if name in self._trans_instance]
        if request.priority == "high" and self.primary_provider in self._trans_instance:
            candidates = [self.primary_provider, *(name for name in candidates if name != self.primary_provider)]
        return [name for name in candidates if self._trans_instance[name].is_available]

    async def translate(self, request: TranslationRequest, *, use_cache: bool = True) -> TranslationResult:
        """Translate a request, serving it from the cache when possible.

        Args:
            request (TranslationRequest): A validated translation request.
            use_cache (bool): When False the cache is neither read nor written.

        Returns:
            TranslationResult: The first result meeting the quality threshold, or the best result seen
                if every candidate fell short.

        Raises:
            NoProviderAvailableError: If no candidate produced a successful result.
        """
        logger.debug("Translation started: '%s'", StringUtils.truncate(request.text))

        cached: TranslationResult | None = await self.fetch_cached_translation(request) if use_cache else None
        if cached is not None:
            logger.debug("Translation cache hit: '%s'", StringUtils.truncate(cached.translated_text))
            return cached

        threshold: float = self.config.TRANSLATION.QUALITY_THRESHOLD
        best: TranslationResult | None = None
        failures: list[ProviderFailure] = []
        accepted: TranslationResult | None = None

        for name in self.select_candidates(request):
            provider: TransInterface = self._trans_instance[name]
            if not provider.is_available:
                logger.debug("Provider '%s' became unavailable, skipping", name)
                continue

            logger.debug("Using translation provider '%s'", name)
            outcome: ProviderOutcome = await provider.attempt(
                request, timeout=self.config.TRANSLATION.REQUEST_TIMEOUT
            )
            if isinstance(outcome, ProviderFailure):
                failures.append(outcome)
                continue

            result: TranslationResult = outcome.result
            if result.quality_score >= threshold:
                accepted = result
                break

            logger.warning(
                "Low translation quality from '%s' (%.2f < %.2f), trying next provider",
                name,
                result.quality_score,
                threshold,
            )
            if best is None or result.quality_score > best.quality_score:
                best = result

        if accepted is None:
            if best is None:
                reasons: str = "; ".join(f"{f.provider}: {f.reason}" for f in failures) or "no provider registered"
                msg: str = f"All translation providers are unavailable ({reasons})"
                logger.error(msg)
                raise NoProviderAvailableError(msg)
            logger.warning("Using best available translation (%s, quality %.2f)", best.model, best.quality_score)
            accepted = best

        if use_cache:
            await self.write_translation_cache(request, accepted)
        logger.info("Translation completed: model=%s, quality=%.2f", accepted.model, accepted.quality_score)
        return accepted

    async def fetch_cached_translation(self, request: TranslationRequest) -> TranslationResult | None:
        """Fetch a cached translation, treating cache errors as misses.

        Args:
            request (TranslationRequest): The request to look up.

        Returns:
            TranslationResult | None: A cache-hit result, or None on a miss.
        """
        try:
            entry: TranslationCacheEntry | None = await self.cache_manager.get(
                request.text, request.source_lang, request.target_lang
            )
        except CacheError as err:
            logger.warning("Cache lookup failed, treating as miss: %s", err)
            return None
        if entry is None:
            return None
        return TranslationResult.from_cache(request, entry.translated_text)

    async def write_translation_cache(self, request: TranslationRequest, result: TranslationResult) -> bool:
        """Store an accepted translation with the default TTL.

        Returns:
            bool: True if the entry was written, False if the cache rejected it.
        """
        try:
            await self.cache_manager.set(
                request.text, result.translated_text, request.source_lang, request.target_lang
            )
        except CacheError as err:
            logger.warning("Failed to write translation cache: %s", err)
            return False
        return True

    async def batch_translate(self, requests: Sequence[TranslationRequest]) -> list[TranslationResult]:
        """Translate many requests with bounded concurrency.

        Requests run concurrently in groups of TRANSLATION.BATCH_SIZE; groups run one after another.
        A failed item becomes an error placeholder, so the output always matches the input in length
        and order.

        Args:
            requests (Sequence[TranslationRequest]): Requests to translate.

        Returns:
            list[TranslationResult]: One result per request, in input order.
        """
        batch_size: int = max(1, self.config.TRANSLATION.BATCH_SIZE)
        results: list[TranslationResult] = []

        for start in range(0, len(requests), batch_size):
            group: Sequence[TranslationRequest] = requests[start : start + batch_size]
            outcomes: list[TranslationResult | BaseException] = await asyncio.gather(
                *(self.translate(request) for request in group), return_exceptions=True
            )
            for outcome in outcomes:
                if isinstance(outcome, TranslationResult):
                    results.append(outcome)
                    continue
                if isinstance(outcome, asyncio.CancelledError):
                    raise outcome
                logger.error("Batch translation error: %s", outcome)
                results.append(TranslationResult.error_sentinel())

        return results

    async def get_status(self) -> TranslationStatus:
        """Report registered providers and cache statistics."""
        cache_stats: CacheStatistics = await self.cache_manager.stats()
        return TranslationStatus(
            available_providers=self.available_engine_names(),
            total_providers=len(self._trans_instance),
            fallback_chain=self.fallback_chain,
            cache_stats=cache_stats,
        )

    async def warmup_cache(self) -> int:
        """Seed the cache with common football terms.

        Entries use CACHE.WARMUP_TTL_SEC. Running it again just refreshes the same keys.

        Returns:
            int: Number of entries written.
        """
        written: int = 0
        for source_text, translated_text in WARMUP_TERMS:
            try:
                await self.cache_manager.set(
                    source_text,
                    translated_text,
                    self.WARMUP_SOURCE_LANG,
                    self.WARMUP_TARGET_LANG,
                    ttl=self.config.CACHE.WARMUP_TTL_SEC,
                )
            except CacheError as err:
                logger.warning("Failed to warm up cache entry '%s': %s", source_text, err)
                continue
            written += 1
        logger.info("Translation cache warmed up with %d entries", written)
        return written

    async def health_check(self) -> bool:
        """Translate a short probe text at low priority, bypassing the cache.

        Returns:
            bool: True if a provider answered the probe with confidence above 0.5.
        """
        probe = TranslationRequest(
            text=HEALTH_CHECK_TEXT,
            source_lang=self.WARMUP_SOURCE_LANG,
            target_lang=self.WARMUP_TARGET_LANG,
            priority="low",
        )
        try:
            result: TranslationResult = await self.translate(probe, use_cache=False)
        except NoProviderAvailableError as err:
            logger.error("Health check failed: %s", err)
            return False
        return result.confidence > HEALTH_CHECK_MIN_CONFIDENCE

    async def shutdown_engines(self) -> None:
        """Shut down all registered providers."""
        logger.info("Class '%s' termination process started.", self.__class__.__name__)
        for _inst in self._trans_instance.values():
            await _inst.close()
        logger.info("Class '%s' termination process completed.", self.__class__.__name__)
