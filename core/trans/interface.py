"""This module defines the abstract base class for translation providers and related exceptions.

It includes the ProviderAttributes record, the outcome types returned by TransInterface.attempt(),
and the ProviderError hierarchy raised by adapters.
"""

from __future__ import annotations

import asyncio
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Final, TypeAlias

from models.translation_models import PROVIDER_KINDS, ProviderKind
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from core.terms import FootballTermLibrary
    from models.config_models import Config
    from models.translation_models import TranslationRequest, TranslationResult

__all__: list[str] = [
    "PROVIDER_KINDS",
    "NoProviderAvailableError",
    "ProviderAttributes",
    "ProviderError",
    "ProviderFailure",
    "ProviderHTTPError",
    "ProviderKind",
    "ProviderOutcome",
    "ProviderRateLimitError",
    "ProviderResponseError",
    "ProviderSuccess",
    "ProviderTimeoutError",
    "TransInterface",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

RATE_LIMIT_BASE_COOLDOWN_SEC: Final[float] = 1.0
RATE_LIMIT_MAX_COOLDOWN_SEC: Final[float] = 30.0
RATE_LIMIT_RESET_SEC: Final[float] = 60.0


class ProviderError(Exception):
    """A provider call failed: transport error, non-success status or malformed body."""


class ProviderHTTPError(ProviderError):
    """The provider answered with a non-success HTTP status or the connection failed."""


class ProviderTimeoutError(ProviderError):
    """The provider did not answer within the configured deadline."""


class ProviderResponseError(ProviderError):
    """The provider answered, but the body did not have the expected shape."""


class ProviderRateLimitError(ProviderHTTPError):
    """The provider rejected the request because of rate limiting (HTTP 429)."""


class NoProviderAvailableError(Exception):
    """No registered provider produced a successful result for the request."""


@dataclass(frozen=True)
class ProviderAttributes:
    """Provider-specific identity and scoring constants.

    Attributes:
        name (ProviderKind): Registry name of the provider.
        model (str): Model identifier reported in results.
        confidence (float): Static trust level attached to every result.
    """

    name: ProviderKind
    model: str
    confidence: float


@dataclass(frozen=True)
class ProviderSuccess:
    result: TranslationResult


@dataclass(frozen=True)
class ProviderFailure:
    """A failed provider attempt.

    Attributes:
        provider (str): Name of the provider that failed.
        reason (str): Human-readable failure description.
        error (ProviderError): The underlying error.
    """

    provider: str
    reason: str
    error: ProviderError


ProviderOutcome: TypeAlias = ProviderSuccess | ProviderFailure


class TransInterface(ABC):
    """Abstract base class for translation providers.

    This class defines the interface for provider adapters: initialisation from configuration,
    translation of a single request, availability reporting and cleanup.
    Subclasses must implement these methods to provide specific translation functionality.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): A class variable that holds a dictionary of
            registered provider classes, keyed by their distinguished names.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        """Register the subclass in the registered dictionary.

        This method is called when a subclass of TransInterface is created.
        Automatically registers the subclass using its distinguished name.

        Args:
            **kwargs: Additional keyword arguments passed to parent class.
        """
        super().__init_subclass__(**kwargs)
        if not hasattr(cls, "fetch_engine_name") or not callable(cls.fetch_engine_name):
            msg = "Subclasses of TransInterface must implement the static method fetch_engine_name()."
            raise TypeError(msg)

        if not isinstance(cls.fetch_engine_name(), str) or cls.fetch_engine_name() == "":
            return  # Abstract intermediates return an empty name and are not registered.

        if cls.fetch_engine_name() in cls.registered:
            msg: str = f"A translation provider with the name '{cls.fetch_engine_name()}' is already registered."
            raise ValueError(msg)

        cls.registered[cls.fetch_engine_name()] = cls

    def __init__(self, *, term_library: FootballTermLibrary | None = None) -> None:
        """Initialize the TransInterface base class.

        Args:
            term_library (FootballTermLibrary | None): Vocabulary shared by the manager, if any.
        """
        self.shared_term_library: FootballTermLibrary | None = term_library
        self._provider_attributes: ProviderAttributes | None = None
        self._rate_limit_error_count: int = 0
        self._rate_limit_last_error: float = 0.0
        self._rate_limit_until: float = 0.0

    @property
    def provider_attributes(self) -> ProviderAttributes:
        """Get the provider attributes.

        Returns:
            ProviderAttributes: The provider attributes.
        """
        if self._provider_attributes is None:
            msg = "Provider attributes have not been set."
            raise RuntimeError(msg)
        return self._provider_attributes

    @provider_attributes.setter
    def provider_attributes(self, attributes: ProviderAttributes) -> None:
        if self._provider_attributes is not None:
            msg = "Provider attributes can only be set once during initialization."
            raise RuntimeError(msg)
        self._provider_attributes = attributes

    @property
    def engine_name(self) -> str:
        """Get the distinguished name of the provider.

        Returns:
            str: The provider name.
        """
        return self.provider_attributes.name

    @property
    def confidence(self) -> float:
        return self.provider_attributes.confidence

    @property
    def is_available(self) -> bool:
        """Check if the provider can take requests.

        A provider is unavailable while a rate-limit cooldown is running.

        Returns:
            bool: True if the provider is available, False otherwise.
        """
        return time.monotonic() >= self._rate_limit_until

    def register_rate_limit(self) -> float:
        """Register a rate-limit event and extend the cooldown period.

        The cooldown doubles with each event and resets once no event has been seen for a while.

        Returns:
            float: The cooldown applied, in seconds.
        """
        now: float = time.monotonic()
        if now - self._rate_limit_last_error > RATE_LIMIT_RESET_SEC:
            self._rate_limit_error_count = 0

        self._rate_limit_error_count += 1
        self._rate_limit_last_error = now

        backoff: float = RATE_LIMIT_BASE_COOLDOWN_SEC * (2 ** (self._rate_limit_error_count - 1))
        backoff = min(backoff, RATE_LIMIT_MAX_COOLDOWN_SEC)

        self._rate_limit_until = max(self._rate_limit_until, now + backoff)
        logger.warning("Provider '%s' rate limited, cooling down for %.1f sec", self.fetch_engine_name(), backoff)
        return backoff

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Fetch the distinguished name of the provider.

        Must be implemented by subclasses. This method is called during class registration
        in __init_subclass__, so the implementation must be available at subclass definition time.

        Returns:
            str: The distinguished name of the provider.
        """
        raise NotImplementedError

    @abstractmethod
    def initialize(self, config: Config) -> None:
        """Initialize the provider with the given configuration.

        Args:
            config (Config): Configuration object containing settings for the provider.

        Raises:
            ProviderError: If the provider cannot be set up, e.g. the credential is missing.
        """
        raise NotImplementedError

    @abstractmethod
    async def translation(self, request: TranslationRequest) -> TranslationResult:
        """Translate a request.

        Implementations never touch the result cache.

        Args:
            request (TranslationRequest): The request to translate.

        Returns:
            TranslationResult: Translation with confidence and quality score filled in.

        Raises:
            ProviderHTTPError: If the transport fails or the status is not successful.
            ProviderRateLimitError: If the request was rate-limited.
            ProviderResponseError: If the response body is malformed.
            ProviderTimeoutError: If the provider does not answer in time.
        """
        raise NotImplementedError

    @abstractmethod
    async def close(self) -> None:
        """Perform cleanup and shutdown of the provider."""
        raise NotImplementedError

    async def attempt(self, request: TranslationRequest, *, timeout: float) -> ProviderOutcome:
        """Run translation() under a deadline and report the outcome as a value.

        Args:
            request (TranslationRequest): The request to translate.
            timeout (float): Deadline in seconds for the whole call.

        Returns:
            ProviderOutcome: ProviderSuccess with the result, or ProviderFailure describing the error.
        """
        name: str = self.fetch_engine_name()
        try:
            async with asyncio.timeout(timeout):
                result: TranslationResult = await self.translation(request)
        except TimeoutError:
            msg: str = f"'{name}' did not respond within {timeout:.1f} sec"
            logger.warning("Provider '%s' timed out", name)
            return ProviderFailure(provider=name, reason=msg, error=ProviderTimeoutError(msg))
        except ProviderRateLimitError as err:
            self.register_rate_limit()
            return ProviderFailure(provider=name, reason=str(err), error=err)
        except ProviderError as err:
            logger.warning("Provider '%s' failed: %s", name, err)
            return ProviderFailure(provider=name, reason=str(err), error=err)
        return ProviderSuccess(result=result)

    def get_authentication_key(self) -> str:
        """Retrieve the authentication key from environment variables.

        The key is retrieved from an environment variable named after the provider's distinguished name,
        with the suffix "_API_KEY". For example, if the provider name is "deepseek",
        the variable would be "DEEPSEEK_API_KEY".

        Returns:
            str: The authentication key, or an empty string if the environment variable is not set.
        """
        return os.getenv(f"{self.fetch_engine_name().upper()}_API_KEY", "")
