"""Configuration data models for the translation engine.

Each dataclass is one INI section; field names match the INI keys. Defaults reproduce the
values the engine uses when no configuration file is present.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = [
    "Cache",
    "Config",
    "General",
    "ProviderSettings",
    "Translation",
]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""


@dataclass
class Translation:
    FALLBACK_CHAIN: list[str] = field(default_factory=lambda: ["deepseek", "claude", "openai"])
    PRIMARY_PROVIDER: str = "deepseek"
    QUALITY_THRESHOLD: float = 0.6
    BATCH_SIZE: int = 5
    REQUEST_TIMEOUT: float = 30.0


@dataclass
class Cache:
    TTL_SEC: int = 24 * 60 * 60
    MAX_ENTRIES: int = 10000
    WARMUP_TTL_SEC: int = 7 * 24 * 60 * 60


@dataclass
class ProviderSettings:
    """Per-provider endpoint and scoring settings.

    CONFIDENCE is the static trust level reported with every result. BASE_SCORE is the starting
    point of the quality heuristic; the remaining scorer weights are shared defaults.
    """

    ENDPOINT: str = ""
    MODEL: str = ""
    MAX_TOKENS: int = 4000
    TEMPERATURE: float = 0.1
    CONFIDENCE: float = 0.9
    BASE_SCORE: float = 0.8


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
    CACHE: Cache = field(default_factory=Cache)
    DEEPSEEK: ProviderSettings = field(
        default_factory=lambda: ProviderSettings(
            ENDPOINT="https://api.deepseek.com/v1/chat/completions",
            MODEL="deepseek-chat",
            MAX_TOKENS=4000,
            CONFIDENCE=0.92,
            BASE_SCORE=0.85,
        )
    )
    CLAUDE: ProviderSettings = field(
        default_factory=lambda: ProviderSettings(
            ENDPOINT="https://api.anthropic.com/v1/messages",
            MODEL="claude-3-5-sonnet-20241022",
            MAX_TOKENS=4000,
            CONFIDENCE=0.95,
            BASE_SCORE=0.80,
        )
    )
    OPENAI: ProviderSettings = field(
        default_factory=lambda: ProviderSettings(
            ENDPOINT="https://api.openai.com/v1/chat/completions",
            MODEL="gpt-4",
            MAX_TOKENS=3000,
            CONFIDENCE=0.90,
            BASE_SCORE=0.85,
        )
    )

    def provider_settings(self, name: str) -> ProviderSettings:
        """Return the settings section for a provider name such as "deepseek"."""
        return getattr(self, name.upper())
