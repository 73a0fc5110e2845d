"""INI configuration loader.

Every value in the file is converted to the type of the matching dataclass default in
``models.config_models``. Numbers and booleans may be written bare or quoted; strings and lists
are Python literals (``MODEL = "deepseek-chat"``, ``FALLBACK_CHAIN = ["deepseek", "claude"]``).
"""

from __future__ import annotations

import ast
import configparser
from configparser import ConfigParser, SectionProxy
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from models.config_models import Config
from models.translation_models import PROVIDER_KINDS
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable

__all__: list[str] = [
    "ALLOWED_PROVIDERS",
    "Config",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ALLOWED_PROVIDERS: Final[tuple[str, ...]] = PROVIDER_KINDS

# (section, key) pairs checked after conversion
_RATIO_KEYS: Final[tuple[tuple[str, str], ...]] = (
    ("TRANSLATION", "QUALITY_THRESHOLD"),
    *((provider.upper(), key) for provider in ALLOWED_PROVIDERS for key in ("CONFIDENCE", "BASE_SCORE")),
)
_POSITIVE_KEYS: Final[tuple[tuple[str, str], ...]] = (
    ("TRANSLATION", "BATCH_SIZE"),
    ("TRANSLATION", "REQUEST_TIMEOUT"),
    ("CACHE", "TTL_SEC"),
    ("CACHE", "MAX_ENTRIES"),
    ("CACHE", "WARMUP_TTL_SEC"),
    *((provider.upper(), "MAX_TOKENS") for provider in ALLOWED_PROVIDERS),
)


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


def _unquote(raw: str) -> str:
    raw = raw.strip()
    for char in ("'", '"'):
        raw = raw.removeprefix(char).removesuffix(char)
    return raw


def _to_bool(raw: str) -> bool:
    value: str = _unquote(raw).lower()
    if value not in ConfigParser.BOOLEAN_STATES:
        msg: str = f"Not a boolean: {raw!r}"
        raise ValueError(msg)
    return ConfigParser.BOOLEAN_STATES[value]


def _to_int(raw: str) -> int:
    return int(float(_unquote(raw)))


def _to_float(raw: str) -> float:
    return float(_unquote(raw))


class ConfigLoader:
    """Loads ``Config`` from an INI file and validates it.

    Sections and keys absent from the file keep their dataclass defaults.

    Args:
        config_filename (str): INI file name to load.
        script_name (str): Executing script name, used in error messaging.
        **args: Command-line overrides. ``debug=True`` forces GENERAL.DEBUG.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist.
        ConfigFormatError: If the file cannot be parsed or contains invalid values or types.
    """

    # bool is checked by exact type, so it never falls through to int
    SCALAR_CONVERTERS: Final[dict[type, Callable[[str], Any]]] = {
        bool: _to_bool,
        int: _to_int,
        float: _to_float,
    }

    def __init__(self, *, config_filename: str, script_name: str, **args) -> None:
        msg: str
        if not Path(config_filename).exists():
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)

        parser = ConfigParser()
        try:
            parser.read(config_filename, encoding="utf-8")
        except configparser.Error as err:
            msg = f"Failed to parse configuration file '{config_filename}': {err}"
            raise ConfigFormatError(msg) from None

        self.config = Config()
        for section in fields(self.config):
            if parser.has_section(section.name):
                self._load_section(section.name, parser[section.name])
            else:
                logger.debug("Section '%s' not defined, using defaults", section.name)

        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        self._validate()

    def _load_section(self, section_name: str, items: SectionProxy) -> None:
        target: Any = getattr(self.config, section_name)
        for key in fields(target):
            if key.name not in items:
                continue
            value: Any = self._convert(f"{section_name}.{key.name}", items[key.name], getattr(target, key.name))
            setattr(target, key.name, value)

    def _convert(self, field_name: str, raw: str, default: Any) -> Any:
        """Convert one INI value to the type of ``default``.

        Raises:
            ConfigValueError: If the value cannot be read as the expected type.
            ConfigTypeError: If the value has an unusable type.
            ConfigFormatError: If a literal has invalid syntax.
        """
        msg: str
        converter: Callable[[str], Any] | None = self.SCALAR_CONVERTERS.get(type(default))
        if converter is not None:
            try:
                return converter(raw)
            except ValueError as err:
                msg = f"Invalid value for {field_name}: {err}"
                raise ConfigValueError(msg) from err
            except TypeError as err:
                msg = f"Invalid value for {field_name}: {err}"
                raise ConfigTypeError(msg) from err

        try:
            return ast.literal_eval(raw)
        except ValueError as err:
            msg = f"Invalid literal for {field_name}: {raw}"
            raise ConfigValueError(msg) from err
        except SyntaxError as err:
            msg = f"Invalid literal for {field_name} (strings must be quoted): {raw}"
            raise ConfigFormatError(msg) from err

    def _validate(self) -> None:
        translation: Any = self.config.TRANSLATION
        translation.FALLBACK_CHAIN = self._provider_list("TRANSLATION.FALLBACK_CHAIN", translation.FALLBACK_CHAIN)

        primary: str = str(translation.PRIMARY_PROVIDER).strip().lower()
        if primary not in ALLOWED_PROVIDERS:
            msg: str = f"Unsupported value used for 'TRANSLATION.PRIMARY_PROVIDER': {primary!r}"
            raise ConfigValueError(msg)
        translation.PRIMARY_PROVIDER = primary

        for section_name, key_name in _RATIO_KEYS:
            self._check(section_name, key_name, lambda v: 0.0 <= v <= 1.0, "must be between 0.0 and 1.0")
        for section_name, key_name in _POSITIVE_KEYS:
            self._check(section_name, key_name, lambda v: v > 0, "must be greater than zero")

    def _check(self, section_name: str, key_name: str, predicate: Callable[[Any], bool], requirement: str) -> None:
        value: Any = getattr(getattr(self.config, section_name), key_name)
        if not predicate(value):
            msg: str = f"'{section_name}.{key_name}' {requirement}: {value}"
            raise ConfigValueError(msg)

    @staticmethod
    def _provider_list(field_name: str, value: Any) -> list[str]:
        """Normalise a provider list, dropping unknown names and repeats.

        The first occurrence of each name wins, so the configured order is preserved.

        Raises:
            ConfigTypeError: If the value is neither a list nor a string.
        """
        if not isinstance(value, (list, str)):
            msg: str = f"Unsupported type used for '{field_name}': {type(value)}"
            raise ConfigTypeError(msg)

        providers: list[str] = []
        for item in value if isinstance(value, list) else [value]:
            name: str = str(item).strip().lower()
            if name not in ALLOWED_PROVIDERS:
                logger.warning("Unknown value '%s' is set for '%s'", item, field_name)
            elif name not in providers:
                providers.append(name)
        return providers
