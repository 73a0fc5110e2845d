"""Command-line front end for the football translation engine.

Translates text, reports provider and cache status, warms up the cache or runs a health check.
Provider credentials are read from DEEPSEEK_API_KEY, CLAUDE_API_KEY and OPENAI_API_KEY.
Results are printed to stdout as JSON; diagnostics go to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, NoReturn

from config.loader import ConfigFileNotFoundError, ConfigLoader, ConfigLoaderError
from core.trans import NoProviderAvailableError, TransManager
from models.config_models import Config
from models.translation_models import (
    DOMAINS,
    PRIORITIES,
    TARGET_LANGUAGES,
    TranslationRequest,
    TranslationValidationError,
)
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from models.translation_models import TranslationResult, TranslationStatus

CFG_FILE: Final[str] = "ballscout.ini"

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        description="Translate football news with language-model providers",
        epilog='Example: python translate_cli.py translate "Messi scores a hat-trick" --priority high',
    )
    parser.add_argument("--config", dest="config", default=CFG_FILE, metavar="FILE", help="Configuration file")
    parser.add_argument("--debug", dest="debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    translate_parser = subparsers.add_parser("translate", help="Translate text")
    translate_parser.add_argument("text", help="Text to translate")
    translate_parser.add_argument("--source", dest="source_lang", default="en", help="Source language tag")
    translate_parser.add_argument("--target", dest="target_lang", default="zh-CN", choices=TARGET_LANGUAGES)
    translate_parser.add_argument("--domain", dest="domain", default="football", choices=DOMAINS)
    translate_parser.add_argument("--priority", dest="priority", default="medium", choices=PRIORITIES)
    translate_parser.add_argument(
        "--warmup", dest="warmup", action="store_true", help="Seed the cache with common terms first"
    )

    subparsers.add_parser("status", help="Show providers and cache statistics")
    subparsers.add_parser("warmup", help="Seed the cache with common football terms")
    subparsers.add_parser("health", help="Translate a probe text and report health")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file, falling back to defaults when it does not exist.

    Raises:
        ConfigLoaderError: If the configuration file exists but is invalid.
    """
    script_name: str = Path(sys.argv[0]).name
    try:
        return ConfigLoader(config_filename=args.config, script_name=script_name, debug=args.debug).config
    except ConfigFileNotFoundError:
        logger.info("Configuration file '%s' not found, using defaults", args.config)
        config = Config()
        config.GENERAL.DEBUG = args.debug
        return config


def print_json(data: dict[str, Any]) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


async def run(args: argparse.Namespace, config: Config) -> int:
    """Execute the selected command.

    Returns:
        int: Process exit code.
    """
    manager = TransManager(config)
    await manager.initialize()
    try:
        match args.command:
            case "translate":
                if args.warmup:
                    await manager.warmup_cache()
                request = TranslationRequest(
                    text=args.text,
                    source_lang=args.source_lang,
                    target_lang=args.target_lang,
                    domain=args.domain,
                    priority=args.priority,
                )
                result: TranslationResult = await manager.translate(request)
                print_json(result.to_dict())
            case "status":
                status: TranslationStatus = await manager.get_status()
                print_json(status.to_dict())
            case "warmup":
                count: int = await manager.warmup_cache()
                print_json({"warmedUp": count})
            case "health":
                healthy: bool = await manager.health_check()
                print_json({"healthy": healthy})
                return 0 if healthy else 1
    finally:
        await manager.shutdown_engines()
    return 0


def main(argv: list[str] | None = None) -> int:
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return 2

    logger_utils = LoggerUtils(config.GENERAL.LOG_FILE)
    if config.GENERAL.DEBUG:
        logger_utils.set_level("DEBUG")

    try:
        return asyncio.run(run(args, config))
    except TranslationValidationError as err:
        print(f"\nError: {err}", file=sys.stderr)
        return 2
    except NoProviderAvailableError as err:
        print(f"\nError: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)
