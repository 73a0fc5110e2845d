"""Utility modules for the translation engine.

This package provides logging setup and string helpers (normalisation, hashing, matching).
"""

from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

__all__: list[str] = ["LoggerUtils", "StringUtils"]
