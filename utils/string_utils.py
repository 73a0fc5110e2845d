from __future__ import annotations

import hashlib
import json
import re
import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__: list[str] = ["StringUtils"]


class StringUtils:
    """Static helpers for text normalisation, hashing and substring checks."""

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Return the value as a string, or an empty string for None.

        Whitespace is preserved; translations may legitimately start or end with it.
        """
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def compress_blanks(value: str) -> str:
        """Collapse runs of whitespace into single spaces and strip both ends."""
        value = StringUtils.ensure_str(value)
        return " ".join(value.split())

    @staticmethod
    def normalize_text(text: str) -> str:
        """Normalize text using Unicode NFC normalization."""
        return unicodedata.normalize("NFC", StringUtils.ensure_str(text))

    @staticmethod
    def generate_translation_hash_key(source_text: str, source_lang: str, target_lang: str) -> str:
        """Generate the cache key for a translation triple.

        The text is NFC-normalised and the language tags are lower-cased, so the key depends only
        on the normalised triple and never on insertion order or process state.

        Args:
            source_text (str): Text to be translated.
            source_lang (str): Source language tag.
            target_lang (str): Target language tag.

        Returns:
            str: SHA-256 hex digest of the normalised triple encoded as a JSON array.
        """
        normalized_source: str = StringUtils.normalize_text(source_text)
        # A JSON array keeps the field boundaries unambiguous whatever the fields contain.
        key_data: str = json.dumps(
            [
                normalized_source,
                StringUtils.ensure_str(source_lang).strip().lower(),
                StringUtils.ensure_str(target_lang).strip().lower(),
            ],
            ensure_ascii=False,
        )
        return hashlib.sha256(key_data.encode("utf-8")).hexdigest()

    @staticmethod
    def contains_any(text: str, needles: Iterable[str]) -> bool:
        """Check whether any of the needles occurs in the text (case-sensitive)."""
        text = StringUtils.ensure_str(text)
        return any(needle and needle in text for needle in needles)

    @staticmethod
    def compile_word_pattern(term: str) -> re.Pattern[str]:
        """Compile a case-insensitive whole-word pattern for a literal term."""
        return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)

    @staticmethod
    def truncate(value: str, limit: int = 50) -> str:
        """Shorten text for log output."""
        value = StringUtils.ensure_str(value)
        if len(value) <= limit:
            return value
        return f"{value[:limit]}..."
