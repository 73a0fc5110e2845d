from __future__ import annotations

import unicodedata

import pytest

from utils.string_utils import StringUtils


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        (123, "123"),
        ("  keep spaces ", "  keep spaces "),
    ],
)
def test_ensure_str(value: object, expected: str) -> None:
    assert StringUtils.ensure_str(value) == expected  # type: ignore[arg-type]


def test_compress_blanks_collapses_whitespace() -> None:
    assert StringUtils.compress_blanks("  Messi \t scores\n\nagain  ") == "Messi scores again"


def test_hash_key_is_stable_and_normalised() -> None:
    composed: str = unicodedata.normalize("NFC", "Mbappé")
    decomposed: str = unicodedata.normalize("NFD", "Mbappé")
    assert composed != decomposed

    key1: str = StringUtils.generate_translation_hash_key(composed, "EN", "zh-CN")
    key2: str = StringUtils.generate_translation_hash_key(decomposed, " en ", "ZH-cn")

    assert key1 == key2
    assert len(key1) == 64


def test_hash_key_differs_by_target() -> None:
    key_cn: str = StringUtils.generate_translation_hash_key("Goal", "en", "zh-CN")
    key_tw: str = StringUtils.generate_translation_hash_key("Goal", "en", "zh-TW")

    assert key_cn != key_tw


def test_hash_key_keeps_field_boundaries() -> None:
    key1: str = StringUtils.generate_translation_hash_key("Goal|en", "x", "zh-CN")
    key2: str = StringUtils.generate_translation_hash_key("Goal", "en|x", "zh-CN")

    assert key1 != key2


def test_contains_any_ignores_empty_needles() -> None:
    assert StringUtils.contains_any("梅西进球", ["", "进球"])
    assert not StringUtils.contains_any("梅西进球", ["", "红牌"])
    assert not StringUtils.contains_any(None, ["进球"])  # type: ignore[arg-type]


def test_compile_word_pattern_matches_whole_words_only() -> None:
    pattern = StringUtils.compile_word_pattern("goal")

    assert pattern.search("What a GOAL!")
    assert not pattern.search("goalkeeper")


def test_truncate() -> None:
    assert StringUtils.truncate("short") == "short"
    assert StringUtils.truncate("x" * 60, limit=10) == "x" * 10 + "..."
