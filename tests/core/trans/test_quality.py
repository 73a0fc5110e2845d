from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from core.terms import FootballTermLibrary
from core.trans.quality import QualityScorer, QualityWeights


@pytest.fixture
def scorer() -> QualityScorer:
    return QualityScorer(FootballTermLibrary())


def test_domain_term_and_name_bonus(scorer: QualityScorer) -> None:
    # 0.8 base + 0.1 domain term + 0.05 known name + 0.05 length, clamped to 1.0
    score: float = scorer.score("Messi scores a goal", "梅西打进一球，球队获胜比赛")

    assert score == pytest.approx(1.0)


def test_length_bonus_only(scorer: QualityScorer) -> None:
    score: float = scorer.score("abcdefghij", "天气很好今天天气")

    assert score == pytest.approx(0.85)


def test_neutral_ratio_between_windows(scorer: QualityScorer) -> None:
    # ratio 0.3 is outside the bonus window but inside the loose window
    score: float = scorer.score("a" * 10, "天气晴")

    assert score == pytest.approx(0.8)


def test_extreme_length_ratio_is_penalised(scorer: QualityScorer) -> None:
    score: float = scorer.score("a" * 100, "天")

    assert score == pytest.approx(0.7)


def test_failure_marker_penalty(scorer: QualityScorer) -> None:
    score: float = scorer.score("Hello there", "[翻译错误] 天气")

    assert score == pytest.approx(0.8 + 0.05 - 0.3)


def test_empty_translation_gets_length_penalty(scorer: QualityScorer) -> None:
    assert scorer.score("Hello", "") == pytest.approx(0.7)


def test_score_is_deterministic(scorer: QualityScorer) -> None:
    original = "Lionel Messi scored a hat-trick"
    translated = "梅西上演帽子戏法"

    assert scorer.score(original, translated) == scorer.score(original, translated)


def test_base_score_is_configurable() -> None:
    scorer = QualityScorer(FootballTermLibrary(), QualityWeights(base_score=0.5))

    assert scorer.score("abcdefghij", "天气很好今天天气") == pytest.approx(0.55)


_texts = st.one_of(
    st.just(""),
    st.text(max_size=300),
    st.sampled_from(["???", "***", "[翻译错误]", "[无法翻译]", "梅西进球", "曼城 足球 比赛"]),
    st.builds(lambda n: "x" * n, st.integers(min_value=0, max_value=5000)),
)
_magnitudes = st.floats(min_value=-10.0, max_value=10.0, allow_nan=False)
_LIBRARY = FootballTermLibrary()


@settings(max_examples=200, deadline=None)
@given(
    original=_texts,
    translated=_texts,
    base_score=_magnitudes,
    bonus=_magnitudes,
    penalty=_magnitudes,
)
def test_score_is_always_clamped(
    original: str, translated: str, base_score: float, bonus: float, penalty: float
) -> None:
    weights = QualityWeights(
        base_score=base_score,
        domain_term_bonus=bonus,
        known_name_bonus=bonus,
        length_bonus=bonus,
        length_penalty=penalty,
        failure_marker_penalty=penalty,
    )

    score: float = QualityScorer(_LIBRARY, weights).score(original, translated)

    assert 0.0 <= score <= 1.0
