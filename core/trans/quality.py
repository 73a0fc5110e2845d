"""Heuristic quality scoring for football translations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from core.terms.football_terms import FAILURE_MARKERS
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.terms import FootballTermLibrary

__all__: list[str] = ["QualityScorer", "QualityWeights"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass(frozen=True)
class QualityWeights:
    """Magnitudes used by QualityScorer.

    Attributes:
        base_score (float): Starting score before adjustments.
        domain_term_bonus (float): Added when the output contains a Chinese football term.
        known_name_bonus (float): Added when the output contains a conventional player or club name.
        length_window (tuple[float, float]): Output/input length ratio range earning length_bonus.
        length_bonus (float): Added when the ratio is inside length_window.
        loose_length_window (tuple[float, float]): Ratio range outside which length_penalty applies.
        length_penalty (float): Subtracted when the ratio is outside loose_length_window.
        failure_marker_penalty (float): Subtracted when the output contains a failure marker.
    """

    base_score: float = 0.8
    domain_term_bonus: float = 0.10
    known_name_bonus: float = 0.05
    length_window: tuple[float, float] = (0.4, 2.5)
    length_bonus: float = 0.05
    loose_length_window: tuple[float, float] = (0.2, 4.0)
    length_penalty: float = 0.10
    failure_marker_penalty: float = 0.30
    failure_markers: tuple[str, ...] = FAILURE_MARKERS


class QualityScorer:
    """Scores how well a translation kept its football register.

    The score is a pure function of (original, translated) and the weights, always in [0.0, 1.0].
    """

    def __init__(self, term_library: FootballTermLibrary, weights: QualityWeights | None = None) -> None:
        self.term_library: FootballTermLibrary = term_library
        self.weights: QualityWeights = weights if weights is not None else QualityWeights()

    def score(self, original: str, translated: str) -> float:
        """Score a translation.

        Args:
            original (str): Source text.
            translated (str): Provider output.

        Returns:
            float: Clamped quality score.
        """
        original = StringUtils.ensure_str(original)
        translated = StringUtils.ensure_str(translated)
        weights: QualityWeights = self.weights
        score: float = weights.base_score

        if self.term_library.contains_domain_term(translated):
            score += weights.domain_term_bonus
        if self.term_library.contains_canonical_name(translated):
            score += weights.known_name_bonus

        ratio: float | None = self._length_ratio(original, translated)
        if ratio is not None and weights.length_window[0] <= ratio <= weights.length_window[1]:
            score += weights.length_bonus
        elif ratio is None or not (weights.loose_length_window[0] <= ratio <= weights.loose_length_window[1]):
            score -= weights.length_penalty

        if StringUtils.contains_any(translated, weights.failure_markers):
            score -= weights.failure_marker_penalty

        clamped: float = min(max(score, 0.0), 1.0)
        logger.debug("Quality score: %.3f (raw %.3f, ratio %s)", clamped, score, ratio)
        return clamped

    @staticmethod
    def _length_ratio(original: str, translated: str) -> float | None:
        # None marks a degenerate pair that always falls outside every window.
        if not original or not translated:
            return None
        return len(translated) / len(original)
