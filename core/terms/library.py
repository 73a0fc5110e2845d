"""Football term library.

Looks up canonical Chinese renderings, detects football entities in source text and
builds the context hint that adapters embed in their prompts.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from core.terms.football_terms import (
    CANONICAL_ENTITY_NAMES,
    COMPETITIONS,
    GENERAL_TERMS,
    PLAYERS,
    TARGET_DOMAIN_TERMS,
    TEAMS,
)
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Mapping

__all__: list[str] = ["DetectedEntities", "FootballTermLibrary"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

CONTEXT_HEADER: Final[tuple[str, ...]] = (
    "这是一篇足球新闻，请注意以下要点：",
    "1. 保持足球术语的专业性和准确性",
    "2. 球员和球队名称使用中文惯用译名",
    "3. 保持原文的语气和风格",
    "4. 确保翻译流畅自然，符合中文表达习惯",
)


@dataclass(frozen=True)
class DetectedEntities:
    """Football entities found in a source text, each list in table order.

    Attributes:
        teams (tuple[str, ...]): Matched team names.
        players (tuple[str, ...]): Matched player names.
        competitions (tuple[str, ...]): Matched competition names.
        terms (tuple[str, ...]): Matched general football terms.
    """

    teams: tuple[str, ...] = field(default_factory=tuple)
    players: tuple[str, ...] = field(default_factory=tuple)
    competitions: tuple[str, ...] = field(default_factory=tuple)
    terms: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not (self.teams or self.players or self.competitions or self.terms)


class FootballTermLibrary:
    """Read-only vocabulary of football terms, teams, players and competitions.

    All tables are fixed at construction time. Lookups are case-insensitive on the source side;
    target-side checks are plain substring tests since Chinese has no case.
    """

    def __init__(
        self,
        *,
        terms: tuple[tuple[str, str], ...] = GENERAL_TERMS,
        teams: tuple[tuple[str, str], ...] = TEAMS,
        players: tuple[tuple[str, str], ...] = PLAYERS,
        competitions: tuple[tuple[str, str], ...] = COMPETITIONS,
        target_domain_terms: tuple[str, ...] = TARGET_DOMAIN_TERMS,
        canonical_entity_names: tuple[str, ...] = CANONICAL_ENTITY_NAMES,
    ) -> None:
        self._terms: Mapping[str, str] = MappingProxyType(dict(terms))
        self._teams: Mapping[str, str] = MappingProxyType(dict(teams))
        self._players: Mapping[str, str] = MappingProxyType(dict(players))
        self._competitions: Mapping[str, str] = MappingProxyType(dict(competitions))
        self._target_domain_terms: tuple[str, ...] = tuple(target_domain_terms)
        self._canonical_entity_names: tuple[str, ...] = tuple(canonical_entity_names)

        # Teams take precedence over players, players over competitions, and so on.
        self._canonical_index: Mapping[str, str] = MappingProxyType(
            {
                source.lower(): target
                for table in (self._terms, self._competitions, self._players, self._teams)
                for source, target in table.items()
            }
        )
        self._replace_patterns: tuple[tuple[re.Pattern[str], str], ...] = tuple(
            (StringUtils.compile_word_pattern(source), target)
            for table in (self._teams, self._players, self._competitions, self._terms)
            for source, target in table.items()
        )
        protected: list[str] = []
        for table in (self._teams, self._players, self._competitions):
            protected.extend(name for name in table if name not in protected)
        self._protected_terms: tuple[str, ...] = tuple(protected)
        logger.debug(
            "Term library loaded: terms=%d, teams=%d, players=%d, competitions=%d",
            len(self._terms),
            len(self._teams),
            len(self._players),
            len(self._competitions),
        )

    @property
    def terms(self) -> Mapping[str, str]:
        return self._terms

    @property
    def teams(self) -> Mapping[str, str]:
        return self._teams

    @property
    def players(self) -> Mapping[str, str]:
        return self._players

    @property
    def competitions(self) -> Mapping[str, str]:
        return self._competitions

    @property
    def protected_terms(self) -> tuple[str, ...]:
        """Names of teams, players and competitions that must not be translated literally."""
        return self._protected_terms

    def lookup_canonical(self, term: str) -> str | None:
        """Return the canonical Chinese rendering of a term, team, player or competition.

        Args:
            term (str): Source-language form. Surrounding whitespace is ignored.

        Returns:
            str | None: The rendering, or None if the term is not in any table.
        """
        return self._canonical_index.get(StringUtils.ensure_str(term).strip().lower())

    def detect_entities(self, text: str) -> DetectedEntities:
        """Find known entities in the text by case-insensitive substring match.

        Args:
            text (str): Source text.

        Returns:
            DetectedEntities: Matches grouped by category, each in table order.
        """
        lowered: str = StringUtils.ensure_str(text).lower()
        if not lowered:
            return DetectedEntities()

        def scan(table: Mapping[str, str]) -> tuple[str, ...]:
            return tuple(name for name in table if name.lower() in lowered)

        return DetectedEntities(
            teams=scan(self._teams),
            players=scan(self._players),
            competitions=scan(self._competitions),
            terms=scan(self._terms),
        )

    def build_context_hint(self, text: str) -> str:
        """Build the instruction block that steers a model toward football conventions.

        The output depends only on the text, so identical inputs always yield identical prompts.

        Args:
            text (str): Source text.

        Returns:
            str: Newline-separated instructions, followed by the detected entities and a glossary line.
        """
        entities: DetectedEntities = self.detect_entities(text)
        parts: list[str] = list(CONTEXT_HEADER)

        if entities.teams:
            parts.append(f"\n涉及的球队：{', '.join(entities.teams)}")
        if entities.players:
            parts.append(f"涉及的球员：{', '.join(entities.players)}")
        if entities.competitions:
            parts.append(f"涉及的赛事：{', '.join(entities.competitions)}")
        if entities.terms:
            glossary: str = ", ".join(f"{term} → {self._terms[term]}" for term in entities.terms)
            parts.append(f"术语对照：{glossary}")

        return "\n".join(parts)

    def replace_terms(self, text: str) -> str:
        """Replace known names and terms with their Chinese renderings.

        Whole-word and case-insensitive. Teams are replaced first, then players, competitions and
        general terms, so a longer club name wins over a term it contains.
        """
        result: str = StringUtils.ensure_str(text)
        for pattern, target in self._replace_patterns:
            result = pattern.sub(target, result)
        return result

    def contains_domain_term(self, translated_text: str) -> bool:
        return StringUtils.contains_any(translated_text, self._target_domain_terms)

    def contains_canonical_name(self, translated_text: str) -> bool:
        return StringUtils.contains_any(translated_text, self._canonical_entity_names)
