"""Compliance engine combining phrase, platform, pattern and heuristic checks.

All rule tables are built once in the constructor and only read by
``check``, so a single engine can be shared between threads.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from postguard.engine.heuristics import HeuristicAnalyzer
from postguard.engine.highlighter import OVERLAP_POLICIES, OVERLAP_SPLICE, highlight
from postguard.engine.models import ComplianceResult, RiskLevel, Violation
from postguard.engine.patterns import OFFSET_FIRST_OCCURRENCE, PatternRuleSet
from postguard.engine.platforms import PlatformRules
from postguard.engine.rules import DEFAULT_PHRASES
from postguard.engine.trie import PhraseEntry, PhraseTrie

if TYPE_CHECKING:
    from postguard.config import EngineConfig

logger = logging.getLogger(__name__)

PASS_SUMMARY = "Content passes all compliance checks."


class ComplianceEngine:
    """Runs every checker over a piece of content and aggregates the result."""

    def __init__(
        self,
        extra_phrases: Optional[Iterable[PhraseEntry]] = None,
        pattern_offsets: str = OFFSET_FIRST_OCCURRENCE,
        highlight_overlap: str = OVERLAP_SPLICE,
    ) -> None:
        if highlight_overlap not in OVERLAP_POLICIES:
            raise ValueError(
                f"Unknown overlap policy '{highlight_overlap}'. Expected one of: {', '.join(OVERLAP_POLICIES)}"
            )
        self._trie = PhraseTrie(list(DEFAULT_PHRASES) + list(extra_phrases or []))
        self._platforms = PlatformRules()
        self._patterns = PatternRuleSet(offset_mode=pattern_offsets)
        self._heuristics = HeuristicAnalyzer()
        self._highlight_overlap = highlight_overlap
        logger.debug(
            "Compliance engine ready: %d phrase(s), %d pattern(s), %d platform(s)",
            len(self._trie),
            len(self._patterns.rules),
            len(self._platforms.platforms()),
        )

    @classmethod
    def from_config(cls, config: Optional[EngineConfig]) -> ComplianceEngine:
        if config is None:
            return cls()
        return cls(
            extra_phrases=config.extra_phrases,
            pattern_offsets=config.pattern_offsets,
            highlight_overlap=config.highlight_overlap,
        )

    @property
    def trie(self) -> PhraseTrie:
        return self._trie

    @property
    def platforms(self) -> PlatformRules:
        return self._platforms

    @property
    def patterns(self) -> PatternRuleSet:
        return self._patterns

    # -- public API ----------------------------------------------------------

    def check(self, content: str, platform: str) -> ComplianceResult:
        """Check *content* for publication on *platform*.

        An unknown platform is reported as a "Platform Error" violation;
        the phrase, pattern and heuristic checks still run.
        """
        violations: list[Violation] = []

        # 1. Banned phrases
        violations.extend(self._trie.search(content))

        # 2. Platform constraints
        violations.extend(self._platforms.validate(content, platform))

        # 3. Pattern rules
        violations.extend(self._patterns.evaluate_all(content))

        # 4. Heuristics
        violations.extend(self._heuristics.evaluate_all(content))

        result = ComplianceResult(
            is_compliant=not violations,
            violations=violations,
            risk_level=RiskLevel.for_count(len(violations)),
        )
        result.summary = summarize(result)

        logger.debug(
            "Checked %d chars for %s: %d violation(s), risk %s",
            len(content),
            platform,
            len(violations),
            result.risk_level.value,
        )
        return result

    def highlight(
        self, content: str, violations: Iterable[Violation], escape: bool = False
    ) -> str:
        """Highlight *violations* in *content* using the configured overlap policy."""
        return highlight(content, violations, overlap=self._highlight_overlap, escape=escape)


def summarize(result: ComplianceResult) -> str:
    if not result.violations:
        return PASS_SUMMARY
    labels = result.violation_labels
    return (
        f"Found {len(result.violations)} violation(s) across "
        f"{len(labels)} categories: {', '.join(labels)}."
    )


def violation_stats(violations: Iterable[Violation]) -> dict[str, int]:
    """Count violations per label, in first-seen order."""
    stats: dict[str, int] = {}
    for v in violations:
        stats[v.label] = stats.get(v.label, 0) + 1
    return stats
