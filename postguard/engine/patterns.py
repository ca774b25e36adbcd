"""Compiled regular-expression rules for sales and pressure wording."""

from __future__ import annotations

import re
from dataclasses import dataclass

from postguard.engine.models import Violation, ViolationType

# Where a pattern violation is anchored.  "first-occurrence" reports the
# first place the matched substring appears in the content, which can be
# earlier than the regex match itself; "native" uses the match offset.
OFFSET_FIRST_OCCURRENCE = "first-occurrence"
OFFSET_NATIVE = "native"
OFFSET_MODES = (OFFSET_FIRST_OCCURRENCE, OFFSET_NATIVE)


@dataclass(frozen=True)
class PatternRule:
    pattern: re.Pattern[str]
    violation_type: ViolationType


DEFAULT_PATTERN_RULES: tuple[PatternRule, ...] = tuple(
    PatternRule(re.compile(p, re.IGNORECASE), vtype)
    for p, vtype in [
        (r"\b\d+\s*%\s*guaranteed", ViolationType.UNREALISTIC_GUARANTEE),
        (r"\bguaranteed\s+\d+\s*%", ViolationType.UNREALISTIC_GUARANTEE),
        (r"\$\d+\s*(per|/)\s*(day|hour|week)", ViolationType.INCOME_CLAIM),
        (r"click\s+here\s+now", ViolationType.URGENT_CTA),
        (r"limited\s+time\s+offer", ViolationType.PRESSURE_TACTIC),
        (r"\b(buy|purchase)\s+now\b", ViolationType.AGGRESSIVE_SALES),
        (r"\bfree\s+trial\b", ViolationType.SUBSCRIPTION_TRAP),
    ]
)


class PatternRuleSet:
    """Fixed table of labelled patterns, each tested once per check."""

    def __init__(
        self,
        rules: tuple[PatternRule, ...] = DEFAULT_PATTERN_RULES,
        offset_mode: str = OFFSET_FIRST_OCCURRENCE,
    ) -> None:
        if offset_mode not in OFFSET_MODES:
            raise ValueError(
                f"Unknown pattern offset mode '{offset_mode}'. Expected one of: {', '.join(OFFSET_MODES)}"
            )
        self._rules = tuple(rules)
        self._offset_mode = offset_mode

    @property
    def rules(self) -> tuple[PatternRule, ...]:
        return self._rules

    @property
    def offset_mode(self) -> str:
        return self._offset_mode

    def evaluate_all(self, content: str) -> list[Violation]:
        violations: list[Violation] = []
        for rule in self._rules:
            match = rule.pattern.search(content)
            if not match:
                continue
            matched = match.group(0)
            if self._offset_mode == OFFSET_NATIVE:
                position = match.start()
            else:
                position = content.find(matched)
            violations.append(
                Violation(
                    phrase=matched,
                    violation_type=rule.violation_type,
                    position=position,
                )
            )
        return violations
