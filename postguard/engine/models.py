"""Data models for the compliance engine.

``ViolationType`` values are the historical labels stored by downstream
consumers; treat them as a stable contract and never rename a value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ViolationType(str, Enum):
    """Every label a checker can emit."""

    # Phrase trie
    FINANCIAL = "Financial Violation"
    MISLEADING = "Misleading Content"
    INAPPROPRIATE = "Inappropriate Content"
    HEALTH = "Health Misinformation"
    INVESTMENT_SCAM = "Investment Scam"
    # Platform rules
    PLATFORM_ERROR = "Platform Error"
    LENGTH = "Length Violation"
    HASHTAG = "Hashtag Requirement"
    # Pattern rules
    UNREALISTIC_GUARANTEE = "Unrealistic Guarantee"
    INCOME_CLAIM = "Income Claim"
    URGENT_CTA = "Urgent Call to Action"
    PRESSURE_TACTIC = "Pressure Tactic"
    AGGRESSIVE_SALES = "Aggressive Sales"
    SUBSCRIPTION_TRAP = "Potential Subscription Trap"
    # Heuristics
    FORMATTING = "Formatting Violation"
    SUSPICIOUS_LINK = "Suspicious Link"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def for_count(cls, count: int) -> RiskLevel:
        """0 violations is Low, 1-2 is Medium, 3 or more is High."""
        if count == 0:
            return cls.LOW
        if count <= 2:
            return cls.MEDIUM
        return cls.HIGH


@dataclass(frozen=True)
class Violation:
    """A single detected rule breach."""

    phrase: str  # matched text, or a description for non-textual checks
    violation_type: ViolationType
    position: int  # character offset into the checked content
    word_position: Optional[str] = None  # "Word 3" / "Words 3-5"
    original_phrase: Optional[str] = None  # exact substring, original casing

    @property
    def label(self) -> str:
        return self.violation_type.value

    def to_dict(self) -> dict:
        data = {
            "phrase": self.phrase,
            "type": self.label,
            "position": self.position,
        }
        if self.word_position is not None:
            data["wordPosition"] = self.word_position
        if self.original_phrase is not None:
            data["originalPhrase"] = self.original_phrase
        return data


@dataclass
class ComplianceResult:
    """Outcome of one ``ComplianceEngine.check`` call."""

    is_compliant: bool
    violations: list[Violation] = field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW
    summary: str = ""

    @property
    def violation_labels(self) -> list[str]:
        """Distinct labels in first-seen order."""
        seen: dict[str, None] = {}
        for v in self.violations:
            seen.setdefault(v.label, None)
        return list(seen)

    def to_dict(self) -> dict:
        return {
            "isCompliant": self.is_compliant,
            "violations": [v.to_dict() for v in self.violations],
            "riskLevel": self.risk_level.value,
            "summary": self.summary,
        }
