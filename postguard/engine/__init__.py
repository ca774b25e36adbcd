"""Compliance matching engine.

Combines a banned-phrase trie, compiled pattern rules, per-platform
constraints and formatting heuristics into a single ``ComplianceResult``.
"""

from postguard.engine.engine import ComplianceEngine, summarize, violation_stats
from postguard.engine.heuristics import HeuristicAnalyzer
from postguard.engine.highlighter import highlight
from postguard.engine.models import ComplianceResult, RiskLevel, Violation, ViolationType
from postguard.engine.patterns import PatternRule, PatternRuleSet
from postguard.engine.platforms import PlatformProfile, PlatformRules
from postguard.engine.trie import PhraseEntry, PhraseTrie, TrieNode

__all__ = [
    "ComplianceEngine",
    "ComplianceResult",
    "HeuristicAnalyzer",
    "PatternRule",
    "PatternRuleSet",
    "PhraseEntry",
    "PhraseTrie",
    "PlatformProfile",
    "PlatformRules",
    "RiskLevel",
    "TrieNode",
    "Violation",
    "ViolationType",
    "highlight",
    "summarize",
    "violation_stats",
]
