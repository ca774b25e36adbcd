"""Tests for the compliance engine and highlighter."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from postguard.engine import (
    ComplianceEngine,
    PhraseEntry,
    RiskLevel,
    Violation,
    ViolationType,
    highlight,
    violation_stats,
)
from postguard.engine.highlighter import OVERLAP_SKIP, highlight_class
from postguard.engine.rules import DEFAULT_PHRASES

ENGINE = ComplianceEngine()


# --- Scenarios ---


def test_scenario_high_risk_post():
    result = ENGINE.check("GUARANTEED 500% returns! Invest now!", "twitter")
    types = [v.violation_type for v in result.violations]

    assert not result.is_compliant
    assert ViolationType.FINANCIAL in types
    assert ViolationType.UNREALISTIC_GUARANTEE in types
    assert ViolationType.FORMATTING in types
    assert result.risk_level == RiskLevel.HIGH
    assert result.summary == (
        "Found 3 violation(s) across 3 categories: "
        "Financial Violation, Unrealistic Guarantee, Formatting Violation."
    )


def test_scenario_clean_post():
    result = ENGINE.check("Just a normal update about our community meetup next week.", "facebook")
    assert result.is_compliant
    assert result.violations == []
    assert result.risk_level == RiskLevel.LOW
    assert result.summary == "Content passes all compliance checks."


def test_empty_content():
    result = ENGINE.check("", "twitter")
    assert result.is_compliant
    assert result.risk_level == RiskLevel.LOW


# --- Properties ---


def test_deterministic():
    content = "Buy now! Free money, this is a scam. https://bit.ly/x"
    assert ENGINE.check(content, "instagram") == ENGINE.check(content, "instagram")


@pytest.mark.parametrize("entry", DEFAULT_PHRASES, ids=lambda e: e.phrase)
def test_every_seeded_phrase_detected(entry):
    result = ENGINE.check(f" {entry.phrase} ", "twitter")
    assert entry.violation_type in [v.violation_type for v in result.violations]


def test_word_boundary():
    assert ENGINE.check("classscam", "twitter").violations == []
    [v] = ENGINE.check("this is a scam.", "twitter").violations
    assert v.original_phrase == "scam"


def test_risk_thresholds():
    assert ENGINE.check("this is a scam.", "twitter").risk_level == RiskLevel.MEDIUM
    assert ENGINE.check("scam and fraud", "twitter").risk_level == RiskLevel.MEDIUM
    assert ENGINE.check("scam, fraud, spam", "twitter").risk_level == RiskLevel.HIGH
    assert RiskLevel.for_count(0) == RiskLevel.LOW
    assert RiskLevel.for_count(2) == RiskLevel.MEDIUM
    assert RiskLevel.for_count(3) == RiskLevel.HIGH


def test_unknown_platform_does_not_suppress_other_checks():
    result = ENGINE.check("this is a scam.", "myspace")
    types = [v.violation_type for v in result.violations]
    assert types.count(ViolationType.PLATFORM_ERROR) == 1
    assert types == [ViolationType.INAPPROPRIATE, ViolationType.PLATFORM_ERROR]


def test_checker_order_preserved():
    result = ENGINE.check("Buy now! this is a scam", "linkedin")
    assert [v.violation_type for v in result.violations] == [
        ViolationType.INAPPROPRIATE,
        ViolationType.HASHTAG,
        ViolationType.AGGRESSIVE_SALES,
    ]


def test_extra_phrases():
    engine = ComplianceEngine(
        extra_phrases=[PhraseEntry("double your money", ViolationType.FINANCIAL)]
    )
    [v] = engine.check("Double your money today", "twitter").violations
    assert v.violation_type == ViolationType.FINANCIAL
    assert ENGINE.check("Double your money today", "twitter").is_compliant


def test_shared_engine_across_threads():
    contents = ["this is a scam.", "Just a normal update.", "GUARANTEED 500% returns! Invest now!"] * 20
    expected = [ENGINE.check(c, "twitter") for c in contents]
    with ThreadPoolExecutor(max_workers=8) as pool:
        actual = list(pool.map(lambda c: ENGINE.check(c, "twitter"), contents))
    assert actual == expected


def test_violation_stats():
    result = ENGINE.check("scam, fraud! Buy now", "twitter")
    assert violation_stats(result.violations) == {
        "Inappropriate Content": 2,
        "Aggressive Sales": 1,
    }


def test_result_to_dict_uses_labels():
    data = ENGINE.check("this is a scam.", "twitter").to_dict()
    assert data["isCompliant"] is False
    assert data["riskLevel"] == "Medium"
    assert data["violations"] == [
        {
            "phrase": "scam",
            "type": "Inappropriate Content",
            "position": 10,
            "wordPosition": "Word 4",
            "originalPhrase": "scam",
        }
    ]


# --- Highlighter ---


def test_highlight_single():
    content = "this is a scam."
    result = ENGINE.check(content, "twitter")
    assert highlight(content, result.violations) == (
        'this is a <span class="violation-inappropriate" '
        'title="Inappropriate Content">scam</span>.'
    )


def test_highlight_multiple_right_to_left():
    content = "scam and fraud"
    result = ENGINE.check(content, "twitter")
    span = '<span class="violation-inappropriate" title="Inappropriate Content">{}</span>'
    assert highlight(content, result.violations) == f"{span.format('scam')} and {span.format('fraud')}"


def test_highlight_ignores_unlocatable_violations():
    content = "x" * 300
    result = ENGINE.check(content, "twitter")
    assert result.violations
    assert highlight(content, result.violations) == content
    assert highlight(content, []) == content


def test_highlight_link_uses_general_class():
    content = "go to https://bit.ly/abc"
    result = ENGINE.check(content, "twitter")
    assert highlight(content, result.violations) == (
        'go to <span class="violation-general" title="Suspicious Link">https://bit.ly/abc</span>'
    )


def test_highlight_overlap_policies():
    content = "free money back guarantee"
    violations = [
        Violation("free money", ViolationType.FINANCIAL, 0, "Words 1-2", "free money"),
        Violation("money back guarantee", ViolationType.FINANCIAL, 5, "Words 2-4", "money back guarantee"),
    ]
    span = '<span class="violation-financial" title="Financial Violation">{}</span>'

    skipped = highlight(content, violations, overlap=OVERLAP_SKIP)
    assert skipped == "free " + span.format("money back guarantee")

    spliced = highlight(content, violations)
    assert spliced.startswith(span.format("free money"))
    assert spliced != skipped


def test_highlight_invalid_overlap_policy():
    with pytest.raises(ValueError):
        highlight("text", [], overlap="merge")


def test_highlight_class_mapping():
    assert highlight_class(ViolationType.INCOME_CLAIM) == "violation-income"
    assert highlight_class(ViolationType.FORMATTING) == "violation-general"


def test_engine_highlight_uses_configured_overlap():
    engine = ComplianceEngine(highlight_overlap=OVERLAP_SKIP)
    content = "free money back guarantee"
    result = engine.check(content, "twitter")
    assert engine.highlight(content, result.violations).count("<span") == 1


def test_engine_rejects_unknown_overlap_policy():
    with pytest.raises(ValueError):
        ComplianceEngine(highlight_overlap="merge")


def test_highlight_escapes_html():
    content = "<b>scam</b> & more"
    result = ENGINE.check(content, "twitter")
    assert highlight(content, result.violations, escape=True) == (
        '&lt;b&gt;<span class="violation-inappropriate" '
        'title="Inappropriate Content">scam</span>&lt;/b&gt; &amp; more'
    )


def test_highlight_escaped_drops_overlapping_spans():
    content = "free money back guarantee"
    result = ENGINE.check(content, "twitter")
    escaped = highlight(content, result.violations, escape=True)
    assert escaped == (
        'free <span class="violation-financial" '
        'title="Financial Violation">money back guarantee</span>'
    )
