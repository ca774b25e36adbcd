"""Annotate content with ``<span>`` markers around violating text.

Only violations that record the exact original substring can be located,
so descriptive violations (length, formatting, ...) are ignored.  Spans are
spliced right-to-left so each splice leaves the offsets of the remaining,
earlier violations intact.
"""

from __future__ import annotations

import html
from typing import Iterable

from postguard.engine.models import Violation, ViolationType

OVERLAP_SPLICE = "splice"
OVERLAP_SKIP = "skip"
OVERLAP_POLICIES = (OVERLAP_SPLICE, OVERLAP_SKIP)

HIGHLIGHT_CLASSES: dict[ViolationType, str] = {
    ViolationType.FINANCIAL: "violation-financial",
    ViolationType.MISLEADING: "violation-misleading",
    ViolationType.INAPPROPRIATE: "violation-inappropriate",
    ViolationType.HEALTH: "violation-health",
    ViolationType.INVESTMENT_SCAM: "violation-investment",
    ViolationType.URGENT_CTA: "violation-urgent",
    ViolationType.UNREALISTIC_GUARANTEE: "violation-guarantee",
    ViolationType.INCOME_CLAIM: "violation-income",
    ViolationType.PRESSURE_TACTIC: "violation-pressure",
    ViolationType.AGGRESSIVE_SALES: "violation-sales",
}
DEFAULT_HIGHLIGHT_CLASS = "violation-general"


def highlight_class(violation_type: ViolationType) -> str:
    return HIGHLIGHT_CLASSES.get(violation_type, DEFAULT_HIGHLIGHT_CLASS)


def _span(v: Violation, inner: str) -> str:
    return (
        f'<span class="{highlight_class(v.violation_type)}" '
        f'title="{html.escape(v.label)}">{inner}</span>'
    )


def highlight(
    content: str,
    violations: Iterable[Violation],
    overlap: str = OVERLAP_SPLICE,
    escape: bool = False,
) -> str:
    """Return *content* with each locatable violation wrapped in a span.

    Args:
        content: The text that was checked.
        violations: Violations from a ``ComplianceResult`` for that text.
        overlap: ``"splice"`` wraps every violation even when spans
            intersect, which can nest markup incorrectly; ``"skip"`` drops
            a violation whose span intersects one already wrapped.
        escape: HTML-escape the content outside and inside the spans.
            Escaped output never nests spans, so an intersecting violation
            is dropped whatever the overlap policy.
    """
    if overlap not in OVERLAP_POLICIES:
        raise ValueError(
            f"Unknown overlap policy '{overlap}'. Expected one of: {', '.join(OVERLAP_POLICIES)}"
        )

    located = sorted(
        (v for v in violations if v.original_phrase and v.position is not None),
        key=lambda v: v.position,
        reverse=True,
    )

    if escape:
        return _highlight_escaped(content, located)

    text = content
    wrapped: list[tuple[int, int]] = []
    for v in located:
        start = v.position
        end = start + len(v.original_phrase)
        if overlap == OVERLAP_SKIP:
            if any(start < w_end and w_start < end for w_start, w_end in wrapped):
                continue
            wrapped.append((start, end))
        text = text[:start] + _span(v, v.original_phrase) + text[end:]

    return text


def _highlight_escaped(content: str, located: list[Violation]) -> str:
    # Built right-to-left; cursor is the start of the text not yet emitted.
    parts: list[str] = []
    cursor = len(content)
    for v in located:
        start = v.position
        end = start + len(v.original_phrase)
        if start < 0 or end > cursor:
            continue
        parts.append(html.escape(content[end:cursor]))
        parts.append(_span(v, html.escape(v.original_phrase)))
        cursor = start
    parts.append(html.escape(content[:cursor]))
    return "".join(reversed(parts))
