"""Stateless formatting and link heuristics.

These run for every platform:

- more than 30% upper-case letters in content longer than 20 characters
- more than three exclamation marks
- http(s) links pointing at URL shorteners or carrying bait keywords
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from postguard.engine.models import Violation, ViolationType

CAPS_RATIO_THRESHOLD = 0.3
CAPS_MIN_LENGTH = 20
MAX_EXCLAMATIONS = 3

SUSPICIOUS_DOMAINS = ("bit.ly", "tinyurl.com", "goo.gl", "t.co")
SUSPICIOUS_KEYWORDS = ("free", "money", "cash", "prize", "winner")

_URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)
_UPPER_PATTERN = re.compile(r"[A-Z]")


def caps_ratio(content: str) -> float:
    """Share of ASCII upper-case letters in *content*; 0.0 when empty."""
    if not content:
        return 0.0
    return len(_UPPER_PATTERN.findall(content)) / len(content)


def is_suspicious_url(url: str) -> bool:
    try:
        host = (urlsplit(url).hostname or "").lower()
    except ValueError:
        host = ""
    if any(host == d or host.endswith("." + d) for d in SUSPICIOUS_DOMAINS):
        return True
    lowered = url.lower()
    return any(k in lowered for k in SUSPICIOUS_KEYWORDS)


class HeuristicAnalyzer:
    def evaluate_all(self, content: str) -> list[Violation]:
        violations: list[Violation] = []

        if caps_ratio(content) > CAPS_RATIO_THRESHOLD and len(content) > CAPS_MIN_LENGTH:
            violations.append(
                Violation("Excessive capitalization detected", ViolationType.FORMATTING, 0)
            )

        if content.count("!") > MAX_EXCLAMATIONS:
            violations.append(
                Violation(
                    "Too many exclamation marks",
                    ViolationType.FORMATTING,
                    content.index("!"),
                )
            )

        for match in _URL_PATTERN.finditer(content):
            url = match.group(0)
            if is_suspicious_url(url):
                violations.append(
                    Violation(
                        url,
                        ViolationType.SUSPICIOUS_LINK,
                        match.start(),
                        original_phrase=url,
                    )
                )

        return violations
