"""Built-in banned phrase table."""

from __future__ import annotations

from postguard.engine.models import ViolationType
from postguard.engine.trie import PhraseEntry

# Financial / scam wording
_FINANCIAL = [
    "free money", "get rich quick", "guaranteed profit", "easy money",
    "make money fast", "no risk investment", "instant cash", "free cash",
    "money back guarantee", "risk free", "guaranteed returns", "quick cash",
    "invest now",
]

# Fake or misleading offers
_MISLEADING = [
    "fake offer", "limited time only", "act now", "urgent",
    "this is not a scam", "too good to be true", "exclusive deal",
    "secret method", "doctors hate this", "one weird trick",
]

_INAPPROPRIATE = [
    "abuse", "hate", "discrimination", "harassment", "bullying",
    "violence", "threat", "spam", "scam", "fraud",
]

# Health / medical misinformation
_HEALTH = [
    "miracle cure", "instant weight loss", "lose weight overnight",
    "cure cancer", "fda approved", "doctor recommended", "medical breakthrough",
    "secret formula", "ancient remedy",
]

# Crypto / investment schemes
_INVESTMENT = [
    "crypto giveaway", "bitcoin doubler", "investment opportunity",
    "ponzi scheme", "pyramid scheme", "mlm opportunity", "passive income guaranteed",
]

DEFAULT_PHRASES: tuple[PhraseEntry, ...] = tuple(
    PhraseEntry(phrase, vtype)
    for phrases, vtype in [
        (_FINANCIAL, ViolationType.FINANCIAL),
        (_MISLEADING, ViolationType.MISLEADING),
        (_INAPPROPRIATE, ViolationType.INAPPROPRIATE),
        (_HEALTH, ViolationType.HEALTH),
        (_INVESTMENT, ViolationType.INVESTMENT_SCAM),
    ]
    for phrase in phrases
)
