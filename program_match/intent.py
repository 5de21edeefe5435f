from __future__ import annotations

"""
Rule-based intent detection over free-text queries.

An intent is present when any of its trigger phrases starts at a word
boundary of the normalized query.  Intents are not exclusive and carry
no rank.
"""

from enum import Enum
from typing import Dict, FrozenSet, List

from .config import INTENT_PATTERNS
from .normalize import contains_phrase, padded_text, phrase_needle


class Intent(str, Enum):
    FAST_COMPLETION = "fast_completion"
    MANAGEMENT = "management"
    MARKETING = "marketing"
    FINANCE = "finance"
    DATA = "data"
    HOSPITALITY = "hospitality"
    HUMAN_RESOURCES = "human_resources"
    SMALL_BUSINESS = "small_business"
    STRONG_DEMAND = "strong_demand"
    HIGH_EARNINGS = "high_earnings"


# Intents that reward a domain match in the entry text.
DOMAIN_INTENTS = (
    Intent.MANAGEMENT,
    Intent.MARKETING,
    Intent.FINANCE,
    Intent.DATA,
    Intent.HOSPITALITY,
    Intent.HUMAN_RESOURCES,
    Intent.SMALL_BUSINESS,
)

PATTERNS: Dict[Intent, List[str]] = {
    Intent(k): [phrase_needle(p) for p in v] for k, v in INTENT_PATTERNS.items()
}


def detect_intents(text: str) -> FrozenSet[Intent]:
    padded = padded_text(text)
    if not padded.strip():
        return frozenset()
    return frozenset(
        intent for intent, needles in PATTERNS.items()
        if contains_phrase(padded, needles)
    )
