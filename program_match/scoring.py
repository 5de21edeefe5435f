from __future__ import annotations

"""
Per-entry scoring strategies for the guided match.

Three independent signals are computed for each catalog entry:

* a keyword score from literal skill phrases and token overlap,
* a semantic score from TF·IDF cosine similarity (see ``embed_index``),
* an intent bonus from detected preferences and the entry's bands.

:func:`combined_score` blends them into the integer match strength
shown to users.
"""

import math
import re
from typing import AbstractSet, Dict, Iterable, Optional

from .bands import band_levels
from .config import (
    DOMAIN_KEYWORDS,
    EXTRA_OVERLAP_CAP,
    EXTRA_OVERLAP_FACTOR,
    FAST_BONUS_LARGE,
    FAST_BONUS_SMALL,
    FAST_COURSES_LARGE,
    FAST_COURSES_SMALL,
    FAST_MONTHS_LARGE,
    FAST_MONTHS_SMALL,
    HOSPITALITY_MARKETING_FACTOR,
    OVERVIEW_OVERLAP_CAP,
    MatchWeights,
)
from .embed_index import document_text
from .intent import DOMAIN_INTENTS, Intent
from .normalize import contains_phrase, padded_text, phrase_needle, tokenize

DEFAULT_WEIGHTS = MatchWeights()

COURSE_COUNT_RE = re.compile(r"(\d+)\s+courses?\b")


def _overlap(tokens: Iterable[str], query_set: AbstractSet[str]) -> int:
    """Number of distinct tokens also present in the query set."""
    return len(set(tokens) & query_set)


# ---------------------------
# Keyword score
# ---------------------------

def keyword_score(
    entry,
    query: str,
    query_set: AbstractSet[str],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> float:
    if not query or not query.strip():
        return 0.0
    q_lower = query.lower()
    score = 0.0

    for skill in entry.skills:
        phrase = skill.lower().strip()
        if phrase and phrase in q_lower:
            score += weights.skill_phrase
            continue
        hits = _overlap(tokenize(skill), query_set)
        if hits:
            score += 1 + hits

    name_hits = _overlap(tokenize(entry.name), query_set)
    if name_hits:
        score += 1 + name_hits

    score += min(OVERVIEW_OVERLAP_CAP, _overlap(tokenize(entry.overview), query_set))

    extra_parts = [entry.tagline, entry.employment_summary]
    for course in entry.courses:
        extra_parts.extend((course.title, course.note))
    extra_hits = _overlap(tokenize(" ".join(p for p in extra_parts if p)), query_set)
    score += min(EXTRA_OVERLAP_CAP, extra_hits * EXTRA_OVERLAP_FACTOR)

    return score


# ---------------------------
# Intent score
# ---------------------------

def course_block(label: str) -> Optional[str]:
    """Classify a time-commitment label as a ``"minimal"`` or ``"mid"`` block."""
    text = (label or "").lower()
    m = COURSE_COUNT_RE.search(text)
    if m:
        count = int(m.group(1))
        if count <= FAST_COURSES_LARGE:
            return "minimal"
        if count <= FAST_COURSES_SMALL:
            return "mid"
        return None
    if "one semester" in text or "1 semester" in text:
        return "minimal"
    if "two semesters" in text or "2 semesters" in text:
        return "mid"
    return None


def fast_completion_bonus(entry) -> float:
    months = entry.approx_months
    block = course_block(entry.time_label)
    if (months is not None and months <= FAST_MONTHS_LARGE) or block == "minimal":
        return FAST_BONUS_LARGE
    if (months is not None and months <= FAST_MONTHS_SMALL) or block == "mid":
        return FAST_BONUS_SMALL
    return 0.0


DOMAIN_NEEDLES = {
    intent: [phrase_needle(k) for k in DOMAIN_KEYWORDS[intent.value]]
    for intent in DOMAIN_INTENTS
}


def domain_matches(entry) -> frozenset:
    """Domain intents whose keyword family occurs in the entry's combined text."""
    text = padded_text(document_text(entry))
    return frozenset(
        intent for intent in DOMAIN_INTENTS
        if contains_phrase(text, DOMAIN_NEEDLES[intent])
    )


def intent_breakdown(
    entry,
    intents: AbstractSet[Intent],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> Dict[str, float]:
    """Contribution of each intent rule to an entry's bonus, keyed by reason."""
    earning, opportunity = band_levels(entry)
    parts: Dict[str, float] = {}

    if not intents:
        parts["earning"] = weights.band_baseline * earning
        parts["opportunity"] = weights.band_baseline * opportunity
        return parts

    if Intent.FAST_COMPLETION in intents:
        parts[Intent.FAST_COMPLETION.value] = fast_completion_bonus(entry)

    matched = domain_matches(entry)
    for intent in DOMAIN_INTENTS:
        if intent in intents and intent in matched:
            bonus = weights.domain_intent
            if intent is Intent.MARKETING and entry.hospitality_oriented:
                bonus *= HOSPITALITY_MARKETING_FACTOR
            parts[intent.value] = bonus

    earn_w = weights.band_preference if Intent.HIGH_EARNINGS in intents else weights.band_baseline
    opp_w = weights.band_preference if Intent.STRONG_DEMAND in intents else weights.band_baseline
    parts["earning"] = earn_w * earning
    parts["opportunity"] = opp_w * opportunity
    return parts


def intent_bonus(
    entry,
    intents: AbstractSet[Intent],
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> float:
    return sum(intent_breakdown(entry, intents, weights).values())


# ---------------------------
# Blend
# ---------------------------

def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def semantic_score(similarity: float, weights: MatchWeights = DEFAULT_WEIGHTS) -> float:
    return similarity * weights.semantic_scale


def combined_score(
    keyword: float,
    semantic: float,
    intent: float,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> int:
    return round_half_up(
        keyword * weights.keyword + semantic * weights.semantic + intent * weights.intent
    )
