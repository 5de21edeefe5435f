from __future__ import annotations

"""
Text normalization utilities used across the program matcher.

Catalog documents and user queries go through the same cleaning and
tokenization so that term statistics line up.  Synonym expansion is
only ever applied to user queries: catalog text is matched on its own
vocabulary plus IDF weighting, while user phrasing is widened to
improve recall.
"""

import re
from typing import Iterable, List, Set

from .config import STOPWORDS, SYNONYM_MAP


# ---------------------------
# Basic helpers
# ---------------------------

NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    Lowercase, replace everything outside ``[a-z0-9]`` and whitespace
    with a space, collapse whitespace runs and strip the edges.
    """
    if not text:
        return ""
    text = NON_ALNUM_RE.sub(" ", str(text).lower())
    return WHITESPACE_RE.sub(" ", text).strip()


def padded_text(text: str) -> str:
    """Normalized text with one space on each side, for phrase lookups."""
    return f" {normalize_text(text)} "


def phrase_needle(phrase: str) -> str:
    """
    Word-anchored form of a trigger phrase for lookups in ``padded_text``.

    Phrases always start at a word boundary, so the stem ``"earn"`` hits
    "earnings" but not "learn".  A trailing space in the raw phrase pins
    the end as well: ``"hr "`` only matches the whole word.
    """
    core = normalize_text(phrase)
    return f" {core} " if phrase.endswith(" ") else f" {core}"


def contains_phrase(padded: str, needles: Iterable[str]) -> bool:
    return any(n in padded for n in needles)


# ---------------------------
# Tokenization & synonyms
# ---------------------------

def tokenize(text: str) -> List[str]:
    """
    Split normalized text on whitespace and drop stopwords.  Order and
    duplicates are preserved; the embedding builder relies on both.
    """
    normalized = normalize_text(text)
    if not normalized:
        return []
    return [tok for tok in normalized.split(" ") if tok not in STOPWORDS]


def expand_synonyms(tokens: Iterable[str]) -> Set[str]:
    """
    Return the token set augmented with every synonym the fixed table
    maps from any of the tokens.  Original tokens are kept.
    """
    expanded: Set[str] = set()
    for tok in tokens:
        expanded.add(tok)
        expanded.update(SYNONYM_MAP.get(tok, ()))
    return expanded


def query_tokens(text: str) -> Set[str]:
    """Dedicated pipeline for user queries: tokenize, then widen."""
    return expand_synonyms(tokenize(text))


if __name__ == "__main__":
    sample = "I like working with clients & guests at HOTELS -- and social-media!"
    print("NORMALIZED:", normalize_text(sample))
    print("TOKENS:", tokenize(sample))
    print("QUERY SET:", sorted(query_tokens(sample)))
