from __future__ import annotations

"""
Ranking module for the guided program match.

For a free-text query every catalog entry is scored with the keyword,
semantic and intent strategies from :mod:`program_match.scoring`, the
three signals are blended into one integer score, entries scoring zero
or less are dropped, and the rest are sorted by score.  Ties keep
catalog order.

Example::

    from program_match.catalog_build import load_catalog
    from program_match.retrieval import match

    catalog = load_catalog()
    for result in match("I enjoy numbers and bookkeeping", catalog.corpus):
        print(result.entry.name, result.score)

"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from loguru import logger

from .catalog_build import CatalogEntry
from .config import MatchWeights
from .embed_index import Corpus, cosine_similarity
from .intent import detect_intents
from .normalize import query_tokens
from .scoring import (
    DEFAULT_WEIGHTS,
    combined_score,
    intent_breakdown,
    keyword_score,
    semantic_score,
)


@dataclass(frozen=True)
class MatchResult:
    entry: CatalogEntry
    score: int
    keyword: float
    semantic: float
    intent: float
    reasons: Tuple[str, ...] = ()


def match(
    query: str,
    corpus: Corpus,
    weights: Optional[MatchWeights] = None,
) -> List[MatchResult]:
    """Rank every entry of ``corpus`` against ``query``.

    An empty or whitespace-only query, or an empty corpus, yields an
    empty list.
    """
    if weights is None:
        weights = DEFAULT_WEIGHTS
    if not query or not query.strip() or len(corpus) == 0:
        return []

    q_set = query_tokens(query)
    intents = detect_intents(query)
    q_emb = corpus.query_embedding(q_set)

    results: List[MatchResult] = []
    for entry in corpus.entries:
        kw = keyword_score(entry, query, q_set, weights)
        sem = semantic_score(cosine_similarity(q_emb, corpus.entry_embedding(entry)), weights)
        parts = intent_breakdown(entry, intents, weights)
        bonus = sum(parts.values())
        score = combined_score(kw, sem, bonus, weights)
        if score <= 0:
            continue
        reasons: List[str] = []
        if kw > 0:
            reasons.append("keywords")
        if sem > 0:
            reasons.append("similar_wording")
        reasons.extend(name for name, value in parts.items() if value > 0)
        results.append(
            MatchResult(
                entry=entry,
                score=score,
                keyword=kw,
                semantic=sem,
                intent=bonus,
                reasons=tuple(reasons),
            )
        )

    # sorted() is stable, so equal scores keep catalog order
    results = sorted(results, key=lambda r: -r.score)
    logger.info(
        "Ranked {} of {} programs (intents: {})",
        len(results), len(corpus), sorted(i.value for i in intents),
    )
    return results


if __name__ == "__main__":
    from .catalog_build import load_catalog

    q = input("Describe what you enjoy: ")
    catalog = load_catalog()
    for r in match(q, catalog.corpus):
        print(f"{r.score:>3}  {r.entry.name}  ({', '.join(r.reasons)})")
