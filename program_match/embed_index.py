from __future__ import annotations

"""
Local TF·IDF index over the program catalog.

Each catalog entry becomes one document (name, tagline, overview,
employment summary, region, skills and course titles/notes).  Inverse
document frequencies are computed once over the whole corpus and then
used to turn any token list into a sparse weighted vector.  Similarity
between a query and an entry is the cosine of their vectors.

No trained model is involved: terms the catalog never uses simply carry
no weight.
"""

import math
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, List, Mapping, Optional, Sequence

from loguru import logger

from .normalize import tokenize

if TYPE_CHECKING:
    from .catalog_build import CatalogEntry


@dataclass(frozen=True)
class Embedding:
    weights: Mapping[str, float]
    norm: float


EMPTY_EMBEDDING = Embedding(weights={}, norm=0.0)


# -----------------------------------------------------------------------------
# Documents & IDF
# -----------------------------------------------------------------------------

def document_text(entry: "CatalogEntry") -> str:
    """Join every searchable field of an entry into one document string."""
    parts: List[str] = [
        entry.name,
        entry.tagline,
        entry.overview,
        entry.employment_summary,
        entry.region,
    ]
    parts.extend(entry.skills)
    for course in entry.courses:
        parts.append(course.title)
        parts.append(course.note)
    return " . ".join(p for p in parts if p)


def document_tokens(entry: "CatalogEntry") -> List[str]:
    return tokenize(document_text(entry))


def compute_idf(documents: Iterable[Sequence[str]]) -> Dict[str, float]:
    """
    ``idf(t) = ln(1 + N / (1 + df(t)))`` over tokenised documents.

    A term counts once per document for document frequency.
    """
    doc_freq: Dict[str, int] = {}
    total = 0
    for tokens in documents:
        total += 1
        for term in set(tokens):
            doc_freq[term] = doc_freq.get(term, 0) + 1
    return {term: math.log(1.0 + total / (1.0 + df)) for term, df in doc_freq.items()}


# -----------------------------------------------------------------------------
# Embeddings & similarity
# -----------------------------------------------------------------------------

def build_embedding(tokens: Iterable[str], idf: Mapping[str, float]) -> Embedding:
    """
    Sparse TF·IDF vector: each occurrence of a known term adds its IDF
    weight once.  Unknown terms are skipped.
    """
    weights: Dict[str, float] = {}
    for tok in tokens:
        w = idf.get(tok)
        if w is None:
            continue
        weights[tok] = weights.get(tok, 0.0) + w
    if not weights:
        return EMPTY_EMBEDDING
    norm = math.sqrt(sum(v * v for v in weights.values()))
    return Embedding(weights=weights, norm=norm)


def cosine_similarity(a: Embedding, b: Embedding) -> float:
    """Cosine of two sparse vectors; 0 when either has no weight."""
    if a.norm == 0.0 or b.norm == 0.0:
        return 0.0
    small, large = (a.weights, b.weights) if len(a.weights) <= len(b.weights) else (b.weights, a.weights)
    dot = 0.0
    for term, w in small.items():
        other = large.get(term)
        if other is not None:
            dot += w * other
    return dot / (a.norm * b.norm)


# -----------------------------------------------------------------------------
# Corpus
# -----------------------------------------------------------------------------

@dataclass
class Corpus:
    """
    The immutable set of catalog entries plus the statistics derived
    from it.

    The IDF table is built on the first request and never rebuilt; the
    entries are never mutated after construction, so the cached values
    stay valid for the life of the object.  Entry embeddings are cached
    by entry id.  Query embeddings are never cached.
    """

    entries: Sequence["CatalogEntry"]
    _idf: Optional[Dict[str, float]] = field(default=None, init=False, repr=False)
    _embeddings: Dict[str, Embedding] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def __post_init__(self) -> None:
        self.entries = tuple(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def idf_built(self) -> bool:
        return self._idf is not None

    @property
    def idf(self) -> Mapping[str, float]:
        if self._idf is None:
            with self._lock:
                if self._idf is None:
                    self._idf = compute_idf(document_tokens(e) for e in self.entries)
                    logger.info(
                        "Built IDF table: {} terms over {} documents",
                        len(self._idf), len(self.entries),
                    )
        return self._idf

    def entry_embedding(self, entry: "CatalogEntry") -> Embedding:
        cached = self._embeddings.get(entry.id)
        if cached is not None:
            return cached
        emb = build_embedding(document_tokens(entry), self.idf)
        # Deterministic per entry; concurrent fills store equal values.
        self._embeddings[entry.id] = emb
        return emb

    def query_embedding(self, tokens: Iterable[str]) -> Embedding:
        return build_embedding(tokens, self.idf)
