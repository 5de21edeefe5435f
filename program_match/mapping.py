from __future__ import annotations

"""
Mapping utilities for the program match API.

This module converts ranked :class:`~program_match.retrieval.MatchResult`
objects into the Pydantic schemas defined in
:mod:`program_match.config`, adding the display details (band labels,
time-commitment wording, related skill clusters) the results panel
shows.  All presentation logic is kept here so ``api.py`` stays small.
"""

import re
from typing import List, Optional, Sequence

from loguru import logger

from .bands import earning_label, opportunity_label
from .catalog_build import Catalog, CatalogEntry
from .config import OVERVIEW_MAX_CHARS, MatchItem, MatchResponse, ProgramSummary
from .retrieval import MatchResult

COURSES_LABEL_RE = re.compile(r"^(\d+)\s+courses?$", re.IGNORECASE)


def format_time_commitment(raw: Optional[str]) -> str:
    """
    Rewrite bare course counts ("3 courses") into the semester wording
    used across the catalog.  Any other label is returned trimmed.
    """
    if not raw:
        return ""
    trimmed = raw.strip()
    m = COURSES_LABEL_RE.match(trimmed)
    if not m:
        return trimmed
    count = int(m.group(1))
    if count <= 0:
        return trimmed
    plural = "Course" if count == 1 else "Courses"
    return f"One Semester (4 Months)/{count} {plural}"


def truncate_overview(text: str, max_chars: int = OVERVIEW_MAX_CHARS) -> str:
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 3] + "..."


def _labels(entry: CatalogEntry, catalog: Catalog) -> tuple[Optional[str], Optional[str]]:
    # Inline ids outside the ranked scale (e.g. "broad") still have a label.
    raw = catalog.program(entry.id)
    earn = earning_label(entry.earning_band) or earning_label(raw.earning_band if raw else None)
    opp = opportunity_label(entry.opportunity_band) or opportunity_label(
        raw.opportunity_band if raw else None
    )
    return earn, opp


def to_match_item(result: MatchResult, catalog: Catalog) -> MatchItem:
    entry = result.entry
    earn, opp = _labels(entry, catalog)
    return MatchItem(
        id=entry.id,
        name=entry.name,
        score=result.score,
        credential_type=entry.credential_type or None,
        overview=truncate_overview(entry.overview) or None,
        time_commitment=format_time_commitment(entry.time_label) or None,
        stack_message=entry.stack_message or None,
        earning_label=earn,
        opportunity_label=opp,
        skill_clusters=[s.name for s in catalog.skills_for_program(entry.id)],
        reasons=list(result.reasons),
    )


def to_program_summary(entry: CatalogEntry, catalog: Catalog) -> ProgramSummary:
    earn, opp = _labels(entry, catalog)
    return ProgramSummary(id=entry.id, name=entry.name, earning_label=earn, opportunity_label=opp)


def map_results_to_response(
    results: Sequence[MatchResult],
    catalog: Catalog,
    limit: Optional[int] = None,
) -> MatchResponse:
    """Convert ranked results into a full MatchResponse object."""
    if limit is not None:
        results = results[:limit]
    items: List[MatchItem] = [to_match_item(r, catalog) for r in results]
    logger.info("Mapped {} matches into API schema", len(items))
    return MatchResponse(matches=items)
