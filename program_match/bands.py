from __future__ import annotations

"""
Earning and opportunity band lookups.

Two vocabularies describe the same ordinal scale: the hyphenated ids
carried by program band links (``earning-strong``) and the underscore
ids carried inline on programs (``medium_high``).  Resolution happens
once while the catalog is ingested so scoring only ever sees an
ordinal level in ``0..4``, where 0 means "no band information".
"""

from typing import Dict, Optional, Tuple

from .config import (
    EARNING_BAND_LABELS,
    INLINE_EARNING_LEVELS,
    INLINE_OPPORTUNITY_LEVELS,
    LINK_EARNING_LEVELS,
    LINK_OPPORTUNITY_LEVELS,
    OPPORTUNITY_BAND_LABELS,
)


def resolve_band(
    link_id: Optional[str],
    inline_id: Optional[str],
    link_table: Dict[str, int],
    inline_table: Dict[str, int],
) -> Tuple[Optional[str], int]:
    """Return ``(band_id, level)`` for one axis.

    The band-link id wins when present and recognised, then the inline
    id; anything else resolves to ``(None, 0)``.
    """
    if link_id and link_id in link_table:
        return link_id, link_table[link_id]
    if inline_id and inline_id in inline_table:
        return inline_id, inline_table[inline_id]
    return None, 0


def resolve_earning(link_id: Optional[str], inline_id: Optional[str]) -> Tuple[Optional[str], int]:
    return resolve_band(link_id, inline_id, LINK_EARNING_LEVELS, INLINE_EARNING_LEVELS)


def resolve_opportunity(link_id: Optional[str], inline_id: Optional[str]) -> Tuple[Optional[str], int]:
    return resolve_band(link_id, inline_id, LINK_OPPORTUNITY_LEVELS, INLINE_OPPORTUNITY_LEVELS)


def band_levels(entry) -> Tuple[int, int]:
    """Ordinal ``(earning, opportunity)`` levels of a catalog entry."""
    return entry.earning_level, entry.opportunity_level


def earning_label(band_id: Optional[str]) -> Optional[str]:
    if not band_id:
        return None
    return EARNING_BAND_LABELS.get(band_id)


def opportunity_label(band_id: Optional[str]) -> Optional[str]:
    if not band_id:
        return None
    return OPPORTUNITY_BAND_LABELS.get(band_id)
