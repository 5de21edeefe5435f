from __future__ import annotations

"""
Loading and normalisation of the static program catalog.

Raw JSON records (programs, program band links, skill clusters) are
validated with Pydantic and then resolved into one canonical, immutable
:class:`CatalogEntry` per program.  Every vocabulary question (which
band id wins, whether a program is hospitality oriented) is settled
here so that the scoring code never has to branch on field conventions.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .bands import resolve_earning, resolve_opportunity
from .config import (
    DATA_DIR,
    HOSPITALITY_MARKERS,
    PROGRAM_BANDS_FILE,
    PROGRAMS_FILE,
    SKILLS_FILE,
)
from .embed_index import Corpus


# ---------------------------
# Raw records
# ---------------------------

class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Course(_Record):
    code: str
    title: Optional[str] = None
    note: Optional[str] = None


class TimeCommitment(_Record):
    label: Optional[str] = None
    approx_months: Optional[float] = Field(default=None, alias="approxMonths")


class Stackability(_Record):
    is_stackable: bool = Field(default=False, alias="isStackable")
    stack_level: Optional[int] = Field(default=None, alias="stackLevel")
    stacks_into: List[str] = Field(default_factory=list, alias="stacksInto")
    stack_message: Optional[str] = Field(default=None, alias="stackMessage")


class Program(_Record):
    id: str
    name: str
    credential_type: Optional[str] = Field(default=None, alias="credentialType")
    short_tagline: Optional[str] = Field(default=None, alias="shortTagline")
    overview: Optional[str] = None
    employment_summary: Optional[str] = Field(default=None, alias="employmentSummary")
    region: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    courses: List[Course] = Field(default_factory=list)
    time_commitment: Optional[TimeCommitment] = Field(default=None, alias="timeCommitment")
    stackability: Optional[Stackability] = None
    earning_band: Optional[str] = Field(default=None, alias="earningBand")
    opportunity_band: Optional[str] = Field(default=None, alias="opportunityBand")
    hospitality_oriented: Optional[bool] = Field(default=None, alias="hospitalityOriented")


class ProgramBand(_Record):
    program_id: str = Field(alias="programId")
    earning_band_id: Optional[str] = Field(default=None, alias="earningBandId")
    opportunity_band_id: Optional[str] = Field(default=None, alias="opportunityBandId")


class SkillCluster(_Record):
    id: str
    name: str
    description: str = ""
    program_ids: List[str] = Field(default_factory=list, alias="programIds")


# ---------------------------
# Canonical entry
# ---------------------------

@dataclass(frozen=True)
class CourseRef:
    code: str
    title: str = ""
    note: str = ""


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    name: str
    tagline: str = ""
    overview: str = ""
    employment_summary: str = ""
    region: str = ""
    credential_type: str = ""
    skills: Tuple[str, ...] = ()
    courses: Tuple[CourseRef, ...] = ()
    time_label: str = ""
    approx_months: Optional[float] = None
    is_stackable: bool = False
    stack_level: Optional[int] = None
    stack_message: str = ""
    earning_band: Optional[str] = None
    earning_level: int = 0
    opportunity_band: Optional[str] = None
    opportunity_level: int = 0
    hospitality_oriented: bool = False


def _looks_hospitality(program: Program) -> bool:
    if program.hospitality_oriented is not None:
        return program.hospitality_oriented
    text = f"{program.id} {program.name}".lower()
    return any(marker in text for marker in HOSPITALITY_MARKERS)


def to_entry(program: Program, band: Optional[ProgramBand] = None) -> CatalogEntry:
    """Resolve one raw program (and its optional band link) into a CatalogEntry."""
    earning_band, earning_level = resolve_earning(
        band.earning_band_id if band else None, program.earning_band
    )
    opportunity_band, opportunity_level = resolve_opportunity(
        band.opportunity_band_id if band else None, program.opportunity_band
    )
    if band and band.earning_band_id and earning_band != band.earning_band_id:
        logger.debug("Unrecognised earning band id {} for {}", band.earning_band_id, program.id)
    if band and band.opportunity_band_id and opportunity_band != band.opportunity_band_id:
        logger.debug("Unrecognised opportunity band id {} for {}", band.opportunity_band_id, program.id)

    tc = program.time_commitment
    st = program.stackability
    return CatalogEntry(
        id=program.id,
        name=program.name,
        tagline=program.short_tagline or "",
        overview=program.overview or "",
        employment_summary=program.employment_summary or "",
        region=program.region or "",
        credential_type=program.credential_type or "",
        skills=tuple(s for s in program.skills if s and s.strip()),
        courses=tuple(CourseRef(c.code, c.title or "", c.note or "") for c in program.courses),
        time_label=(tc.label or "") if tc else "",
        approx_months=tc.approx_months if tc else None,
        is_stackable=st.is_stackable if st else False,
        stack_level=st.stack_level if st else None,
        stack_message=(st.stack_message or "") if st else "",
        earning_band=earning_band,
        earning_level=earning_level,
        opportunity_band=opportunity_band,
        opportunity_level=opportunity_level,
        hospitality_oriented=_looks_hospitality(program),
    )


def build_entries(
    programs: Sequence[Program],
    bands: Sequence[ProgramBand] = (),
) -> List[CatalogEntry]:
    """
    Main normalisation pipeline for the program catalog.

    Catalog order is preserved; it is the tie-break order of the ranker.
    When several band links name the same program the last one wins.
    """
    band_by_program: Dict[str, ProgramBand] = {b.program_id: b for b in bands}
    entries = [to_entry(p, band_by_program.get(p.id)) for p in programs]
    logger.info("Catalog normalisation complete. Entries: {}", len(entries))
    return entries


# ---------------------------
# Catalog bundle
# ---------------------------

@dataclass
class Catalog:
    programs: List[Program]
    bands: List[ProgramBand] = field(default_factory=list)
    skill_clusters: List[SkillCluster] = field(default_factory=list)
    corpus: Corpus = field(init=False)

    def __post_init__(self) -> None:
        self.corpus = Corpus(build_entries(self.programs, self.bands))
        self._programs_by_id = {p.id: p for p in self.programs}

    def program(self, program_id: str) -> Optional[Program]:
        return self._programs_by_id.get(program_id)

    def skills_for_program(self, program_id: str) -> List[SkillCluster]:
        return [s for s in self.skill_clusters if program_id in s.program_ids]

    def programs_for_earning_band(self, band_id: str) -> List[CatalogEntry]:
        """Entries whose resolved earning band, or inline earning band, is ``band_id``."""
        out: List[CatalogEntry] = []
        for entry in self.corpus.entries:
            raw = self._programs_by_id[entry.id]
            if entry.earning_band == band_id or raw.earning_band == band_id:
                out.append(entry)
        return out


# ---------------------------
# IO helpers
# ---------------------------

def _read_json_list(path: Path, required: bool) -> List[Any]:
    if not path.exists():
        if required:
            raise FileNotFoundError(
                f"{path} not found. Place the catalog JSON files under {path.parent}."
            )
        logger.warning("Optional catalog file {} missing; using an empty list", path)
        return []
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array in {path}, got {type(data).__name__}")
    return data


def load_catalog(data_dir: Path = DATA_DIR) -> Catalog:
    """Load programs, band links and skill clusters from ``data_dir``."""
    data_dir = Path(data_dir)
    logger.info("Loading catalog from {}", data_dir)
    programs = TypeAdapter(List[Program]).validate_python(
        _read_json_list(data_dir / PROGRAMS_FILE, required=True)
    )
    bands = TypeAdapter(List[ProgramBand]).validate_python(
        _read_json_list(data_dir / PROGRAM_BANDS_FILE, required=False)
    )
    skills = TypeAdapter(List[SkillCluster]).validate_python(
        _read_json_list(data_dir / SKILLS_FILE, required=False)
    )
    logger.info(
        "Loaded {} programs, {} band links, {} skill clusters",
        len(programs), len(bands), len(skills),
    )
    return Catalog(programs=programs, bands=bands, skill_clusters=skills)
