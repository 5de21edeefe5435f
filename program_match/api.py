from __future__ import annotations

"""
FastAPI application for the guided program match.

- Loads the static catalog once at startup
- ``POST /match`` ranks programs for a free-text description
- ``GET /programs/earning/{band_id}`` lists programs in an earning band
- A blank description is a valid request and returns no matches
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel, Field

from .bands import earning_label
from .catalog_build import Catalog, load_catalog
from .config import (
    DATA_DIR,
    DEFAULT_RESULT_LIMIT,
    HealthResponse,
    MatchResponse,
    ProgramSummary,
)
from .mapping import map_results_to_response, to_program_summary
from .retrieval import MatchResult, match

app = FastAPI()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_catalog: Optional[Catalog] = None


def set_catalog(catalog: Optional[Catalog]) -> None:
    global _catalog
    _catalog = catalog


def get_catalog() -> Catalog:
    if _catalog is None:
        raise HTTPException(status_code=500, detail="Catalog not loaded")
    return _catalog


@app.on_event("startup")
def startup_event() -> None:
    if _catalog is not None:
        logger.info("Catalog already loaded with {} programs", len(_catalog.corpus))
        return
    logger.info("Starting app warmup...")
    set_catalog(load_catalog(DATA_DIR))
    # Build the IDF table now rather than on the first request.
    _ = get_catalog().corpus.idf
    logger.info("Warmup complete.")


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="healthy")


class MatchRequest(BaseModel):
    query: str = ""
    limit: Optional[int] = Field(default=None, ge=1)


@app.post("/match", response_model=MatchResponse)
def match_programs(req: MatchRequest) -> MatchResponse:
    catalog = get_catalog()
    results = match(req.query, catalog.corpus)
    return map_results_to_response(results, catalog, limit=req.limit or DEFAULT_RESULT_LIMIT)


@app.get("/programs/earning/{band_id}", response_model=List[ProgramSummary])
def programs_by_earning(band_id: str) -> List[ProgramSummary]:
    if earning_label(band_id) is None:
        raise HTTPException(status_code=404, detail=f"Unknown earning band '{band_id}'")
    catalog = get_catalog()
    return [to_program_summary(e, catalog) for e in catalog.programs_for_earning_band(band_id)]


# =============================================================================
# CLI convenience
# =============================================================================

def match_single_query(query: str) -> List[MatchResult]:
    if _catalog is None:
        set_catalog(load_catalog(DATA_DIR))
    return match(query, get_catalog().corpus)
