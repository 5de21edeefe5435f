from pathlib import Path

import pytest

from program_match import api
from program_match.catalog_build import Program, build_entries, load_catalog
from program_match.embed_index import Corpus

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def make_program(pid: str, name: str, **fields) -> Program:
    return Program(id=pid, name=name, **fields)


def make_corpus(*programs: Program, bands=()) -> Corpus:
    return Corpus(build_entries(programs, bands))


@pytest.fixture
def sample_catalog():
    return load_catalog(DATA_DIR)


@pytest.fixture
def loaded_api(sample_catalog):
    api.set_catalog(sample_catalog)
    yield sample_catalog
    api.set_catalog(None)
