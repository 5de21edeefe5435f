import pytest
from fastapi.testclient import TestClient

from program_match import api


@pytest.fixture
def client(loaded_api):
    with TestClient(api.app) as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_match_endpoint(client):
    resp = client.post("/match", json={"query": "accounting and bookkeeping"})
    assert resp.status_code == 200
    matches = resp.json()["matches"]
    assert matches[0]["id"] == "accounting-certificate"
    assert matches[0]["score"] > 0


def test_match_blank_query_is_empty_not_error(client):
    resp = client.post("/match", json={"query": "   "})
    assert resp.status_code == 200
    assert resp.json() == {"matches": []}


def test_match_limit(client):
    resp = client.post("/match", json={"query": "business management and data", "limit": 1})
    assert resp.status_code == 200
    assert len(resp.json()["matches"]) == 1


def test_programs_by_earning_band(client):
    resp = client.get("/programs/earning/earning-strong")
    assert resp.status_code == 200
    body = resp.json()
    assert [p["id"] for p in body] == ["business-admin-diploma"]
    assert body[0]["earning_label"] == "Medium to high ($28-35+/hr)"


def test_unknown_earning_band_is_404(client):
    assert client.get("/programs/earning/bogus").status_code == 404


def test_catalog_not_loaded_is_500():
    api.set_catalog(None)
    c = TestClient(api.app)
    resp = c.post("/match", json={"query": "accounting"})
    assert resp.status_code == 500
