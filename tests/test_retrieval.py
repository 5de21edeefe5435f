from conftest import make_corpus, make_program
from program_match import normalize
from program_match.config import MatchWeights
from program_match.embed_index import Corpus
from program_match.intent import detect_intents
from program_match.retrieval import match
from program_match.scoring import intent_breakdown, keyword_score

SCENARIO = (
    "I like working with people in hotels, events, and social media, "
    "and want to start working soon"
)


def _scenario_corpus():
    hosp = make_program(
        "hospitality-events",
        "Hospitality and Events Certificate",
        overview="Hotel front desk, guest service and event marketing.",
        skills=["guest service", "event planning"],
        time_commitment={"label": "Two semesters", "approx_months": 10},
    )
    mkt = make_program(
        "marketing",
        "Marketing Certificate",
        overview="Social media campaigns, advertising and brand building.",
        skills=["social media", "digital marketing"],
        time_commitment={"label": "Four semesters", "approx_months": 20},
    )
    return make_corpus(hosp, mkt)


def test_scenario_hospitality_and_marketing():
    corpus = _scenario_corpus()
    hosp, mkt = corpus.entries
    results = {r.entry.id: r for r in match(SCENARIO, corpus)}
    assert results["hospitality-events"].score > 0
    assert results["marketing"].score > 0

    intents = detect_intents(SCENARIO)
    hosp_parts = intent_breakdown(hosp, intents)
    mkt_parts = intent_breakdown(mkt, intents)
    assert hosp_parts["fast_completion"] == 3.0
    assert mkt_parts["fast_completion"] == 0.0
    assert mkt_parts["marketing"] == 2 * hosp_parts["marketing"]
    assert "marketing" in results["marketing"].reasons
    assert "hospitality" in results["hospitality-events"].reasons


def test_literal_accounting_skill_scenario():
    corpus = make_corpus(make_program("acc", "Ledger Studies", skills=["accounting"]))
    entry = corpus.entries[0]
    query = "accounting and bookkeeping"
    assert keyword_score(entry, query, normalize.query_tokens(query)) == 4.0
    results = match(query, corpus)
    assert [r.entry.id for r in results] == ["acc"]
    assert results[0].keyword == 4.0


def test_match_is_deterministic(sample_catalog):
    first = [(r.entry.id, r.score) for r in match(SCENARIO, sample_catalog.corpus)]
    second = [(r.entry.id, r.score) for r in match(SCENARIO, sample_catalog.corpus)]
    assert first
    assert first == second


def test_blank_query_returns_nothing(sample_catalog):
    assert match("", sample_catalog.corpus) == []
    assert match("   ", sample_catalog.corpus) == []


def test_empty_corpus_returns_nothing():
    assert match("accounting and bookkeeping", Corpus([])) == []


def test_synonym_recall(monkeypatch):
    corpus = make_corpus(make_program("front", "Frontline Certificate", skills=["customer care"]))
    results = match("client", corpus)
    assert [r.entry.id for r in results] == ["front"]
    assert results[0].score > 0

    monkeypatch.delitem(normalize.SYNONYM_MAP, "client")
    assert match("client", make_corpus(make_program("front", "Frontline Certificate", skills=["customer care"]))) == []


def test_zero_scores_are_dropped():
    corpus = make_corpus(
        make_program("acc", "Accounting Certificate", skills=["accounting"]),
        make_program("weld", "Welding Foundation"),
    )
    assert [r.entry.id for r in match("accounting", corpus)] == ["acc"]


def test_ties_keep_catalog_order():
    a = make_program("a", "Accounting Certificate", skills=["accounting"])
    b = make_program("b", "Accounting Certificate", skills=["accounting"])
    forward = match("accounting", make_corpus(a, b))
    backward = match("accounting", make_corpus(b, a))
    assert forward[0].score == forward[1].score
    assert [r.entry.id for r in forward] == ["a", "b"]
    assert [r.entry.id for r in backward] == ["b", "a"]


def test_results_sorted_by_score(sample_catalog):
    results = match("accounting and bookkeeping", sample_catalog.corpus)
    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True)
    assert results[0].entry.id == "accounting-certificate"


def test_zero_weights_match_nothing(sample_catalog):
    weights = MatchWeights(keyword=0, semantic=0, intent=0)
    assert match(SCENARIO, sample_catalog.corpus, weights) == []
