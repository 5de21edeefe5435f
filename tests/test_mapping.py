from program_match.bands import earning_label, opportunity_label
from program_match.mapping import (
    format_time_commitment,
    map_results_to_response,
    to_program_summary,
    truncate_overview,
)
from program_match.retrieval import match


def test_format_time_commitment():
    assert format_time_commitment("3 courses") == "One Semester (4 Months)/3 Courses"
    assert format_time_commitment(" 1 Course ") == "One Semester (4 Months)/1 Course"
    assert format_time_commitment("Two semesters") == "Two semesters"
    assert format_time_commitment("0 courses") == "0 courses"
    assert format_time_commitment(None) == ""


def test_truncate_overview():
    assert truncate_overview("short") == "short"
    long = "x" * 300
    out = truncate_overview(long)
    assert len(out) == 220
    assert out.endswith("...")


def test_band_labels_cover_both_vocabularies():
    assert earning_label("earning-strong") == "Medium to high ($28-35+/hr)"
    assert earning_label("medium_high") == "Medium to high ($28-35+ /hr approx.)"
    assert opportunity_label("opportunity-limited") == "Some opportunities in the region"
    assert opportunity_label("emerging") == "Emerging or growing area"
    assert earning_label("nope") is None
    assert opportunity_label(None) is None


def test_map_results_to_response(sample_catalog):
    results = match("accounting and bookkeeping", sample_catalog.corpus)
    response = map_results_to_response(results, sample_catalog, limit=2)
    assert 1 <= len(response.matches) <= 2
    top = response.matches[0]
    assert top.id == "accounting-certificate"
    assert top.score == results[0].score
    assert top.earning_label == "Entry to medium ($20-26/hr)"
    assert top.opportunity_label == "Very strong and stable demand"
    assert top.time_commitment == "Two semesters"
    assert top.stack_message == "Credits count toward the Business Administration Diploma."
    assert top.skill_clusters == ["Financial literacy"]
    assert "keywords" in top.reasons
    assert "finance" in top.reasons


def test_course_count_label_is_reworded_in_results(sample_catalog):
    results = match("social media and digital marketing", sample_catalog.corpus)
    items = {m.id: m for m in map_results_to_response(results, sample_catalog).matches}
    assert items["marketing-certificate"].time_commitment == "One Semester (4 Months)/3 Courses"


def test_summary_falls_back_to_inline_label(sample_catalog):
    hosp = next(e for e in sample_catalog.corpus.entries if e.id == "hospitality-tourism-certificate")
    summary = to_program_summary(hosp, sample_catalog)
    assert summary.earning_label == "Entry ($18-22/hr approx.)"
    assert summary.opportunity_label == "Broad opportunities across sectors"
