from program_match.normalize import (
    contains_phrase,
    expand_synonyms,
    normalize_text,
    padded_text,
    phrase_needle,
    query_tokens,
    tokenize,
)


def test_normalize_text_strips_punctuation_and_whitespace():
    assert normalize_text("  Hello,   WORLD!!\n") == "hello world"
    assert normalize_text("social-media & events") == "social media events"


def test_tokenize_drops_stopwords_and_keeps_duplicates():
    assert tokenize("The Art of Accounting and Finance") == ["art", "accounting", "finance"]
    assert tokenize("data, data and more data") == ["data", "data", "more", "data"]


def test_tokenize_empty_input():
    assert tokenize("") == []
    assert tokenize("   ") == []
    assert tokenize("the and of") == []


def test_expand_synonyms_adds_without_replacing():
    expanded = expand_synonyms(["client"])
    assert "client" in expanded
    assert "customer" in expanded


def test_expand_synonyms_unknown_token_passes_through():
    assert expand_synonyms(["zebra", "zebra"]) == {"zebra"}


def test_query_tokens_widens_user_text():
    tokens = query_tokens("Clients at hotels")
    assert {"clients", "hotels", "customer", "hospitality"} <= tokens
    assert "at" not in tokens


def test_phrase_needles_anchor_at_word_start():
    padded = padded_text("Learn payroll, HR.")
    assert padded == " learn payroll hr "
    assert contains_phrase(padded, [phrase_needle("hr ")])
    assert contains_phrase(padded, [phrase_needle("pay")])
    assert not contains_phrase(padded, [phrase_needle("earn")])
    assert not contains_phrase(padded, [phrase_needle("roll")])
