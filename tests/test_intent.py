from program_match.intent import Intent, detect_intents

SCENARIO = (
    "I like working with people in hotels, events, and social media, "
    "and want to start working soon"
)


def test_scenario_intents():
    assert detect_intents(SCENARIO) == {
        Intent.HOSPITALITY,
        Intent.MARKETING,
        Intent.FAST_COMPLETION,
    }


def test_preference_intents():
    assert detect_intents("I want a well-paid job with job security") == {
        Intent.HIGH_EARNINGS,
        Intent.STRONG_DEMAND,
    }


def test_empty_text_has_no_intents():
    assert detect_intents("") == frozenset()
    assert detect_intents("   ") == frozenset()


def test_padded_patterns_match_at_edges_only():
    assert Intent.HUMAN_RESOURCES in detect_intents("HR")
    assert Intent.HUMAN_RESOURCES not in detect_intents("three chairs")


def test_intents_are_case_insensitive():
    assert Intent.FINANCE in detect_intents("ACCOUNTING and Bookkeeping")


def test_stems_only_match_at_word_start():
    assert Intent.HIGH_EARNINGS not in detect_intents("I want to learn bookkeeping")
    assert Intent.FAST_COMPLETION not in detect_intents("I enjoy serving breakfast to hotel guests")
    assert Intent.HIGH_EARNINGS in detect_intents("strong earnings matter to me")
    assert Intent.FAST_COMPLETION in detect_intents("something faster than a degree")


def test_punctuation_does_not_block_whole_word_triggers():
    assert Intent.HUMAN_RESOURCES in detect_intents("HR, payroll and people")
    assert Intent.HUMAN_RESOURCES in detect_intents("I'd like to work in HR.")
    assert Intent.HUMAN_RESOURCES not in detect_intents("HRM systems")
