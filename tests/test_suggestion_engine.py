# tests/test_suggestion_engine.py

from dictionary_index.core.suggestion_engine import SuggestionEngine, suggest


def test_prefix_matches_first(make_index):
    idx = make_index(["apple", "app", "application", "banana"])
    assert suggest(idx, "app") == ["app", "apple", "application"]


def test_fallback_to_first_words(make_index):
    idx = make_index(["banana", "cherry"])
    assert suggest(idx, "xyz") == ["banana", "cherry"]


def test_fallback_is_capped(make_index):
    idx = make_index([f"w{i:02d}" for i in range(30)])
    out = SuggestionEngine(limit=10).suggest(idx, "nothing")
    assert out == [f"w{i:02d}" for i in range(10)]


def test_empty_dictionary(make_index):
    assert suggest(make_index(), "abc") == []


def test_query_is_normalized(make_index):
    idx = make_index(["apple", "banana"])
    assert suggest(idx, "  APP ") == ["apple"]


def test_explicit_limit_overrides_default(make_index):
    idx = make_index(["aa", "ab", "ac"])
    assert SuggestionEngine(limit=10).suggest(idx, "a", limit=2) == ["aa", "ab"]
