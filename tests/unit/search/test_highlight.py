"""Unit tests for query word highlighting."""

import pytest

from facet_search.search.highlight import highlight_terms


@pytest.mark.unit
class TestHighlightTerms:
    """Tests for highlight_terms."""

    def test_wraps_case_insensitive_matches_keeping_original_case(self):
        result = highlight_terms("Go is fun. go go!", ["go"])

        assert result == "<mark>Go</mark> is fun. <mark>go</mark> <mark>go</mark>!"

    def test_no_match_returns_text_unchanged(self):
        text = "nothing to see"

        assert highlight_terms(text, ["missing"]) == text

    def test_empty_inputs(self):
        assert highlight_terms("", ["go"]) == ""
        assert highlight_terms("text", []) == "text"

    def test_regex_metacharacters_are_escaped(self):
        result = highlight_terms("Learn C++ and C# (fast)", ["c++", "(fast)"])

        assert result == "Learn <mark>C++</mark> and C# <mark>(fast)</mark>"

    def test_substring_matches_are_highlighted(self):
        assert highlight_terms("Google", ["go"]) == "<mark>Go</mark>ogle"

    def test_multiple_words_are_highlighted(self):
        result = highlight_terms("Rust ownership model", ["rust", "model"])

        assert result == "<mark>Rust</mark> ownership <mark>model</mark>"

    def test_custom_tag(self):
        assert highlight_terms("hello", ["hello"], tag="em") == "<em>hello</em>"

    def test_inserted_markup_is_not_highlighted_again(self):
        result = highlight_terms("go mark", ["go", "mark"])

        assert result == "<mark>go</mark> <mark>mark</mark>"

    def test_longer_word_wins_over_its_prefix(self):
        assert highlight_terms("golang", ["go", "golang"]) == "<mark>golang</mark>"

    def test_repeated_words_wrap_once(self):
        assert highlight_terms("rust", ["rust", "rust"]) == "<mark>rust</mark>"
