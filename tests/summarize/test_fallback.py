"""Tests for the local fallback summary."""

import pytest

from summarize.fallback import FALLBACK_WORD_LIMIT, summarize_locally


class TestSummarizeLocally:
    def test_first_sentence(self):
        assert summarize_locally("Hello world. More text.") == "Hello world."

    def test_first_seven_words(self):
        text = "one two three four five six seven eight"
        assert summarize_locally(text) == "one two three four five six seven..."

    def test_short_text_unchanged(self):
        assert summarize_locally("short text") == "short text"

    def test_exactly_limit_words_unchanged(self):
        words = " ".join(["word"] * FALLBACK_WORD_LIMIT)
        assert summarize_locally(words) == words

    def test_trims_whitespace(self):
        assert summarize_locally("  \n Walked the dog. Then rain.  ") == "Walked the dog."

    def test_collapses_whitespace_when_truncating(self):
        text = "a  b\tc\nd e f g h i"
        assert summarize_locally(text) == "a b c d e f g..."

    def test_period_wins_over_word_limit(self):
        text = "one two three four five six seven eight nine. ten"
        assert summarize_locally(text) == "one two three four five six seven eight nine."

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty(self, text):
        assert summarize_locally(text) == ""
