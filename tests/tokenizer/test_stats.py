"""Tests for text statistics and punctuation predicates."""

import pytest

from rsvp_core.services.tokenizer.stats import (
    TextStats,
    count_sentences,
    extract_sentences,
    get_text_stats,
    has_punctuation,
    is_long_word,
    is_sentence_end,
)
from rsvp_core.services.tokenizer.tokenizer import parse_text


# =============================================================================
# Sentence Counting
# =============================================================================


class TestCountSentences:
    """Tests for the heuristic sentence counter."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", 0),
            ("   ", 0),
            ("Hello world", 1),
            ("Hello. World!", 2),
            ("One? Two! Three.", 3),
            ("Wait... what?!", 2),
            ("Version 2.0 is out", 1),
        ],
    )
    def test_counts(self, text, expected):
        assert count_sentences(text) == expected

    def test_abbreviations_ignored(self):
        assert count_sentences("Mr. Smith met Dr. Jones. They talked.") == 2

    def test_lowercase_abbreviation(self):
        assert count_sentences("We saw the st. louis arch.") == 1

    def test_initials_ignored(self):
        assert count_sentences("J. K. Rowling wrote books.") == 1

    def test_none(self):
        assert count_sentences(None) == 0


# =============================================================================
# Text Statistics
# =============================================================================


class TestGetTextStats:
    """Tests for get_text_stats."""

    def test_basic(self):
        assert get_text_stats("Hello world. This is a test.", wpm=300) == TextStats(
            word_count=6,
            char_count=23,
            sentence_count=2,
            avg_word_length=3.8,
            estimated_time_ms=1200,
            estimated_time_formatted="0:01",
        )

    def test_empty(self):
        assert get_text_stats("") == TextStats(
            word_count=0,
            char_count=0,
            sentence_count=0,
            avg_word_length=0.0,
            estimated_time_ms=0,
            estimated_time_formatted="0:00",
        )

    def test_word_count_matches_parse(self):
        text = "  Several   words\nacross\n\nlines here. "
        assert get_text_stats(text).word_count == len(parse_text(text))

    def test_char_count_excludes_spaces(self):
        assert get_text_stats("ab   cd\nef").char_count == 6

    def test_average_rounds_half_up(self):
        # 9 characters over 4 words = 2.25
        assert get_text_stats("a ab abc abc").avg_word_length == 2.3

    def test_time_scales_inversely_with_wpm(self):
        text = " ".join(["word"] * 300)
        slow = get_text_stats(text, wpm=300)
        fast = get_text_stats(text, wpm=600)
        assert slow.estimated_time_ms == 60_000
        assert fast.estimated_time_ms == 30_000
        assert slow.estimated_time_formatted == "1:00"

    @pytest.mark.parametrize(
        "wpm,expected_ms",
        [
            (0, 180_000),
            (-50, 180_000),
            (0.5, 360_000),
            (250.5, 719),
            ("120", 1_500),
            (None, 600),
            ("fast", 600),
            (True, 600),
            (float("nan"), 600),
        ],
    )
    def test_wpm_floor_and_fallback(self, wpm, expected_ms):
        """WPM below 1 counts as 1; non-numeric WPM falls back to 300."""
        assert get_text_stats("one two three", wpm=wpm).estimated_time_ms == expected_ms

    def test_negative_wpm_clamped_to_one(self):
        stats = get_text_stats("one two three four five six", wpm=-1)
        assert stats.estimated_time_ms == 360_000
        assert stats.estimated_time_formatted == "6:00"

    def test_hours_format(self):
        text = " ".join(["word"] * 3000)
        assert get_text_stats(text, wpm=10).estimated_time_formatted == "5:00:00"


# =============================================================================
# Predicates
# =============================================================================


class TestPredicates:
    """Tests for sentence extraction and punctuation checks."""

    def test_extract_sentences(self):
        assert extract_sentences("Hello. World! Again?") == ["Hello.", "World!", "Again?"]

    def test_extract_without_terminal(self):
        assert extract_sentences("No end") == ["No end"]

    @pytest.mark.parametrize("value", [None, ""])
    def test_extract_empty(self, value):
        assert extract_sentences(value) == []

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("extraordinary", True),
            ("abcdefgh", True),
            ("hello", False),
            ("hello!!!!", False),
            ("", False),
            (None, False),
        ],
    )
    def test_is_long_word(self, word, expected):
        assert is_long_word(word) is expected

    def test_is_long_word_custom_threshold(self):
        assert is_long_word("hello", 5)

    @pytest.mark.parametrize(
        "word,expected",
        [("end.", True), ("wow!", True), ("what?", True), ("end", False), ("end,", False), ('"quoted."', False)],
    )
    def test_is_sentence_end(self, word, expected):
        assert is_sentence_end(word) is expected

    @pytest.mark.parametrize(
        "word,expected",
        [("a,b", True), ("well-known", True), ("em—dash", True), ("wait;", True), ("plain", False), ("", False)],
    )
    def test_has_punctuation(self, word, expected):
        assert has_punctuation(word) is expected
