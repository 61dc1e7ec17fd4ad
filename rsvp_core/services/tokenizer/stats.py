"""
Text statistics and punctuation predicates.

Heuristic only: sentences are counted from terminal punctuation after
stripping a fixed list of abbreviations, not detected linguistically.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, List

from .constants import LONG_WORD_THRESHOLD, PAUSE_PUNCTUATION, SENTENCE_ABBREVIATIONS, SENTENCE_ENDERS
from .timing import format_time, round_half_up
from .tokenizer import parse_text

_ABBREVIATION_PATTERN = re.compile(
    r"\b(" + "|".join(SENTENCE_ABBREVIATIONS) + r")\.",
    re.IGNORECASE,
)
# Single-letter initials like "J. K. Rowling"
_INITIAL_PATTERN = re.compile(r"\b([A-Z])\.")
_SENTENCE_END_RUN = re.compile(r"[.!?]+(?:\s|$)")
_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")
_NON_WORD_CHARS = re.compile(r"[^\w]")
_PAUSE_PUNCTUATION = re.compile("[" + re.escape(PAUSE_PUNCTUATION) + "]")


@dataclass(frozen=True)
class TextStats:
    """Reading statistics for a text.

    Attributes:
        word_count: Number of words (same split as ``parse_text``).
        char_count: Characters across all words, spaces excluded.
        sentence_count: Approximate number of sentences.
        avg_word_length: Mean characters per word, one decimal.
        estimated_time_ms: Reading time at the requested WPM.
        estimated_time_formatted: ``M:SS`` or ``H:MM:SS``.
    """

    word_count: int
    char_count: int
    sentence_count: int
    avg_word_length: float
    estimated_time_ms: int
    estimated_time_formatted: str


def count_sentences(text: str) -> int:
    """
    Count sentences in text.

    Args:
        text: Text to analyze.

    Returns:
        Number of terminal punctuation runs; 1 for non-blank text without
        any, 0 for empty input.

    Examples:
        >>> count_sentences("Dr. Smith arrived. He sat down!")
        2
        >>> count_sentences("no punctuation here")
        1
    """
    if not text or not isinstance(text, str):
        return 0

    normalized = _ABBREVIATION_PATTERN.sub(r"\1", text)
    normalized = _INITIAL_PATTERN.sub(r"\1", normalized)

    matches = _SENTENCE_END_RUN.findall(normalized)
    if matches:
        return len(matches)
    return 1 if text.strip() else 0


def _as_number(value: Any, default: float) -> float:
    # Numbers pass through unchanged, fractions and zero included
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return default
    if not isinstance(value, (int, float)) or math.isnan(value):
        return default
    return value


def get_text_stats(text: str, wpm: Any = 300) -> TextStats:
    """
    Get reading statistics for text.

    Args:
        text: Text to analyze.
        wpm: Words per minute for the time estimate. Values below 1,
            zero included, count as 1; non-numeric values fall back to 300.

    Returns:
        TextStats for the text.

    Examples:
        >>> get_text_stats("one two three", wpm=60).estimated_time_formatted
        '0:03'
    """
    words = parse_text(text)
    word_count = len(words)
    char_count = sum(len(word) for word in words)
    sentence_count = count_sentences(text)
    avg_word_length = round_half_up(char_count / word_count * 10) / 10 if word_count else 0.0

    effective_wpm = max(1, _as_number(wpm, 300))
    estimated_time_ms = round_half_up(word_count / effective_wpm * 60_000) if word_count else 0

    return TextStats(
        word_count=word_count,
        char_count=char_count,
        sentence_count=sentence_count,
        avg_word_length=avg_word_length,
        estimated_time_ms=estimated_time_ms,
        estimated_time_formatted=format_time(estimated_time_ms),
    )


def extract_sentences(text: str) -> List[str]:
    """
    Split text into sentences, keeping the terminal punctuation.

    Examples:
        >>> extract_sentences("Hello. World! Again?")
        ['Hello.', 'World!', 'Again?']
    """
    if not text or not isinstance(text, str):
        return []

    return [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def is_long_word(word: str, threshold: int = LONG_WORD_THRESHOLD) -> bool:
    """Check if a word, punctuation removed, has at least ``threshold`` characters."""
    if not word or not isinstance(word, str):
        return False
    return len(_NON_WORD_CHARS.sub("", word)) >= threshold


def is_sentence_end(word: str) -> bool:
    """Check if a word ends with sentence-ending punctuation."""
    if not word or not isinstance(word, str):
        return False
    return word.endswith(SENTENCE_ENDERS)


def has_punctuation(word: str) -> bool:
    """Check if a word contains punctuation that might need a pause."""
    if not word or not isinstance(word, str):
        return False
    return _PAUSE_PUNCTUATION.search(word) is not None
