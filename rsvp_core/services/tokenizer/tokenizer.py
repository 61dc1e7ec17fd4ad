"""
Word tokenization and chunking for RSVP reading.

This module turns raw text into the ordered word list the reader flashes,
groups words into multi-word chunks, and extracts the peripheral context
around a position.

Pipeline stages:
1. Zero-width character removal
2. Line break and whitespace collapsing
3. Splitting on single spaces
4. Optional chunking into groups of 1-3 words

Example usage:
    >>> words = parse_text("Hello   world!\\nNew line.")
    >>> words
    ['Hello', 'world!', 'New', 'line.']
    >>> chunk_words(words, 2)
    ['Hello world!', 'New line.']
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional

from rsvp_core.config import Settings, get_settings

from .constants import (
    MSG_NO_READABLE_TEXT,
    MSG_NO_TEXT,
    MSG_OK,
    MSG_TOO_FEW_WORDS,
    WORD_SEPARATOR,
    ZERO_WIDTH_CHARS,
)

_ZERO_WIDTH_TABLE = str.maketrans(dict.fromkeys(ZERO_WIDTH_CHARS))
_LINE_BREAKS = re.compile(r"[\r\n]+")
_WHITESPACE_RUN = re.compile(r"\s+")
_NON_WHITESPACE_RUN = re.compile(r"\S+")
_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class ContextWindow:
    """Words surrounding a reading position.

    Attributes:
        before: Words preceding the current word, space-joined.
        current: The word at the position.
        after: Words following the current word, space-joined.
    """

    before: str = ""
    current: str = ""
    after: str = ""


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of checking whether text can be read.

    Attributes:
        valid: Whether the text has enough words.
        message: Human-readable status message.
        word_count: Number of words found.
    """

    valid: bool
    message: str
    word_count: int


def coerce_int(value: Any, default: int) -> int:
    """
    Best-effort integer conversion used for caller-supplied sizes.

    Args:
        value: An int, float or string starting with an integer.
        default: Returned when ``value`` cannot be converted or is zero.

    Returns:
        The converted integer, or ``default``.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        result = value
    elif isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return default
        result = int(value)
    elif isinstance(value, str):
        # Leading digits count, so "2 words" and "2.5" both read as 2
        match = _LEADING_INTEGER.match(value)
        if match is None:
            return default
        try:
            result = int(match.group(1))
        except ValueError:
            # Past the interpreter's digit limit
            return default
    else:
        return default
    return result or default


def parse_text(text: str) -> List[str]:
    """
    Split raw text into words for RSVP display.

    Args:
        text: Raw text input.

    Returns:
        Words in reading order; empty list for None, non-string, empty or
        whitespace-only input.

    Examples:
        >>> parse_text("Hello   world!\\nNew line.")
        ['Hello', 'world!', 'New', 'line.']
        >>> parse_text("   ")
        []
    """
    if not text or not isinstance(text, str):
        return []

    normalized = text.translate(_ZERO_WIDTH_TABLE)
    normalized = _LINE_BREAKS.sub(" ", normalized)
    normalized = _WHITESPACE_RUN.sub(" ", normalized).strip()

    if not normalized:
        return []

    return normalized.split(WORD_SEPARATOR)


def chunk_words(
    words: List[str],
    chunk_size: Any,
    settings: Optional[Settings] = None,
) -> List[str]:
    """
    Group words into chunks for multi-word display.

    Args:
        words: Words from ``parse_text``.
        chunk_size: Requested words per chunk; clamped to the configured
            range, unparseable values mean 1.
        settings: Configuration providing the chunk range.

    Returns:
        Chunk strings in reading order. The last chunk may be shorter.

    Examples:
        >>> chunk_words(["a", "b", "c", "d", "e"], 2)
        ['a b', 'c d', 'e']
    """
    if not isinstance(words, list) or not words:
        return []

    settings = settings or get_settings()
    size = max(settings.chunk_min, min(settings.chunk_max, coerce_int(chunk_size, 1)))

    if size <= 1:
        return list(words)

    total = len(words)
    chunks: List[str] = []
    for start in range(0, total, size):
        # Build each chunk directly instead of slicing and joining
        chunk = words[start]
        for j in range(start + 1, min(start + size, total)):
            chunk += WORD_SEPARATOR + words[j]
        chunks.append(chunk)

    return chunks


def get_context(
    words: List[str],
    index: Any,
    context_size: Any = 8,
) -> ContextWindow:
    """
    Get the words surrounding a position.

    Args:
        words: Words from ``parse_text``.
        index: Current word index; clamped into range.
        context_size: Words to include on each side (minimum 1).

    Returns:
        ContextWindow with before/current/after text. Windows are truncated
        at the list boundaries.

    Examples:
        >>> get_context(["a", "b", "c", "d", "e"], 2, 2)
        ContextWindow(before='a b', current='c', after='d e')
    """
    if not isinstance(words, list) or not words:
        return ContextWindow()

    idx = max(0, min(len(words) - 1, coerce_int(index, 0)))
    size = max(1, coerce_int(context_size, 8))

    start = max(0, idx - size)
    end = min(len(words), idx + size + 1)

    return ContextWindow(
        before=WORD_SEPARATOR.join(words[start:idx]),
        current=words[idx] or "",
        after=WORD_SEPARATOR.join(words[idx + 1:end]),
    )


def validate(text: str, settings: Optional[Settings] = None) -> ValidationResult:
    """
    Check that text has enough words to read.

    Args:
        text: Raw text input.
        settings: Configuration providing the minimum word count.

    Returns:
        ValidationResult with status, message and word count.

    Examples:
        >>> validate("Hello big world!")
        ValidationResult(valid=True, message='OK', word_count=3)
    """
    if not text or not isinstance(text, str):
        return ValidationResult(valid=False, message=MSG_NO_TEXT, word_count=0)

    words = parse_text(text)

    if not words:
        return ValidationResult(valid=False, message=MSG_NO_READABLE_TEXT, word_count=0)

    min_words = (settings or get_settings()).text_min_words
    if len(words) < min_words:
        return ValidationResult(
            valid=False,
            message=MSG_TOO_FEW_WORDS.format(min_words=min_words),
            word_count=len(words),
        )

    return ValidationResult(valid=True, message=MSG_OK, word_count=len(words))


def count_words(text: str) -> int:
    """Count whitespace-separated words without full parsing."""
    if not text or not isinstance(text, str):
        return 0
    return len(_NON_WHITESPACE_RUN.findall(text))


def truncate_words(text: str, max_words: int, suffix: str = "...") -> str:
    """
    Truncate text to a maximum number of words.

    Examples:
        >>> truncate_words("one two three four five", 3)
        'one two three...'
    """
    words = parse_text(text)

    if len(words) <= max_words:
        return text.strip() if isinstance(text, str) else ""

    return WORD_SEPARATOR.join(words[:max(0, max_words)]) + suffix
