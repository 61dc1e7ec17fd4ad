"""
Batch precomputation of display records for RSVP playback.

Everything the playback loop needs per chunk (escaped parts, markup,
width hint, ORP index) is computed once when text is loaded, so each frame
is a plain list lookup. Records are rebuilt from scratch whenever the text,
chunk size, ORP flag or bionic flag changes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from rsvp_core.config import Settings, get_settings
from rsvp_core.logging_config import log_performance

from .constants import WORD_SEPARATOR
from .orp import ORPCalculator
from .render import WordParts, get_display_parts, render_chunk
from .tokenizer import chunk_words, parse_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrecomputedRecord:
    """Ready-to-display data for one chunk.

    Attributes:
        text: The chunk text.
        parts: Escaped ORP parts per word (empty in bionic mode).
        html: Rendered markup.
        max_length: Largest letter/digit count among the chunk's words.
        orp_index: ORP index of the chunk text as a whole.
        word_count: Number of words in the chunk.
    """

    text: str
    parts: Tuple[WordParts, ...]
    html: str
    max_length: int
    orp_index: int
    word_count: int


@dataclass(frozen=True)
class ReadingScript:
    """Result of loading text for playback.

    Attributes:
        success: Whether the text could be loaded.
        word_count: Number of words parsed from the text.
        chunk_count: Number of display chunks.
        records: Precomputed records in reading order.
        error: Reason for failure, if any.
    """

    success: bool
    word_count: int
    chunk_count: int
    records: Tuple[PrecomputedRecord, ...] = field(default_factory=tuple)
    error: Optional[str] = None


def _count_words_in_chunk(text: str) -> int:
    if not text:
        return 0
    return text.count(WORD_SEPARATOR) + 1


def precompute_words(
    words: List[str],
    orp_enabled: bool = True,
    bionic_mode: bool = False,
    calculator: Optional[ORPCalculator] = None,
) -> List[PrecomputedRecord]:
    """
    Precompute display data for a list of words or chunks.

    Indexing into the result is equivalent to calling the per-word
    functions at display time.

    Args:
        words: Words or chunks in reading order.
        orp_enabled: Whether ORP highlighting is enabled.
        bionic_mode: Whether bionic reading is enabled (replaces ORP).
        calculator: ORP calculator to use; pass a dedicated instance when
            precomputing from several threads.

    Returns:
        One record per input item, in input order; empty list for
        non-list input.
    """
    if not isinstance(words, list):
        return []

    calculator = calculator or ORPCalculator()
    records: List[PrecomputedRecord] = []

    for text in words:
        if not isinstance(text, str):
            text = ""
        parts = None if bionic_mode else get_display_parts(text, orp_enabled, calculator)

        records.append(
            PrecomputedRecord(
                text=text,
                parts=tuple(parts or ()),
                html=render_chunk(text, orp_enabled, bionic_mode, parts, calculator),
                max_length=calculator.get_max_word_length(text),
                orp_index=calculator.calculate(text),
                word_count=_count_words_in_chunk(text),
            )
        )

    return records


@log_performance("prepare_reading_script")
def prepare_reading_script(
    text: str,
    chunk_size: Any = None,
    orp_enabled: bool = True,
    bionic_mode: bool = False,
    settings: Optional[Settings] = None,
) -> ReadingScript:
    """
    Parse, chunk and precompute text for playback.

    Args:
        text: Raw text to load.
        chunk_size: Words per chunk; defaults to the configured default.
        orp_enabled: Whether ORP highlighting is enabled.
        bionic_mode: Whether bionic reading is enabled.
        settings: Configuration providing chunk and word-count limits.

    Returns:
        ReadingScript; failures are reported through ``success``/``error``.

    Example:
        >>> script = prepare_reading_script("one two three four five", chunk_size=2)
        >>> script.chunk_count
        3
    """
    if not text or not isinstance(text, str):
        return ReadingScript(success=False, word_count=0, chunk_count=0, error="No text provided")

    settings = settings or get_settings()
    words = parse_text(text)

    if len(words) < settings.text_min_words:
        return ReadingScript(
            success=False,
            word_count=len(words),
            chunk_count=0,
            error=f"Need at least {settings.text_min_words} words",
        )

    if chunk_size is None:
        chunk_size = settings.chunk_default

    chunks = chunk_words(words, chunk_size, settings=settings)
    records = precompute_words(chunks, orp_enabled, bionic_mode)

    logger.debug(
        "Precomputed %d records from %d words (orp=%s, bionic=%s)",
        len(records),
        len(words),
        orp_enabled,
        bionic_mode,
    )

    return ReadingScript(
        success=True,
        word_count=len(words),
        chunk_count=len(chunks),
        records=tuple(records),
    )
