"""
Tokenizer package for RSVP text processing.

This package contains the text engine behind the reader:
- classifier: Unicode-aware letter/digit classification
- escaping: HTML escaping and HTML-to-text extraction
- tokenizer: word splitting, chunking, context windows, validation
- orp: ORP index and bionic fixation calculation
- render: markup for ORP, plain and bionic display
- precompute: batch preparation of display records
- stats: sentence counting and reading statistics
- timing: display durations and time formatting
- constants: tables, entity maps and punctuation sets

Primary usage:
    >>> from rsvp_core.services.tokenizer import prepare_reading_script
    >>> script = prepare_reading_script("Speed reading is fun.", chunk_size=2)
    >>> [record.text for record in script.records]
    ['Speed reading', 'is fun.']
"""

from .classifier import LetterClassifier, UNICODE_PROPERTIES_AVAILABLE, is_letter_or_digit
from .escaping import escape_html, strip_html, unescape_html
from .tokenizer import (
    ContextWindow,
    ValidationResult,
    chunk_words,
    count_words,
    get_context,
    parse_text,
    truncate_words,
    validate,
)
from .orp import (
    ORPCalculator,
    OrpInfo,
    calculate,
    calculate_bionic_fixation,
    get_letter_count,
    get_max_word_length,
    get_orp_info,
)
from .render import (
    WordParts,
    get_display_parts,
    get_word_parts,
    render_bionic_word,
    render_chunk,
    render_word,
)
from .precompute import PrecomputedRecord, ReadingScript, precompute_words, prepare_reading_script
from .stats import (
    TextStats,
    count_sentences,
    extract_sentences,
    get_text_stats,
    has_punctuation,
    is_long_word,
    is_sentence_end,
)
from .timing import (
    TimingCalculator,
    calculate_actual_wpm,
    ease_out_quad,
    estimate_remaining_time_ms,
    estimate_total_time_ms,
    format_duration,
    format_minutes,
    format_time,
)
from .constants import TOKENIZER_VERSION


def get_tokenizer_version() -> str:
    """Return the current tokenizer version string."""
    return TOKENIZER_VERSION


__all__ = [
    # Classification
    "LetterClassifier",
    "UNICODE_PROPERTIES_AVAILABLE",
    "is_letter_or_digit",
    # Escaping
    "escape_html",
    "unescape_html",
    "strip_html",
    # Tokenization
    "ContextWindow",
    "ValidationResult",
    "parse_text",
    "chunk_words",
    "get_context",
    "validate",
    "count_words",
    "truncate_words",
    # ORP / bionic
    "ORPCalculator",
    "OrpInfo",
    "calculate",
    "calculate_bionic_fixation",
    "get_letter_count",
    "get_max_word_length",
    "get_orp_info",
    # Rendering
    "WordParts",
    "get_word_parts",
    "get_display_parts",
    "render_word",
    "render_bionic_word",
    "render_chunk",
    # Precomputation
    "PrecomputedRecord",
    "ReadingScript",
    "precompute_words",
    "prepare_reading_script",
    # Statistics
    "TextStats",
    "count_sentences",
    "get_text_stats",
    "extract_sentences",
    "is_long_word",
    "is_sentence_end",
    "has_punctuation",
    # Timing
    "TimingCalculator",
    "ease_out_quad",
    "format_time",
    "format_minutes",
    "format_duration",
    "estimate_total_time_ms",
    "estimate_remaining_time_ms",
    "calculate_actual_wpm",
    # Version
    "TOKENIZER_VERSION",
    "get_tokenizer_version",
]
