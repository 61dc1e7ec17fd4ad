"""
Letter/digit classification for positional calculations.

Every character of a document passes through this check once during
precomputation, so it is tiered: an ASCII fast path, a fixed Latin
Extended range, and only then a Unicode property lookup. Whether the
property lookup is usable is probed once at import; when it is not, an
allow-list of common script ranges stands in for it.
"""

import logging
import unicodedata
from typing import Callable, Optional

from .constants import (
    LATIN_EXTENDED_EXCLUDED,
    LATIN_EXTENDED_RANGE,
    SCRIPT_FALLBACK_RANGES,
)

logger = logging.getLogger(__name__)

_LATIN_START, _LATIN_END = LATIN_EXTENDED_RANGE


def _probe_unicode_properties() -> bool:
    """Return True if the interpreter ships usable Unicode category data."""
    try:
        return (
            unicodedata.category("Ж") == "Lu"  # Cyrillic Zhe
            and unicodedata.category("٣") == "Nd"  # Arabic-Indic three
            and unicodedata.category("—") == "Pd"  # em dash
        )
    except (TypeError, ValueError):
        return False


UNICODE_PROPERTIES_AVAILABLE = _probe_unicode_properties()


def _unicode_property_test(char: str) -> bool:
    # L* = letters, N* = numbers
    return unicodedata.category(char)[0] in "LN"


def _script_range_test(char: str) -> bool:
    code = ord(char)
    for start, end in SCRIPT_FALLBACK_RANGES:
        if start <= code <= end:
            return True
    return False


class LetterClassifier:
    """
    Decide whether a code point counts as a letter or digit.

    Example usage:
        >>> classifier = LetterClassifier()
        >>> classifier.is_letter_or_digit(ord("a"))
        True
        >>> classifier.is_letter_or_digit(ord("×"))
        False
    """

    def __init__(self, use_unicode_properties: Optional[bool] = None) -> None:
        """
        Initialize the classifier.

        Args:
            use_unicode_properties: Force the Unicode property test (True) or
                the script allow-list (False). Defaults to what the runtime
                supports.
        """
        if use_unicode_properties is None:
            use_unicode_properties = UNICODE_PROPERTIES_AVAILABLE
        self.use_unicode_properties = use_unicode_properties
        self._wide_test: Callable[[str], bool] = (
            _unicode_property_test if use_unicode_properties else _script_range_test
        )

    def is_letter_or_digit(self, code: int, char: Optional[str] = None) -> bool:
        """
        Check if a code point is a letter or digit.

        Args:
            code: The character's code point.
            char: The character itself; derived from ``code`` when omitted.

        Returns:
            True for letters and digits of any script, False otherwise.
        """
        # Fast path for ASCII alphanumerics
        if code <= 0x7A:
            return (
                0x61 <= code
                or 0x41 <= code <= 0x5A
                or 0x30 <= code <= 0x39
            )

        # Latin-1 Supplement through Latin Extended-B
        if _LATIN_START <= code <= _LATIN_END:
            return code not in LATIN_EXTENDED_EXCLUDED

        if code > _LATIN_END:
            if char is None:
                try:
                    char = chr(code)
                except (ValueError, OverflowError):
                    return False
            return self._wide_test(char)

        return False

    def is_letter_or_digit_char(self, char: str) -> bool:
        """Check a single character."""
        return self.is_letter_or_digit(ord(char), char)


_default_classifier = LetterClassifier()
logger.debug(
    "Letter classifier using %s for non-Latin scripts",
    "Unicode properties" if UNICODE_PROPERTIES_AVAILABLE else "script allow-list",
)


def is_letter_or_digit(code: int, char: Optional[str] = None) -> bool:
    """Check a code point with the default classifier."""
    return _default_classifier.is_letter_or_digit(code, char)


def get_default_classifier() -> LetterClassifier:
    """Return the process-wide classifier (stateless, safe to share)."""
    return _default_classifier
