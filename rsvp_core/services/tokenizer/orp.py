"""ORP (Optimal Recognition Point) and bionic fixation calculator for RSVP reading."""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .classifier import LetterClassifier, get_default_classifier
from .constants import (
    BIONIC_LONG_WORD_RATIO,
    BIONIC_RATIO_TABLE,
    ORP_LONG_WORD_RATIO,
    ORP_POSITION_CAPACITY,
    ORP_SLOT_TABLE,
    WORD_SEPARATOR,
)


@dataclass(frozen=True)
class OrpInfo:
    """ORP details for a word, for debugging and inspection."""

    word: str
    letter_count: int
    orp_index: int
    orp_char: str
    percent_from_left: int


def orp_slot(letter_count: int) -> int:
    """
    Pick which letter/digit the eye should fixate on.

    Args:
        letter_count: Number of letter/digit characters in the word (> 0).

    Returns:
        0-based slot among the word's letters/digits.
    """
    for max_count, slot in ORP_SLOT_TABLE:
        if letter_count <= max_count:
            return slot
    # Very long words: approximately 27% from the left
    return math.floor(letter_count * ORP_LONG_WORD_RATIO)


def bionic_bold_count(letter_count: int) -> int:
    """
    Number of letters/digits to bold in bionic mode.

    Short words (1-2) are bolded entirely, three-letter words get two,
    longer words about 50%, 45% and then 40%.
    """
    if letter_count <= 2:
        return letter_count
    if letter_count == 3:
        return 2
    for max_count, ratio in BIONIC_RATIO_TABLE:
        if letter_count <= max_count:
            return math.ceil(letter_count * ratio)
    return math.ceil(letter_count * BIONIC_LONG_WORD_RATIO)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class ORPCalculator:
    """
    Calculate the Optimal Recognition Point for words.

    The ORP is the character position in a word where the eye naturally
    fixates for fastest recognition, roughly 20-35% from the left.
    Only letters and digits are counted when picking the position, but the
    returned index is an offset into the original string, so leading
    quotes and brackets shift it right.

    Each calculator owns a fixed-size scratch buffer reused across calls.
    It is not safe to share one instance between threads; create one per
    worker instead.

    Example usage:
        >>> calc = ORPCalculator()
        >>> calc.calculate("hello")
        1
        >>> calc.calculate('"Hello')
        2
        >>> calc.calculate_bionic_fixation("reading")
        4
    """

    def __init__(self, classifier: Optional[LetterClassifier] = None) -> None:
        """
        Initialize the ORP calculator.

        Args:
            classifier: Letter/digit classifier; defaults to the shared one.
        """
        self._classifier = classifier or get_default_classifier()
        self._positions: List[int] = [0] * ORP_POSITION_CAPACITY

    def calculate(self, word: str) -> int:
        """
        Calculate the ORP index for a word.

        Args:
            word: The word (or chunk) to calculate ORP for.

        Returns:
            The 0-indexed position of the ORP character in ``word``; 0 for
            empty input or words without letters/digits.

        Examples:
            >>> calc = ORPCalculator()
            >>> calc.calculate("the")
            1
            >>> calc.calculate("programming")
            3
        """
        if not word or not isinstance(word, str):
            return 0

        positions = self._positions
        capacity = len(positions)
        is_letter = self._classifier.is_letter_or_digit
        letter_count = 0

        for i, char in enumerate(word):
            if is_letter(ord(char), char):
                positions[letter_count] = i
                letter_count += 1
                if letter_count == capacity:
                    break

        if letter_count == 0:
            return 0

        return positions[orp_slot(letter_count)]

    def calculate_bionic_fixation(self, word: str) -> int:
        """
        Calculate where the bold prefix ends in bionic mode.

        Args:
            word: The word to analyze.

        Returns:
            Offset one past the last bolded letter/digit, usable directly as
            a slice bound; 0 for words without letters/digits.

        Examples:
            >>> calc = ORPCalculator()
            >>> calc.calculate_bionic_fixation("hello")
            3
            >>> calc.calculate_bionic_fixation("(it)")
            3
        """
        if not word or not isinstance(word, str):
            return 0

        letter_count = self.get_letter_count(word)
        if letter_count == 0:
            return 0

        bold_count = bionic_bold_count(letter_count)

        is_letter = self._classifier.is_letter_or_digit
        counted = 0
        for i, char in enumerate(word):
            if is_letter(ord(char), char):
                counted += 1
                if counted >= bold_count:
                    return i + 1

        return len(word)

    def get_letter_count(self, word: str) -> int:
        """Count letter/digit characters in a word."""
        if not word or not isinstance(word, str):
            return 0

        is_letter = self._classifier.is_letter_or_digit
        count = 0
        for char in word:
            if is_letter(ord(char), char):
                count += 1
        return count

    def get_max_word_length(self, text: str) -> int:
        """
        Get the largest letter/digit count among the words of a chunk.

        Used by callers to size a stable display width and by timing to
        scale durations for long words.

        Examples:
            >>> ORPCalculator().get_max_word_length("a quick, brown fox")
            5
        """
        if not text or not isinstance(text, str):
            return 0

        is_letter = self._classifier.is_letter_or_digit
        max_len = 0
        current = 0

        for char in text:
            if char == WORD_SEPARATOR:
                if current > max_len:
                    max_len = current
                current = 0
            elif is_letter(ord(char), char):
                current += 1

        return max(max_len, current)

    def split_for_display(self, word: str) -> Tuple[str, str, str]:
        """
        Split a word into raw (unescaped) parts around its ORP.

        Returns:
            Tuple of (before_orp, orp_char, after_orp).

        Example:
            >>> ORPCalculator().split_for_display("reading")
            ('re', 'a', 'ding')
        """
        if not word or not isinstance(word, str):
            return ("", "", "")

        orp_index = self.calculate(word)
        return (word[:orp_index], word[orp_index:orp_index + 1], word[orp_index + 1:])

    def get_orp_info(self, word: str) -> OrpInfo:
        """Describe the ORP placement of a word."""
        if not word or not isinstance(word, str):
            return OrpInfo(word="", letter_count=0, orp_index=0, orp_char="", percent_from_left=0)

        letter_count = self.get_letter_count(word)
        orp_index = self.calculate(word)
        percent = 0
        if letter_count > 1 and len(word) > 1:
            percent = _round_half_up(orp_index / (len(word) - 1) * 100)

        return OrpInfo(
            word=word,
            letter_count=letter_count,
            orp_index=orp_index,
            orp_char=word[orp_index:orp_index + 1],
            percent_from_left=percent,
        )


# Shared instance for single-threaded callers of the module-level helpers
_default_calculator = ORPCalculator()


def calculate(word: str) -> int:
    """Calculate the ORP index with the shared calculator."""
    return _default_calculator.calculate(word)


def calculate_bionic_fixation(word: str) -> int:
    """Calculate the bionic bold split with the shared calculator."""
    return _default_calculator.calculate_bionic_fixation(word)


def get_letter_count(word: str) -> int:
    """Count letter/digit characters with the shared calculator."""
    return _default_calculator.get_letter_count(word)


def get_max_word_length(text: str) -> int:
    """Largest letter/digit count among the words of ``text``."""
    return _default_calculator.get_max_word_length(text)


def get_orp_info(word: str) -> OrpInfo:
    """Describe the ORP placement of a word with the shared calculator."""
    return _default_calculator.get_orp_info(word)
