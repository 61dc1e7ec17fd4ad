"""
Markup rendering for RSVP display.

Three mutually exclusive modes, chosen per call by flags:
- ORP: each word split into before/orp/after spans
- plain: the escaped text in a single span
- bionic: each word split into a bold prefix and a normal remainder

Raw text is escaped exactly once on every path; ``WordParts`` values are
already escaped and are wrapped as-is.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .constants import WORD_SEPARATOR
from .escaping import escape_html
from .orp import ORPCalculator, calculate, calculate_bionic_fixation


@dataclass(frozen=True)
class WordParts:
    """A word split around its ORP character.

    All fields are HTML-escaped. Unescaping and concatenating them gives
    back the original word. With ORP disabled the whole escaped word sits
    in ``orp``.
    """

    before: str = ""
    orp: str = ""
    after: str = ""


EMPTY_PARTS = WordParts()


def get_word_parts(
    word: str,
    orp_enabled: bool = True,
    calculator: Optional[ORPCalculator] = None,
) -> WordParts:
    """
    Split a word into escaped parts around its ORP.

    Args:
        word: The word to split.
        orp_enabled: Whether to highlight the ORP.
        calculator: ORP calculator to use; defaults to the shared one.

    Returns:
        WordParts; empty parts for None or non-string input.

    Examples:
        >>> get_word_parts("hello")
        WordParts(before='h', orp='e', after='llo')
        >>> get_word_parts("hello", orp_enabled=False)
        WordParts(before='', orp='hello', after='')
    """
    if not word or not isinstance(word, str):
        return EMPTY_PARTS

    if not orp_enabled:
        return WordParts(orp=escape_html(word))

    orp_index = calculator.calculate(word) if calculator else calculate(word)

    return WordParts(
        before=escape_html(word[:orp_index]),
        orp=escape_html(word[orp_index:orp_index + 1]),
        after=escape_html(word[orp_index + 1:]),
    )


def get_display_parts(
    text: str,
    orp_enabled: bool = True,
    calculator: Optional[ORPCalculator] = None,
) -> List[WordParts]:
    """
    Get parts for every word of a chunk; each word gets its own ORP.

    Examples:
        >>> get_display_parts("hello world")
        [WordParts(before='h', orp='e', after='llo'), WordParts(before='w', orp='o', after='rld')]
    """
    if not text or not isinstance(text, str):
        return []

    return [
        get_word_parts(word, orp_enabled, calculator)
        for word in text.split(WORD_SEPARATOR)
        if word
    ]


def _render_parts(parts: WordParts) -> str:
    return (
        f'<span class="before">{parts.before}</span>'
        f'<span class="orp">{parts.orp}</span>'
        f'<span class="after">{parts.after}</span>'
    )


def render_word(word: str, orp_enabled: bool = True) -> str:
    """
    Render a single word.

    Example:
        >>> render_word("hello")
        '<span class="before">h</span><span class="orp">e</span><span class="after">llo</span>'
    """
    if not orp_enabled:
        return f'<span class="word-plain">{escape_html(word)}</span>'
    return _render_parts(get_word_parts(word, orp_enabled))


def render_bionic_word(word: str, calculator: Optional[ORPCalculator] = None) -> str:
    """Render a word with its leading portion bolded."""
    if not word or not isinstance(word, str):
        return ""

    fixation = (
        calculator.calculate_bionic_fixation(word)
        if calculator
        else calculate_bionic_fixation(word)
    )
    bold = escape_html(word[:fixation])
    normal = escape_html(word[fixation:])

    return f'<span class="bionic-bold">{bold}</span><span class="bionic-normal">{normal}</span>'


def render_chunk(
    text: str,
    orp_enabled: bool = True,
    bionic_mode: bool = False,
    precomputed_parts: Optional[Sequence[WordParts]] = None,
    calculator: Optional[ORPCalculator] = None,
) -> str:
    """
    Render a chunk of one or more words.

    Bionic mode replaces ORP highlighting; it is not layered on top.

    Args:
        text: The chunk text.
        orp_enabled: Whether to highlight the ORP of each word.
        bionic_mode: Whether to render in bionic reading format.
        precomputed_parts: Parts from ``get_display_parts`` to avoid
            recalculating them.
        calculator: ORP calculator to use; defaults to the shared one.

    Returns:
        Markup for the chunk.
    """
    if not isinstance(text, str):
        return ""

    if bionic_mode:
        return WORD_SEPARATOR.join(
            f'<span class="word-part bionic">{render_bionic_word(word, calculator)}</span>'
            for word in text.split(WORD_SEPARATOR)
            if word
        )

    if not orp_enabled:
        return f'<span class="word-part word-plain">{escape_html(text)}</span>'

    parts = (
        precomputed_parts
        if precomputed_parts is not None
        else get_display_parts(text, orp_enabled, calculator)
    )

    return WORD_SEPARATOR.join(
        f'<span class="word-part">{_render_parts(p)}</span>' for p in parts
    )
