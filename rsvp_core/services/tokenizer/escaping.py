"""
HTML escaping and best-effort HTML-to-text extraction.

``escape_html`` is the single boundary between raw text and rendered
markup: every raw substring goes through it exactly once.
``strip_html`` is a plain-text extractor for fetched pages, not a parser.
"""

import re

from .constants import HTML_ESCAPES, MAX_CODE_POINT, NAMED_ENTITIES, STRIPPED_ELEMENTS

_ESCAPE_TABLE = str.maketrans(HTML_ESCAPES)

_UNESCAPE_PATTERN = re.compile("|".join(re.escape(entity) for entity in HTML_ESCAPES.values()))
_UNESCAPE_MAP = {entity: char for char, entity in HTML_ESCAPES.items()}

_STRIPPED_ELEMENT_PATTERNS = tuple(
    re.compile(rf"<{name}\b[^>]*>.*?</{name}>", re.IGNORECASE | re.DOTALL)
    for name in STRIPPED_ELEMENTS
)
_TAG_PATTERN = re.compile(r"<[^>]+>")

# Applied in table order, so "&amp;lt;" decodes all the way to "<"
_NAMED_ENTITY_PATTERNS = tuple(
    (re.compile(rf"&{name};", re.IGNORECASE), char) for name, char in NAMED_ENTITIES.items()
)
_DECIMAL_ENTITY_PATTERN = re.compile(r"&#([0-9]+);")
_HEX_ENTITY_PATTERN = re.compile(r"&#x([0-9a-f]+);", re.IGNORECASE)
_LEFTOVER_ENTITY_PATTERN = re.compile(r"&[a-z]+;", re.IGNORECASE)
_WHITESPACE_RUN = re.compile(r"\s+")


def escape_html(text: str) -> str:
    """
    Escape HTML special characters.

    Args:
        text: Raw text.

    Returns:
        Text with ``& < > " '`` replaced by entities; empty string for
        None, non-string or empty input.

    Examples:
        >>> escape_html('<script>alert("xss")</script>')
        '&lt;script&gt;alert(&quot;xss&quot;)&lt;/script&gt;'
    """
    if not text or not isinstance(text, str):
        return ""
    return text.translate(_ESCAPE_TABLE)


def unescape_html(text: str) -> str:
    """Reverse ``escape_html`` (only the five entities it produces)."""
    if not text or not isinstance(text, str):
        return ""
    return _UNESCAPE_PATTERN.sub(lambda match: _UNESCAPE_MAP[match.group(0)], text)


def _decode_code_point(digits: str, base: int) -> str:
    # int() refuses very long decimal strings; anything this long is out of range anyway
    digits = digits.lstrip("0")
    if len(digits) > 8:
        return ""
    code_point = int(digits or "0", base)
    if 0 < code_point <= MAX_CODE_POINT and not 0xD800 <= code_point <= 0xDFFF:
        return chr(code_point)
    return ""


def _decode_entities(text: str) -> str:
    for pattern, char in _NAMED_ENTITY_PATTERNS:
        text = pattern.sub(char, text)
    text = _DECIMAL_ENTITY_PATTERN.sub(lambda match: _decode_code_point(match.group(1), 10), text)
    text = _HEX_ENTITY_PATTERN.sub(lambda match: _decode_code_point(match.group(1), 16), text)
    # Unrecognized entities become a space
    return _LEFTOVER_ENTITY_PATTERN.sub(" ", text)


def strip_html(html: str) -> str:
    """
    Extract readable plain text from an HTML string.

    Drops script/style/noscript/svg elements with their content, turns the
    remaining tags into spaces, then decodes named entities, decimal
    references and hex references, in that order. ``&amp;`` is decoded
    before ``&lt;``, so ``&amp;lt;`` yields ``<``. Whatever entity syntax
    is left becomes a space, and whitespace is collapsed.

    Args:
        html: HTML markup, possibly malformed.

    Returns:
        Plain text; empty string for None, non-string or empty input.

    Examples:
        >>> strip_html("<p>Hello &amp; world</p>")
        'Hello & world'
        >>> strip_html("<script>bad()</script>Safe")
        'Safe'
    """
    if not html or not isinstance(html, str):
        return ""

    text = html
    for pattern in _STRIPPED_ELEMENT_PATTERNS:
        text = pattern.sub(" ", text)
    text = _TAG_PATTERN.sub(" ", text)

    text = _decode_entities(text)

    return _WHITESPACE_RUN.sub(" ", text).strip()
