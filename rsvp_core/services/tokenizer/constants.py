"""
Tokenizer constants for RSVP text processing.

This module contains the constants used by the text engine: character
classification ranges, ORP and bionic fixation tables, HTML entity maps,
punctuation sets, and abbreviation lists.
"""

# Tokenizer version - increment when logic changes
TOKENIZER_VERSION = "3.0.0"

# -----------------------------------------------------------------------------
# Whitespace
# -----------------------------------------------------------------------------

# Zero-width characters that can merge or invisibly split words
ZERO_WIDTH_CHARS = (
    '\u200b',   # zero-width space
    '\u200c',   # zero-width non-joiner
    '\u200d',   # zero-width joiner
    '\ufeff',   # BOM / zero-width no-break space
)

# Chunks are displayed with plain ASCII spaces between words
WORD_SEPARATOR = " "

# -----------------------------------------------------------------------------
# Letter / Digit Classification
# -----------------------------------------------------------------------------

# Latin-1 Supplement, Latin Extended-A and Extended-B
LATIN_EXTENDED_RANGE = (0x00C0, 0x024F)

# Multiplication and division signs sit inside the Latin-1 block
LATIN_EXTENDED_EXCLUDED = frozenset({0x00D7, 0x00F7})

# Script ranges accepted when Unicode property data is unavailable
SCRIPT_FALLBACK_RANGES = (
    (0x0400, 0x04FF),   # Cyrillic
    (0x0370, 0x03FF),   # Greek
    (0x4E00, 0x9FFF),   # CJK Unified Ideographs
    (0x3040, 0x309F),   # Hiragana
    (0x30A0, 0x30FF),   # Katakana
    (0xAC00, 0xD7AF),   # Hangul Syllables
)

# -----------------------------------------------------------------------------
# ORP (Optimal Recognition Point)
# -----------------------------------------------------------------------------
# O'Regan & Levy-Schoen (1987): optimal viewing position ~20-40% from left.
# Rayner (1979): initial fixation is typically left of center.
# Brysbaert & Nazir (2005): 2-3 characters left of center.

# Maximum letter/digit positions recorded per word
ORP_POSITION_CAPACITY = 200

# (max letter count, slot) - first row whose bound is >= n wins
ORP_SLOT_TABLE = (
    (1, 0),
    (2, 0),
    (3, 1),
    (5, 1),
    (9, 2),
    (13, 3),
)

# Words longer than the table fixate ~27% from the left
ORP_LONG_WORD_RATIO = 0.27

# -----------------------------------------------------------------------------
# Bionic Reading
# -----------------------------------------------------------------------------

# (max letter count, bold ratio) for words with more than three letters
BIONIC_RATIO_TABLE = (
    (6, 0.5),
    (10, 0.45),
)
BIONIC_LONG_WORD_RATIO = 0.4

# -----------------------------------------------------------------------------
# HTML
# -----------------------------------------------------------------------------

HTML_ESCAPES = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
}

# Elements dropped together with their content when stripping markup
STRIPPED_ELEMENTS = ('script', 'style', 'noscript', 'svg')

# Named entities decoded by strip_html (lowercase keys)
NAMED_ENTITIES = {
    'nbsp': ' ',
    'amp': '&',
    'lt': '<',
    'gt': '>',
    'quot': '"',
    'apos': "'",
    'ndash': '–',
    'mdash': '—',
    'lsquo': "'",
    'rsquo': "'",
    'ldquo': '"',
    'rdquo': '"',
    'hellip': '…',
    'copy': '©',
    'reg': '®',
    'trade': '™',
}

MAX_CODE_POINT = 0x10FFFF

# -----------------------------------------------------------------------------
# Sentences and Punctuation
# -----------------------------------------------------------------------------

SENTENCE_ENDERS = ('.', '!', '?')

# Punctuation that may warrant a pause
PAUSE_PUNCTUATION = '.!?,;:-—'

# Abbreviations whose trailing period does not end a sentence
SENTENCE_ABBREVIATIONS = (
    'Mr', 'Mrs', 'Ms', 'Dr', 'Prof', 'Sr', 'Jr',
    'vs', 'etc', 'Inc', 'Ltd', 'Corp', 'Ave', 'St', 'Blvd',
)

# Long word threshold (characters, punctuation excluded)
LONG_WORD_THRESHOLD = 8

# Full stops: . ! ? … plus CJK/fullwidth forms, inverted marks, interrobangs
FULL_STOP_CHARS = frozenset(
    '.!?\u2026'
    '。！？．'
    '¿¡'
    '‽⁇⁈⁉'
)

# Partial stops: , ; : em/en dash plus CJK/fullwidth forms
PARTIAL_STOP_CHARS = frozenset(
    ',;:—–'
    '、，：；'
)

# -----------------------------------------------------------------------------
# Validation messages
# -----------------------------------------------------------------------------

MSG_NO_TEXT = "Please paste some text first!"
MSG_NO_READABLE_TEXT = "No readable text found."
MSG_TOO_FEW_WORDS = "Please paste at least {min_words} words."
MSG_OK = "OK"
