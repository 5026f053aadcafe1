"""Control codes and character classes for O(1) classification.

WordStar documents interleave printable text with single-byte control codes
below 0x20. This module names the ones with meaning and groups the rest into
the set that is silently dropped.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from wsmark.codes import IGNORED_CODES, is_displayed

    if char in IGNORED_CODES:
        ...
"""

import unicodedata

# In-line modifier toggles
BOLD = "\x02"
UNDERLINE = "\x13"
ITALICS = "\x19"

# Document structure
FORM_FEED = "\x0c"
EOF_MARKER = "\x1a"
LINE_TERMINATORS: frozenset[str] = frozenset("\n\r")

MODIFIER_CODES: frozenset[str] = frozenset((BOLD, UNDERLINE, ITALICS))

# Every other C0 code is discarded without effect. Tab (0x09) lands here too.
IGNORED_CODES: frozenset[str] = frozenset(
    chr(code)
    for code in range(0x20)
    if chr(code) not in MODIFIER_CODES
    and chr(code) not in LINE_TERMINATORS
    and chr(code) not in (FORM_FEED, EOF_MARKER)
)

CONTROL_CODES: frozenset[str] = frozenset(chr(code) for code in range(0x20))

# Line end search set: newline, carriage return, end-of-file marker
LINE_END_CHARS: tuple[str, ...] = ("\n", "\r", EOF_MARKER)


def is_displayed(char: str) -> bool:
    """Check if character is displayed text.

    Displayed text is any letter (L*), number (N*), punctuation (P*),
    symbol (S*) or space separator (Zs).

    """
    if not char:
        return False
    if " " <= char <= "~":
        return True
    cat = unicodedata.category(char)
    return cat[0] in "LNPS" or cat == "Zs"


def is_displayed_text(text: str) -> bool:
    """Check that text is non-empty and made only of displayed characters."""
    return bool(text) and all(is_displayed(char) for char in text)


def strip_control_codes(text: str) -> str:
    """Remove every C0 control code from text."""
    return "".join(char for char in text if char not in CONTROL_CODES)
