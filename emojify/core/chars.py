"""Character classification for alias bodies.

WHY: Both the encoder scan and the table integrity checks need the same
answer to "can this character appear between two markers?". Keeping the
predicate in one place means the scanner and the data can never disagree.

HOW: Membership test against a frozen set of ASCII letters, digits,
underscore, plus and minus. is_alias() applies it to a whole candidate.

RULES:
- ASCII only: emoji, combining marks and accented letters are never alias chars
- The marker itself is not an alias char
- All functions are pure and total
"""

from __future__ import annotations

import string

from emojify.config import MARKER

ALIAS_CHARS = frozenset(string.ascii_letters + string.digits + "_+-")


def is_alias_char(ch: str) -> bool:
    """Return True if ``ch`` may appear inside an alias body."""
    return ch in ALIAS_CHARS


def has_marker(text: str) -> bool:
    """Return True if ``text`` contains the alias marker at all."""
    return MARKER in text


def is_alias(candidate: str) -> bool:
    """Check that ``candidate`` has the shape ``:body:``.

    RULES:
    - At least three characters (a one-character body)
    - First and last characters are the marker
    - Every character in between passes is_alias_char()
    """
    if len(candidate) < 3:
        return False
    if candidate[0] != MARKER or candidate[-1] != MARKER:
        return False
    return all(is_alias_char(ch) for ch in candidate[1:-1])
