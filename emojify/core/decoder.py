"""Emoji → alias decoder.

WHY: Decoding is the inverse of encoding, but emoji are not delimited:
a skin-toned gesture is the bare gesture followed by a modifier. Matching
the bare gesture first would leave an orphaned modifier behind, so the
order of replacement matters.

HOW: Every emoji in the reverse table is replaced with its alias using a
literal replace-all, longest emoji first. The table computes that order
once when it is built.

RULES:
- Pure-ASCII text is returned unchanged (no emoji can be present)
- Longest emoji first; equal lengths ordered by the emoji string
- Aliases are ASCII, so replaced spans can never match a later pattern
- Duplicate emoji values decode to the table's chosen alias (lossy)
"""

from __future__ import annotations

from emojify.core.table import AliasTable


def decode(text: str, table: AliasTable) -> str:
    """Replace every known emoji in ``text`` with its alias.

    Args:
        text: Arbitrary input text. Empty text is valid.
        table: The alias table whose reverse mapping drives replacement.

    Returns:
        The rewritten text; identical to ``text`` outside replaced emoji.
    """
    if text.isascii():
        return text

    result = text
    for emoji, alias in table.replacement_order():
        if emoji in result:
            result = result.replace(emoji, alias)
    return result
