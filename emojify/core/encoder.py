"""Alias → emoji encoder: a single-pass marker scanner.

WHY: Aliases sit inside arbitrary text, and markers are also ordinary
punctuation (times like 12:30, "note: ..."). The encoder must replace
every alias it knows while copying everything else byte for byte,
including runs of markers that look like half an alias.

HOW: A two-state machine walks the text once. OUTSIDE copies characters
straight to the output. IN_TOKEN accumulates a pending candidate starting
at a marker. A closing marker triggers a table lookup; on a miss whose
next character could start a new alias body, the closing marker is
reused as the opening marker of a fresh candidate, so ":a:b:" still
tries ":b:".

RULES:
- Text without a marker is returned unchanged without scanning
- Hit: emit the emoji, go OUTSIDE
- Miss followed by an alias char: emit the token minus its last marker,
  restart the pending token with that marker, stay IN_TOKEN
- Miss otherwise: emit the closed token verbatim, go OUTSIDE
- Any other character aborts the candidate: it is appended and the whole
  pending token is emitted verbatim (not re-scanned)
- An unterminated candidate at end of input is emitted verbatim
- Already emitted output is never revisited
"""

from __future__ import annotations

import enum

from emojify.config import MARKER
from emojify.core.chars import has_marker, is_alias_char
from emojify.core.table import AliasTable


class ScanState(str, enum.Enum):
    """Scanner states.

    RULES:
    - outside: copying plain text
    - in_token: accumulating a candidate that started at a marker
    """

    OUTSIDE = "outside"
    IN_TOKEN = "in_token"


def encode(text: str, table: AliasTable) -> str:
    """Replace every known alias in ``text`` with its emoji.

    Args:
        text: Arbitrary input text. Empty text is valid.
        table: The alias table to resolve candidates against.

    Returns:
        The rewritten text; identical to ``text`` outside replaced aliases.
    """
    if not has_marker(text):
        return text

    out: list[str] = []
    pending: list[str] = []
    state = ScanState.OUTSIDE
    last = len(text) - 1

    for i, ch in enumerate(text):
        if state is ScanState.OUTSIDE:
            if ch == MARKER:
                pending = [ch]
                state = ScanState.IN_TOKEN
            else:
                out.append(ch)
            continue

        # IN_TOKEN
        if ch == MARKER:
            pending.append(ch)
            token = "".join(pending)
            replacement = table.lookup(token)

            if replacement != token:
                out.append(replacement)
                pending = []
                state = ScanState.OUTSIDE
            elif i < last and is_alias_char(text[i + 1]):
                # The closing marker may open the next alias
                out.append(token[:-1])
                pending = [MARKER]
            else:
                out.append(token)
                pending = []
                state = ScanState.OUTSIDE
        elif is_alias_char(ch):
            pending.append(ch)
        else:
            pending.append(ch)
            out.append("".join(pending))
            pending = []
            state = ScanState.OUTSIDE

    if pending:
        out.append("".join(pending))

    return "".join(out)
