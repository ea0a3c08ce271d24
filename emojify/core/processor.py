"""Processor: one alias table plus the operations that use it.

WHY: The CLI, tests and library callers all want "encode this", "decode
this", "list everything" without threading a table through every call.
A Processor binds the table once; the module-level functions bind the
default table.

HOW: Processor holds an AliasTable (the shared default when none is
given) and delegates to encoder.encode, decoder.decode and
AliasTable.list_all.

RULES:
- A Processor never mutates its table
- Processors over the same table give identical results
- Module-level encode/decode/list_all use the default table
"""

from __future__ import annotations

from collections.abc import Iterator

from emojify.core import decoder, encoder
from emojify.core.table import AliasTable, default_table


class Processor:
    """Encode and decode text against one alias table."""

    def __init__(self, table: AliasTable | None = None) -> None:
        self.table = table if table is not None else default_table()

    def encode(self, text: str) -> str:
        """Replace aliases with emoji."""
        return encoder.encode(text, self.table)

    def decode(self, text: str) -> str:
        """Replace emoji with aliases."""
        return decoder.decode(text, self.table)

    def list_all(self) -> Iterator[str]:
        """Yield ``"alias emoji"`` lines sorted by alias."""
        return self.table.list_all()


def encode(text: str) -> str:
    """Encode ``text`` with the default table."""
    return Processor().encode(text)


def decode(text: str) -> str:
    """Decode ``text`` with the default table."""
    return Processor().decode(text)


def list_all() -> Iterator[str]:
    """List every alias of the default table."""
    return Processor().list_all()
