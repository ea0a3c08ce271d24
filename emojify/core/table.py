"""Immutable alias table and its reverse mapping.

WHY: Encoding needs alias → emoji, decoding needs emoji → alias, and the
listing command needs a stable enumeration. One object owns all three so
they are always derived from the same data and never drift apart.

HOW: AliasTable is built once from (alias, emoji) pairs. The forward and
reverse dicts are wrapped in MappingProxyType so nothing can mutate them
after construction. load_table() reads the gemoji-format JSON resource
and caches one table per path, so every caller in the process shares the
same instance.

RULES:
- Keys are full aliases including markers (":smile:")
- lookup() never fails: a miss returns the alias unchanged
- Reverse tie-break: aliases are visited in sorted order and the first
  alias seen for an emoji wins (":+1:" over ":thumbsup:")
- The decode order (longest emoji first) is computed once per table
- list_all() yields "alias emoji" lines sorted by alias, fresh on every call
- No method mutates the table after __init__
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from emojify.config import MARKER, TABLE_PATH

logger = logging.getLogger(__name__)


class AliasTable:
    """Read-only alias → emoji mapping with a derived emoji → alias mapping.

    WHY: The encoder and decoder must share one table without any hidden
    process-wide state. Passing an explicit, immutable value keeps every
    call reentrant and lets tests build small tables of their own.

    HOW: The constructor copies the pairs into a dict, then derives the
    reverse dict by walking aliases in sorted order. Both are exposed only
    through read-only views.

    RULES:
    - Later duplicates of the same alias overwrite earlier ones
    - Duplicate emoji values keep the first alias in sorted order
    - Safe to share between threads: nothing is written after __init__
    """

    def __init__(self, pairs: Iterable[tuple[str, str]]) -> None:
        forward: dict[str, str] = {}
        for alias, emoji in pairs:
            forward[alias] = emoji

        reverse: dict[str, str] = {}
        for alias in sorted(forward):
            reverse.setdefault(forward[alias], alias)

        self._forward: Mapping[str, str] = MappingProxyType(forward)
        self._reverse: Mapping[str, str] = MappingProxyType(reverse)
        self._sorted_aliases: tuple[str, ...] = tuple(sorted(forward))
        self._replacement_order: tuple[tuple[str, str], ...] = tuple(
            (emoji, reverse[emoji])
            for emoji in sorted(reverse, key=lambda emoji: (-len(emoji), emoji))
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> AliasTable:
        """Build a table from (alias, emoji) pairs."""
        return cls(pairs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> AliasTable:
        """Build a table from an alias → emoji mapping."""
        return cls(mapping.items())

    @classmethod
    def from_entries(cls, entries: Iterable[Mapping]) -> AliasTable:
        """Build a table from gemoji-shaped records.

        WHY: The bundled resource and the remote gemoji database share the
        same record format: one emoji with a list of bare alias names.

        HOW: Each bare name is wrapped in markers and paired with the
        record's emoji.

        RULES:
        - Records need "emoji" and "aliases"; other keys are ignored
        - "smile" becomes ":smile:"
        """
        return cls(
            (f"{MARKER}{name}{MARKER}", entry["emoji"])
            for entry in entries
            for name in entry["aliases"]
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def lookup(self, alias: str) -> str:
        """Return the emoji for ``alias``, or ``alias`` itself on a miss."""
        return self._forward.get(alias, alias)

    def reverse_lookup(self, emoji: str) -> str | None:
        """Return the alias for ``emoji``, or None if it is unknown."""
        return self._reverse.get(emoji)

    @property
    def forward(self) -> Mapping[str, str]:
        return self._forward

    @property
    def reverse(self) -> Mapping[str, str]:
        return self._reverse

    def aliases(self) -> tuple[str, ...]:
        """All aliases in ascending order."""
        return self._sorted_aliases

    def emojis(self) -> tuple[str, ...]:
        """All emoji values that decode back to an alias."""
        return tuple(self._reverse)

    def replacement_order(self) -> tuple[tuple[str, str], ...]:
        """(emoji, alias) pairs for decoding, longest emoji first.

        Equal lengths are ordered by the emoji string. Computed once in
        __init__ so the decoder never re-sorts.
        """
        return self._replacement_order

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_all(self) -> Iterator[str]:
        """Yield ``"alias emoji"`` for every entry, sorted by alias.

        Each call returns a new generator, so the listing can be consumed
        any number of times.
        """
        return (f"{alias} {self._forward[alias]}" for alias in self._sorted_aliases)

    def __len__(self) -> int:
        return len(self._forward)

    def __contains__(self, alias: object) -> bool:
        return alias in self._forward

    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted_aliases)

    def __repr__(self) -> str:
        return f"AliasTable({len(self)} aliases, {len(self._reverse)} emoji)"


# ---------------------------------------------------------------------------
# Loading the bundled resource
# ---------------------------------------------------------------------------


def read_entries(path: Path) -> list[dict]:
    """Read gemoji-format records from a JSON file."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def load_table(path: Path | None = None) -> AliasTable:
    """Load and cache the alias table stored at ``path``.

    WHY: The table is large (thousands of aliases) and never changes
    while the process runs. Parsing it once and sharing the result keeps
    "build once, read many" without a module-level global.

    HOW: Resolves the path to an absolute one, then reads the JSON records
    and builds an AliasTable. The cache keys on the resolved path, so
    None, TABLE_PATH and a relative spelling of it share one table.

    RULES:
    - path=None means config.TABLE_PATH (the bundled resource by default)
    - Missing or corrupt files raise; there is no empty fallback table
    """
    resolved = Path(path if path is not None else TABLE_PATH).resolve()
    return _load_resolved(resolved)


@lru_cache(maxsize=None)
def _load_resolved(resolved: Path) -> AliasTable:
    table = AliasTable.from_entries(read_entries(resolved))
    logger.debug("Loaded %d aliases (%d emoji) from %s", len(table), len(table.reverse), resolved)
    return table


def default_table() -> AliasTable:
    """Return the shared table for the configured resource path."""
    return load_table(None)
