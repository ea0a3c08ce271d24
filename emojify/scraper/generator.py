"""Turn gemoji records into the alias map and the bundled resource file.

WHY: The alias table ships as a static JSON resource so the converter
never needs the network. Regenerating that resource must be repeatable:
same input, byte-identical output, and never a record the loader would
choke on.

HOW: build_alias_map() wraps every bare alias in markers. render_table()
drops aliases that would not survive the encoder's character rules,
sorts records by their first alias, validates the result against the
gemoji schema, and serializes one record per line.

RULES:
- Later records overwrite earlier ones that reuse an alias, in the map
  and in the rendered file alike
- Invalid aliases are dropped with a warning, not an error
- Records left with no aliases are omitted
- Output is validated with jsonschema before it is returned
- ensure_ascii=False: emoji are stored as UTF-8, not escapes
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import jsonschema

from emojify.config import MARKER, SCHEMA_PATH
from emojify.core.chars import is_alias
from emojify.scraper.models import GemojiEntry

logger = logging.getLogger(__name__)


def _load_schema() -> dict[str, Any]:
    """Load the gemoji JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def validate_records(records: Any) -> None:
    """Validate raw records against the gemoji schema.

    Raises:
        jsonschema.ValidationError: If the records do not match.
    """
    jsonschema.validate(instance=records, schema=_get_schema())


def wrap_alias(name: str) -> str:
    """Wrap a bare alias name in markers: "smile" → ":smile:"."""
    return f"{MARKER}{name}{MARKER}"


def build_alias_map(entries: Iterable[GemojiEntry]) -> dict[str, str]:
    """Map every wrapped alias to its emoji."""
    alias_map: dict[str, str] = {}
    for entry in entries:
        for name in entry.aliases:
            alias_map[wrap_alias(name)] = entry.emoji
    return alias_map


def _alias_owners(entries: list[GemojiEntry]) -> dict[str, int]:
    """Map each bare alias to the index of the last record that uses it."""
    owners: dict[str, int] = {}
    for index, entry in enumerate(entries):
        for name in entry.aliases:
            owners[name] = index
    return owners


def _clean_entry(entry: GemojiEntry, index: int, owners: dict[str, int]) -> GemojiEntry | None:
    """Drop aliases the encoder could never match or a later record reuses.

    RULES:
    - Keeps alias order
    - An alias stays only on the record build_alias_map() would map it to
    - Repeats of an alias within one record are kept once
    - Returns None when no alias survives
    """
    valid: list[str] = []
    for name in entry.aliases:
        if not is_alias(wrap_alias(name)):
            logger.warning("Dropping invalid alias %r for %s", name, entry.emoji)
        elif owners[name] != index:
            logger.warning("Dropping alias %r for %s: reused by a later record", name, entry.emoji)
        elif name not in valid:
            valid.append(name)
    if not valid:
        return None
    return GemojiEntry(
        emoji=entry.emoji,
        aliases=valid,
        description=entry.description,
        category=entry.category,
        tags=list(entry.tags),
    )


def render_table(entries: Iterable[GemojiEntry]) -> str:
    """Serialize entries into the bundled resource format.

    WHY: The resource is checked into the package; a stable layout keeps
    regenerations reviewable as ordinary diffs.

    HOW: Cleans each entry (invalid and overridden aliases dropped),
    sorts by first alias, validates, then writes a JSON array with one
    compact record per line.

    Raises:
        jsonschema.ValidationError: If the rendered records are invalid.
    """
    entries = list(entries)
    owners = _alias_owners(entries)
    cleaned = [
        c for c in (_clean_entry(e, i, owners) for i, e in enumerate(entries))
        if c is not None
    ]
    cleaned.sort(key=lambda e: e.aliases[0])
    records = [e.to_dict() for e in cleaned]

    validate_records(records)

    lines = [
        "  " + json.dumps(record, ensure_ascii=False, separators=(",", ":"))
        for record in records
    ]
    if not lines:
        return "[]\n"
    return "[\n" + ",\n".join(lines) + "\n]\n"


def write_table(entries: Iterable[GemojiEntry], path: Path) -> int:
    """Render entries and write them to ``path``.

    Returns:
        The number of records written.
    """
    content = render_table(entries)
    path = Path(path)
    path.write_text(content, encoding="utf-8")
    count = len(json.loads(content))
    logger.info("Wrote %d records to %s", count, path)
    return count
