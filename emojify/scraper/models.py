"""gemoji record and scrape result dataclasses.

WHY: The gemoji database is a flat JSON array of loosely-typed records.
Typed dataclasses make the fields the generator relies on explicit and
catch shape mismatches at the boundary instead of deep in rendering.

HOW: GemojiEntry.from_dict parses one record, keeping only the fields
emojify uses. ScrapeResult bundles the parsed entries with the derived
alias map.

RULES:
- emoji and aliases are required; description, category, tags are optional
- aliases are bare names ("smile"), never wrapped in markers
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GemojiEntry:
    """One emoji record from the gemoji database.

    RULES:
    - emoji: the raw emoji string, possibly several code points
    - aliases: bare alias names in source order
    - description/category: human-readable metadata, may be empty
    - tags: search keywords; not used for lookup
    """

    emoji: str
    aliases: list[str]
    description: str = ""
    category: str = ""
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> GemojiEntry:
        """Parse a GemojiEntry from a raw record dict."""
        return cls(
            emoji=data["emoji"],
            aliases=list(data["aliases"]),
            description=data.get("description", ""),
            category=data.get("category", ""),
            tags=list(data.get("tags", [])),
        )

    def to_dict(self) -> dict:
        """Serialize to the resource record format (tags omitted)."""
        record: dict = {"emoji": self.emoji}
        if self.description:
            record["description"] = self.description
        if self.category:
            record["category"] = self.category
        record["aliases"] = list(self.aliases)
        return record


@dataclass
class ScrapeResult:
    """The outcome of one scrape.

    RULES:
    - emoji_count is the number of distinct aliases in data
    - data maps ":alias:" → emoji
    - entries keeps the parsed records for rendering
    """

    emoji_count: int
    data: dict[str, str]
    entries: list[GemojiEntry] = field(default_factory=list)
