"""gemoji scraper package: regenerates the bundled alias table.

WHY: The alias table is a static resource built from GitHub's gemoji
database. This package is the only part of emojify that talks to the
network, and it is never used at conversion time.

HOW: client.py downloads and validates the database, generator.py turns
records into the alias map and the resource file, cli.py wires both
behind the ``emojify-scraper`` command.

RULES:
- All HTTP goes through GemojiClient (no direct httpx usage elsewhere)
- Generated output is schema-validated before it is written
"""

from emojify.scraper.client import GemojiAPIError, GemojiClient, scrape
from emojify.scraper.models import GemojiEntry, ScrapeResult

__all__ = ["GemojiAPIError", "GemojiClient", "GemojiEntry", "ScrapeResult", "scrape"]
