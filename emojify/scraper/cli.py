"""Command-line interface for regenerating the alias table.

WHY: The bundled data/emoji.json goes stale as gemoji adds emoji.
Maintainers refresh it with one command instead of hand-editing
thousands of records.

HOW: argparse accepts an optional source URL and output path. The async
scrape runs via asyncio.run(), the result is rendered and written, and
progress is logged to stderr.

RULES:
- Default source: config.GEMOJI_URL; default output: the bundled resource
- Exit status 0 on success, 1 on HTTP, transport or validation errors
- Nothing is written when fetching or validation fails
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

import httpx
import jsonschema

from emojify.config import BUNDLED_TABLE_PATH, GEMOJI_URL, LOG_FORMAT, load_log_level
from emojify.scraper.client import GemojiAPIError, scrape
from emojify.scraper.generator import write_table

logger = logging.getLogger(__name__)


async def _run(args: argparse.Namespace) -> int:
    result = await scrape(url=args.url, on_status=logger.info)
    logger.info("Successfully fetched %d aliases", result.emoji_count)

    output = Path(args.output)
    count = write_table(result.entries, output)
    logger.info("Generated %s with %d emoji records", output, count)
    return count


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the scraper."""
    parser = argparse.ArgumentParser(
        prog="emojify-scraper",
        description="Fetch GitHub's gemoji database and regenerate the emojify alias table.",
    )

    parser.add_argument(
        "--url",
        default=GEMOJI_URL,
        help="Source URL of the gemoji emoji.json (default: %(default)s).",
    )

    parser.add_argument(
        "--output",
        default=str(BUNDLED_TABLE_PATH),
        help="Path of the alias table to write (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``emojify-scraper`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=load_log_level(logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        asyncio.run(_run(args))
    except (GemojiAPIError, httpx.HTTPError, jsonschema.ValidationError, OSError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
