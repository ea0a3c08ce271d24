"""Configuration constants, resource paths, and .env loading.

WHY: Centralizes every configurable value (the alias marker, where the
alias table lives, where the scraper fetches from, how loud logging is)
so they are easy to find, update, and override without touching the
scanning logic.

HOW: python-dotenv loads the .env file on import. Constants are plain
module-level values; environment variables override the defaults.
load_log_level() turns a level name into a logging level with a safe
fallback.

RULES:
- MARKER is fixed (":"); the delimiter is not configurable
- TABLE_PATH defaults to the bundled data/emoji.json resource
- EMOJIFY_DATA_PATH points the table loader at a regenerated resource
- Unknown log level names fall back to the caller's default
- A bad EMOJIFY_HTTP_TIMEOUT falls back to 30 seconds; importing never fails
"""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from the working directory (where the CLI is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Alias syntax
# ---------------------------------------------------------------------------

MARKER = ":"
"""Character opening and closing every alias, e.g. ``:smile:``."""

# ---------------------------------------------------------------------------
# Resource paths
# ---------------------------------------------------------------------------

DATA_DIR = Path(__file__).resolve().parent / "data"
BUNDLED_TABLE_PATH = DATA_DIR / "emoji.json"
SCHEMA_PATH = DATA_DIR / "gemoji_schema.json"

TABLE_PATH = Path(os.getenv("EMOJIFY_DATA_PATH", str(BUNDLED_TABLE_PATH)))

# ---------------------------------------------------------------------------
# Scraper defaults
# ---------------------------------------------------------------------------

GEMOJI_URL = os.getenv(
    "EMOJIFY_GEMOJI_URL",
    "https://raw.githubusercontent.com/github/gemoji/master/db/emoji.json",
)
DEFAULT_HTTP_TIMEOUT_S = 30.0
HTTP_TIMEOUT = os.getenv("EMOJIFY_HTTP_TIMEOUT", "")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_LEVEL = os.getenv("EMOJIFY_LOG_LEVEL", "")


def load_log_level(default: int = logging.WARNING) -> int:
    """Resolve EMOJIFY_LOG_LEVEL to a logging level.

    WHY: The text CLI must stay quiet on stderr by default, while the
    scraper reports progress. Both read the same variable.

    HOW: Looks the upper-cased name up in the logging module's level
    table.

    RULES:
    - Empty or unknown names return ``default``
    - Numeric strings are accepted as-is
    """
    name = LOG_LEVEL.strip().upper()
    if not name:
        return default
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def load_http_timeout() -> float:
    """Resolve EMOJIFY_HTTP_TIMEOUT to a timeout in seconds.

    RULES:
    - Empty means DEFAULT_HTTP_TIMEOUT_S
    - Non-numeric, non-positive or non-finite values log a warning and
      return DEFAULT_HTTP_TIMEOUT_S
    """
    raw = HTTP_TIMEOUT.strip()
    if not raw:
        return DEFAULT_HTTP_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value) or value <= 0:
        logger.warning(
            "Ignoring invalid EMOJIFY_HTTP_TIMEOUT %r, using %s seconds",
            HTTP_TIMEOUT, DEFAULT_HTTP_TIMEOUT_S,
        )
        return DEFAULT_HTTP_TIMEOUT_S
    return value
