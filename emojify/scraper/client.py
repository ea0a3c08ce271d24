"""Async HTTP client for GitHub's gemoji emoji database.

WHY: The bundled alias table is generated from gemoji's db/emoji.json.
Refreshing it means downloading that file, checking it is the shape the
generator expects, and parsing it into typed records. This module keeps
the HTTP details in one place so the scraper command (and tests) only
deal with GemojiEntry objects.

HOW: Uses httpx.AsyncClient for the download. GemojiClient is an async
context manager: enter it to open the connection pool, exit to close it.
fetch_entries() GETs the database, validates it with jsonschema and
parses each record.

RULES:
- Always use the async context manager (async with GemojiClient() as client:)
- url defaults to config.GEMOJI_URL, timeout to config.load_http_timeout()
- Non-200 responses raise GemojiAPIError with status and body
- A 200 body that is not JSON also raises GemojiAPIError
- Malformed payloads raise jsonschema.ValidationError before parsing
- Transport failures propagate as httpx.HTTPError
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from emojify.config import GEMOJI_URL, load_http_timeout
from emojify.scraper.generator import build_alias_map, validate_records
from emojify.scraper.models import GemojiEntry, ScrapeResult

logger = logging.getLogger(__name__)


class GemojiAPIError(Exception):
    """Raised when the gemoji download returns an error response.

    WHY: Callers need a typed exception to tell a bad response apart from
    a network failure or a malformed payload.

    RULES:
    - Always include status_code and message
    - message is the response body text
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"gemoji download error {status_code}: {message}")


class GemojiClient:
    """Async client for downloading the gemoji database.

    RULES:
    - Use as: async with GemojiClient() as client: ...
    - transport is for tests (httpx.MockTransport); None uses the network
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = url or GEMOJI_URL
        self._timeout = timeout if timeout is not None else load_http_timeout()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GemojiClient:
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Return the active httpx client, raising if not in context manager."""
        if self._client is None:
            raise RuntimeError(
                "GemojiClient must be used as an async context manager: "
                "async with GemojiClient() as client: ..."
            )
        return self._client

    async def fetch_entries(
        self,
        on_status: Callable[[str], None] | None = None,
    ) -> list[GemojiEntry]:
        """Download and parse the gemoji database.

        Args:
            on_status: Optional callback for status updates.

        Returns:
            Parsed records in source order.

        Raises:
            GemojiAPIError: On a non-200 response or a body that is not JSON.
            jsonschema.ValidationError: If the payload is not gemoji-shaped.
        """
        client = self._ensure_client()
        if on_status:
            on_status("Fetching emoji data from {}".format(self._url))

        resp = await client.get(self._url)
        if resp.status_code != 200:
            raise GemojiAPIError(resp.status_code, resp.text)

        try:
            records = resp.json()
        except ValueError as e:
            raise GemojiAPIError(resp.status_code, "invalid JSON: {}".format(e)) from e
        validate_records(records)
        entries = [GemojiEntry.from_dict(r) for r in records]
        logger.info("Fetched %d gemoji records", len(entries))
        return entries


async def scrape(
    url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    on_status: Callable[[str], None] | None = None,
) -> ScrapeResult:
    """Fetch the gemoji database and build the alias map.

    RULES:
    - emoji_count is the number of distinct wrapped aliases
    """
    async with GemojiClient(url=url, transport=transport) as client:
        entries = await client.fetch_entries(on_status=on_status)

    data = build_alias_map(entries)
    return ScrapeResult(emoji_count=len(data), data=data, entries=entries)
