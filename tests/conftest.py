"""Shared test fixtures for the emojify test suite.

WHY: Most tests need either the real bundled alias table (to check
behaviour users actually see) or a tiny hand-built table (to pin down
scanner and decoder edge cases independent of the data).

HOW: Pytest fixtures provide the cached default table, a Processor over
it, and a small AliasTable built from SAMPLE_PAIRS.

RULES:
- SAMPLE_PAIRS includes a duplicate emoji to exercise the reverse tie-break
- SAMPLE_PAIRS includes a base emoji and its skin-toned form
- The default table is loaded once per session (load_table caches it)
"""

from typing import List, Tuple

import pytest

from emojify.core.processor import Processor
from emojify.core.table import AliasTable, default_table

SAMPLE_PAIRS: List[Tuple[str, str]] = [
    (":smile:", "\U0001f604"),
    (":grin:", "\U0001f601"),
    (":tada:", "\U0001f389"),
    (":+1:", "\U0001f44d"),
    (":thumbsup:", "\U0001f44d"),
    (":-1:", "\U0001f44e"),
    (":wave:", "\U0001f44b"),
    (":wave_tone1:", "\U0001f44b\U0001f3fb"),
    (":a:", "\U0001f170\ufe0f"),
    (":b:", "\U0001f171\ufe0f"),
]


@pytest.fixture
def sample_table():
    """A small AliasTable built from SAMPLE_PAIRS."""
    return AliasTable.from_pairs(SAMPLE_PAIRS)


@pytest.fixture(scope="session")
def table():
    """The bundled alias table."""
    return default_table()


@pytest.fixture
def processor(table):
    """A Processor over the bundled alias table."""
    return Processor(table)
