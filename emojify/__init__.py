"""emojify: convert emoji aliases to emoji and back.

WHY: Services like GitHub and Slack write emoji as aliases (":tada:"),
but terminals, commit logs and plain-text files show the raw text. This
package swaps aliases for the real emoji, and emoji back for aliases,
without touching anything else in the text.

HOW: A static alias table (generated from GitHub's gemoji database) is
loaded once. The encoder scans text for marker-delimited aliases; the
decoder replaces emoji longest-first. The CLI and the scraper that
regenerates the table are thin layers on top.

RULES:
- encode/decode never fail and never alter text outside replaced spans
- The alias table is immutable once loaded
- The scraper is the only component that touches the network
"""

from emojify.core.processor import Processor, decode, encode, list_all
from emojify.core.table import AliasTable, load_table

__version__ = "1.0.0"

__all__ = [
    "AliasTable",
    "Processor",
    "decode",
    "encode",
    "list_all",
    "load_table",
]
