"""Command-line interface for emojify.

WHY: The converter is mostly used in pipelines (``git log | emojify``)
and for one-off strings (``emojify "ship it :rocket:"``). Both need to
leave every byte outside an alias untouched, so the CLI must not add or
strip line endings of its own.

HOW: argparse accepts optional text words plus --list, --encode, --decode
and --version. Text words are joined with spaces and printed with a
trailing newline; stdin is read as raw bytes, processed, and written
back without any added newline. Logging goes to stderr.

RULES:
- Default mode is encode; --encode and --decode together is an error (exit 1)
- --list prints "alias emoji" lines sorted by alias and ignores text
- Text arguments: output + "\\n", except empty output prints nothing
- Stdin: output written exactly, empty input gives empty output
- Undecodable stdin bytes pass through unchanged (surrogateescape)
- Errors go to stderr as "Error: ..." with exit status 1
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import List, Optional

from emojify import __version__
from emojify.config import LOG_FORMAT, load_log_level
from emojify.core.processor import Processor

logger = logging.getLogger(__name__)

_STREAM_ENCODING = "utf-8"
_STREAM_ERRORS = "surrogateescape"


def _error(msg: str) -> None:
    """Print an error message to stderr and exit with status 1."""
    print("Error: {}".format(msg), file=sys.stderr, flush=True)
    sys.exit(1)


def _read_stdin() -> str:
    """Read all of stdin without newline translation.

    WHY: Text-mode stdin turns "\\r\\n" into "\\n", which would change
    bytes the converter promises to preserve.

    HOW: Reads the underlying binary buffer when there is one and decodes
    it with surrogateescape; falls back to the text layer otherwise.
    """
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin.read()
    return buffer.read().decode(_STREAM_ENCODING, _STREAM_ERRORS)


def _write(text: str) -> None:
    """Write ``text`` to stdout exactly, bypassing newline translation."""
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    sys.stdout.flush()
    buffer.write(text.encode(_STREAM_ENCODING, _STREAM_ERRORS))
    buffer.flush()


def _list_aliases(processor: Processor) -> None:
    _write("".join(line + "\n" for line in processor.list_all()))


def _process_args(words: List[str], process: Callable[[str], str]) -> None:
    """Process command-line words and print the result.

    RULES:
    - Words are joined with single spaces
    - A trailing newline is added unless the result is empty
    """
    processed = process(" ".join(words))
    if processed:
        _write(processed + "\n")


def _process_stdin(process: Callable[[str], str]) -> None:
    """Process stdin and write the result without adding a newline."""
    try:
        text = _read_stdin()
    except OSError as e:
        _error("error reading from stdin: {}".format(e))
        return
    logger.debug("Read %d characters from stdin", len(text))
    _write(process(text))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() lets tests inspect
    flags without running anything.

    RULES:
    - Positional: text (zero or more words)
    - Flags: -l/--list, -e/--encode, -d/--decode, -v/--version
    """
    parser = argparse.ArgumentParser(
        prog="emojify",
        description="Substitute emoji aliases (:smile:) with emoji raw characters, "
                    "or emoji back with aliases using --decode.",
        epilog="Examples:\n"
               "  emojify \"Hey, I just :raising_hand: you!\"\n"
               "  emojify --decode \"Hey, I just \U0001f64b you!\"\n"
               "  git log --oneline --color | emojify | less -r",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="Text to process. Reads stdin when omitted.",
    )

    parser.add_argument(
        "-l", "--list",
        action="store_true",
        help="List all available aliases and their emoji.",
    )

    parser.add_argument(
        "-e", "--encode",
        action="store_true",
        help="Encode aliases to emoji (default behaviour).",
    )

    parser.add_argument(
        "-d", "--decode",
        action="store_true",
        help="Decode emoji to aliases.",
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=__version__,
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``emojify`` command.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=load_log_level(logging.WARNING),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    if args.encode and args.decode:
        _error("--encode and --decode flags are mutually exclusive")
        return

    processor = Processor()

    if args.list:
        _list_aliases(processor)
        return

    process = processor.decode if args.decode else processor.encode
    logger.debug("Mode: %s", "decode" if args.decode else "encode")

    if args.text:
        _process_args(args.text, process)
    else:
        _process_stdin(process)


if __name__ == "__main__":
    main()
