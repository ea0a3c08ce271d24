"""Core rewriting modules: classifier, table, encoder, decoder.

WHY: The core package is the part of emojify with real logic: the
marker scanner, the longest-first decoder, and the immutable table they
both read. Everything else (CLI, scraper) is plumbing around it.

HOW: chars.py classifies alias characters, table.py owns the alias and
reverse mappings, encoder.py and decoder.py are pure functions of text
and table, processor.py binds a table to both.

RULES:
- No I/O here except table.load_table() reading the resource file
- encode/decode are total: any string in, a string out, no exceptions
"""
