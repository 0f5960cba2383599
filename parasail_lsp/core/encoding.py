"""UTF-8 constants and UTF-16 position helpers for parasail-lsp.

Editors address characters in UTF-16 code units while Python strings index
by code point. Every column that crosses the engine boundary goes through
these helpers.
"""

import sys

# Encoding constants
ENCODING = "utf-8"
ENCODING_ERRORS = "replace"  # Preserve data, mark corruption


def configure_stdio() -> None:
    """Reconfigure stderr to UTF-8 with replace error handling.

    stdin/stdout carry the protocol in stdio mode and are left untouched.
    """
    if hasattr(sys.stderr, "reconfigure"):
        sys.stderr.reconfigure(encoding=ENCODING, errors=ENCODING_ERRORS)


def utf16_len(text: str) -> int:
    """Length of text in UTF-16 code units."""
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in text)


def utf16_to_index(line: str, column: int) -> int:
    """Convert a UTF-16 column to a string index within line.

    Columns past the end of the line clamp to len(line). A column that lands
    inside a surrogate pair resolves to the character it belongs to.
    """
    if column <= 0:
        return 0
    units = 0
    for index, ch in enumerate(line):
        units += 2 if ord(ch) > 0xFFFF else 1
        if units > column:
            return index
        if units == column:
            return index + 1
    return len(line)


def index_to_utf16(line: str, index: int) -> int:
    """Convert a string index within line to a UTF-16 column."""
    index = max(0, min(index, len(line)))
    return utf16_len(line[:index])
