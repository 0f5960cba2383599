"""Line-level tokenizer for hover and completion.

A token is a maximal run of word characters, optionally joined by ``::``
namespace separators (``Containers::Vector``). All positions use UTF-16
columns; out-of-range lines and columns clamp instead of raising.
"""

import re

from parasail_lsp.core.encoding import index_to_utf16, utf16_to_index
from parasail_lsp.core.types import Position, Range
from parasail_lsp.core.utils import split_lines

TOKEN_RE = re.compile(r"\w+(?:::\w+)*")

# Partial token ending at the cursor; may end in a dangling separator ("IO::")
_PREFIX_RE = re.compile(r"(?:\w+::)*\w*$")


def line_at(text: str, line: int) -> str:
    """Return line `line` of text without its terminator, or "" if out of range."""
    lines = split_lines(text)
    if line < 0 or line >= len(lines):
        return ""
    return lines[line]


def word_range_at(text: str, position: Position) -> tuple[str, Range] | None:
    """Find the token under position and its range.

    A cursor sitting just after the last character of a token is still on
    that token.
    """
    line = line_at(text, position.line)
    column = utf16_to_index(line, position.character)
    for match in TOKEN_RE.finditer(line):
        if match.start() > column:
            break
        if column <= match.end():
            span = Range.on_line(
                position.line,
                index_to_utf16(line, match.start()),
                index_to_utf16(line, match.end()),
            )
            return match.group(0), span
    return None


def word_at(text: str, position: Position) -> str | None:
    """Return the token under position, or None."""
    found = word_range_at(text, position)
    return found[0] if found else None


def prefix_before(text: str, position: Position) -> str:
    """Return the partial token that ends exactly at the cursor.

    Returns "" at the start of a line or after a non-word character.
    """
    line = line_at(text, position.line)
    column = utf16_to_index(line, position.character)
    match = _PREFIX_RE.search(line[:column])
    return match.group(0) if match else ""
