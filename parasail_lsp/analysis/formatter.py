"""Indentation normalization.

Snaps each line's leading whitespace down to the nearest multiple of the tab
size, written as spaces. Block structure is not considered; callers wanting
keyword-aware indentation must layer it on top.
"""

import re

from parasail_lsp.core.types import Range, TextEdit
from parasail_lsp.core.utils import split_lines

# Leading run of horizontal whitespace; \r and \n never belong to it
_INDENT_RE = re.compile(r"[^\S\r\n]*")


def expected_indent(current: str, tab_size: int) -> str:
    """Spaces for `current` snapped down to a multiple of tab_size."""
    return " " * (tab_size * (len(current) // tab_size))


def reindent(text: str, tab_size: int) -> list[TextEdit]:
    """Edits replacing misaligned leading whitespace.

    Lines already indented by a multiple of tab_size spaces produce no edit,
    so applying the result and re-running yields nothing.
    """
    if tab_size < 1:
        return []

    edits: list[TextEdit] = []
    for line_number, line in enumerate(split_lines(text)):
        current = _INDENT_RE.match(line).group(0)
        expected = expected_indent(current, tab_size)
        if current != expected:
            edits.append(TextEdit(
                range=Range.on_line(line_number, 0, len(current)),
                new_text=expected,
            ))
    return edits


def apply_edits(text: str, edits: list[TextEdit]) -> str:
    """Apply single-line edits to text.

    Only supports edits that stay within one line, which is all the
    formatter emits.
    """
    lines = text.split("\n")
    ordered = sorted(edits, key=lambda e: (e.range.start.line, e.range.start.character), reverse=True)
    for edit in ordered:
        row = edit.range.start.line
        line = lines[row]
        lines[row] = line[:edit.range.start.character] + edit.new_text + line[edit.range.end.character:]
    return "\n".join(lines)
