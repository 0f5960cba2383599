"""Flat symbol outline built from declaration patterns.

Every line is tested against every declaration pattern. A line may produce
several entries when more than one pattern matches; the outline has no
nesting.
"""

import re
from types import MappingProxyType

from parasail_lsp.core.encoding import index_to_utf16, utf16_len
from parasail_lsp.core.types import Range, SymbolEntry, SymbolKind
from parasail_lsp.core.utils import split_lines

# Declaration keyword -> identifier, in the order entries are emitted per line
SYMBOL_PATTERNS: MappingProxyType[SymbolKind, re.Pattern[str]] = MappingProxyType({
    SymbolKind.FUNCTION: re.compile(r"\bfunc\s+(\w+)"),
    SymbolKind.TYPE: re.compile(r"\btype\s+(\w+)"),
    SymbolKind.INTERFACE: re.compile(r"\binterface\s+(\w+)"),
    SymbolKind.CLASS: re.compile(r"\bclass\s+(\w+)"),
    SymbolKind.MODULE: re.compile(r"\bmodule\s+(\w+)"),
    SymbolKind.PACKAGE: re.compile(r"\bpackage\s+(\w+)"),
})

# "end func Foo" closes a declaration rather than opening one
_CLOSING_RE = re.compile(r"^\s*end\b")

_COMMENT_MARKER = "//"


def _code_part(line: str) -> str:
    """Line text before any // comment."""
    cut = line.find(_COMMENT_MARKER)
    return line if cut < 0 else line[:cut]


def symbols_in_line(line: str, line_number: int) -> list[SymbolEntry]:
    """Outline entries declared on a single line."""
    code = _code_part(line)
    if _CLOSING_RE.match(code):
        return []

    entries: list[SymbolEntry] = []
    line_range = Range.on_line(line_number, 0, utf16_len(line))
    for kind, pattern in SYMBOL_PATTERNS.items():
        match = pattern.search(code)
        if match is None:
            continue
        entries.append(SymbolEntry(
            name=match.group(1),
            kind=kind,
            range=line_range,
            selection_range=Range.on_line(
                line_number,
                index_to_utf16(line, match.start(1)),
                index_to_utf16(line, match.end(1)),
            ),
        ))
    return entries


def symbols_in(text: str) -> list[SymbolEntry]:
    """Outline of text, in line order."""
    entries: list[SymbolEntry] = []
    for line_number, line in enumerate(split_lines(text)):
        entries.extend(symbols_in_line(line, line_number))
    return entries
