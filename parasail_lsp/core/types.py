"""Core types for parasail-lsp.

This module defines the plain data produced by the analysis engine:
positions, ranges, diagnostics, completion items, outline entries and
edits. All dataclasses are frozen for immutability. Positions are zero-based
and columns are counted in UTF-16 code units, the editor's convention.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True)
class Position:
    """A zero-based (line, character) location in a document."""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """A span between two positions, end exclusive."""

    start: Position
    end: Position

    @classmethod
    def on_line(cls, line: int, start: int, end: int) -> "Range":
        """Build a range that stays within a single line."""
        return cls(Position(line, start), Position(line, end))

    def contains(self, other: "Range") -> bool:
        """Return True if other lies within this range."""
        return (
            (self.start.line, self.start.character) <= (other.start.line, other.start.character)
            and (other.end.line, other.end.character) <= (self.end.line, self.end.character)
        )


class DiagnosticSeverity(IntEnum):
    """Diagnostic severity. Values match the LSP wire encoding."""

    ERROR = 1
    WARNING = 2
    INFORMATION = 3


@dataclass(frozen=True)
class Diagnostic:
    """A problem reported at a text location.

    Attributes:
        severity: How serious the problem is.
        range: Where the problem is.
        message: Human-readable description.
        source: Tool that produced the diagnostic.
    """

    severity: DiagnosticSeverity
    range: Range
    message: str
    source: str = "parasail"


class CompletionItemKind(Enum):
    """Where a completion candidate came from."""

    KEYWORD = "keyword"
    MODULE = "module"
    SNIPPET = "snippet"
    REFERENCE = "reference"


@dataclass(frozen=True)
class CompletionItem:
    """A completion candidate.

    Attributes:
        label: Text shown in the completion list.
        kind: Candidate category.
        documentation: Long description; keyword items leave this empty
            until resolved.
        detail: Short one-line annotation.
        insert_text: Text to insert instead of the label.
        is_snippet: True when insert_text uses ``${index:default}`` placeholders.
    """

    label: str
    kind: CompletionItemKind
    documentation: str | None = None
    detail: str | None = None
    insert_text: str | None = None
    is_snippet: bool = False


class SymbolKind(Enum):
    """Declaration kind of an outline entry."""

    FUNCTION = "function"
    TYPE = "type"
    INTERFACE = "interface"
    CLASS = "class"
    MODULE = "module"
    PACKAGE = "package"


@dataclass(frozen=True)
class SymbolEntry:
    """A named declaration found in a document.

    Attributes:
        name: The declared identifier.
        kind: Declaration kind.
        range: The whole physical line holding the declaration.
        selection_range: The identifier only.
    """

    name: str
    kind: SymbolKind
    range: Range
    selection_range: Range


@dataclass(frozen=True)
class TextEdit:
    """Replace the text covered by range with new_text."""

    range: Range
    new_text: str


@dataclass(frozen=True)
class Hover:
    """Documentation for the token under the cursor."""

    contents: str
    range: Range | None = None
