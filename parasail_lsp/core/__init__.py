"""Core types, errors and helpers."""

from parasail_lsp.core.encoding import ENCODING, ENCODING_ERRORS, configure_stdio
from parasail_lsp.core.errors import ConfigError, ParasailError, ValidatorError
from parasail_lsp.core.types import (
    CompletionItem,
    CompletionItemKind,
    Diagnostic,
    DiagnosticSeverity,
    Hover,
    Position,
    Range,
    SymbolEntry,
    SymbolKind,
    TextEdit,
)

__all__ = [
    "ENCODING",
    "ENCODING_ERRORS",
    "configure_stdio",
    "ParasailError",
    "ConfigError",
    "ValidatorError",
    # Analysis results
    "CompletionItem",
    "CompletionItemKind",
    "Diagnostic",
    "DiagnosticSeverity",
    "Hover",
    "Position",
    "Range",
    "SymbolEntry",
    "SymbolKind",
    "TextEdit",
]
