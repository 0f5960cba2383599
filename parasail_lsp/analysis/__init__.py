"""Document analysis engine: text in, diagnostics, completions, hovers and outlines out."""

from parasail_lsp.analysis.catalog import (
    KEYWORDS,
    STANDARD_LIBRARY,
    keywords_with_prefix,
    lookup_keyword,
    lookup_library_symbols,
)
from parasail_lsp.analysis.diagnostics import DiagnosticsAdapter, clamp_to_text, parse_diagnostics
from parasail_lsp.analysis.engine import AnalysisEngine
from parasail_lsp.analysis.formatter import apply_edits, reindent
from parasail_lsp.analysis.imports import import_label, imports_declared
from parasail_lsp.analysis.library import LibraryIndex, LibrarySymbol
from parasail_lsp.analysis.scanner import prefix_before, word_at, word_range_at
from parasail_lsp.analysis.symbols import SYMBOL_PATTERNS, symbols_in
from parasail_lsp.analysis.templates import TEMPLATES, Template, templates_matching

__all__ = [
    "AnalysisEngine",
    # Catalogs
    "KEYWORDS",
    "STANDARD_LIBRARY",
    "TEMPLATES",
    "Template",
    "keywords_with_prefix",
    "lookup_keyword",
    "lookup_library_symbols",
    "templates_matching",
    # Scanning
    "prefix_before",
    "word_at",
    "word_range_at",
    "imports_declared",
    "import_label",
    "SYMBOL_PATTERNS",
    "symbols_in",
    # Formatting
    "apply_edits",
    "reindent",
    # Diagnostics
    "DiagnosticsAdapter",
    "clamp_to_text",
    "parse_diagnostics",
    # Library
    "LibraryIndex",
    "LibrarySymbol",
]
