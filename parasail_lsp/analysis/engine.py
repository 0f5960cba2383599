"""Analysis facade composing the scanner, catalogs and adapters.

Every operation except validation is a synchronous pure function of the
document text and the settings passed in. Settings are never read from
global state.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from parasail_lsp.analysis.catalog import (
    keywords_with_prefix,
    library_namespace,
    lookup_keyword,
    lookup_library_symbols,
)
from parasail_lsp.analysis.diagnostics import DiagnosticsAdapter
from parasail_lsp.analysis.formatter import reindent
from parasail_lsp.analysis.imports import import_label, import_namespaces, imports_declared
from parasail_lsp.analysis.library import LibraryIndex
from parasail_lsp.analysis.scanner import line_at, prefix_before, word_range_at
from parasail_lsp.analysis.symbols import symbols_in
from parasail_lsp.analysis.templates import templates_matching
from parasail_lsp.config.schema import ServerConfig, Settings
from parasail_lsp.core.errors import ValidatorError
from parasail_lsp.core.types import (
    CompletionItem,
    CompletionItemKind,
    Diagnostic,
    Hover,
    Position,
    SymbolEntry,
    TextEdit,
)

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Turns document text into completions, hovers, outlines, edits and diagnostics."""

    def __init__(
        self,
        adapter: DiagnosticsAdapter,
        library: LibraryIndex | None = None,
    ) -> None:
        self.adapter = adapter
        self.library = library or LibraryIndex()

    @classmethod
    def from_config(cls, config: ServerConfig) -> AnalysisEngine:
        """Build an engine whose adapter and library follow config."""
        adapter = DiagnosticsAdapter(
            config.interpreter,
            config.interpreter_args,
            file_suffix=config.file_suffix,
            temp_dir=config.temp_dir,
            timeout=config.validation_timeout,
        )
        return cls(adapter, LibraryIndex.scan(config.settings.library_paths))

    def reload_library(self, paths: list[str]) -> None:
        """Swap in a fresh library index for new settings."""
        self.library = LibraryIndex.scan(paths)

    # -- completion --------------------------------------------------------

    def complete(self, text: str, position: Position, settings: Settings) -> list[CompletionItem]:
        """Candidates for the cursor, concatenated by source with no ranking."""
        prefix = prefix_before(text, position)
        declared = imports_declared(text)

        items: list[CompletionItem] = [
            CompletionItem(label=name, kind=CompletionItemKind.KEYWORD)
            for name in keywords_with_prefix(prefix)
        ]

        namespaces = None if settings.implicit_imports else import_namespaces(declared)
        for name, doc in lookup_library_symbols(prefix):
            if namespaces is not None and library_namespace(name) not in namespaces:
                continue
            items.append(CompletionItem(
                label=name,
                kind=CompletionItemKind.MODULE,
                documentation=doc,
                detail="Standard Library",
            ))

        for symbol in self.library.matching(prefix):
            items.append(CompletionItem(
                label=symbol.name,
                kind=CompletionItemKind.MODULE,
                documentation=f"{symbol.kind.value} {symbol.name}",
                detail=f"Library: {symbol.path.name}",
            ))

        for template in templates_matching(line_at(text, position.line)):
            items.append(CompletionItem(
                label=template.label,
                kind=CompletionItemKind.SNIPPET,
                documentation=template.description,
                insert_text=template.snippet,
                is_snippet=True,
            ))

        for path in sorted(declared):
            items.append(CompletionItem(
                label=import_label(path),
                kind=CompletionItemKind.REFERENCE,
                documentation=f"Resolved import: {path}",
                detail=f"Import from {path}",
            ))

        return items

    def resolve(self, item: CompletionItem) -> CompletionItem:
        """Fill in documentation left empty at completion time."""
        if item.documentation is not None:
            return item
        doc = lookup_keyword(item.label)
        return replace(item, documentation=doc) if doc else item

    # -- navigation --------------------------------------------------------

    def hover(self, text: str, position: Position) -> Hover | None:
        """Keyword documentation for the token under the cursor."""
        found = word_range_at(text, position)
        if found is None:
            return None
        word, span = found
        doc = lookup_keyword(word)
        return Hover(contents=doc, range=span) if doc else None

    def outline(self, text: str) -> list[SymbolEntry]:
        return symbols_in(text)

    def format(self, text: str, tab_size: int, settings: Settings) -> list[TextEdit]:
        if not settings.enable_formatting:
            return []
        return reindent(text, tab_size)

    # -- validation --------------------------------------------------------

    async def validate(self, text: str, settings: Settings) -> list[Diagnostic] | None:
        """Run the interpreter over text.

        Returns:
            Diagnostics capped at ``max_number_of_problems``, or None when
            the interpreter could not run. None means "leave the previous
            diagnostics alone"; the failure is logged, never raised.
        """
        try:
            diagnostics = await self.adapter.run(text)
        except ValidatorError as e:
            logger.error("Validation error: %s", e.message)
            return None
        if len(diagnostics) > settings.max_number_of_problems:
            logger.debug(
                "Truncating %d diagnostics to %d",
                len(diagnostics), settings.max_number_of_problems,
            )
            diagnostics = diagnostics[: settings.max_number_of_problems]
        return diagnostics
