"""Conversions between engine results and lsprotocol wire types."""

from __future__ import annotations

from lsprotocol import types as lsp

from parasail_lsp.core.types import (
    CompletionItem,
    CompletionItemKind,
    Diagnostic,
    Hover,
    Position,
    Range,
    SymbolEntry,
    SymbolKind,
    TextEdit,
)

COMPLETION_KINDS: dict[CompletionItemKind, lsp.CompletionItemKind] = {
    CompletionItemKind.KEYWORD: lsp.CompletionItemKind.Keyword,
    CompletionItemKind.MODULE: lsp.CompletionItemKind.Module,
    CompletionItemKind.SNIPPET: lsp.CompletionItemKind.Snippet,
    CompletionItemKind.REFERENCE: lsp.CompletionItemKind.Reference,
}

_COMPLETION_KINDS_REVERSE = {v: k for k, v in COMPLETION_KINDS.items()}

SYMBOL_KINDS: dict[SymbolKind, lsp.SymbolKind] = {
    SymbolKind.FUNCTION: lsp.SymbolKind.Function,
    SymbolKind.TYPE: lsp.SymbolKind.Struct,
    SymbolKind.INTERFACE: lsp.SymbolKind.Interface,
    SymbolKind.CLASS: lsp.SymbolKind.Class,
    SymbolKind.MODULE: lsp.SymbolKind.Module,
    SymbolKind.PACKAGE: lsp.SymbolKind.Package,
}


def to_position(position: lsp.Position) -> Position:
    return Position(position.line, position.character)


def to_lsp_range(span: Range) -> lsp.Range:
    return lsp.Range(
        start=lsp.Position(line=span.start.line, character=span.start.character),
        end=lsp.Position(line=span.end.line, character=span.end.character),
    )


def to_lsp_diagnostic(diagnostic: Diagnostic) -> lsp.Diagnostic:
    return lsp.Diagnostic(
        range=to_lsp_range(diagnostic.range),
        message=diagnostic.message,
        severity=lsp.DiagnosticSeverity(int(diagnostic.severity)),
        source=diagnostic.source,
    )


def to_lsp_completion(item: CompletionItem) -> lsp.CompletionItem:
    return lsp.CompletionItem(
        label=item.label,
        kind=COMPLETION_KINDS[item.kind],
        documentation=item.documentation,
        detail=item.detail,
        insert_text=item.insert_text,
        insert_text_format=lsp.InsertTextFormat.Snippet if item.is_snippet else None,
    )


def from_lsp_completion(item: lsp.CompletionItem) -> CompletionItem:
    """Rebuild an engine item from one echoed back by completionItem/resolve."""
    documentation = item.documentation
    if isinstance(documentation, lsp.MarkupContent):
        documentation = documentation.value
    return CompletionItem(
        label=item.label,
        kind=_COMPLETION_KINDS_REVERSE.get(item.kind, CompletionItemKind.KEYWORD),
        documentation=documentation,
        detail=item.detail,
        insert_text=item.insert_text,
        is_snippet=item.insert_text_format == lsp.InsertTextFormat.Snippet,
    )


def to_lsp_hover(hover: Hover) -> lsp.Hover:
    return lsp.Hover(
        contents=lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=hover.contents),
        range=to_lsp_range(hover.range) if hover.range else None,
    )


def to_lsp_symbol(entry: SymbolEntry) -> lsp.DocumentSymbol:
    return lsp.DocumentSymbol(
        name=entry.name,
        kind=SYMBOL_KINDS[entry.kind],
        range=to_lsp_range(entry.range),
        selection_range=to_lsp_range(entry.selection_range),
        detail=entry.kind.value,
    )


def to_lsp_edit(edit: TextEdit) -> lsp.TextEdit:
    return lsp.TextEdit(range=to_lsp_range(edit.range), new_text=edit.new_text)
