"""Rich-based output utilities for the parasail-lsp CLI.

The ``serve`` command never prints through this module: in stdio mode
stdout belongs to the protocol.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from parasail_lsp.core.types import Diagnostic, DiagnosticSeverity, SymbolEntry

# Shared console instance; soft wrap keeps file:line:col output on one line
console = Console(highlight=False, soft_wrap=True)

_SEVERITY_STYLES: dict[DiagnosticSeverity, tuple[str, str]] = {
    DiagnosticSeverity.ERROR: ("error", "bold red"),
    DiagnosticSeverity.WARNING: ("warning", "yellow"),
    DiagnosticSeverity.INFORMATION: ("info", "cyan"),
}


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[dim]{escape(message)}[/dim]")


def print_diagnostics(path: Path, diagnostics: list[Diagnostic]) -> None:
    """Print diagnostics as ``file:line:col: severity: message`` (1-based)."""
    if not diagnostics:
        print_info(f"{path}: no problems")
        return
    for diag in diagnostics:
        label, style = _SEVERITY_STYLES[diag.severity]
        start = diag.range.start
        console.print(
            f"{escape(str(path))}:{start.line + 1}:{start.character + 1}: "
            f"[{style}]{label}[/{style}]: {escape(diag.message)}"
        )


def print_outline(path: Path, symbols: list[SymbolEntry]) -> None:
    """Print outline entries as a table."""
    if not symbols:
        print_info(f"{path}: no declarations")
        return
    table = Table(title=str(path), title_justify="left")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Kind", style="cyan")
    table.add_column("Name", style="bold")
    for entry in symbols:
        table.add_row(str(entry.range.start.line + 1), entry.kind.value, entry.name)
    console.print(table)
