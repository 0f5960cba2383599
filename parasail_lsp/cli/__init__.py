"""Command-line interface."""

from parasail_lsp.cli.main import main

__all__ = ["main"]
