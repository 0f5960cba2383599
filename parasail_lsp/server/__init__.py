"""Language Server Protocol front end for the analysis engine."""

from parasail_lsp.server.app import ParasailLanguageServer, create_server, run_server
from parasail_lsp.server.bootstrap import configure_logging
from parasail_lsp.server.validation import ValidationCoordinator

__all__ = [
    "ParasailLanguageServer",
    "ValidationCoordinator",
    "configure_logging",
    "create_server",
    "run_server",
]
