"""Logging setup for the language server.

In stdio mode stdout carries the protocol, so console logs go to stderr.
Once a client is connected, warnings and errors are also forwarded to its
log console through ``window/logMessage``.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from lsprotocol import types as lsp

if TYPE_CHECKING:
    from pygls.lsp.server import LanguageServer

logger = logging.getLogger(__name__)

LOGGER_NAMESPACE = "parasail_lsp"

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_MESSAGE_TYPES: dict[int, lsp.MessageType] = {
    logging.ERROR: lsp.MessageType.Error,
    logging.WARNING: lsp.MessageType.Warning,
    logging.INFO: lsp.MessageType.Info,
    logging.DEBUG: lsp.MessageType.Log,
}


def configure_logging(
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> Path | None:
    """Configure the parasail_lsp namespace logger.

    Adds a stderr handler and, when log_file is given, a rotating file
    handler (max 5MB per file, 3 backup files). Existing handlers are
    replaced so repeated calls don't duplicate output.

    Args:
        level: Logging level for both handlers.
        log_file: Optional path of the log file. Parent dirs are created.

    Returns:
        The log file path, or None when logging only to stderr.
    """
    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel(level)
    root.handlers.clear()
    root.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(console_handler)

    if log_file is None:
        return None

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(file_handler)

    logger.info("Server logging configured: %s", log_file)
    return log_file


class LspLogHandler(logging.Handler):
    """Forwards log records to the client's log console."""

    def __init__(self, server: LanguageServer, level: int = logging.WARNING) -> None:
        super().__init__(level)
        self._server = server
        self.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message_type = _MESSAGE_TYPES.get(record.levelno, lsp.MessageType.Log)
            if record.levelno >= logging.ERROR:
                message_type = lsp.MessageType.Error
            self._server.window_log_message(
                lsp.LogMessageParams(type=message_type, message=self.format(record))
            )
        except Exception:
            self.handleError(record)


def attach_client_logging(server: LanguageServer, level: int = logging.WARNING) -> LspLogHandler:
    """Install an LspLogHandler on the namespace logger, replacing any previous one."""
    root = logging.getLogger(LOGGER_NAMESPACE)
    for handler in list(root.handlers):
        if isinstance(handler, LspLogHandler):
            root.removeHandler(handler)
    handler = LspLogHandler(server, level)
    root.addHandler(handler)
    return handler
