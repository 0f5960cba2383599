"""Typed exception hierarchy for parasail-lsp."""

from __future__ import annotations


class ParasailError(Exception):
    """Base class for all parasail-lsp errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(ParasailError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""


class ValidatorError(ParasailError):
    """Raised when the external interpreter cannot produce diagnostics.

    Covers temporary-file I/O failures, spawn failures and timeouts. The
    analysis engine logs these and reports "no result" for the pass.
    """

    def __init__(self, message: str, interpreter: str | None = None) -> None:
        self.interpreter = interpreter
        super().__init__(message)
