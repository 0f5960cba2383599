"""Pydantic models for parasail-lsp configuration validation."""

import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from parasail_lsp.core.constants import DEFAULT_FILE_SUFFIX, DEFAULT_INTERPRETER

# How overlapping validations of one document are reconciled
ValidationPolicy = Literal["latest", "last-writer"]

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


def _expand_paths(paths: list[str] | None) -> list[str]:
    """Expand ~ and make each path absolute. Existence is checked at scan time."""
    if not paths:
        return []
    return [os.path.abspath(os.path.expanduser(p)) for p in paths]


class Settings(BaseModel):
    """Editor-facing settings, sent by the client under ``parasailServer``.

    Accepts the camelCase names the editor extension uses as well as the
    snake_case attribute names. Instances are frozen: a configuration change
    replaces the whole object.

    Example client payload:
        "parasailServer": {
            "maxNumberOfProblems": 100,
            "enableFormatting": true,
            "libraryPaths": ["~/parasail/lib"],
            "implicitImports": false
        }
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    max_number_of_problems: int = Field(default=1000, ge=0, alias="maxNumberOfProblems")
    """Upper bound on diagnostics published per document."""

    enable_formatting: bool = Field(default=True, alias="enableFormatting")
    """When false, formatting requests return no edits."""

    library_paths: list[str] = Field(default_factory=list, alias="libraryPaths")
    """Directories scanned for ParaSail sources offered as completions."""

    implicit_imports: bool = Field(default=True, alias="implicitImports")
    """Offer the whole standard library without an explicit import."""

    @field_validator("library_paths", mode="before")
    @classmethod
    def normalize_library_paths(cls, v: list[str] | None) -> list[str]:
        """Normalize library paths to absolute paths."""
        return _expand_paths(v)


class ServerConfig(BaseModel):
    """Process-level configuration loaded from config.json files.

    Example in config.json:
        {
            "interpreter": "/opt/parasail/bin/interp.csh",
            "validation_policy": "latest",
            "settings": {"maxNumberOfProblems": 200}
        }
    """

    model_config = ConfigDict(extra="forbid")

    interpreter: str = DEFAULT_INTERPRETER
    """Executable run as ``<interpreter> [args...] <temp-file>`` for diagnostics."""

    interpreter_args: list[str] = []
    """Extra arguments placed before the temporary file path."""

    file_suffix: str = DEFAULT_FILE_SUFFIX
    """Extension of the temporary file, which tells the interpreter the source language."""

    temp_dir: str | None = None
    """Directory for temporary files. None uses the platform default."""

    validation_policy: ValidationPolicy = "last-writer"
    """'last-writer' publishes whatever finishes last; 'latest' cancels superseded runs."""

    validation_timeout: float | None = Field(default=None, gt=0)
    """Seconds before a hung interpreter is killed. None waits forever."""

    settings: Settings = Field(default_factory=Settings)
    """Initial editor settings, used until the client sends its own."""

    log_level: LogLevel = "INFO"
    """Level for the parasail_lsp logger."""

    log_file: str | None = None
    """Optional rotating log file path."""

    @field_validator("file_suffix")
    @classmethod
    def check_suffix(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(f"file_suffix must start with '.', got {v!r}")
        return v

    @field_validator("temp_dir", "log_file", mode="before")
    @classmethod
    def expand_user(cls, v: str | None) -> str | None:
        return os.path.expanduser(v) if v else v
