"""Core constants and paths for parasail-lsp.

Single source of truth for global paths and language-level names. Modules
should import from here instead of hardcoding ``Path.home() / ".parasail-lsp"``.
"""

from pathlib import Path

CONFIG_DIR_NAME = ".parasail-lsp"
CONFIG_FILE_NAME = "config.json"

# Section of workspace/configuration the editor extension sends settings under
SETTINGS_SECTION = "parasailServer"

# Tag attached to every diagnostic produced by the interpreter adapter
DIAGNOSTIC_SOURCE = "parasail"

DEFAULT_INTERPRETER = "interp.csh"
DEFAULT_FILE_SUFFIX = ".psi"
TEMP_FILE_PREFIX = "parasail-"

# Extensions scanned under libraryPaths
SOURCE_SUFFIXES: tuple[str, ...] = (".psi", ".psl", ".psu")

SERVER_NAME = "parasail-lsp"


def get_global_config_dir() -> Path:
    """Get ~/.parasail-lsp (global config directory)."""
    return Path.home() / CONFIG_DIR_NAME


def get_global_config_path() -> Path:
    """Get the global config file path."""
    return get_global_config_dir() / CONFIG_FILE_NAME


def get_local_config_path(cwd: Path) -> Path:
    """Get the project-local config file path for a working directory."""
    return cwd / CONFIG_DIR_NAME / CONFIG_FILE_NAME
