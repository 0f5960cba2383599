"""Shared utility functions for parasail-lsp."""

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dicts. Override values take precedence.

    Merge rules:
    - Dicts are recursively merged
    - Lists are REPLACED (override wins completely), so a project config
      can clear ``libraryPaths`` set globally
    - Other values are overwritten

    Args:
        base: Base dictionary.
        override: Dictionary with values to overlay.

    Returns:
        New merged dictionary (original dicts not modified).
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def split_lines(text: str) -> list[str]:
    """Split document text into lines without terminators.

    Splits on ``\\n`` only, matching the editor's line numbering, and drops
    a trailing ``\\r`` from each line. Empty text is a single empty line.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
