"""Configuration loading with fail-fast behavior and layered merging.

Configs merge from two layers, later layers overriding earlier ones:
1. Global user config (~/.parasail-lsp/config.json)
2. Project local config (<cwd>/.parasail-lsp/config.json)

With no config files at all, the pydantic defaults apply. Every error names
the layer it came from, so a broken global file is not mistaken for a broken
project one.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from parasail_lsp.config.schema import ServerConfig
from parasail_lsp.core.constants import get_global_config_path, get_local_config_path
from parasail_lsp.core.errors import ConfigError
from parasail_lsp.core.utils import deep_merge

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None, cwd: Path | None = None) -> ServerConfig:
    """Load server configuration.

    Args:
        path: Explicit config file path. If provided, skips layered loading.
        cwd: Working directory for the local layer. Defaults to Path.cwd().

    Returns:
        Validated ServerConfig object.

    Raises:
        ConfigError: If any config file contains invalid JSON or the merged
            config fails validation.
    """
    if path is not None:
        return _load_from_path(path)

    effective_cwd = cwd or Path.cwd()
    layers = (
        ("global", get_global_config_path()),
        ("project", get_local_config_path(effective_cwd)),
    )
    merged: dict[str, Any] = {}
    loaded_from: list[str] = []

    for layer, layer_path in layers:
        data = _read_layer(layer_path, layer)
        if data:
            merged = deep_merge(merged, data)
            loaded_from.append(f"{layer} {layer_path}")

    if not loaded_from:
        logger.debug("No config files found, using defaults")
        return ServerConfig()
    logger.info("Config loaded from: %s", ", ".join(loaded_from))

    try:
        return ServerConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(
            f"Config validation failed (merged from {', '.join(loaded_from)}): {e}"
        ) from e


def _load_from_path(path: Path) -> ServerConfig:
    """Load and validate config from a specific path.

    Raises:
        ConfigError: If file doesn't exist, contains invalid JSON, or fails validation.
    """
    data = _read_layer(path, "explicit", required=True)
    try:
        return ServerConfig.model_validate(data or {})
    except ValidationError as e:
        raise ConfigError(f"Config validation failed for {path}: {e}") from e


def _read_layer(path: Path, layer: str, *, required: bool = False) -> dict[str, Any] | None:
    """Read one config layer as ServerConfig input.

    A missing optional layer is None and an empty file is an empty layer.
    A UTF-8 BOM is accepted since some Windows editors write one.

    Raises:
        ConfigError: If a required file is missing, or the file can't be read
            or isn't a JSON object.
    """
    if not path.is_file():
        if required:
            raise ConfigError(f"Config file not found ({layer}): {path}")
        logger.debug("No %s config at %s", layer, path)
        return None

    try:
        content = path.read_text(encoding="utf-8-sig").strip()
    except OSError as e:
        raise ConfigError(f"Cannot read {layer} config {path}: {e}") from e
    if not content:
        return {}

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {layer} config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected an object in {layer} config {path}, got {type(data).__name__}"
        )
    return data
