"""Configuration loading and validation."""

from parasail_lsp.config.loader import load_config
from parasail_lsp.config.schema import ServerConfig, Settings, ValidationPolicy
from parasail_lsp.config.settings import SettingsStore, parse_settings

__all__ = [
    "ServerConfig",
    "Settings",
    "SettingsStore",
    "ValidationPolicy",
    "load_config",
    "parse_settings",
]
