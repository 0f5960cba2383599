"""Single owned cell for editor settings.

The global Settings object is replaced wholesale by ``replace()``, the one
designated writer. Per-document settings fetched from the client are cached
by URI and dropped when the document closes. Everything else only reads.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from parasail_lsp.config.schema import Settings
from parasail_lsp.core.errors import ConfigError

logger = logging.getLogger(__name__)


def parse_settings(payload: Any, fallback: Settings) -> Settings:
    """Validate a client settings payload.

    Args:
        payload: The ``parasailServer`` section sent by the client. None or
            an empty value means "keep the fallback".
        fallback: Settings returned when payload is empty.

    Raises:
        ConfigError: If the payload is not an object or fails validation.
    """
    if not payload:
        return fallback
    if not isinstance(payload, dict):
        raise ConfigError(f"Expected settings object, got {type(payload).__name__}")
    try:
        return Settings.model_validate(payload)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


class SettingsStore:
    """Holds the global settings and the per-document cache."""

    def __init__(self, initial: Settings | None = None) -> None:
        self._global = initial or Settings()
        self._documents: dict[str, Settings] = {}

    @property
    def global_settings(self) -> Settings:
        return self._global

    def replace(self, settings: Settings) -> None:
        """Install new global settings and invalidate per-document entries."""
        self._global = settings
        self._documents.clear()
        logger.debug("Settings replaced: %s", settings.model_dump(by_alias=True))

    def set_document(self, uri: str, settings: Settings) -> None:
        self._documents[uri] = settings

    def for_document(self, uri: str) -> Settings:
        """Settings for uri, falling back to the global settings."""
        return self._documents.get(uri, self._global)

    def forget(self, uri: str) -> None:
        """Drop cached settings for a closed document."""
        self._documents.pop(uri, None)
