"""Shared pytest fixtures and configuration for parasail-lsp tests."""

import sys
from unittest.mock import AsyncMock, MagicMock

import pytest

from parasail_lsp.analysis.diagnostics import DiagnosticsAdapter
from parasail_lsp.analysis.engine import AnalysisEngine
from parasail_lsp.config.schema import Settings


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for platform-specific tests."""
    config.addinivalue_line("markers", "windows: mark test to run only on Windows")
    config.addinivalue_line("markers", "unix_only: mark test to run only on Unix")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Auto-skip tests based on platform markers."""
    skip_windows = pytest.mark.skip(reason="Windows-only test")
    skip_unix = pytest.mark.skip(reason="Unix-only test")

    for item in items:
        if "windows" in item.keywords and sys.platform != "win32":
            item.add_marker(skip_windows)
        if "unix_only" in item.keywords and sys.platform == "win32":
            item.add_marker(skip_unix)


@pytest.fixture
def settings() -> Settings:
    """Default editor settings."""
    return Settings()


@pytest.fixture
def mock_adapter() -> MagicMock:
    """Interpreter adapter whose run() returns no diagnostics."""
    adapter = MagicMock(spec=DiagnosticsAdapter)
    adapter.run = AsyncMock(return_value=[])
    return adapter


@pytest.fixture
def engine(mock_adapter: MagicMock) -> AnalysisEngine:
    """Engine with a mocked adapter and an empty library index."""
    return AnalysisEngine(mock_adapter)
