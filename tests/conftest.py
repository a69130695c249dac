"""
Shared pytest fixtures and configuration for oranpy tests.

This module provides:
- Automatic unit/integration markers based on test location
- Logging and settings isolation between tests
"""

import logging
import sys
from pathlib import Path
from typing import Generator

import pytest
import structlog

# Ensure oranpy package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from oranpy.core.logging import clear_context
from oranpy.core.settings import clear_settings_cache


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if "cli" in test_path.parts:
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_logging_fixture() -> Generator[None, None, None]:
    """Reset structlog, bound context and root handlers around each test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    structlog.reset_defaults()
    clear_context()
    yield
    structlog.reset_defaults()
    clear_context()
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
    root.setLevel(saved_level)


@pytest.fixture(autouse=True)
def isolated_settings_fixture(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop cached settings and any ORANPY_* variables from the environment."""
    import os

    for key in list(os.environ):
        if key.startswith("ORANPY_"):
            monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
