"""Shared test fixtures for the docaudit test suite."""

from collections.abc import Callable, Generator
from datetime import datetime
from pathlib import Path

import pytest

from docaudit.audit.gate import ChangeEventGate
from docaudit.audit.stores import InMemoryAuditStore
from tests.factories import FIXED_TIME


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "[audit]\\nmodes = ['snapshot']",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache and TOML overlay around each test."""
    from docaudit.config import get_settings
    from docaudit.config.settings import set_toml_config

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture
def store() -> InMemoryAuditStore:
    """Create a fresh in-memory audit store for each test."""
    return InMemoryAuditStore()


@pytest.fixture
def gate() -> ChangeEventGate:
    return ChangeEventGate()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_TIME
