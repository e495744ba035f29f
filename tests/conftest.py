"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from landing_theme.config import Config  # noqa: E402
from landing_theme.theme_engine import ThemeRegistry, get_registry  # noqa: E402


@pytest.fixture
def registry() -> ThemeRegistry:
    """Registry of the shipped presets."""
    return get_registry()


@pytest.fixture
def noir(registry):
    return registry.get_preset("noir")


@pytest.fixture(autouse=True)
def reset_config(monkeypatch, tmp_path):
    """Keep every test away from the user's real config file."""
    monkeypatch.setenv("LANDING_THEME_CONFIG", str(tmp_path / "config.yaml"))
    Config._instance = None
    yield
    Config._instance = None
