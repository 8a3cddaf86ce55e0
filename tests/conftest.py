"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with git and the diff tool mocked out")
    config.addinivalue_line("markers", "integration: tests against real temporary git repositories")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def diffall_home(tmp_path: Path, monkeypatch) -> Path:
    """Point DIFFALL_HOME at an empty per-test directory.

    Returns:
        Path to the diffall home directory (not created)
    """
    home = tmp_path / ".diffall"
    monkeypatch.setenv("DIFFALL_HOME", str(home))
    return home


@pytest.fixture
def workspace_parent(tmp_path: Path, diffall_home: Path) -> Path:
    """Configure ``tmp_dir`` so tests can see which workspaces were left behind.

    Returns:
        Path to the (empty) parent directory of session workspaces
    """
    parent = tmp_path / "workspaces"
    parent.mkdir()
    write_config(diffall_home, {"tmp_dir": str(parent)})
    return parent


# =============================================================================
# Test Helpers
# =============================================================================


def write_config(home: Path, data: dict) -> Path:
    """Write ``config.json`` into a diffall home directory."""
    import json

    home.mkdir(parents=True, exist_ok=True)
    config_path = home / "config.json"
    config_path.write_text(json.dumps(data))
    return config_path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
