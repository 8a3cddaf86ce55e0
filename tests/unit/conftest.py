"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for mocking git.
"""

import subprocess
from unittest.mock import MagicMock

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import run_cmd, write_config

__all__ = [
    "completed",
    "fake_git",
    "run_cmd",
    "write_config",
]


def completed(returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> subprocess.CompletedProcess:
    """Build the value a mocked ``subprocess.run`` returns."""
    return subprocess.CompletedProcess(args=["git"], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def fake_git(tmp_path):
    """A MagicMock standing in for ``diffall.api.git.Git`` rooted at ``tmp_path/repo``.

    ``config`` is a dict backing ``config_get``.
    """
    root = tmp_path / "repo"
    root.mkdir()
    git = MagicMock()
    git.root = root
    git.work_path.side_effect = lambda path: root / path
    git.config = {}
    git.config_get.side_effect = lambda key: git.config.get(key)
    return git
