"""Shared fixtures for integration tests.

These tests drive real git against throwaway repositories. The external
diff tool is a small Python script that records what it was given.
"""

import json
import shlex
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

RECORDER_SCRIPT = """\
import json
import os
import sys
from pathlib import Path


def snapshot(root):
    root = Path(root)
    return {p.relative_to(root).as_posix(): p.read_bytes().decode() for p in sorted(root.rglob("*")) if p.is_file()}


left, right = sys.argv[-2], sys.argv[-1]
record = {
    "argv": sys.argv[1:],
    "cwd": os.getcwd(),
    "env": {name: os.environ.get(name) for name in ("LOCAL", "REMOTE", "BASE")},
    "left": snapshot(left),
    "right": snapshot(right),
}
if os.environ.get("BASE"):
    record["base"] = snapshot(os.environ["BASE"])
Path(os.environ["DIFFALL_TEST_RECORD"]).write_text(json.dumps(record))

for rel, content in json.loads(os.environ.get("DIFFALL_TEST_EDITS", "{}")).items():
    target = Path(right) / rel
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content.encode())

sys.exit(int(os.environ.get("DIFFALL_TEST_EXIT", "0")))
"""


def git(repo: Path, *args: str) -> str:
    """Run git in ``repo`` and return its stripped stdout."""
    result = subprocess.run(["git", *args], cwd=repo, capture_output=True, text=True, check=True)
    return result.stdout.strip()


def commit_all(repo: Path, message: str) -> str:
    """Stage everything, commit, and return the new commit id."""
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", message)
    return git(repo, "rev-parse", "HEAD")


class Recorder:
    """Diff tool stand-in that writes what it saw to a JSON file."""

    def __init__(self, tmp_path: Path, monkeypatch):
        self.script = tmp_path / "recorder.py"
        self.script.write_text(RECORDER_SCRIPT)
        self.record_path = tmp_path / "record.json"
        self._monkeypatch = monkeypatch
        monkeypatch.setenv("DIFFALL_TEST_RECORD", str(self.record_path))
        monkeypatch.delenv("DIFFALL_TEST_EDITS", raising=False)
        monkeypatch.delenv("DIFFALL_TEST_EXIT", raising=False)

    @property
    def extcmd(self) -> str:
        """Command line for ``-x``; the directories are appended by diffall."""
        return f"{shlex.quote(sys.executable)} {shlex.quote(str(self.script))}"

    @property
    def shell_cmd(self) -> str:
        """Command for ``difftool.<name>.cmd``; reads the directories from the environment."""
        return f'{self.extcmd} "$LOCAL" "$REMOTE"'

    @property
    def called(self) -> bool:
        return self.record_path.exists()

    def edit(self, edits: dict[str, str]) -> None:
        """Have the tool rewrite files on the right-hand side."""
        self._monkeypatch.setenv("DIFFALL_TEST_EDITS", json.dumps(edits))

    def exit_with(self, status: int) -> None:
        self._monkeypatch.setenv("DIFFALL_TEST_EXIT", str(status))

    def read(self) -> dict:
        return json.loads(self.record_path.read_text())


@pytest.fixture
def git_repo(tmp_path: Path, monkeypatch) -> Path:
    """Create a repository with ``a.txt`` and ``b.txt`` committed on HEAD.

    Global and system git config are isolated so no diff tool is configured
    unless a test sets one.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    global_config = tmp_path / "gitconfig"
    global_config.write_text("")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in ("GIT_DIR", "GIT_WORK_TREE", "GIT_INDEX_FILE"):
        monkeypatch.delenv(name, raising=False)

    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "core.autocrlf", "false")

    (repo / "a.txt").write_text("alpha\n")
    (repo / "b.txt").write_text("bravo\n")
    commit_all(repo, "Initial")
    return repo


@pytest.fixture
def recorder(tmp_path: Path, monkeypatch) -> Recorder:
    return Recorder(tmp_path, monkeypatch)
