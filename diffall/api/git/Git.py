"""Thin wrapper around the git executable."""

from __future__ import annotations

__all__ = ["Git"]

import logging
import os
import subprocess
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from ..endpoint.ComparisonPlan import CompareMode
from ..endpoint.Endpoint import Endpoint
from ..endpoint.RevisionResolutionError import RevisionResolutionError
from .GitError import GitError

logger = logging.getLogger(__name__)


def _is_safe_relpath(path: str) -> bool:
    """Check that a git-reported path stays inside the repository root."""
    if not path or path.startswith("/") or "\\" in path:
        return False
    return all(part not in ("", ".", "..") for part in path.split("/"))


def _split_nul(data: bytes) -> list[str]:
    return [os.fsdecode(item) for item in data.split(b"\0") if item]


class Git:
    """Run git queries against one repository.

    Args:
        root: Top-level directory of the working tree
        cwd: Directory the user invoked diffall from (path filters are
            relative to it); defaults to ``root``
    """

    def __init__(self, root: Path, cwd: Path | None = None):
        self.root = Path(root)
        self.cwd = Path(cwd) if cwd is not None else self.root

    @classmethod
    def discover(cls, cwd: Path | None = None) -> Git:
        """Locate the repository containing ``cwd``.

        Raises:
            GitError: If ``cwd`` is not inside a git working tree
        """
        start = Path(cwd) if cwd is not None else Path.cwd()
        probe = cls(start, start)
        result = probe._run(["rev-parse", "--show-toplevel"], cwd=start, check=False)
        if result.returncode != 0:
            raise GitError(
                f"Not a git working tree: {start}",
                returncode=result.returncode,
                stderr=result.stderr.decode(errors="replace").strip(),
            )
        root = Path(os.fsdecode(result.stdout).strip())
        return cls(root, start)

    def _run(
        self,
        args: Sequence[str],
        cwd: Path | None = None,
        check: bool = True,
        literal: bool = False,
    ) -> subprocess.CompletedProcess[bytes]:
        env = None
        if literal:
            env = dict(os.environ)
            env["GIT_LITERAL_PATHSPECS"] = "1"
        cmd = ["git", *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd or self.root),
                capture_output=True,
                env=env,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GitError("git executable not found on PATH") from exc
        except OSError as exc:
            raise GitError(f"Failed to run git {args[0]}: {exc}") from exc

        if check and result.returncode != 0:
            raise GitError(
                f"git {args[0]} failed with exit code {result.returncode}",
                returncode=result.returncode,
                stderr=result.stderr.decode(errors="replace").strip(),
            )
        return result

    def prefix(self) -> str:
        """Path of the invocation directory relative to the repository root."""
        result = self._run(["rev-parse", "--show-prefix"], cwd=self.cwd)
        return os.fsdecode(result.stdout).strip()

    def rev_parse(self, token: str) -> str:
        """Resolve a revision token to a full commit id.

        Raises:
            RevisionResolutionError: If the token does not name a commit
        """
        result = self._run(
            ["rev-parse", "--verify", "--quiet", f"{token}^{{commit}}"],
            cwd=self.cwd,
            check=False,
        )
        if result.returncode != 0:
            raise RevisionResolutionError(token)
        return os.fsdecode(result.stdout).strip()

    def rev_parse_short(self, token: str) -> str:
        """Resolve a revision token to its abbreviated commit id."""
        full = self.rev_parse(token)
        result = self._run(["rev-parse", "--short", full], check=False)
        if result.returncode != 0:
            raise RevisionResolutionError(token, "cannot abbreviate")
        return os.fsdecode(result.stdout).strip()

    def merge_base(self, left: str, right: str) -> str:
        """Best common ancestor of two revisions.

        Raises:
            RevisionResolutionError: If the revisions share no history
        """
        result = self._run(["merge-base", left, right], check=False)
        if result.returncode != 0:
            raise RevisionResolutionError(f"{left}...{right}", "no merge base")
        return os.fsdecode(result.stdout).strip()

    def changed_paths(
        self,
        left: Endpoint,
        right: Endpoint,
        mode: CompareMode = "direct",
        paths: Sequence[str] = (),
    ) -> tuple[str, ...]:
        """List root-relative paths that differ between two endpoints.

        Args:
            left: Left endpoint; must be a revision
            right: Right endpoint (revision, index or working tree)
            mode: ``merge_base`` compares right against the merge base of
                left and right instead of left itself
            paths: Path filters relative to the invocation directory

        Returns:
            Changed paths in git's order, without duplicates
        """
        if left.kind != "revision":
            raise ValueError(f"left endpoint must be a revision (found: {left.kind})")

        args = ["diff", "--name-only", "-z", "--no-renames", "--no-ext-diff", "--no-textconv"]
        if right.kind == "working_tree":
            args.append(str(left.rev))
        elif right.kind == "staged":
            args.extend(["--cached", str(left.rev)])
        elif mode == "merge_base":
            args.append(f"{left.rev}...{right.rev}")
        else:
            args.extend([str(left.rev), str(right.rev)])
        args.append("--")
        args.extend(paths)

        result = self._run(args, cwd=self.cwd)

        changed: list[str] = []
        seen: set[str] = set()
        for path in _split_nul(result.stdout):
            if not _is_safe_relpath(path):
                logger.warning("Ignoring unsafe path reported by git: %r", path)
                continue
            if path not in seen:
                seen.add(path)
                changed.append(path)
        return tuple(changed)

    def revision_has(self, rev: str, path: str) -> bool:
        """Check whether ``path`` is a file (blob) in ``rev``."""
        result = self._run(["ls-tree", "-z", "--full-tree", rev, "--", path], literal=True)
        for entry in result.stdout.split(b"\0"):
            if not entry:
                continue
            meta, _, name = entry.partition(b"\t")
            fields = meta.split()
            if len(fields) >= 2 and fields[1] == b"blob" and os.fsdecode(name) == path:
                return True
        return False

    def index_has(self, path: str) -> bool:
        """Check whether ``path`` has an entry in the index."""
        result = self._run(["ls-files", "-z", "--cached", "--full-name", "--", path], literal=True)
        return path in _split_nul(result.stdout)

    def read_blob(self, spec: str) -> bytes:
        """Raw contents of a blob, e.g. ``<rev>:<path>`` or ``:<path>``."""
        return self._run(["cat-file", "blob", spec]).stdout

    def config_get(self, key: str) -> str | None:
        """Value of a git config key, or None when unset."""
        result = self._run(["config", "--get", key], check=False)
        if result.returncode == 1:
            return None
        if result.returncode != 0:
            raise GitError(
                f"git config --get {key} failed",
                returncode=result.returncode,
                stderr=result.stderr.decode(errors="replace").strip(),
            )
        value = os.fsdecode(result.stdout).strip()
        return value or None

    def work_path(self, path: str) -> Path:
        """Absolute working-tree location of a root-relative path."""
        return self.root.joinpath(*PurePosixPath(path).parts)
