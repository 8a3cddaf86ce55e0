"""Materialize one side of a comparison."""

import logging
import os
import shutil
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from ..endpoint.Endpoint import Endpoint
from ..git.Git import Git
from ..git.GitError import GitError
from ..workspace.WorkspaceError import WorkspaceError
from .MaterializeOutcome import MaterializeOutcome

logger = logging.getLogger(__name__)


def _target(dest: Path, path: str) -> Path:
    return dest.joinpath(*PurePosixPath(path).parts)


def _write(dest: Path, path: str, data: bytes) -> None:
    target = _target(dest, path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)


def _from_revision(git: Git, rev: str, paths: Sequence[str], dest: Path) -> list[MaterializeOutcome]:
    outcomes: list[MaterializeOutcome] = []
    for path in paths:
        try:
            if not git.revision_has(rev, path):
                outcomes.append(MaterializeOutcome(path, "absent"))
                continue
            _write(dest, path, git.read_blob(f"{rev}:{path}"))
            outcomes.append(MaterializeOutcome(path, "written"))
        except (GitError, OSError) as exc:
            logger.warning("Could not materialize %s from %s: %s", path, rev, exc)
            outcomes.append(MaterializeOutcome(path, "error", str(exc)))
    return outcomes


def _from_index(git: Git, paths: Sequence[str], dest: Path) -> list[MaterializeOutcome]:
    outcomes: list[MaterializeOutcome] = []
    for path in paths:
        try:
            if not git.index_has(path):
                outcomes.append(MaterializeOutcome(path, "absent"))
                continue
            _write(dest, path, git.read_blob(f":{path}"))
            outcomes.append(MaterializeOutcome(path, "written"))
        except (GitError, OSError) as exc:
            logger.warning("Could not materialize %s from the index: %s", path, exc)
            outcomes.append(MaterializeOutcome(path, "error", str(exc)))
    return outcomes


def _from_working_tree(git: Git, paths: Sequence[str], dest: Path) -> list[MaterializeOutcome]:
    """Copy every listed path that still exists, in a single pass.

    Files can disappear while the pass runs; those are reported as absent
    rather than failing the whole copy. A symlink is written as a regular
    file holding its target, as git stores it.
    """
    outcomes: list[MaterializeOutcome] = []
    for path in paths:
        source = git.work_path(path)
        if not (source.is_symlink() or source.is_file()):
            outcomes.append(MaterializeOutcome(path, "absent"))
            continue
        target = _target(dest, path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            if source.is_symlink():
                target.write_bytes(os.fsencode(os.readlink(source)))
            else:
                shutil.copy2(source, target)
            outcomes.append(MaterializeOutcome(path, "written"))
        except FileNotFoundError:
            outcomes.append(MaterializeOutcome(path, "absent"))
        except OSError as exc:
            logger.warning("Could not copy %s from the working tree: %s", path, exc)
            outcomes.append(MaterializeOutcome(path, "error", str(exc)))
    return outcomes


def materialize_side(git: Git, endpoint: Endpoint, paths: Sequence[str], dest: Path) -> list[MaterializeOutcome]:
    """Write ``endpoint``'s version of each changed path under ``dest``.

    Args:
        git: Repository to read from
        endpoint: Side to materialize; revisions should carry a resolved id
        paths: Root-relative changed paths
        dest: Root directory for this side

    Returns:
        One outcome per path, in input order

    Raises:
        WorkspaceError: If ``dest`` itself cannot be created
    """
    try:
        dest.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WorkspaceError(f"Cannot create directory {dest}: {exc}") from exc

    logger.info("Materializing %d path(s) from %s into %s", len(paths), endpoint.describe(), dest)
    if endpoint.kind == "revision":
        return _from_revision(git, str(endpoint.rev), paths, dest)
    if endpoint.kind == "staged":
        return _from_index(git, paths, dest)
    return _from_working_tree(git, paths, dest)
