"""Copy edited files from the working-tree side back into the repository."""

import filecmp
import logging
import os
import shutil
from pathlib import Path

from .CopyBackResult import CopyBackResult

logger = logging.getLogger(__name__)


def copy_back(side_dir: Path, work_tree: Path) -> CopyBackResult:
    """Copy every regular file under ``side_dir`` onto ``work_tree``.

    Existing files are overwritten; files whose bytes already match are
    left alone. Files missing from ``side_dir`` are never deleted from the
    working tree. A path that is a symlink in the working tree arrives as a
    file holding the link target; the link is never replaced, and an edit
    to that file is reported as an error.

    Args:
        side_dir: Materialized working-tree side
        work_tree: Root of the real working tree

    Returns:
        CopyBackResult listing root-relative paths
    """
    result = CopyBackResult()
    if not side_dir.is_dir():
        return result

    for source in sorted(side_dir.rglob("*")):
        if source.is_symlink() or not source.is_file():
            continue
        rel = source.relative_to(side_dir)
        target = work_tree / rel
        rel_str = rel.as_posix()
        try:
            if target.is_symlink():
                if source.read_bytes() == os.fsencode(os.readlink(target)):
                    result.unchanged.append(rel_str)
                else:
                    logger.warning("Not copying back %s over a symlink", rel_str)
                    result.errors.append(f"{rel_str}: is a symlink in the working tree, not overwritten")
                continue
            if target.is_file() and filecmp.cmp(source, target, shallow=False):
                result.unchanged.append(rel_str)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
            result.copied.append(rel_str)
            logger.info("Copied back %s", rel_str)
        except OSError as exc:
            logger.warning("Copy-back failed for %s: %s", rel_str, exc)
            result.errors.append(f"{rel_str}: {exc}")
    return result
