"""Private temporary directory for one diffall run (UNO: single class)."""

from __future__ import annotations

import logging
import shutil
import signal
import tempfile
import threading
from pathlib import Path
from types import FrameType
from typing import Any

from .WorkspaceError import WorkspaceError

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "git-diffall."

# Signals that would otherwise terminate the process without unwinding.
_CLEANUP_SIGNALS = tuple(getattr(signal, name) for name in ("SIGTERM", "SIGHUP") if hasattr(signal, name))


class SessionWorkspace:
    """Context manager owning the session's temporary tree.

    Termination signals are turned into ``SystemExit`` before the directory
    is created, so ``__exit__`` removes the tree on every exit path.
    Removal failures are recorded in ``cleanup_error`` and logged, never
    raised.

    Args:
        parent: Directory to create the workspace in (system temp dir if None)
    """

    def __init__(self, parent: Path | str | None = None):
        self.parent = Path(parent).expanduser() if parent else None
        self.path: Path | None = None
        self.cleanup_error: str | None = None
        self._previous_handlers: dict[int, Any] = {}

    def __enter__(self) -> SessionWorkspace:
        self._install_signal_handlers()
        try:
            if self.parent is not None:
                self.parent.mkdir(parents=True, exist_ok=True)
            self.path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=self.parent))
        except OSError as exc:
            self._restore_signal_handlers()
            raise WorkspaceError(f"Cannot create session workspace: {exc}") from exc
        logger.info("Created session workspace %s", self.path)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        try:
            self.cleanup()
        finally:
            self._restore_signal_handlers()
        return False

    @property
    def root(self) -> Path:
        """Directory of the open workspace."""
        if self.path is None:
            raise WorkspaceError("Session workspace is not open")
        return self.path

    def side(self, name: str) -> Path:
        """Create and return the root directory for one materialized side."""
        root = self.root / name
        try:
            root.mkdir()
        except OSError as exc:
            raise WorkspaceError(f"Cannot create directory {root}: {exc}") from exc
        return root

    def cleanup(self) -> None:
        if self.path is None or not self.path.exists():
            return
        try:
            shutil.rmtree(self.path)
            logger.info("Removed session workspace %s", self.path)
        except OSError as exc:
            self.cleanup_error = f"Failed to remove session workspace {self.path}: {exc}"
            logger.warning(self.cleanup_error)

    def _install_signal_handlers(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            return
        for signum in _CLEANUP_SIGNALS:
            self._previous_handlers[signum] = signal.signal(signum, self._on_signal)

    def _restore_signal_handlers(self) -> None:
        for signum, handler in self._previous_handlers.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)
        self._previous_handlers.clear()

    @staticmethod
    def _on_signal(signum: int, _frame: FrameType | None) -> None:
        logger.info("Received signal %d, cleaning up", signum)
        raise SystemExit(128 + signum)
