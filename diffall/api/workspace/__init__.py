"""Workspace API module: the per-run temporary tree and copy-back."""

from .copy_back import copy_back
from .CopyBackResult import CopyBackResult
from .SessionWorkspace import SessionWorkspace
from .WorkspaceError import WorkspaceError

__all__ = ["CopyBackResult", "SessionWorkspace", "WorkspaceError", "copy_back"]
