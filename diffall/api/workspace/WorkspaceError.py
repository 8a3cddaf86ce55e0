"""Workspace error."""


class WorkspaceError(OSError):
    """Raised when the session workspace or a side directory cannot be created."""
