"""Git API module: the version-control queries diffall relies on."""

from .Git import Git
from .GitError import GitError

__all__ = ["Git", "GitError"]
