"""Diffall API module: the end-to-end directory diff command.

Matches CLI: git-diffall [<rev> [<rev>]] [-- <path>...]
"""

from .DiffallOutput import DiffallOutput

__all__ = ["DiffallOutput"]
