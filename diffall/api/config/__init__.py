"""Config API module."""

from .DiffallConfig import DiffallConfig
from .LogConfig import LogConfig

__all__ = ["DiffallConfig", "LogConfig"]
