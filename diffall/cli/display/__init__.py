"""CLI display."""

from .CLIDisplay import CLIDisplay
from .Display import Display

__all__ = ["CLIDisplay", "Display"]
