"""Tool API module: choosing and running the external diff tool."""

from .DiffTool import DiffTool
from .invoke_tool import invoke_tool
from .resolve_diff_tool import resolve_diff_tool
from .ToolInvocationError import ToolInvocationError

__all__ = ["DiffTool", "ToolInvocationError", "invoke_tool", "resolve_diff_tool"]
