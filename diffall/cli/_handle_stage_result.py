"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _handle_stage_result(func: F, display_format: str = "yaml") -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as YAML or JSON)

    Args:
        func: Function that returns StageResult
        display_format: ``yaml`` or ``json``

    Returns:
        Wrapped function that displays the result and exits with its status
    """
    if display_format not in ("json", "yaml"):
        raise ValueError(f"Invalid display_format value: {display_format!r}")

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .display.CLIDisplay import CLIDisplay

        _run_single_execution(func, args, kwargs, CLIDisplay(), display_format)

    return wrapper  # type: ignore[return-value]
