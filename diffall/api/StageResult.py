"""StageResult dataclass for the 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    The progress callback is a generator yielding ``(fraction, message)``
    tuples; it must fill in ``result``, ``output`` and ``success`` before it
    finishes. ``exit_code`` is the process status the CLI should report,
    which for a diff session is the external tool's own status.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
    exit_code: int = 1
