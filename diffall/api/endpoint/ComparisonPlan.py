"""Comparison plan produced by endpoint resolution."""

from dataclasses import dataclass
from typing import Literal

from .Endpoint import Endpoint

CompareMode = Literal["direct", "merge_base"]


@dataclass(frozen=True)
class ComparisonPlan:
    """Immutable description of one diffall run.

    Built once from the command line and passed through listing,
    materialization, tool invocation and copy-back unchanged.
    """

    left: Endpoint
    right: Endpoint
    mode: CompareMode = "direct"
    paths: tuple[str, ...] = ()
    copy_back: bool = False
    extcmd: str | None = None
    tool: str | None = None
