"""Per-path materialization outcome."""

from dataclasses import dataclass
from typing import Literal

MaterializeStatus = Literal["written", "absent", "error"]


@dataclass(frozen=True)
class MaterializeOutcome:
    """What happened to one changed path on one side.

    ``absent`` means the path does not exist on that side (an add or a
    delete) and is not a failure.
    """

    path: str
    status: MaterializeStatus
    detail: str | None = None
