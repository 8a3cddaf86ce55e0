"""Endpoint of a comparison (UNO: single class)."""

from dataclasses import dataclass
from typing import Literal

EndpointKind = Literal["revision", "staged", "working_tree"]


@dataclass(frozen=True)
class Endpoint:
    """One side of a comparison: a revision, the index, or the working tree."""

    kind: EndpointKind
    rev: str | None = None

    def __post_init__(self) -> None:
        if self.kind == "revision" and not self.rev:
            raise ValueError("revision endpoint requires a non-empty rev")
        if self.kind != "revision" and self.rev is not None:
            raise ValueError(f"{self.kind} endpoint does not take a rev (found: {self.rev!r})")

    @classmethod
    def revision(cls, rev: str) -> "Endpoint":
        return cls(kind="revision", rev=rev)

    @classmethod
    def staged(cls) -> "Endpoint":
        return cls(kind="staged")

    @classmethod
    def working_tree(cls) -> "Endpoint":
        return cls(kind="working_tree")

    @property
    def is_working_tree(self) -> bool:
        return self.kind == "working_tree"

    def dir_name(self, short: str | None = None) -> str:
        """Name of the materialized directory for this side.

        Args:
            short: Abbreviated object name, required for revisions

        Returns:
            ``cmt-<short>``, ``staged`` or ``working_tree``
        """
        if self.kind == "staged":
            return "staged"
        if self.kind == "working_tree":
            return "working_tree"
        if not short:
            raise ValueError(f"revision {self.rev!r} needs its short name to build a directory name")
        return f"cmt-{short}"

    def describe(self) -> str:
        if self.kind == "revision":
            return str(self.rev)
        return self.kind
