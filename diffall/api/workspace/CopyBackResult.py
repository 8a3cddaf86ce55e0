"""Copy-back result dataclass."""

from dataclasses import dataclass, field


@dataclass
class CopyBackResult:
    """Files copied onto the working tree, and the ones that failed."""

    copied: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
