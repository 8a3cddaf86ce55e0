"""Resolved diff tool command (UNO: single class)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffTool:
    """A runnable diff command.

    Exactly one of ``argv`` and ``shell_command`` is set. With
    ``placeholders`` enabled, ``$LOCAL``/``$REMOTE`` entries in ``argv`` are
    replaced by the two directories; otherwise, or when ``argv`` has no
    placeholder, the directories are appended. ``shell_command`` reads them
    from the environment, as ``difftool.<name>.cmd`` does in git.
    """

    name: str
    argv: tuple[str, ...] | None = None
    shell_command: str | None = None
    placeholders: bool = True

    def __post_init__(self) -> None:
        if (self.argv is None) == (self.shell_command is None):
            raise ValueError("DiffTool needs exactly one of argv or shell_command")
        if self.argv is not None and not self.argv:
            raise ValueError(f"DiffTool {self.name!r} has an empty argv")

    def command(self, left: str, right: str) -> list[str] | str:
        """Build the command for a pair of directories."""
        if self.shell_command is not None:
            return self.shell_command
        assert self.argv is not None
        if not self.placeholders or not any(arg in ("$LOCAL", "$REMOTE") for arg in self.argv):
            return [*self.argv, left, right]
        return [left if arg == "$LOCAL" else right if arg == "$REMOTE" else arg for arg in self.argv]
