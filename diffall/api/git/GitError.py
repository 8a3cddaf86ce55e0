"""Git command error."""


class GitError(RuntimeError):
    """Raised when a git command fails unexpectedly."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)
