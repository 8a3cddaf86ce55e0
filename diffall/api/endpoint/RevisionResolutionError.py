"""Revision resolution error."""


class RevisionResolutionError(Exception):
    """Raised when a token does not name a valid revision."""

    def __init__(self, token: str, detail: str | None = None):
        self.token = token
        message = f"Not a valid revision: {token!r}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
