"""Usage error."""


class UsageError(Exception):
    """Raised when arguments are malformed or flags conflict."""
