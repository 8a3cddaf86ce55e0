"""Tool invocation error."""


class ToolInvocationError(RuntimeError):
    """Raised when the external diff tool cannot be started at all.

    A tool that starts and exits nonzero is not an error; its status is
    passed through as the run's exit status.
    """
