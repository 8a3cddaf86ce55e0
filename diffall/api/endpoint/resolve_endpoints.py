"""Resolve command-line tokens into a comparison plan."""

from collections.abc import Sequence

from .ComparisonPlan import CompareMode, ComparisonPlan
from .Endpoint import Endpoint
from .UsageError import UsageError

DEFAULT_REVISION = "HEAD"


def _split_range(token: str) -> tuple[str, str, CompareMode] | None:
    """Split ``A...B`` / ``A..B`` into its sides, or None for a plain token."""
    if "..." in token:
        left, right = token.split("...", 1)
        mode: CompareMode = "merge_base"
    elif ".." in token:
        left, right = token.split("..", 1)
        mode = "direct"
    else:
        return None
    if "..." in right or ".." in right:
        raise UsageError(f"Malformed revision range: {token!r}")
    return left or DEFAULT_REVISION, right or DEFAULT_REVISION, mode


def resolve_endpoints(
    tokens: Sequence[str] = (),
    explicit_paths: Sequence[str] | None = None,
    cached: bool = False,
    copy_back: bool = False,
    extcmd: str | None = None,
    tool: str | None = None,
) -> ComparisonPlan:
    """Build the comparison plan for a diffall invocation.

    Args:
        tokens: Positional arguments given before the ``--`` separator.
            The first two are revisions, or the first alone when it is a
            range; any further ones are path filters.
        explicit_paths: Arguments given after ``--``; always path filters.
        cached: Compare against the index instead of the working tree
        copy_back: Copy edited working-tree files back after the tool exits
        extcmd: Custom diff command used instead of the configured tool
        tool: Name of the diff tool to use instead of the configured one

    Returns:
        ComparisonPlan with left/right endpoints and compare mode

    Raises:
        UsageError: If the tokens and flags do not describe a valid comparison
    """
    count = 1 if tokens and _split_range(tokens[0]) is not None else 2
    revisions = list(tokens[:count])
    paths = [*tokens[count:], *(explicit_paths or [])]

    if extcmd is not None:
        extcmd = extcmd[1:] if extcmd.startswith("=") else extcmd
        if not extcmd.strip():
            raise UsageError("--extcmd requires a non-empty command")

    if not revisions:
        left = Endpoint.revision(DEFAULT_REVISION)
        right = Endpoint.staged() if cached else Endpoint.working_tree()
        mode: CompareMode = "direct"
    elif len(revisions) == 1:
        split = _split_range(revisions[0])
        if split is None:
            left = Endpoint.revision(revisions[0])
            right = Endpoint.staged() if cached else Endpoint.working_tree()
            mode = "direct"
        else:
            if cached:
                raise UsageError("--cached cannot be combined with a revision range")
            left_rev, right_rev, mode = split
            left = Endpoint.revision(left_rev)
            right = Endpoint.revision(right_rev)
    else:
        if cached:
            raise UsageError("--cached accepts at most one revision")
        if _split_range(revisions[1]) is not None:
            raise UsageError(f"A revision range must be the only revision given (found: {revisions[1]!r})")
        left = Endpoint.revision(revisions[0])
        right = Endpoint.revision(revisions[1])
        mode = "direct"

    if copy_back and not right.is_working_tree:
        raise UsageError("--copy-back is only valid when comparing against the working tree")

    return ComparisonPlan(
        left=left,
        right=right,
        mode=mode,
        paths=tuple(paths),
        copy_back=copy_back,
        extcmd=extcmd,
        tool=tool,
    )
