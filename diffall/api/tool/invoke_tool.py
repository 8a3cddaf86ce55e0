"""Run the external diff tool on the materialized directories."""

import logging
import os
import subprocess
from pathlib import Path

from .DiffTool import DiffTool
from .ToolInvocationError import ToolInvocationError

logger = logging.getLogger(__name__)


def invoke_tool(
    tool: DiffTool,
    workspace: Path,
    left: str,
    right: str,
    base: str | None = None,
) -> int:
    """Run ``tool`` from inside the workspace and wait for it.

    Args:
        tool: Resolved diff command
        workspace: Session workspace, used as the working directory
        left: Left directory, relative to ``workspace``
        right: Right directory, relative to ``workspace``
        base: Merge-base directory, exported as ``BASE`` when given

    Returns:
        The tool's exit status (``128 + signum`` if it was killed)

    Raises:
        ToolInvocationError: If the tool could not be started
    """
    env = dict(os.environ)
    env["LOCAL"] = left
    env["REMOTE"] = right
    if base is not None:
        env["BASE"] = base
    else:
        env.pop("BASE", None)

    command = tool.command(left, right)
    logger.info("Running %s in %s: %r", tool.name, workspace, command)
    try:
        completed = subprocess.run(
            command,
            cwd=str(workspace),
            env=env,
            shell=isinstance(command, str),
            check=False,
        )
    except OSError as exc:
        raise ToolInvocationError(f"Could not start diff tool {tool.name!r}: {exc}") from exc

    returncode = completed.returncode
    if returncode < 0:
        returncode = 128 - returncode
    logger.info("%s exited with status %d", tool.name, returncode)
    return returncode
