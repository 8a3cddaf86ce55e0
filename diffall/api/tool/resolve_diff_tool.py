"""Select the diff command for a run."""

import logging
import shlex

from ..config.DiffallConfig import DiffallConfig
from ..endpoint.UsageError import UsageError
from ..git.Git import Git
from ._KNOWN_TOOLS import _KNOWN_TOOLS
from .DiffTool import DiffTool

logger = logging.getLogger(__name__)


def _custom(command: str) -> DiffTool:
    try:
        argv = shlex.split(command)
    except ValueError as exc:
        raise UsageError(f"Cannot parse diff command {command!r}: {exc}") from exc
    if not argv:
        raise UsageError("Diff command is empty")
    return DiffTool(name=argv[0], argv=tuple(argv), placeholders=False)


def resolve_diff_tool(
    git: Git,
    config: DiffallConfig,
    extcmd: str | None = None,
    tool: str | None = None,
) -> DiffTool:
    """Pick the diff command.

    Precedence: ``extcmd`` argument, ``tool`` argument, ``extcmd`` and
    ``tool`` from the config file, then git's ``diff.tool`` and
    ``merge.tool``. A named tool uses ``difftool.<name>.cmd`` when set,
    otherwise the known-tool table (with ``difftool.<name>.path`` as the
    executable), otherwise ``<name> LOCAL REMOTE``.

    Raises:
        UsageError: If no tool is configured or the command cannot be parsed
    """
    if extcmd:
        return _custom(extcmd)
    if not tool and config.extcmd:
        return _custom(config.extcmd)

    name = tool or config.tool or git.config_get("diff.tool") or git.config_get("merge.tool")
    if not name:
        raise UsageError(
            "No default diff tool configured; set one with 'git config diff.tool <tool>' or pass -x/--extcmd"
        )

    shell_command = git.config_get(f"difftool.{name}.cmd")
    if shell_command:
        logger.debug("Using difftool.%s.cmd: %s", name, shell_command)
        return DiffTool(name=name, shell_command=shell_command)

    executable = git.config_get(f"difftool.{name}.path")
    template = _KNOWN_TOOLS.get(name)
    if template is not None:
        return DiffTool(name=name, argv=(executable or template[0], *template[1:]))
    return DiffTool(name=name, argv=(executable or name,))
