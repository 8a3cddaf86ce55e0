"""Diffall command.

Materialize the changed files of two repository states into a private
workspace and open them in an external directory diff tool.
Matches CLI: git-diffall [--cached] [--copy-back] [-x CMD] [<rev> [<rev>]] [-- <path>...]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..config.DiffallConfig import DiffallConfig
from ..endpoint.ComparisonPlan import ComparisonPlan
from ..endpoint.Endpoint import Endpoint
from ..endpoint.RevisionResolutionError import RevisionResolutionError
from ..endpoint.UsageError import UsageError
from ..git.Git import Git
from ..git.GitError import GitError
from ..materialize.materialize_side import materialize_side
from ..StageResult import StageResult
from ..tool.invoke_tool import invoke_tool
from ..tool.resolve_diff_tool import resolve_diff_tool
from ..tool.ToolInvocationError import ToolInvocationError
from ..workspace.copy_back import copy_back
from ..workspace.CopyBackResult import CopyBackResult
from ..workspace.SessionWorkspace import SessionWorkspace
from ..workspace.WorkspaceError import WorkspaceError
from .DiffallOutput import DiffallOutput


def _resolve(git: Git, endpoint: Endpoint) -> tuple[Endpoint, str]:
    """Pin a revision endpoint to its commit id and name its directory."""
    if endpoint.kind != "revision":
        return endpoint, endpoint.dir_name()
    full = git.rev_parse(str(endpoint.rev))
    return Endpoint.revision(full), endpoint.dir_name(git.rev_parse_short(full))


def cmd(plan: ComparisonPlan, cwd: Path | None = None) -> StageResult:
    """Run a directory diff session.

    Args:
        plan: Resolved endpoints, path filters and flags
        cwd: Directory to run from (current directory if None)

    Returns:
        StageResult whose ``exit_code`` is the external tool's exit status,
        0 when nothing differs, or 1 on failure
    """

    def _build_result(
        result_obj: StageResult,
        success: bool,
        message: str,
        exit_code: int,
        **fields: Any,
    ) -> None:
        result_obj.output = DiffallOutput(
            left=plan.left.describe(),
            right=plan.right.describe(),
            mode=plan.mode,
            exit_code=exit_code,
            **fields,
        ).model_dump(mode="python")
        result_obj.result = message
        result_obj.success = success
        result_obj.exit_code = exit_code

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ...utils.logger import configure_logging

        warnings: list[str] = []

        yield (0.05, "Loading configuration...")
        try:
            config = DiffallConfig.load()
        except ValueError as e:
            _build_result(result_obj, False, str(e), 1, errors=[str(e)])
            return
        configure_logging(DiffallConfig.get_home_dir(), config.log)

        yield (0.1, "Resolving revisions...")
        try:
            git = Git.discover(cwd)
            prefix = git.prefix()
            left, left_name = _resolve(git, plan.left)
            right, right_name = _resolve(git, plan.right)
            base: Endpoint | None = None
            base_name: str | None = None
            if plan.mode == "merge_base":
                base_rev = git.merge_base(str(left.rev), str(right.rev))
                base = Endpoint.revision(base_rev)
                base_name = f"base-{git.rev_parse_short(base_rev)}"
        except (GitError, RevisionResolutionError) as e:
            _build_result(result_obj, False, str(e), 1, errors=[str(e)])
            return

        yield (0.2, "Listing changed paths...")
        try:
            changed = git.changed_paths(left, right, plan.mode, plan.paths)
        except GitError as e:
            _build_result(result_obj, False, str(e), 1, errors=[str(e)], prefix=prefix)
            return

        if not changed:
            yield (1.0, "Complete")
            _build_result(result_obj, True, "No differences found", 0, prefix=prefix)
            return

        yield (0.3, "Selecting diff tool...")
        try:
            tool = resolve_diff_tool(git, config, plan.extcmd, plan.tool)
        except (UsageError, GitError) as e:
            _build_result(
                result_obj,
                False,
                f"{e} (see git-diffall --help)",
                1,
                errors=[str(e)],
                prefix=prefix,
                changed=list(changed),
            )
            return

        sides: list[tuple[Endpoint, str]] = [(left, left_name), (right, right_name)]
        if base is not None and base_name is not None:
            sides.append((base, base_name))

        materialized: dict[str, list[str]] = {}
        exit_code = 0
        copied = CopyBackResult()
        workspace = SessionWorkspace(config.tmp_dir)
        try:
            with workspace:
                root = workspace.root
                for index, (endpoint, name) in enumerate(sides):
                    yield (0.35 + 0.1 * index, f"Materializing {name} ({len(changed)} path(s))...")
                    outcomes = materialize_side(git, endpoint, changed, workspace.side(name))
                    materialized[name] = [o.path for o in outcomes if o.status == "written"]
                    warnings.extend(
                        f"{name}: could not materialize {o.path}: {o.detail}" for o in outcomes if o.status == "error"
                    )

                yield (0.7, f"Running {tool.name} on {left_name} and {right_name}...")
                try:
                    exit_code = invoke_tool(tool, root, left_name, right_name, base_name)
                finally:
                    if plan.copy_back:
                        copied = copy_back(root / right_name, git.root)
        except (WorkspaceError, ToolInvocationError) as e:
            if workspace.cleanup_error:
                warnings.append(workspace.cleanup_error)
            _build_result(
                result_obj,
                False,
                str(e),
                1,
                errors=[str(e)],
                warnings=warnings + copied.errors,
                prefix=prefix,
                changed=list(changed),
                materialized=materialized,
                tool=tool.name,
                copied_back=copied.copied,
                workspace_removed=workspace.cleanup_error is None,
            )
            return

        if workspace.cleanup_error:
            warnings.append(workspace.cleanup_error)
        warnings.extend(f"copy-back: {err}" for err in copied.errors)

        yield (1.0, "Complete")
        if exit_code == 0:
            message = f"Compared {len(changed)} changed path(s) with {tool.name}"
        else:
            message = f"{tool.name} exited with status {exit_code}"
        if copied.copied:
            message = f"{message}; copied back {len(copied.copied)} file(s)"
        _build_result(
            result_obj,
            exit_code == 0,
            message,
            exit_code,
            warnings=warnings,
            prefix=prefix,
            changed=list(changed),
            left_dir=left_name,
            right_dir=right_name,
            base_dir=base_name,
            materialized=materialized,
            tool=tool.name,
            copied_back=copied.copied,
            workspace_removed=workspace.cleanup_error is None,
        )

    return StageResult(
        announce=f"Diffing {plan.left.describe()} against {plan.right.describe()}...",
        progress_callback=do_work,
    )
