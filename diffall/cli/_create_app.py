"""Create the git-diffall Typer CLI app."""

from typing import Annotated

import typer

from diffall.api.diffall.cmd import cmd
from diffall.api.endpoint.resolve_endpoints import resolve_endpoints
from diffall.api.endpoint.UsageError import UsageError
from diffall.cli._handle_stage_result import _handle_stage_result


def _create_app(explicit_paths: list[str] | None = None) -> typer.Typer:
    """Create and configure the git-diffall Typer app.

    Args:
        explicit_paths: Arguments that followed ``--`` on the command line.
            They are split off before Typer parses the rest, so they are
            never mistaken for revisions or options.
    """
    app = typer.Typer(
        name="git-diffall",
        help="Open the changes between two repository states in a directory diff tool.",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.command()
    def diffall(
        ctx: typer.Context,
        revisions: Annotated[
            list[str] | None,
            typer.Argument(
                help="Zero, one or two revisions, or a range A..B / A...B. Extra arguments are paths.",
                show_default=False,
            ),
        ] = None,
        cached: Annotated[
            bool, typer.Option("--cached", "--staged", help="Compare against the index instead of the working tree")
        ] = False,
        copy_back: Annotated[
            bool, typer.Option("--copy-back", help="Copy edited working-tree files back after the tool exits")
        ] = False,
        extcmd: Annotated[
            str | None,
            typer.Option("--extcmd", "-x", help="Run '<command> LEFT RIGHT' instead of the configured tool"),
        ] = None,
        tool: Annotated[
            str | None, typer.Option("--tool", "-t", help="Diff tool to use instead of git's diff.tool")
        ] = None,
        display: Annotated[str, typer.Option("--display", "-d", help="Output format: json or yaml")] = "yaml",
    ) -> None:
        """Compare two repository states as whole directory trees.

        With no revision the working tree is compared against HEAD; with one
        revision, against that revision. --cached compares the index instead.
        A..B compares two commits, A...B compares B against the merge base.
        Paths after -- restrict the comparison.
        """
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        try:
            plan = resolve_endpoints(
                revisions or [],
                explicit_paths,
                cached=cached,
                copy_back=copy_back,
                extcmd=extcmd,
                tool=tool,
            )
        except UsageError as e:
            typer.echo(f"Usage error: {e}", err=True)
            typer.echo(ctx.get_usage(), err=True)
            typer.echo("Try 'git-diffall --help' for help.", err=True)
            raise typer.Exit(1) from e

        _handle_stage_result(cmd, display)(plan)

    return app
