"""CLI - main entry point."""

import sys

PATH_SEPARATOR = "--"


def _split_paths(argv: list[str]) -> tuple[list[str], list[str] | None]:
    """Split ``argv`` at the first ``--`` into (options/revisions, paths)."""
    if PATH_SEPARATOR not in argv:
        return argv, None
    index = argv.index(PATH_SEPARATOR)
    return argv[:index], argv[index + 1 :]


def _is_usage_error(exc: BaseException) -> bool:
    """True for click usage errors, including those from a copy of click bundled with typer."""
    return any(cls.__name__ == "UsageError" for cls in type(exc).__mro__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from diffall.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    head, paths = _split_paths(list(argv))

    if "--version" in head:
        from diffall.api.config.get_package_version import get_package_version

        print(f"git-diffall {get_package_version()}")
        return 0

    app = _create_app(paths)
    try:
        rv = app(head, prog_name="git-diffall", standalone_mode=False)
    except (click.exceptions.Abort, typer.Abort, KeyboardInterrupt):
        typer.echo("Interrupted", err=True)
        return 130
    except Exception as e:
        if _is_usage_error(e):
            typer.echo(f"Usage error: {e}", err=True)
        else:
            typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return rv if isinstance(rv, int) else 0
