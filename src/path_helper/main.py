"""CLI entry point for path_helper."""

import os
import sys
from pathlib import Path
from typing import Annotated

import typer
from py_app_dev.core.exceptions import UserNotificationException
from py_app_dev.core.logging import logger

from path_helper import __version__
from path_helper.builder import PathBuilder
from path_helper.domain import DEFAULT_VARIABLES, ShellStyle
from path_helper.errors import PathHelperError
from path_helper.logger import DEFAULT_LOG_LEVEL, setup_logger
from path_helper.shells import detect_shell_style, render_exports

package_name = "path_helper"
DEFAULT_ROOT_DIR = Path("/")
USAGE = "usage: path_helper [-c | -s]"

app = typer.Typer(
    name=package_name,
    help="Build PATH and MANPATH from /etc/paths, /etc/manpaths and their .d directories.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{package_name} {__version__}")
        raise typer.Exit()


def _select_style(csh: bool, sh: bool) -> ShellStyle:
    if csh:
        return ShellStyle.CSH
    if sh:
        return ShellStyle.SH
    return detect_shell_style(os.environ.get("SHELL"))


def _is_usage_error(ctx: typer.Context, csh: int, sh: int) -> bool:
    """Anything beyond a single ``-c`` or ``-s`` is a usage error."""
    return bool(ctx.args) or csh + sh > 1


@app.command(
    help="Print shell commands that set PATH (and MANPATH, when already set).",
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def path_helper(
    ctx: typer.Context,
    csh: Annotated[int, typer.Option("-c", count=True, help="Generate C-shell commands.")] = 0,
    sh: Annotated[int, typer.Option("-s", count=True, help="Generate Bourne shell commands.")] = 0,
    root_dir: Annotated[
        Path,
        typer.Option("--root", envvar="PATH_HELPER_ROOT", help="Directory containing etc/paths and etc/manpaths."),
    ] = DEFAULT_ROOT_DIR,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    if _is_usage_error(ctx, csh, sh):
        typer.echo(USAGE, err=True)
        raise typer.Exit(1)

    style = _select_style(bool(csh), bool(sh))
    try:
        values = PathBuilder().build_variables(DEFAULT_VARIABLES, root_dir)
    except PathHelperError as e:
        logger.error(str(e))
        raise typer.Exit(1) from e
    except MemoryError as e:
        logger.error("out of memory")
        raise typer.Exit(1) from e

    # Values keep undecodable file bytes as surrogates; write them back out unchanged
    typer.echo(render_exports(style, values).encode("utf-8", "surrogateescape"), nl=False)


def main() -> int:
    try:
        setup_logger(os.environ.get("PATH_HELPER_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        app()
        return 0
    except UserNotificationException as e:
        logger.error(f"{e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
