"""Command-line interface for mergemygpx.

Subcommands:
    merge FILES... [--output PATH]
    merge-all DIRECTORY
    invert FILES...
    invert-all DIRECTORY
    decimate FILES... FACTOR_M
    info FILES...

Prints "*** OK ***" on success. On failure prints the error (with its cause
chain when --verbose is given) and exits with status 1.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from mergemygpx import commands
from mergemygpx.constants import PACKAGE_NAME, PACKAGE_VERSION, CliConfig, LogConfig
from mergemygpx.model.result import CommandResult

app = typer.Typer(
    name=PACKAGE_NAME,
    help="MMG - A tool to merge, invert and decimate GPX files.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{PACKAGE_NAME} {PACKAGE_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
) -> None:
    """MMG - A tool to merge GPX files."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LogConfig.FORMAT)
    ctx.obj = {"verbose": verbose}


def _report(ctx: typer.Context, result: CommandResult) -> None:
    """Print a command result and exit with status 1 on failure."""
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))

    for summary in result.summaries:
        for line in summary.to_lines():
            typer.echo(line)
    for path in result.written:
        typer.echo(f"Wrote '{path}'")
    if result.notice:
        typer.echo(result.notice)

    if result.ok:
        typer.secho(CliConfig.OK_BANNER, fg=typer.colors.GREEN)
        return

    message = result.failure.describe(verbose=verbose)
    typer.secho(CliConfig.ERROR_BANNER.format(message=message), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command("merge")
def merge_command(
    ctx: typer.Context,
    files: list[Path] = typer.Argument(..., help=CliConfig.HELP_FOR_FILES_ARG),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help=f"Output file (default: ./{CliConfig.DEFAULT_MERGE_OUTPUT})."
    ),
) -> None:
    """Merge all tracks from all given files into a file with a single track.

    Files are merged by order of appearance on the command-line.
    """
    output_path = output or Path.cwd() / CliConfig.DEFAULT_MERGE_OUTPUT
    _report(ctx, commands.merge(files, output_path))


@app.command("merge-all")
def merge_all_command(
    ctx: typer.Context,
    directory: Path = typer.Argument(..., help=CliConfig.HELP_FOR_DIRECTORY_ARG),
) -> None:
    """Same as "merge" with all the files in the given directory.

    Files are merged by alphabetical order of their names.
    The output file `merged.gpx` is created in DIRECTORY.
    """
    _report(ctx, commands.merge_all(directory))


@app.command("invert")
def invert_command(
    ctx: typer.Context,
    files: list[Path] = typer.Argument(..., help=CliConfig.HELP_FOR_FILES_ARG),
) -> None:
    """Invert each track of each given file.

    An output file is created per input file.
    Tracks and segments are not merged, just inverted one by one.
    """
    _report(ctx, commands.invert(files))


@app.command("invert-all")
def invert_all_command(
    ctx: typer.Context,
    directory: Path = typer.Argument(..., help=CliConfig.HELP_FOR_DIRECTORY_ARG),
) -> None:
    """Same as "invert" with all the files in the given directory."""
    _report(ctx, commands.invert_all(directory))


@app.command("decimate")
def decimate_command(
    ctx: typer.Context,
    files: list[Path] = typer.Argument(..., help=CliConfig.HELP_FOR_FILES_ARG),
    factor_m: int = typer.Argument(..., help="Decimate by a factor M; that is, keep only every M-th point."),
) -> None:
    """Decimate the points of each segment of each track of each given file.

    Some mapping tools (e.g. Komoot) refuse to import GPX files with too many
    points. Use this command to reduce the number of points until they accept it.
    The first and last point of every segment are always kept.
    """
    _report(ctx, commands.decimate(files, factor_m))


@app.command("info")
def info_command(
    ctx: typer.Context,
    files: list[Path] = typer.Argument(..., help=CliConfig.HELP_FOR_FILES_ARG),
) -> None:
    """Print information about one or more GPX files."""
    _report(ctx, commands.info(files))
