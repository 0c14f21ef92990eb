"""Main CLI application entry point.

Defines the Typer application behind the ``stat`` command.
"""

from pathlib import Path
from typing import Annotated

import typer

from statreport import __version__
from statreport.core.config import StatConfigError, load_config
from statreport.core.models import ExitCode
from statreport.core.reporter import StatReporter
from statreport.utils.formatting import print_error, print_warning
from statreport.utils.logging import configure_logging

PROG_NAME = "stat"

app = typer.Typer(
    name=PROG_NAME,
    help="Report filesystem metadata for a single file.",
    add_completion=False,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"statreport version {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_extra_args": True,
    },
)
def main(
    ctx: typer.Context,
    path: Annotated[
        str | None,
        typer.Argument(help="Path of the file to inspect.", show_default=False),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Read settings from this TOML file.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Print type, dev, ino, nlink, size and checksum of PATH.

    Exits 0 after printing the report, 1 when PATH cannot be opened or
    queried, and 2 when PATH is missing.
    """
    configure_logging(verbose)

    if path is None:
        # Usage line only; configuration is irrelevant without a path
        code = StatReporter(out=typer.echo).run([PROG_NAME])
        raise typer.Exit(code=int(code))

    try:
        config = load_config(config_path)
    except StatConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=int(ExitCode.FAILURE)) from e

    args = [PROG_NAME, path]
    if ctx.args:
        print_warning(f"Ignoring extra arguments: {' '.join(ctx.args)}")
        args.extend(ctx.args)

    reporter = StatReporter(config=config, out=typer.echo)
    raise typer.Exit(code=int(reporter.run(args)))


if __name__ == "__main__":
    app()
