"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from fskit import __version__
from fskit.cli.commands import config, fs, io
from fskit.utils.formatting import err_console, set_quiet

# Create main Typer app
app = typer.Typer(
    name="fskit",
    help="Scan directory trees, remove paths and manipulate files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fskit version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route fskit log records to stderr through Rich.

    Args:
        verbose: If True, log at DEBUG level, otherwise WARNING.
    """
    logger = logging.getLogger("fskit")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


@app.callback()
def main(
    ctx: typer.Context,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """fskit - filesystem utility layer.

    Scan directories into trees, remove paths recursively and read or
    write files with diagnosable errors.
    """
    configure_logging(verbose)
    set_quiet(quiet)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(fs.app, name="fs")
app.add_typer(io.app, name="io")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
