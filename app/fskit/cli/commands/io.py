"""File I/O commands.

Provides commands to read, write, append, move files and create
directories, reporting OS failures with their diagnosed reason.
"""

from pathlib import Path
from typing import Annotated

import typer

from fskit.cli.types import get_config, parse_mode
from fskit.filesystem.errors import FskitError
from fskit.filesystem.operations import create_directory, read, rename, write
from fskit.utils.formatting import print_error, print_success

app = typer.Typer(
    help="Read, write and move files.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command("read")
def read_file(
    path: Annotated[Path, typer.Argument(help="File to read.")],
    lines: Annotated[
        bool,
        typer.Option("--lines", "-l", help="Print numbered lines."),
    ] = False,
) -> None:
    """Print the contents of a file."""
    config = get_config()
    try:
        contents = read(path, as_lines=lines, encoding=config.encoding)
    except FskitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if isinstance(contents, list):
        width = len(str(len(contents)))
        for number, line in enumerate(contents, start=1):
            typer.echo(f"{number:>{width}}  {line}")
        return
    typer.echo(contents, nl=False)


@app.command("write")
def write_file(
    path: Annotated[Path, typer.Argument(help="File to write.")],
    text: Annotated[str, typer.Argument(help="Text to write.")],
    append_text: Annotated[
        bool,
        typer.Option("--append", "-a", help="Append instead of overwriting."),
    ] = False,
    newline: Annotated[
        bool,
        typer.Option("--newline/--no-newline", help="Terminate the text with a newline."),
    ] = True,
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Octal mode for created directories."),
    ] = None,
) -> None:
    """Write text to a file, creating missing directories."""
    config = get_config()
    dir_mode = parse_mode(mode)
    contents = text + "\n" if newline else text

    try:
        written = write(
            path,
            contents,
            append=append_text,
            mode=config.directory_mode if dir_mode is None else dir_mode,
            encoding=config.encoding,
        )
    except FskitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    action = "Appended" if append_text else "Wrote"
    print_success(f"{action} {written} character(s).")


@app.command("mv")
def move(
    origin: Annotated[Path, typer.Argument(help="Current path.")],
    target: Annotated[Path, typer.Argument(help="New path.")],
) -> None:
    """Rename or move a file or directory."""
    try:
        rename(origin, target)
    except FskitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success("Renamed.")


@app.command("mkdir")
def make_directory(
    path: Annotated[Path, typer.Argument(help="Directory to create.")],
    mode: Annotated[
        str | None,
        typer.Option("--mode", "-m", help="Octal mode for created directories."),
    ] = None,
) -> None:
    """Create a directory and its missing parents."""
    config = get_config()
    dir_mode = parse_mode(mode)

    try:
        create_directory(path, config.directory_mode if dir_mode is None else dir_mode)
    except FskitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success("Directory ready.")
