"""Configuration commands.

Provides commands to display the effective configuration and to write
a default configuration file.
"""

from typing import Annotated

import typer
from rich.table import Table

from fskit.cli.types import get_config
from fskit.core.config import ConfigError, FskitConfig, config_to_dict, save_config
from fskit.core.paths import get_config_path
from fskit.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = get_config()
    path = get_config_path()

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", no_wrap=True)
    table.add_column("Value", style="info")

    for key, value in config_to_dict(config).items():
        table.add_row(key, str(value))

    console.print(table)
    source = str(path) if path.exists() else "defaults (no config file)"
    console.print(f"[dim]Source: {source}[/dim]")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config file already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_config(FskitConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
