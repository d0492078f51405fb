"""Directory tree scanning and removal commands.

Provides commands to display a directory as a tree and to remove
files and directories recursively.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.tree import Tree

from fskit.cli.types import OutputFormat, get_config
from fskit.filesystem.errors import FskitError
from fskit.filesystem.models import DirectoryNode
from fskit.filesystem.remover import remove
from fskit.filesystem.scanner import scan_directory
from fskit.utils.formatting import (
    console,
    format_size_auto,
    print_error,
    print_info,
    print_success,
)

app = typer.Typer(
    help="Directory tree scanning and removal.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def tree(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to scan."),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TREE,
    follow_symlinks: Annotated[
        bool | None,
        typer.Option(
            "--follow-symlinks/--no-follow-symlinks",
            help="Descend into symlinked directories.",
        ),
    ] = None,
) -> None:
    """Scan a directory recursively and display it."""
    config = get_config()
    follow = config.follow_symlinks if follow_symlinks is None else follow_symlinks

    try:
        root = scan_directory(path, follow_symlinks=follow)
    except FskitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(root.to_dict()))
        return

    console.print(_build_tree(root, label=root.path))
    console.print(
        f"\n[dim]{root.file_count} files, {root.directory_count} directories "
        f"({format_size_auto(root.total_size)} total)[/dim]"
    )


@app.command()
def rm(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Files or directories to remove."),
    ],
    cascade: Annotated[
        int | None,
        typer.Option(
            "--cascade",
            "-c",
            min=0,
            help="Parent levels to remove when a file deletion leaves them empty.",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Remove files and directories recursively."""
    config = get_config()
    levels = config.cascade_empty_parents if cascade is None else cascade

    existing = [p for p in paths if p.exists() or p.is_symlink()]
    if not existing:
        print_info("Nothing to remove.")
        return

    if not yes:
        confirmed = typer.confirm(
            f"Remove {len(existing)} path(s) recursively?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        removed = remove(paths, levels)
    except FskitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Removed {len(removed)} path(s).")


# === Private helper functions ===


def _build_tree(node: DirectoryNode, label: str, parent: Tree | None = None) -> Tree:
    """Build a Rich tree for a directory node and its subtree."""
    text = f"[tree.directory]{escape(label)}/[/]"
    branch = Tree(text) if parent is None else parent.add(text)

    for child in node.subdirectories:
        _build_tree(child, label=child.name, parent=branch)

    for file in node.files:
        style = "tree.symlink" if file.is_symlink else "tree.file"
        size = format_size_auto(file.size_bytes)
        branch.add(f"[{style}]{escape(file.base_name)}[/] [dim]({size})[/dim]")

    return branch
