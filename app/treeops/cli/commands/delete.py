"""Delete command implementation.

Deletes matching files and prunes directories they leave empty, or
removes a whole directory tree when no filter is given.
"""

from pathlib import Path
from typing import Annotated

import typer

from treeops.cli.display import print_paths
from treeops.cli.types import get_config, get_observer
from treeops.engine import FileFilter, delete_files, describe_error, find_files
from treeops.utils.formatting import print_error, print_info

app = typer.Typer(
    help="Delete files by extension and/or name.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def delete_command(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Option(
            "--dir",
            "-d",
            help="Directory to delete from. Defaults to the configured directory.",
        ),
    ] = None,
    extension: Annotated[
        str | None,
        typer.Option(
            "--ext",
            "-e",
            help="File extension including the dot, e.g. .js.",
        ),
    ] = None,
    name: Annotated[
        str | None,
        typer.Option(
            "--name",
            "-n",
            help="File name without extension.",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete files recursively. Without filters, the whole directory is removed."""
    if ctx.invoked_subcommand is not None:
        return

    settings = get_config(ctx)
    root = directory if directory is not None else Path(settings.default_directory)
    if extension is None:
        extension = settings.default_extension

    whole_tree = FileFilter.create(extension, name).is_empty

    if dry_run:
        _print_plan(root, extension, name, whole_tree)
        return

    if not yes:
        if whole_tree:
            prompt = f"Delete the entire directory {root}?"
        else:
            prompt = f"Delete matching files under {root}?"
        if not typer.confirm(prompt, default=False):
            print_info("Aborted.")
            raise typer.Exit(code=0)

    try:
        deleted = delete_files(root, extension, name, observer=get_observer(ctx))
    except OSError as e:
        print_error(describe_error(e))
        raise typer.Exit(code=1) from e

    print_paths("Deleted", deleted)


def _print_plan(root: Path, extension: str | None, name: str | None, whole_tree: bool) -> None:
    """Display what a deletion would remove without removing anything."""
    if whole_tree:
        print_paths("Would delete (dry-run)", [str(root)])
        return

    try:
        planned = find_files(root, extension, name)
    except OSError as e:
        print_error(describe_error(e))
        raise typer.Exit(code=1) from e

    print_paths("Would delete (dry-run)", planned)
