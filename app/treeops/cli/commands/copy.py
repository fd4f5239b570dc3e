"""Copy command implementation.

Copies matching files, or a whole directory tree, into a destination
directory while mirroring the source structure.
"""

from pathlib import Path
from typing import Annotated

import typer

from treeops.cli.display import print_paths
from treeops.cli.types import get_config, get_observer
from treeops.engine import FileFilter, TreeOpsError, copy_files, describe_error
from treeops.utils.formatting import print_error, print_success

app = typer.Typer(
    help="Copy files by extension and/or name into another directory.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def copy_command(
    ctx: typer.Context,
    dest: Annotated[
        Path,
        typer.Option(
            "--dest",
            "-t",
            help="Destination directory, created if missing.",
        ),
    ],
    src: Annotated[
        Path | None,
        typer.Option(
            "--src",
            "-s",
            help="Source directory. Defaults to the configured directory.",
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
) -> None:
    """Copy files recursively. Without filters, the whole tree is copied."""
    if ctx.invoked_subcommand is not None:
        return

    settings = get_config(ctx)
    source = src if src is not None else Path(settings.default_directory)
    if extension is None:
        extension = settings.default_extension

    try:
        copied = copy_files(source, dest, extension, name, observer=get_observer(ctx))
    except TreeOpsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except OSError as e:
        print_error(describe_error(e))
        raise typer.Exit(code=1) from e

    if FileFilter.create(extension, name).is_empty:
        print_success(f"Copied {source} into {dest}")
        return

    print_paths("Copied files", copied)
