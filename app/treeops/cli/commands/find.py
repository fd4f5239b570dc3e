"""Find command implementation.

Lists files below a directory that match an extension and/or name.
"""

from pathlib import Path
from typing import Annotated

import typer

from treeops.cli.display import print_paths, print_paths_json
from treeops.cli.types import OutputFormat, get_config
from treeops.engine import describe_error, find_files
from treeops.utils.formatting import print_error

app = typer.Typer(
    help="Find files by extension and/or name.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def find_command(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Option(
            "--dir",
            "-d",
            help="Directory to search. Defaults to the configured directory.",
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
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Find files recursively. Without filters, every file is listed."""
    if ctx.invoked_subcommand is not None:
        return

    settings = get_config(ctx)
    root = directory if directory is not None else Path(settings.default_directory)
    if extension is None:
        extension = settings.default_extension

    try:
        files = find_files(root, extension, name)
    except OSError as e:
        print_error(describe_error(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        print_paths_json(files)
        return

    print_paths("Found files", files)
