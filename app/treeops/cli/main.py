"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from treeops import __version__
from treeops.cli.commands import config, copy, delete, find
from treeops.core.config import ConfigError, load_config
from treeops.utils.formatting import configure_logging, print_error

# Create main Typer app
app = typer.Typer(
    name="treeops",
    help="Find, copy and delete files recursively by extension or name.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"treeops version {__version__}")
        raise typer.Exit()


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
    """treeops - recursive file find, copy and delete.

    Select files by extension, by name without extension, or both.
    Without either filter, copy and delete act on the whole directory.
    """
    try:
        settings = load_config()
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if verbose:
        configure_logging("DEBUG")
    elif quiet:
        configure_logging("ERROR")
    else:
        configure_logging(settings.log_level)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = settings


# Register commands
app.add_typer(find.app, name="find")
app.add_typer(copy.app, name="copy")
app.add_typer(delete.app, name="delete")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
