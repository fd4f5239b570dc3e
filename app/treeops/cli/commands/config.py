"""Config command implementation.

Shows the effective configuration or writes a default config file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from treeops.cli.types import get_config
from treeops.core.config import ConfigError, TreeopsConfig, save_config
from treeops.core.paths import get_config_path
from treeops.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or initialize the treeops configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    settings = get_config(ctx)

    table = Table(
        title=f"Configuration ({escape(str(get_config_path()))})",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", no_wrap=True)
    table.add_column("Value", style="info")

    for key, value in settings.model_dump().items():
        table.add_row(key, "-" if value is None else escape(str(value)))

    console.print(table)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default values."""
    path = get_config_path()
    if path.exists() and not force:
        print_info(f"Config already exists: {path} (use --force to overwrite)")
        return

    try:
        saved = save_config(TreeopsConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
