"""Configuration commands.

Provides commands to show the effective configuration, print the
config file location, and write a default config file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from treewipe.core.config import ConfigError, TreewipeConfig, require_config, save_config
from treewipe.core.paths import get_config_path
from treewipe.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective configuration."""
    config = require_config()

    table = Table(title="Configuration", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    for name, value in config.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(value) or "-"
        table.add_row(name, escape(str(value)))

    console.print(table)
    config_path = get_config_path()
    source = str(config_path) if config_path.exists() else "built-in defaults"
    console.print(f"\n[dim]Source: {escape(source)}[/dim]")


@app.command()
def path() -> None:
    """Print the configuration file path."""
    typer.echo(str(get_config_path()))


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    config_path = get_config_path()
    if config_path.exists() and not force:
        print_info(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(TreewipeConfig())
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
