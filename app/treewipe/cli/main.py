"""treewipe command line.

Wires the deletion commands into one Typer app and configures logging
from the global flags before any command runs.
"""

from typing import Annotated

import typer

from treewipe import __version__
from treewipe.cli.commands import config, delete, erase, history
from treewipe.core.logging import setup_logging

app = typer.Typer(
    name="treewipe",
    help="Delete files and whole directory trees, reporting every entry that survives.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"treewipe version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
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
        bool, typer.Option("--verbose", "-v", help="Log every entry as it is deleted.")
    ] = False,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Log errors only.")] = False,
) -> None:
    """Delete single entries strictly or tolerantly, or erase whole trees bottom-up.

    Entries that cannot be removed are reported and never stop the rest
    of an erase.
    """
    setup_logging(verbose=verbose, quiet=quiet)


app.command(name="delete")(delete.delete)
app.command(name="safe-delete")(delete.safe_delete_command)
app.command(name="erase")(erase.erase)
app.add_typer(history.app, name="history")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
