"""CLI package for treewipe.

This package contains the Typer application and all subcommands.
"""

from treewipe.cli.main import app

__all__ = ["app"]
