"""CLI commands for treewipe."""
