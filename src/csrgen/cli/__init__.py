"""Command-line layer (typer + rich)."""
