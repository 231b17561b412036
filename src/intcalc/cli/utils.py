"""
intcalc CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform
from importlib.metadata import PackageNotFoundError, version

import typer

import intcalc


def get_version() -> str:
    """Get intcalc version from package metadata."""
    try:
        return version("intcalc")
    except PackageNotFoundError:
        return intcalc.__version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"intcalc version {get_version()}")
        typer.echo(f"  Python:        {platform.python_implementation()} {platform.python_version()}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send log records at ``level`` and above to stderr."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
