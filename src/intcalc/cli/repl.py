"""
Interactive read-eval-print loop.

Reads one line at a time, prints the value or the error message, and keeps
going until end of input. A bad line never ends the session.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

import typer

from intcalc.core.calculator import evaluate_line
from intcalc.core.config import DEFAULT_CONFIG_FILE, ReplConfig, load_config
from intcalc.core.errors import ConfigError

from .utils import configure_logging

logger = logging.getLogger(__name__)


def run_repl(
    stream: TextIO,
    config: ReplConfig,
    echo: Callable[..., None] = typer.echo,
) -> int:
    """Run the loop over ``stream`` until it is exhausted.

    Returns:
        Number of lines that failed to parse or evaluate.
    """
    failures = 0
    evaluated = 0
    logger.info("Session started")

    if config.banner:
        echo(config.banner)

    while True:
        echo(config.prompt, nl=False)
        line = stream.readline()
        if not line:
            echo("")
            break

        if not line.strip():
            continue

        result = evaluate_line(line)
        evaluated += 1
        if config.show_ast and result.rendered is not None:
            echo(result.rendered)

        if result.ok:
            echo(str(result.value))
        else:
            failures += 1
            echo(result.message)

    logger.info("Session ended: %d lines, %d failed", evaluated, failures)
    return failures


def repl_command(
    config_path: Path = typer.Option(
        Path(DEFAULT_CONFIG_FILE), "--config", "-c", help="Path to intcalc.toml"
    ),
    show_ast: bool | None = typer.Option(
        None,
        "--show-ast/--no-show-ast",
        help="Print the parsed expression before each result. Default from config.",
    ),
) -> None:
    """Start the interactive calculator."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if show_ast is not None:
        config.show_ast = show_ast

    configure_logging(config.log_level)
    run_repl(sys.stdin, config)
