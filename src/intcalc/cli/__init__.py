"""
intcalc CLI package.

- repl.py: Interactive read-eval-print loop
- utils.py: Shared utilities

Commands:
    intcalc repl              Interactive session on stdin
    intcalc eval EXPRESSION   Evaluate one expression
    intcalc tokens EXPRESSION Show the token stream
    intcalc ast EXPRESSION    Show the parsed expression
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from intcalc.core.calculator import calculate, parse_line
from intcalc.core.errors import CalcError, ParseError
from intcalc.core.expression_lang.tokenizer import lex
from intcalc.core.ir.expressions import render

from .repl import repl_command, run_repl
from .utils import version_callback

app = typer.Typer(
    help="intcalc: integer arithmetic evaluator",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version information",
    ),
) -> None:
    """intcalc CLI main callback for global options."""
    pass


app.command(name="repl")(repl_command)


@app.command(name="eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '(1 + 2) * 3'"),
) -> None:
    """Evaluate a single expression and print the result."""
    try:
        value = calculate(expression)
    except CalcError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e
    typer.echo(str(value))


@app.command(name="tokens")
def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Show the tokens an expression lexes into."""
    table = Table(title="Tokens")
    table.add_column("Pos", style="dim", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Text")

    for tok in lex(expression):
        table.add_row(str(tok.pos), tok.kind.value, tok.value)

    console.print(table)


@app.command(name="ast")
def ast_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
) -> None:
    """Parse an expression and print its rendering."""
    try:
        expr = parse_line(expression)
    except ParseError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1) from e
    typer.echo(render(expr))


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "app",
    "main",
    "run_repl",
]
