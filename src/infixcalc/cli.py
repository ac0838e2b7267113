"""
infixcalc CLI.

Thin shell around the expression core:

- eval: evaluate one expression
- repl: read-evaluate-print loop over stdin
- tokens: show the token stream for an expression
- tree: show the parsed expression tree
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from infixcalc._version import get_version
from infixcalc.calculator import calculate
from infixcalc.config import CalcSettings, configure_logging, load_settings
from infixcalc.errors import CalcError
from infixcalc.expressions import Expr
from infixcalc.parser import parse_expr
from infixcalc.tokenizer import tokenize

logger = logging.getLogger(__name__)

console = Console()

_QUIT_WORDS = {"quit", "exit"}

_MAX_TREE_DEPTH = 16

LenientOption = Annotated[
    bool,
    typer.Option(
        "--lenient",
        help="Ignore tokens left over after a complete expression.",
    ),
]


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"infixcalc {get_version()}")
        raise typer.Exit()


app = typer.Typer(
    help="Evaluate arithmetic expressions: + - * / ^, unary minus, parentheses.",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """infixcalc CLI main callback for global options."""
    pass


def _settings() -> CalcSettings:
    try:
        settings = load_settings()
    except CalcError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)
    configure_logging(settings)
    return settings


@app.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate, e.g. '3^2*2'"),
    lenient: LenientOption = False,
) -> None:
    """Evaluate a single expression."""
    settings = _settings()
    result = calculate(expression, strict=settings.strict and not lenient)
    if not result.ok:
        typer.echo(str(result), err=True)
        raise typer.Exit(code=1)
    typer.echo(str(result))


@app.command("repl")
def repl_command(
    lenient: LenientOption = False,
    echo: bool | None = typer.Option(
        None,
        "--echo/--no-echo",
        help="Echo each input line before its result (default from INFIXCALC_ECHO).",
    ),
) -> None:
    """Read expressions line by line until end of input or 'quit'."""
    settings = _settings()
    strict = settings.strict and not lenient
    show_input = settings.echo if echo is None else echo

    while True:
        try:
            line = input(settings.prompt)
        except EOFError:
            break
        except UnicodeDecodeError as e:
            typer.echo(f"error: {e}", err=True)
            continue

        raw = line.rstrip("\r\n")
        line = raw.strip()
        if not line:
            continue
        if line.lower() in _QUIT_WORDS:
            break

        if show_input:
            typer.echo(f"Your input: {raw}")
        typer.echo(str(calculate(line, strict=strict)))

    logger.debug("REPL finished")


@app.command("tokens")
def tokens_command(
    expression: str = typer.Argument(..., help="Expression to tokenize"),
) -> None:
    """Show the token stream for an expression."""
    _settings()
    table = Table(title="Tokens")
    table.add_column("Pos", justify="right")
    table.add_column("Kind")
    table.add_column("Value")

    try:
        for tok in tokenize(expression):
            table.add_row(str(tok.pos), str(tok.kind), repr(tok.value))
    except CalcError as e:
        console.print(table)
        typer.echo(f"Tokenize error: {e.message}", err=True)
        raise typer.Exit(code=1)

    console.print(table)


def _build_tree(expr: Expr) -> Tree:
    """Rich tree for expr; subtrees below _MAX_TREE_DEPTH are elided."""
    root = Tree(expr.label)
    pending: list[tuple[Expr, Tree, int]] = [(expr, root, 0)]
    while pending:
        node, branch, depth = pending.pop()
        if node.children and depth >= _MAX_TREE_DEPTH:
            branch.add("...")
            continue
        for child in node.children:
            pending.append((child, branch.add(child.label), depth + 1))
    return root


@app.command("tree")
def tree_command(
    expression: str = typer.Argument(..., help="Expression to parse"),
    lenient: LenientOption = False,
) -> None:
    """Show the parsed expression tree."""
    settings = _settings()
    try:
        expr = parse_expr(expression, strict=settings.strict and not lenient)
    except CalcError as e:
        typer.echo(f"Parse error: {e.message}", err=True)
        raise typer.Exit(code=1)

    console.print(_build_tree(expr))
    typer.echo(str(expr))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
