"""
xcalc CLI - Entry point.

Evaluates one arithmetic expression given as the only positional argument
and prints the result with six fractional digits:

    $ xcalc "2 + 3 * 4"
    14.000000

Every failure (invalid character, unexpected token, undefined remainder)
prints a diagnostic to stdout and exits with status 1.
"""

import logging
import platform
import sys

import typer
from rich.console import Console
from rich.tree import Tree

from xcalc.core.environment import DEFAULT_PRECISION, get_log_level
from xcalc.core.errors import CalcError
from xcalc.core.expression_lang import evaluate, parse_expr
from xcalc.core.ir.expressions import BinaryExpr, Expr

logger = logging.getLogger(__name__)

USAGE = 'Syntax: xcalc "<expr>"'


def get_version() -> str:
    """Get xcalc version from package metadata."""
    from xcalc import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"xcalc {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def build_tree(expr: Expr) -> Tree:
    """Render an expression AST as a rich Tree."""
    root: Tree | None = None
    stack: list[tuple[Expr, Tree | None]] = [(expr, None)]

    while stack:
        node, parent = stack.pop()
        if isinstance(node, BinaryExpr):
            label = f"[bold]{node.op.value}[/bold]"
        else:
            label = f"[cyan]{node}[/cyan]"

        branch = Tree(label) if parent is None else parent.add(label)
        if root is None:
            root = branch
        if isinstance(node, BinaryExpr):
            # Right first so the left child is added first
            stack.append((node.right, branch))
            stack.append((node.left, branch))

    assert root is not None
    return root


# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="xcalc – evaluate an arithmetic expression",
    add_completion=False,
)


# Expressions may start with "-", which must not be taken for an option.
# Arguments after the expression are ignored.
@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def calculate(
    expression: str | None = typer.Argument(
        None,
        help='Expression to evaluate, e.g. "2 + 3 * 4"',
        show_default=False,
    ),
    precision: int = typer.Option(
        DEFAULT_PRECISION,
        "--precision",
        "-p",
        min=0,
        help="Number of fractional digits in the result",
    ),
    show_ast: bool = typer.Option(
        False,
        "--show-ast",
        help="Print the parsed expression tree to stderr",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable debug logging",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """Evaluate EXPRESSION and print the result."""
    level = get_log_level(verbose)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("xcalc").setLevel(level)

    if not expression:
        typer.echo(USAGE)
        raise typer.Exit(code=1)

    try:
        expr = parse_expr(expression)
        if show_ast:
            Console(stderr=True).print(build_tree(expr))
        result = evaluate(expr)
    except CalcError as e:
        logger.debug("Evaluation of %r failed", expression, exc_info=True)
        typer.echo(str(e))
        raise typer.Exit(code=1)

    typer.echo(f"{result:.{precision}f}")


# =============================================================================
# Main Entry Point
# =============================================================================


def main(argv: list[str] | None = None) -> None:
    app(args=argv, prog_name="xcalc")


if __name__ == "__main__":
    main(sys.argv[1:])
