"""
xcalc arithmetic expression language.

Tokenizer, parser, and evaluator for single arithmetic expressions.

Usage:
    from xcalc.core.expression_lang import calculate, evaluate, parse_expr

    expr = parse_expr("2 + 3 * 4")
    result = evaluate(expr)
    # result == 14.0
"""

from xcalc.core.expression_lang.evaluator import evaluate
from xcalc.core.expression_lang.parser import parse_expr


def calculate(source: str) -> float:
    """Parse and evaluate an expression string in one step."""
    return evaluate(parse_expr(source))


__all__ = ["calculate", "evaluate", "parse_expr"]
