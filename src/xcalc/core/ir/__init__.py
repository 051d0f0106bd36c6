"""
Intermediate representation for xcalc expressions.
"""

from .expressions import BinaryExpr, BinaryOp, Expr, Literal

__all__ = ["BinaryExpr", "BinaryOp", "Expr", "Literal"]
