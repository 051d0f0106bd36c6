"""
Expression types for xcalc IR.

This module defines the typed expression AST produced by the parser and
consumed by the evaluator. There are exactly two node kinds:

- Literal: a floating-point number
- BinaryExpr: an operator applied to two child expressions

Nodes are frozen; a tree is never mutated after the parser builds it.
"""

from __future__ import annotations

import math
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "**"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        # int() would drop the sign of -0.0
        negative_zero = self.value == 0 and math.copysign(1.0, self.value) < 0
        if self.value.is_integer() and not negative_zero:
            return str(int(self.value))
        return repr(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        # Iterative: left-deep chains can be far deeper than the recursion limit
        parts: list[str] = []
        stack: list[Expr | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, BinaryExpr):
                stack.extend([")", item.right, f" {item.op.value} ", item.left, "("])
            else:
                parts.append(str(item))
        return "".join(parts)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | BinaryExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
