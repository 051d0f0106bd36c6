"""
Expression evaluator for the xcalc expression language.

Walks an expression AST and computes a single float. Pure evaluation:
no I/O, no shared state, and the tree is only read.

Floating-point edge cases follow IEEE 754 the way C's ``/`` and ``pow``
do: division by zero and out-of-domain powers produce infinities or NaN
instead of raising. Only remainder, which works on truncated 64-bit
integers, can fail.
"""

from __future__ import annotations

import logging
import math

from xcalc.core.errors import EvalError
from xcalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal

logger = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree.

    Args:
        expr: Parsed expression AST.

    Returns:
        The computed value.

    Raises:
        EvalError: If a remainder has no defined result.
    """
    result = _interpret(expr)
    logger.debug("Evaluated %s = %r", expr, result)
    return result


def _interpret(expr: Expr) -> float:
    """Post-order walk over explicit node and value stacks."""
    values: list[float] = []
    stack: list[tuple[Expr, bool]] = [(expr, False)]

    while stack:
        node, visited = stack.pop()

        if isinstance(node, Literal):
            values.append(node.value)
            continue

        if not isinstance(node, BinaryExpr):
            raise EvalError(f"Unknown expression type: {type(node).__name__}")

        if visited:
            right = values.pop()
            left = values.pop()
            values.append(_apply_binary(node.op, left, right))
        else:
            # Left is pushed last so it is evaluated first
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.left, False))

    return values.pop()


def _apply_binary(op: BinaryOp, left: float, right: float) -> float:
    """Combine two evaluated operands."""
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right
    if op == BinaryOp.MUL:
        return left * right
    if op == BinaryOp.DIV:
        return _div(left, right)
    if op == BinaryOp.MOD:
        return _rem(left, right)
    if op == BinaryOp.POW:
        return _pow(left, right)

    raise EvalError(f"Unknown binary op: {op}")


def _div(left: float, right: float) -> float:
    """IEEE 754 division: x/0 is a signed infinity, 0/0 and nan/0 are NaN."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _to_int64(value: float) -> int:
    """Truncate toward zero into the signed 64-bit range."""
    if not math.isfinite(value):
        raise EvalError(f"Remainder operand {value!r} is not finite")
    truncated = int(value)
    if not _INT64_MIN <= truncated <= _INT64_MAX:
        raise EvalError(f"Remainder operand {value!r} is out of 64-bit range")
    return truncated


def _rem(left: float, right: float) -> float:
    """Integer remainder of truncated operands; the sign follows the dividend."""
    dividend = _to_int64(left)
    divisor = _to_int64(right)
    if divisor == 0:
        raise EvalError("Remainder by zero")
    remainder = abs(dividend) % abs(divisor)
    return float(-remainder if dividend < 0 else remainder)


def _is_odd_integer(value: float) -> bool:
    return value.is_integer() and value % 2 == 1


def _pow(base: float, exponent: float) -> float:
    """C ``pow``: overflow gives a signed infinity, domain errors give NaN."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            # Zero raised to a negative power
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
