"""Shared pytest fixtures for xcalc tests."""

import pytest

from xcalc.core.ir.expressions import BinaryExpr, BinaryOp, Literal


@pytest.fixture
def simple_tree() -> BinaryExpr:
    """Return the tree for ``2 + 3 * 4``."""
    return BinaryExpr(
        op=BinaryOp.ADD,
        left=Literal(value=2),
        right=BinaryExpr(op=BinaryOp.MUL, left=Literal(value=3), right=Literal(value=4)),
    )
