"""Tests for the expression IR node types."""

import pytest
from pydantic import ValidationError

from xcalc.core.expression_lang import evaluate, parse_expr
from xcalc.core.ir.expressions import BinaryExpr, BinaryOp, Literal


class TestLiteral:
    def test_int_is_coerced_to_float(self) -> None:
        lit = Literal(value=3)
        assert isinstance(lit.value, float)

    def test_str_integral(self) -> None:
        assert str(Literal(value=14)) == "14"

    def test_str_fractional(self) -> None:
        assert str(Literal(value=0.25)) == "0.25"

    def test_str_negative_zero(self) -> None:
        assert str(Literal(value=-0.0)) == "-0.0"

    def test_str_positive_zero(self) -> None:
        assert str(Literal(value=0)) == "0"

    def test_negative_zero_in_tree(self) -> None:
        assert str(parse_expr("1 / -0")) == "(1 / -0.0)"

    def test_frozen(self) -> None:
        lit = Literal(value=1)
        with pytest.raises(ValidationError):
            lit.value = 2.0  # type: ignore[misc]


class TestBinaryExpr:
    def test_parser_builds_expected_tree(self, simple_tree: BinaryExpr) -> None:
        assert parse_expr("2 + 3 * 4") == simple_tree

    def test_str(self, simple_tree: BinaryExpr) -> None:
        assert str(simple_tree) == "(2 + (3 * 4))"

    def test_evaluate(self, simple_tree: BinaryExpr) -> None:
        assert evaluate(simple_tree) == 14.0

    def test_operator_values(self) -> None:
        assert [op.value for op in BinaryOp] == ["+", "-", "*", "/", "%", "**"]

    def test_rejects_non_expression_child(self) -> None:
        with pytest.raises(ValidationError):
            BinaryExpr(op=BinaryOp.ADD, left=Literal(value=1), right="2")  # type: ignore[arg-type]

    def test_str_of_deep_right_operand(self) -> None:
        expr = Literal(value=1)
        for _ in range(5_000):
            expr = BinaryExpr(op=BinaryOp.SUB, left=Literal(value=2), right=expr)
        text = str(expr)
        assert text.startswith("(2 - " * 5_000 + "1)")
        assert text.count(")") == 5_000
