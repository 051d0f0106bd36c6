"""
Precedence-climbing parser for the xcalc expression language.

Grammar:
    expr     → primary (binop primary)*
    primary  → ("+" | "-")* NUMBER
    binop    → "+" | "-" | "*" | "/" | "%" | "**"

Operator precedence and associativity come from the binding-power table
below rather than from one grammar rule per level. Every operator's right
power is one above its left power, so operators of equal precedence group
to the left. That includes ``**``: ``2 ** 3 ** 2`` is ``(2 ** 3) ** 2``.

Signs in primary position are folded into the literal, so the tree only
ever holds Literal and BinaryExpr nodes.
"""

from __future__ import annotations

import logging

from xcalc.core.errors import ParseError, make_parse_error
from xcalc.core.expression_lang.tokenizer import Lexer, Token, TokenKind
from xcalc.core.ir.expressions import BinaryExpr, BinaryOp, Expr, Literal

logger = logging.getLogger(__name__)


_BINARY_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
    TokenKind.PERCENT: BinaryOp.MOD,
    TokenKind.STAR_STAR: BinaryOp.POW,
}

# (left, right) binding powers
BINDING_POWER: dict[BinaryOp, tuple[int, int]] = {
    BinaryOp.ADD: (20, 21),
    BinaryOp.SUB: (20, 21),
    BinaryOp.MUL: (22, 23),
    BinaryOp.DIV: (22, 23),
    BinaryOp.MOD: (22, 23),
    BinaryOp.POW: (24, 25),
}


def _describe(kind: TokenKind) -> str:
    if kind == TokenKind.EOF:
        return "end of input"
    return str(kind)


class _Parser:
    """Pratt parser pulling tokens from a lexer through a one-token buffer."""

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.current: Token = lexer.next_token()

    def advance(self) -> Token:
        tok = self.current
        if tok.kind != TokenKind.EOF:
            self.current = self.lexer.next_token()
        return tok

    def error(self, message: str, tok: Token) -> ParseError:
        return make_parse_error(message, _describe(tok.kind), self.lexer.source, tok.pos)

    # -- Grammar rules --

    def parse_expression(self, min_bp: int = 0) -> Expr:
        """Parse a subtree whose operators all bind at least as tight as min_bp."""
        left = self.parse_primary()

        while True:
            tok = self.current
            if tok.kind == TokenKind.EOF:
                return left

            op = _BINARY_OPS.get(tok.kind)
            if op is None:
                raise self.error(
                    f"Unexpected token after expression: {_describe(tok.kind)}", tok
                )

            left_bp, right_bp = BINDING_POWER[op]
            if left_bp < min_bp:
                # Leave the operator in the buffer for the enclosing call
                return left

            self.advance()
            right = self.parse_expression(right_bp)
            left = BinaryExpr(op=op, left=left, right=right)

    def parse_primary(self) -> Literal:
        """("+" | "-")* NUMBER"""
        negative = False
        while self.current.kind in (TokenKind.PLUS, TokenKind.MINUS):
            if self.current.kind == TokenKind.MINUS:
                negative = not negative
            self.advance()

        tok = self.current
        if tok.kind != TokenKind.NUMBER:
            raise self.error(f"Unexpected token: {_describe(tok.kind)}", tok)

        self.advance()
        assert tok.number is not None
        return Literal(value=-tok.number if negative else tok.number)


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "2 + 3 * 4")

    Returns:
        Parsed expression AST.

    Raises:
        ParseError: If the token sequence is not a valid expression.
        LexError: If scanning meets an invalid character.
    """
    parser = _Parser(Lexer(source))
    expr = parser.parse_expression(0)
    logger.debug("Parsed %r as %s", source, expr)
    return expr
