"""
Tokenizer for the xcalc expression language.

Converts an expression string into typed tokens, one at a time, on demand.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum, auto

from xcalc.core.errors import make_lex_error


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    PERCENT = auto()
    STAR_STAR = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer.

    ``number`` is only meaningful when ``kind`` is NUMBER; it is None
    for every other kind.
    """

    __slots__ = ("kind", "number", "pos")

    def __init__(self, kind: TokenKind, pos: int, number: float | None = None) -> None:
        self.kind = kind
        self.number = number
        self.pos = pos

    def __repr__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"Token({self.kind}, {self.number!r}, pos={self.pos})"
        return f"Token({self.kind}, pos={self.pos})"


_WHITESPACE = " \n\t\f\r"
_DIGITS = "0123456789"

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
}


class Lexer:
    """Scanner over one expression string.

    The cursor only moves forward. Once the end of input is reached,
    every further call to :meth:`next_token` returns EOF again.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def next_token(self) -> Token:
        """Scan and return the next token, advancing the cursor past it.

        Raises:
            LexError: If the next non-whitespace character starts no token.
        """
        source = self.source
        n = len(source)

        while self.pos < n and source[self.pos] in _WHITESPACE:
            self.pos += 1

        if self.pos >= n:
            return Token(TokenKind.EOF, n)

        start = self.pos
        c = source[start]

        if c in _DIGITS:
            return self._read_number()

        if c in _SINGLE_CHAR:
            self.pos += 1
            return Token(_SINGLE_CHAR[c], start)

        if c == "*":
            self.pos += 1
            if self.pos < n and source[self.pos] == "*":
                self.pos += 1
                return Token(TokenKind.STAR_STAR, start)
            return Token(TokenKind.STAR, start)

        raise make_lex_error(c, source, start)

    def _read_number(self) -> Token:
        """Read a digit run with an optional fractional part."""
        source = self.source
        n = len(source)
        start = self.pos

        value = 0.0
        while self.pos < n and source[self.pos] in _DIGITS:
            value = value * 10 + (ord(source[self.pos]) - ord("0"))
            self.pos += 1

        if self.pos < n and source[self.pos] == ".":
            frac_start = self.pos + 1
            if frac_start >= n or source[frac_start] not in _DIGITS:
                raise make_lex_error(".", source, self.pos)
            self.pos = frac_start
            while self.pos < n and source[self.pos] in _DIGITS:
                self.pos += 1
            # Let float() do the correctly-rounded conversion of the whole literal
            value = float(source[start : self.pos])

        return Token(TokenKind.NUMBER, start, value)


def tokenize(source: str) -> Iterator[Token]:
    """Yield every token of an expression string, ending with EOF."""
    lexer = Lexer(source)
    while True:
        tok = lexer.next_token()
        yield tok
        if tok.kind == TokenKind.EOF:
            return
