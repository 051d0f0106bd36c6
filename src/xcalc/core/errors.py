"""
Error types for xcalc lexing, parsing, and evaluation.
"""

from dataclasses import dataclass
from typing import Optional


class CalcError(Exception):
    """Base exception for all xcalc errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class LexError(CalcError):
    """
    Raised when the scanner meets a character outside the token set.

    Examples:
    - Letters or punctuation such as ``@`` or ``(``
    - A decimal point with no digits after it
    """

    def __init__(self, char: str, pos: int, context: Optional["ErrorContext"] = None):
        self.char = char
        self.pos = pos
        super().__init__(f"Invalid character '{char}'", context)


class ParseError(CalcError):
    """
    Raised when a token appears where the grammar does not allow it.

    Examples:
    - An expression that starts with an operator other than a sign
    - A dangling operator followed by end of input
    - Two numbers with no operator between them
    """

    def __init__(
        self,
        message: str,
        kind: str,
        pos: int,
        context: Optional["ErrorContext"] = None,
    ):
        self.kind = kind
        self.pos = pos
        super().__init__(message, context)


class EvalError(CalcError):
    """
    Raised when an arithmetic operation has no defined result.

    Examples:
    - Remainder by zero after truncation to integers
    - Remainder operands that are not finite or overflow 64 bits
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error inside the expression text.

    Attributes:
        source: The full expression text
        column: Column number (1-indexed)
    """

    source: str
    column: int

    def format(self) -> str:
        """
        Format the context as the source line with a marker under the column.

        Returns:
            Formatted string like:
                "   1 | 2 @ 3\\n         ^"
        """
        prefix = "   1 | "
        # Only the first line is shown; tabs and newlines would shift the marker
        line = self.source.replace("\t", " ").replace("\n", " ").replace("\r", " ")
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{line}\n{marker}"


def make_lex_error(char: str, source: str, pos: int) -> LexError:
    """
    Helper to create a LexError with context.

    Args:
        char: The offending character
        source: The expression text
        pos: Offset of the character (0-indexed)

    Returns:
        LexError with context attached
    """
    return LexError(char, pos, ErrorContext(source=source, column=pos + 1))


def make_parse_error(message: str, kind: str, source: str, pos: int) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        kind: Kind of the offending token
        source: The expression text
        pos: Offset of the token (0-indexed)

    Returns:
        ParseError with context attached
    """
    return ParseError(message, kind, pos, ErrorContext(source=source, column=pos + 1))
