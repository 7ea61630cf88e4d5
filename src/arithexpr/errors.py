"""
Error types for arithexpr parsing and evaluation.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


class ParseErrorKind(StrEnum):
    """What went wrong while reading an expression."""

    UNEXPECTED_TOKEN = "unexpected_token"
    EXPECTED_TOKEN = "expected_token"
    NUMBER_EXPECTED = "number_expected"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ArithError(Exception):
    """Base exception for all arithexpr errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class ParseError(ArithError):
    """
    Raised when an expression cannot be tokenized or parsed.

    Examples:
    - A character that is not a number, operator or parenthesis
    - An operator where a number or sub-expression must start
    - A missing closing parenthesis

    The whole parse is aborted; no partial tree is ever returned.
    """

    def __init__(
        self,
        message: str,
        kind: ParseErrorKind,
        position: int,
        *,
        symbol: str | None = None,
        expected: str | None = None,
        context: Optional["ErrorContext"] = None,
    ):
        self.kind = kind
        self.position = position
        self.symbol = symbol
        self.expected = expected
        super().__init__(message, context)


class EvaluatorError(ArithError):
    """
    Raised when a parsed tree cannot be reduced to a number.

    A well-formed tree never fails under the default settings; division by
    zero follows IEEE-754. Raised for division by zero only when strict
    division is enabled, and for nodes of a foreign type.
    """

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error inside an expression string.

    Attributes:
        text: The full expression being parsed
        position: 0-indexed offset of the offending character
    """

    text: str
    position: int

    @property
    def line(self) -> int:
        """1-indexed line of the error position."""
        return self.text.count("\n", 0, self.position) + 1

    @property
    def column(self) -> int:
        """1-indexed column of the error position."""
        return self.position - (self.text.rfind("\n", 0, self.position) + 1) + 1

    def format(self) -> str:
        """
        Format the offending source line with a caret under the error column.

        Returns:
            Two lines like:
                   1 | 1*2,5
                          ^
        """
        lines = self.text.split("\n")
        source_line = lines[self.line - 1] if lines else ""
        prefix = f"{self.line:4d} | "
        marker_pos = len(prefix) + self.column - 1
        return f"{prefix}{source_line}\n{' ' * marker_pos}^"


def make_parse_error(
    message: str,
    kind: ParseErrorKind,
    text: str,
    position: int,
    *,
    symbol: str | None = None,
    expected: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with source context.

    Args:
        message: Error description
        kind: Category of the failure
        text: Expression being parsed
        position: Offset of the offending character
        symbol: Offending character, if any
        expected: Token that was required, for EXPECTED_TOKEN

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(text=text, position=position)
    return ParseError(
        message,
        kind,
        position,
        symbol=symbol,
        expected=expected,
        context=context,
    )
