"""
Tokenizer for arithexpr.

Turns an expression string into typed tokens, one at a time, as the parser
asks for them. The lexer owns the cursor and never backtracks.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import StrEnum, auto

from arithexpr.errors import ParseErrorKind, make_parse_error


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    # End of input
    EOF = auto()
    # Unrecognised character
    ERROR = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Literals
    NUMBER = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "symbol", "pos")

    def __init__(
        self,
        kind: TokenKind,
        pos: int,
        value: float = 0.0,
        symbol: str | None = None,
    ) -> None:
        self.kind = kind
        self.pos = pos
        self.value = value
        self.symbol = symbol

    def __repr__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"Token({self.kind}, {self.value!r}, pos={self.pos})"
        return f"Token({self.kind}, {self.symbol!r}, pos={self.pos})"


_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

# ASCII digits, at most one decimal point, ASCII digits. No sign, no exponent.
_NUMBER_RE = re.compile(r"[0-9]*\.?[0-9]*")
_DIGITS = frozenset("0123456789")
_WHITESPACE = frozenset(" \t\n\r\f\v")


class Lexer:
    """On-demand tokenizer with a single token of lookahead."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _skip_whitespace(self) -> None:
        n = len(self.text)
        while self.pos < n and self.text[self.pos] in _WHITESPACE:
            self.pos += 1

    def next_token(self) -> Token:
        """Scan the next token and advance the cursor past it.

        Raises:
            ParseError: On a character that starts no token.
        """
        self._skip_whitespace()

        if self.pos >= len(self.text):
            return Token(TokenKind.EOF, self.pos)

        c = self.text[self.pos]

        if c in _DIGITS:
            start = self.pos
            return Token(TokenKind.NUMBER, start, value=self._read_number())

        kind = _SINGLE_CHAR.get(c, TokenKind.ERROR)
        if kind == TokenKind.ERROR:
            raise make_parse_error(
                f"Unexpected token {c!r} at position {self.pos}",
                ParseErrorKind.UNEXPECTED_TOKEN,
                self.text,
                self.pos,
                symbol=c,
            )

        tok = Token(kind, self.pos, symbol=c)
        self.pos += 1
        return tok

    def _read_number(self) -> float:
        """Consume a decimal literal at the cursor and convert it."""
        m = _NUMBER_RE.match(self.text, self.pos)
        assert m is not None
        num_str = m.group(0)
        # A lone "." matches the pattern but holds no digits
        if not _DIGITS.intersection(num_str):
            raise make_parse_error(
                f"Number expected but not found at position {self.pos}",
                ParseErrorKind.NUMBER_EXPECTED,
                self.text,
                self.pos,
            )
        self.pos = m.end()
        return float(num_str)


def iter_tokens(source: str) -> Iterator[Token]:
    """Yield the tokens of an expression string, ending with EOF."""
    lexer = Lexer(source)
    while True:
        tok = lexer.next_token()
        yield tok
        if tok.kind == TokenKind.EOF:
            return
