"""
Recursive descent parser for arithmetic expressions.

The naive grammar is left recursive (expression -> expression "+" term), so
it is rewritten with continuation productions:

    expression   → term expression1
    expression1  → "+" term expression1 | "-" term expression1 | ε
    term         → factor term1
    term1        → "*" factor term1 | "/" factor term1 | ε
    factor       → "(" expression ")" | "-" factor | NUMBER

Tree building folds each continuation into the node before it:

    expression  → term e1           Add(term, e1)
    expression1 → "+" term e1'      Add(e1', term)
    expression1 → "-" term e1'      Sub(e1', term)
    expression1 → ε                 0
    term        → factor t1         Mul(factor, t1)
    term1       → "*" factor t1'    Mul(t1', factor)
    term1       → "/" factor t1'    Div(t1', factor)
    term1       → ε                 1

An empty continuation is the identity of its operator, so the extra leaves
never change the result, and the value comes out left-associative:
1 - 2 - 3 is 1 + ((0 - 3) - 2) = -4.

One token of lookahead, no backtracking.
"""

from __future__ import annotations

import logging

from arithexpr.environment import DEFAULT_SETTINGS, Settings
from arithexpr.errors import ParseError, ParseErrorKind, make_parse_error
from arithexpr.nodes import BinaryOp, Expr, NumberLiteral, Operator, UnaryNegate
from arithexpr.tokenizer import Lexer, Token, TokenKind

logger = logging.getLogger(__name__)

_ADDITIVE_IDENTITY = 0.0
_MULTIPLICATIVE_IDENTITY = 1.0


class _Parser:
    """Recursive descent parser over a lazily scanned token stream."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.lexer = Lexer(text)
        self.current: Token = self.lexer.next_token()

    def advance(self) -> Token:
        tok = self.current
        self.current = self.lexer.next_token()
        return tok

    def match_close_paren(self) -> None:
        """Require a closing parenthesis just before the cursor.

        The cursor already sits past the lookahead token, so a current ")"
        passes, and so does end of input directly after an earlier ")":
        "((1)" parses as "((1))".
        """
        end = self.lexer.pos
        if end == 0 or self.text[end - 1] != ")":
            raise make_parse_error(
                f"Expected token ')' at position {self.current.pos}",
                ParseErrorKind.EXPECTED_TOKEN,
                self.text,
                self.current.pos,
                symbol=self.current.symbol,
                expected=")",
            )
        self.advance()

    # -- Grammar rules --

    def parse_expression(self) -> Expr:
        """term expression1"""
        term = self.parse_term()
        rest = self.parse_expression1()
        return BinaryOp(op=Operator.ADD, left=term, right=rest)

    def parse_expression1(self) -> Expr:
        """('+' | '-') term expression1 | ε"""
        if self.current.kind in (TokenKind.PLUS, TokenKind.MINUS):
            op = Operator.ADD if self.current.kind == TokenKind.PLUS else Operator.SUB
            self.advance()
            term = self.parse_term()
            rest = self.parse_expression1()
            return BinaryOp(op=op, left=rest, right=term)
        return NumberLiteral(value=_ADDITIVE_IDENTITY)

    def parse_term(self) -> Expr:
        """factor term1"""
        factor = self.parse_factor()
        rest = self.parse_term1()
        return BinaryOp(op=Operator.MUL, left=factor, right=rest)

    def parse_term1(self) -> Expr:
        """('*' | '/') factor term1 | ε"""
        if self.current.kind in (TokenKind.STAR, TokenKind.SLASH):
            op = Operator.MUL if self.current.kind == TokenKind.STAR else Operator.DIV
            self.advance()
            factor = self.parse_factor()
            rest = self.parse_term1()
            return BinaryOp(op=op, left=rest, right=factor)
        return NumberLiteral(value=_MULTIPLICATIVE_IDENTITY)

    def parse_factor(self) -> Expr:
        """'(' expression ')' | '-' factor | NUMBER"""
        tok = self.current

        if tok.kind == TokenKind.LPAREN:
            self.advance()
            expr = self.parse_expression()
            self.match_close_paren()
            return expr

        if tok.kind == TokenKind.MINUS:
            self.advance()
            return UnaryNegate(operand=self.parse_factor())

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            return NumberLiteral(value=tok.value)

        raise self._unexpected(tok)

    def _unexpected(self, tok: Token) -> ParseError:
        shown = "end of input" if tok.kind == TokenKind.EOF else repr(tok.symbol)
        return make_parse_error(
            f"Unexpected token {shown} at position {tok.pos}",
            ParseErrorKind.UNEXPECTED_TOKEN,
            self.text,
            tok.pos,
            symbol=tok.symbol,
        )


def parse(text: str, settings: Settings | None = None) -> Expr:
    """Parse an expression string into an AST.

    Input left over after a complete expression is ignored unless
    ``settings.require_end`` is set.

    Args:
        text: Expression string (e.g., "1 + 2 * (3 - 4)")
        settings: Optional behaviour settings.

    Returns:
        Root node of the parsed tree.

    Raises:
        ParseError: If the expression is invalid, or nests deeper than the
            interpreter recursion limit allows.
    """
    settings = settings or DEFAULT_SETTINGS
    parser = _Parser(text)
    try:
        expr = parser.parse_expression()
    except RecursionError:
        raise make_parse_error(
            f"Expression nested too deeply at position {parser.current.pos}",
            ParseErrorKind.NESTING_TOO_DEEP,
            text,
            parser.current.pos,
            symbol=parser.current.symbol,
        ) from None

    leftover = parser.current
    if leftover.kind != TokenKind.EOF:
        if settings.require_end:
            raise make_parse_error(
                f"Unexpected token after expression at position {leftover.pos}",
                ParseErrorKind.UNEXPECTED_TOKEN,
                text,
                leftover.pos,
                symbol=leftover.symbol,
            )
        logger.debug("Ignoring input after position %d in %r", leftover.pos, text)

    logger.debug("Parsed %r", text)
    return expr


def is_valid(text: str, settings: Settings | None = None) -> bool:
    """Check whether ``text`` parses, without keeping the tree."""
    try:
        parse(text, settings)
    except ParseError:
        return False
    return True
