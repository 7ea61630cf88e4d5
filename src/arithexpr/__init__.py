"""
arithexpr - parse and evaluate arithmetic expressions.

A lazy tokenizer, a recursive descent parser producing an immutable tree,
and a tree-walking evaluator. Does NOT use Python's eval().

Usage:
    from arithexpr import parse, evaluate

    expr = parse("(1 + 2) * (3 + 4)")
    result = evaluate(expr)
    # result == 21.0
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from arithexpr.environment import Settings, load_settings
from arithexpr.errors import ArithError, EvaluatorError, ParseError, ParseErrorKind
from arithexpr.evaluator import evaluate
from arithexpr.nodes import BinaryOp, Expr, NumberLiteral, Operator, UnaryNegate
from arithexpr.parser import is_valid, parse

try:
    __version__ = version("arithexpr")
except PackageNotFoundError:
    __version__ = "0.0.0"


def calculate(text: str, settings: Settings | None = None) -> float:
    """Parse and evaluate ``text`` in one step.

    Raises:
        ParseError: If the expression is invalid.
        EvaluatorError: If evaluation fails under strict settings.
    """
    return evaluate(parse(text, settings), settings)


__all__ = [
    "__version__",
    "ArithError",
    "BinaryOp",
    "EvaluatorError",
    "Expr",
    "NumberLiteral",
    "Operator",
    "ParseError",
    "ParseErrorKind",
    "Settings",
    "UnaryNegate",
    "calculate",
    "evaluate",
    "is_valid",
    "load_settings",
    "parse",
]
