"""
Expression evaluator for arithexpr.

Reduces a parsed tree to a single float. Pure evaluation: no I/O, no side
effects, and the tree is only ever read.
"""

from __future__ import annotations

import logging
import math

from arithexpr.environment import DEFAULT_SETTINGS, Settings
from arithexpr.errors import EvaluatorError
from arithexpr.nodes import BinaryOp, Expr, NumberLiteral, Operator, UnaryNegate

logger = logging.getLogger(__name__)


def evaluate(expr: Expr, settings: Settings | None = None) -> float:
    """Evaluate a parsed expression tree.

    Division follows IEEE-754: dividing by zero gives a signed infinity,
    and 0/0 gives NaN. Python's own ``/`` raises instead, so the evaluator
    does not lean on it for a zero divisor.

    Args:
        expr: Parsed expression AST.
        settings: Optional behaviour settings. With ``strict_division``
            a zero divisor raises instead.

    Returns:
        The computed value.

    Raises:
        EvaluatorError: On division by zero under strict division, or on
            a node that is not part of the expression tree types.
    """
    result = _interpret(expr, settings or DEFAULT_SETTINGS)
    logger.debug("Evaluated expression to %r", result)
    return result


def _interpret(expr: Expr, settings: Settings) -> float:
    """Reduce the tree post-order with explicit stacks.

    Trees from long flat sums are as deep as they are long, so the walk
    does not recurse.
    """
    # (node, children_done) pairs still to visit, and finished operand values
    pending: list[tuple[Expr, bool]] = [(expr, False)]
    values: list[float] = []

    while pending:
        node, children_done = pending.pop()

        if isinstance(node, NumberLiteral):
            values.append(node.value)

        elif isinstance(node, UnaryNegate):
            if children_done:
                values.append(-values.pop())
            else:
                pending.append((node, True))
                pending.append((node.operand, False))

        elif isinstance(node, BinaryOp):
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(_apply_binary(node.op, left, right, settings))
            else:
                # Left is pushed last so it is reduced first
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))

        else:
            raise EvaluatorError(f"Unknown expression type: {type(node).__name__}")

    return values.pop()


def _apply_binary(op: Operator, left: float, right: float, settings: Settings) -> float:
    if op == Operator.ADD:
        return left + right
    if op == Operator.SUB:
        return left - right
    if op == Operator.MUL:
        return left * right
    if op == Operator.DIV:
        if right == 0 and settings.strict_division:
            raise EvaluatorError("Division by zero")
        return ieee_divide(left, right)

    raise EvaluatorError(f"Unknown binary op: {op}")


def ieee_divide(left: float, right: float) -> float:
    """Divide with IEEE-754 semantics for a zero divisor."""
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    # Sign of the infinity follows both operands, including -0.0
    return math.copysign(math.inf, left) * math.copysign(1.0, right)
