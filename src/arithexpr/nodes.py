"""
Expression tree types for arithexpr.

Nodes are frozen pydantic models. Every inner node owns its children
outright; nothing is shared and nothing changes after construction.

Supports:
- Numeric literals: 1, 2.5, 7.
- Arithmetic: +, -, *, /
- Unary negation: -x
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operator(StrEnum):
    """Binary arithmetic operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberLiteral(BaseModel):
    """A numeric literal, always held as a float."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class UnaryNegate(BaseModel):
    """Unary minus: -operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"(-{self.operand})"


class BinaryOp(BaseModel):
    """Binary operation: left op right."""

    op: Operator
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.left} {self.op.value} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberLiteral | UnaryNegate | BinaryOp

# Rebuild models for recursive forward references
UnaryNegate.model_rebuild()
BinaryOp.model_rebuild()
