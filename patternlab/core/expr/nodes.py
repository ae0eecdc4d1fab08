"""Immutable arithmetic expression tree.

Responsibilities:
  - Define the five node variants: Number, Add, Subtract, Multiply, Divide.
  - Validate nodes at construction; malformed trees never reach the evaluator.
  - Render a tree as fully parenthesised infix text for CLI and debug output.

Invariants:
  - Nodes are frozen; evaluation never mutates them.
  - Number.value is a finite real number, never bool.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar

from .errors import ExpressionError


class Expression:
    symbol: ClassVar[str] = ""


def _check_operand(owner: str, side: str, value: object) -> None:
    if not isinstance(value, Expression):
        raise ExpressionError(
            f"{owner}.{side} must be an Expression, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Number(Expression):
    value: int | float

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool) or not isinstance(value, Real):
            raise ExpressionError(f"Number.value must be a real number, got {type(value).__name__}")
        try:
            finite = math.isfinite(value)
        except OverflowError:
            raise ExpressionError("Number.value is too large for a float") from None
        if not finite:
            raise ExpressionError(f"Number.value must be finite, got {value}")


@dataclass(frozen=True)
class BinaryExpression(Expression):
    left: Expression
    right: Expression

    def __post_init__(self) -> None:
        name = type(self).__name__
        _check_operand(name, "left", self.left)
        _check_operand(name, "right", self.right)


@dataclass(frozen=True)
class Add(BinaryExpression):
    symbol: ClassVar[str] = "+"


@dataclass(frozen=True)
class Subtract(BinaryExpression):
    symbol: ClassVar[str] = "-"


@dataclass(frozen=True)
class Multiply(BinaryExpression):
    symbol: ClassVar[str] = "*"


@dataclass(frozen=True)
class Divide(BinaryExpression):
    symbol: ClassVar[str] = "/"


BINARY_NODES: dict[str, type[BinaryExpression]] = {
    Add.symbol: Add,
    Subtract.symbol: Subtract,
    Multiply.symbol: Multiply,
    Divide.symbol: Divide,
}


def render(node: Expression) -> str:
    if isinstance(node, Number):
        return f"{node.value}"
    if isinstance(node, BinaryExpression):
        return f"({render(node.left)} {node.symbol} {render(node.right)})"
    raise TypeError(f"Not an expression node: {type(node).__name__}")
