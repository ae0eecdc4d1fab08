"""Recursive evaluation of arithmetic expression trees.

Responsibilities:
  - Reduce a tree to a single number, left operand before right at every node.
  - Raise DivisionByZero when a Divide node's right operand evaluates to zero.

Invariants:
  - Pure and idempotent; nodes are never mutated.
  - No partial result escapes a failed evaluation.
"""

from __future__ import annotations

import math
from typing import Callable

from .errors import DivisionByZero
from .nodes import Add, BinaryExpression, Divide, Expression, Multiply, Number, Subtract, render

_DEBUG_FN: Callable[[str], None] | None = None


def set_evaluator_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


def _overflow_value(left: int | float, right: int | float) -> float:
    return math.inf if (left > 0) == (right > 0) else -math.inf


def as_float(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        return _overflow_value(value, 1)


def evaluate(node: Expression) -> int | float:
    if isinstance(node, Number):
        return node.value
    if not isinstance(node, BinaryExpression):
        raise TypeError(f"Not an expression node: {type(node).__name__}")

    left = evaluate(node.left)
    right = evaluate(node.right)

    if isinstance(node, Add):
        value = left + right
    elif isinstance(node, Subtract):
        value = left - right
    elif isinstance(node, Multiply):
        value = left * right
    elif isinstance(node, Divide):
        if right == 0:
            if _DEBUG_FN is not None:
                _DEBUG_FN(f"EVAL node={render(node)} error=DIVISION_BY_ZERO")
            raise DivisionByZero(node)
        try:
            value = left / right
        except OverflowError:
            # int quotient outside float range
            value = _overflow_value(left, right)
    else:
        raise TypeError(f"Unsupported operator node: {type(node).__name__}")

    if _DEBUG_FN is not None:
        _DEBUG_FN(f"EVAL node={render(node)} value={value}")
    return value
