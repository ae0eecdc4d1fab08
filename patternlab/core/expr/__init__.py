"""Interpreter for immutable arithmetic expression trees.

Responsibilities:
  - Expose node types, evaluator, JSON loader and batch helpers.
"""

from .errors import DivisionByZero, ExpressionError
from .evaluator import evaluate, set_evaluator_debug
from .nodes import Add, Divide, Expression, Multiply, Number, Subtract, render

__all__ = [
    "Add",
    "Divide",
    "DivisionByZero",
    "Expression",
    "ExpressionError",
    "Multiply",
    "Number",
    "Subtract",
    "evaluate",
    "render",
    "set_evaluator_debug",
]
