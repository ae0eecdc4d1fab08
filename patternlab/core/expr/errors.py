"""Error types raised while building or evaluating expression trees.

Responsibilities:
  - ExpressionError: malformed trees or expression documents (construction time).
  - DivisionByZero: the only evaluation-time failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .nodes import Divide


class ExpressionError(ValueError):
    pass


class DivisionByZero(ZeroDivisionError):
    def __init__(self, node: "Divide", message: str = "Division by zero is not allowed.") -> None:
        super().__init__(message)
        self.node = node
