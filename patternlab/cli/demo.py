"""Walkthrough of both components with the classic sample inputs.

Example:
  - python -m patternlab.cli.demo
"""

from __future__ import annotations

from patternlab.cli._debug_utils import _fmt_number
from patternlab.core.engine.context import OrderContext
from patternlab.core.expr.evaluator import evaluate
from patternlab.core.expr.nodes import Add, Divide, Multiply, Number, Subtract, render


def sample_expressions() -> list:
    # (5 + 3) * (10 - 2) -> 64
    product = Multiply(
        Add(Number(5), Number(3)),
        Subtract(Number(10), Number(2)),
    )
    # (20 / 5) + (4 * 3) -> 16
    mixed = Add(
        Divide(Number(20), Number(5)),
        Multiply(Number(4), Number(3)),
    )
    return [product, mixed]


def main() -> None:
    for tree in sample_expressions():
        print(f"RESULT expr={render(tree)} value={_fmt_number(evaluate(tree))}")

    order = OrderContext(order_id="demo")
    for label, action in [
        ("Processing Order", order.process_order),
        ("Shipping Order", order.ship_order),
        ("Delivering Order", order.deliver_order),
        ("Trying to Process a Delivered Order", order.process_order),
    ]:
        print(f"\n--- {label} ---")
        result = action()
        print(f"[{result.prev_state.value}] {result.message}")


if __name__ == "__main__":
    main()
