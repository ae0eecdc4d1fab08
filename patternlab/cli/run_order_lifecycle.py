"""Drive a single order through lifecycle operations from the command line.

Purpose:
  - Apply process/ship/deliver operations in the given order to a fresh order.
Inputs:
  - Operation names; --order-id; --table; --debug.
Outputs:
  - One "[STATE] message" line per step (or a history table) and a SUMMARY line.
Example:
  - python -m patternlab.cli.run_order_lifecycle process ship deliver process
"""

from __future__ import annotations

import argparse
from typing import Sequence

from patternlab.cli._debug_utils import _debug_sink
from patternlab.core.engine.context import OrderContext, set_machine_debug
from patternlab.core.engine.history import history_frame

OPERATION_CHOICES = ("process", "ship", "deliver")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run order lifecycle operations against one order")
    parser.add_argument("operations", nargs="+", choices=OPERATION_CHOICES, help="Operations in call order")
    parser.add_argument("--order-id", default=None, help="Label for the order in debug output")
    parser.add_argument("--table", action="store_true", help="Print the step history as a table")
    parser.add_argument("--debug", action="store_true", help="Print state machine trace")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    set_machine_debug(_debug_sink(args))
    try:
        order = OrderContext(order_id=args.order_id)
        for name in args.operations:
            result = order.apply(name)
            if not args.table:
                print(f"[{result.prev_state.value}] {result.message}")
    finally:
        set_machine_debug(None)

    if args.table:
        print(history_frame(order.history).to_string(index=False))

    rejected = sum(1 for r in order.history if not r.accepted)
    print(f"SUMMARY final_state={order.state.value} steps={len(order.history)} rejected={rejected}")


if __name__ == "__main__":
    main()
