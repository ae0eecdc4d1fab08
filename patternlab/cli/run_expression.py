"""Evaluate JSON expression documents from the command line.

Purpose:
  - Load one or more expression documents, evaluate them in order, print a summary.
Inputs:
  - Paths to JSON documents; --on-zero-division {raise,nan}; --debug.
Outputs:
  - RESULT/SUMMARY key=value lines on stdout; exit code 2 on expected errors.
Example:
  - python -m patternlab.cli.run_expression examples/product.json --debug
"""

from __future__ import annotations

import argparse
import math
from typing import Sequence

from patternlab.cli._debug_utils import _dbg, _debug_sink, _fmt_number
from patternlab.core.expr.batch import ZERO_DIVISION_MODES, summarize
from patternlab.core.expr.errors import DivisionByZero, ExpressionError
from patternlab.core.expr.evaluator import as_float, evaluate, set_evaluator_debug
from patternlab.core.expr.loader import load_expression
from patternlab.core.expr.nodes import render


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate arithmetic expression documents (JSON)")
    parser.add_argument("files", nargs="+", help="Expression document paths")
    parser.add_argument(
        "--on-zero-division",
        choices=ZERO_DIVISION_MODES,
        default="raise",
        help="raise: stop with an error; nan: record NaN and continue",
    )
    parser.add_argument("--debug", action="store_true", help="Print evaluation trace")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    set_evaluator_debug(_debug_sink(args))
    try:
        values: list[float] = []
        for path in args.files:
            try:
                tree = load_expression(path)
            except ExpressionError as exc:
                print(f"SUMMARY status=ERROR message=INVALID_EXPRESSION file={path} detail={exc}")
                raise SystemExit(2)
            _dbg(args, f"loaded file={path} expr={render(tree)}")
            try:
                value = as_float(evaluate(tree))
            except DivisionByZero as exc:
                if args.on_zero_division == "raise":
                    print(
                        f"SUMMARY status=ERROR message=DIVISION_BY_ZERO file={path} "
                        f"node={render(exc.node)}"
                    )
                    raise SystemExit(2)
                value = math.nan
            values.append(value)
            print(f"RESULT file={path} expr={render(tree)} value={_fmt_number(value)}")
    finally:
        set_evaluator_debug(None)

    summary = summarize(values)
    print(
        f"SUMMARY count={summary.count} finite={summary.finite} "
        f"min={_fmt_number(summary.min)} max={_fmt_number(summary.max)} "
        f"mean={_fmt_number(summary.mean)}"
    )


if __name__ == "__main__":
    main()
