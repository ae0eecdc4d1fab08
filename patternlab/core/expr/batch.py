"""Evaluate many expression trees into a numpy array and summarize the values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from .errors import DivisionByZero
from .evaluator import as_float, evaluate
from .nodes import Expression

ZERO_DIVISION_MODES = ("raise", "nan")


@dataclass(frozen=True)
class BatchSummary:
    count: int
    finite: int
    min: Optional[float]
    max: Optional[float]
    mean: Optional[float]


def evaluate_many(trees: Iterable[Expression], on_zero_division: str = "raise") -> np.ndarray:
    if on_zero_division not in ZERO_DIVISION_MODES:
        raise ValueError("on_zero_division must be 'raise' or 'nan'")
    values: list[float] = []
    for tree in trees:
        try:
            values.append(as_float(evaluate(tree)))
        except DivisionByZero:
            if on_zero_division == "raise":
                raise
            values.append(float("nan"))
    return np.asarray(values, dtype=float)


def summarize(values: np.ndarray) -> BatchSummary:
    arr = np.asarray(values, dtype=float)
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        return BatchSummary(count=int(arr.size), finite=0, min=None, max=None, mean=None)
    return BatchSummary(
        count=int(arr.size),
        finite=int(finite.size),
        min=float(np.min(finite)),
        max=float(np.max(finite)),
        mean=float(np.mean(finite)),
    )
