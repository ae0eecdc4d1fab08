"""Tabular view of order lifecycle steps for CLI reports."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from .result import StepResult

HISTORY_COLUMNS = [
    "seq",
    "operation",
    "prev_state",
    "final_state",
    "outcome",
    "category",
    "changed",
    "message",
]


def history_frame(results: Iterable[StepResult]) -> pd.DataFrame:
    rows = []
    for seq, result in enumerate(results, start=1):
        rows.append(
            {
                "seq": seq,
                "operation": result.operation.value,
                "prev_state": result.prev_state.value,
                "final_state": result.final_state.value,
                "outcome": result.outcome.value,
                "category": result.category.value,
                "changed": result.changed,
                "message": result.message,
            }
        )
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)
