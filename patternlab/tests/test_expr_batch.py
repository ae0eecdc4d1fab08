"""Tests for batch evaluation and summaries."""

from __future__ import annotations

import math

import numpy as np
import pytest

from patternlab.core.expr.batch import evaluate_many, summarize
from patternlab.core.expr.errors import DivisionByZero
from patternlab.core.expr.nodes import Add, Divide, Multiply, Number


def test_evaluate_many_preserves_order() -> None:
    trees = [Number(1), Add(Number(2), Number(3)), Divide(Number(9), Number(3))]
    values = evaluate_many(trees)
    assert values.dtype == float
    np.testing.assert_array_equal(values, np.array([1.0, 5.0, 3.0]))


def test_evaluate_many_raises_by_default() -> None:
    with pytest.raises(DivisionByZero):
        evaluate_many([Number(1), Divide(Number(1), Number(0))])


def test_evaluate_many_nan_mode() -> None:
    values = evaluate_many([Number(4), Divide(Number(1), Number(0))], on_zero_division="nan")
    assert values[0] == 4.0
    assert math.isnan(values[1])


def test_evaluate_many_rejects_unknown_mode() -> None:
    with pytest.raises(ValueError):
        evaluate_many([Number(1)], on_zero_division="skip")


def test_summarize_ignores_non_finite() -> None:
    summary = summarize(np.array([2.0, float("nan"), 6.0]))
    assert summary.count == 3
    assert summary.finite == 2
    assert summary.min == 2.0
    assert summary.max == 6.0
    assert summary.mean == 4.0


def test_summarize_empty() -> None:
    summary = summarize(np.array([], dtype=float))
    assert summary.count == 0
    assert summary.finite == 0
    assert summary.mean is None


def test_evaluate_many_huge_int_result_is_infinite() -> None:
    values = evaluate_many([Multiply(Number(10**308), Number(10)), Number(2)])
    assert values[0] == math.inf
    summary = summarize(values)
    assert summary.finite == 1
    assert summary.max == 2.0
