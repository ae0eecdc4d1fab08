"""Tests for command line entry points."""

from __future__ import annotations

import json

import pytest

from patternlab.cli import demo, run_expression, run_order_lifecycle
from patternlab.cli._debug_utils import _dbg, _fmt_number


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_run_expression_prints_results_and_summary(tmp_path, capsys) -> None:
    a = _write(tmp_path, "a.json", {"op": "*", "left": {"op": "+", "left": 5, "right": 3}, "right": {"op": "-", "left": 10, "right": 2}})
    b = _write(tmp_path, "b.json", {"op": "/", "left": 20, "right": 5})

    run_expression.main([a, b])

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == f"RESULT file={a} expr=((5 + 3) * (10 - 2)) value=64"
    assert lines[1] == f"RESULT file={b} expr=(20 / 5) value=4"
    assert lines[-1] == "SUMMARY count=2 finite=2 min=4 max=64 mean=34"


def test_run_expression_division_by_zero_exits_2(tmp_path, capsys) -> None:
    path = _write(tmp_path, "z.json", {"op": "/", "left": 1, "right": {"op": "-", "left": 2, "right": 2}})
    with pytest.raises(SystemExit) as excinfo:
        run_expression.main([path])
    assert excinfo.value.code == 2
    out = capsys.readouterr().out
    assert "SUMMARY status=ERROR message=DIVISION_BY_ZERO" in out
    assert "node=(1 / (2 - 2))" in out


def test_run_expression_nan_mode_continues(tmp_path, capsys) -> None:
    z = _write(tmp_path, "z.json", {"op": "/", "left": 1, "right": 0})
    ok = _write(tmp_path, "ok.json", 3)
    run_expression.main(["--on-zero-division", "nan", z, ok])
    out = capsys.readouterr().out
    assert "value=nan" in out
    assert "SUMMARY count=2 finite=1 min=3 max=3 mean=3" in out


def test_run_expression_invalid_document_exits_2(tmp_path, capsys) -> None:
    path = _write(tmp_path, "bad.json", {"op": "+", "left": 1})
    with pytest.raises(SystemExit) as excinfo:
        run_expression.main([path])
    assert excinfo.value.code == 2
    assert "message=INVALID_EXPRESSION" in capsys.readouterr().out


def test_run_expression_debug_trace(tmp_path, capsys) -> None:
    path = _write(tmp_path, "a.json", {"op": "+", "left": 1, "right": 2})
    run_expression.main(["--debug", path])
    out = capsys.readouterr().out
    assert "[debug] EVAL node=(1 + 2) value=3" in out


def test_run_order_lifecycle_lines_and_summary(capsys) -> None:
    run_order_lifecycle.main(["ship", "process", "ship", "deliver", "process"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "[PLACED] Order cannot be shipped before processing.",
        "[PLACED] Order processed.",
        "[SHIPPED] Order shipped.",
        "[DELIVERED] Order is complete.",
        "[DELIVERED] Order has already been delivered.",
        "SUMMARY final_state=DELIVERED steps=5 rejected=2",
    ]


def test_run_order_lifecycle_table(capsys) -> None:
    run_order_lifecycle.main(["--table", "process"])
    out = capsys.readouterr().out
    assert "PROCESSED" in out
    assert "SUMMARY final_state=SHIPPED steps=1 rejected=0" in out


def test_run_order_lifecycle_rejects_unknown_operation(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_order_lifecycle.main(["cancel"])
    assert excinfo.value.code == 2


def test_demo_walkthrough(capsys) -> None:
    demo.main()
    out = capsys.readouterr().out
    assert "RESULT expr=((5 + 3) * (10 - 2)) value=64" in out
    assert "RESULT expr=((20 / 5) + (4 * 3)) value=16" in out
    assert "[DELIVERED] Order has already been delivered." in out


def test_dbg_prefix_and_suppression(capsys) -> None:
    class Args:
        debug = True

    _dbg(Args(), "hello")
    assert capsys.readouterr().out == "[debug] hello\n"

    class ArgsOff:
        debug = False

    _dbg(ArgsOff(), "silent")
    assert capsys.readouterr().out == ""


def test_fmt_number() -> None:
    assert _fmt_number(None) == "NA"
    assert _fmt_number(4.0) == "4"
    assert _fmt_number(3.5) == "3.5"
    assert _fmt_number(7) == "7"


def test_run_expression_huge_integer_document_exits_2(tmp_path, capsys) -> None:
    path = tmp_path / "big.json"
    path.write_text("9" * 400, encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        run_expression.main([str(path)])
    assert excinfo.value.code == 2
    assert "message=INVALID_EXPRESSION" in capsys.readouterr().out


def test_run_expression_unreadable_document_exits_2(tmp_path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run_expression.main([str(tmp_path)])
    assert excinfo.value.code == 2
    assert "message=INVALID_EXPRESSION" in capsys.readouterr().out


def test_run_expression_quotient_beyond_float_range(tmp_path, capsys) -> None:
    path = _write(tmp_path, "inf.json", {"op": "/", "left": {"op": "*", "left": 10**308, "right": 10}, "right": 1})
    run_expression.main([path])
    out = capsys.readouterr().out
    assert "value=inf" in out
    assert "SUMMARY count=1 finite=0 min=NA max=NA mean=NA" in out
