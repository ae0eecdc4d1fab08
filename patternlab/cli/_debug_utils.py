from __future__ import annotations

import argparse
from typing import Callable


def _debug_enabled(args: argparse.Namespace) -> bool:
    return bool(getattr(args, "debug", False))


def _dbg(args: argparse.Namespace, msg: str) -> None:
    if _debug_enabled(args):
        print(f"[debug] {msg}")


def _debug_sink(args: argparse.Namespace) -> Callable[[str], None] | None:
    if not _debug_enabled(args):
        return None
    return lambda msg: _dbg(args, msg)


def _fmt_number(value: float | int | None) -> str:
    if value is None:
        return "NA"
    if isinstance(value, float) and value.is_integer():
        return f"{value:g}"
    return f"{value}"
