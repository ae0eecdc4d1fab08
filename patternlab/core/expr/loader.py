"""Build expression trees from JSON documents.

Document shape:
  - leaf: a bare JSON number, or {"number": <number>}
  - operator: {"op": "+"|"-"|"*"|"/"|"add"|..., "left": <expr>, "right": <expr>}

Errors carry the JSON path of the offending element, e.g. "$.left.right".
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import ExpressionError
from .nodes import BINARY_NODES, BinaryExpression, Expression, Number

OP_NAMES: dict[str, str] = {
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "/",
}


def _require(payload: dict[str, Any], key: str, path: str) -> Any:
    if key not in payload:
        raise ExpressionError(f"{path}: missing required field '{key}'")
    return payload[key]


def _build_number(value: Any, path: str) -> Number:
    try:
        return Number(value)
    except ExpressionError as exc:
        raise ExpressionError(f"{path}: {exc}") from exc


def _resolve_op(raw: Any, path: str) -> type[BinaryExpression]:
    if not isinstance(raw, str):
        raise ExpressionError(f"{path}: field 'op' must be a string")
    symbol = OP_NAMES.get(raw.strip().lower(), raw.strip())
    node_cls = BINARY_NODES.get(symbol)
    if node_cls is None:
        raise ExpressionError(f"{path}: unknown operator '{raw}'")
    return node_cls


def build_expression(payload: Any, path: str = "$") -> Expression:
    if isinstance(payload, dict):
        if "number" in payload:
            extra = set(payload) - {"number"}
            if extra:
                raise ExpressionError(f"{path}: unexpected fields {sorted(extra)} next to 'number'")
            return _build_number(payload["number"], f"{path}.number")
        node_cls = _resolve_op(_require(payload, "op", path), f"{path}.op")
        left = build_expression(_require(payload, "left", path), f"{path}.left")
        right = build_expression(_require(payload, "right", path), f"{path}.right")
        return node_cls(left, right)
    if isinstance(payload, (int, float)) and not isinstance(payload, bool):
        return _build_number(payload, path)
    raise ExpressionError(f"{path}: expected a number or an object, got {type(payload).__name__}")


def load_expression(path: str | Path) -> Expression:
    doc_path = Path(path)
    if not doc_path.exists():
        raise ExpressionError(f"Expression document not found: {doc_path}")
    try:
        text = doc_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ExpressionError(f"Expression document is not UTF-8: {doc_path}") from exc
    except OSError as exc:
        raise ExpressionError(f"Cannot read expression document {doc_path}: {exc.strerror}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ExpressionError(f"Invalid JSON in {doc_path}: {exc.msg}") from exc
    return build_expression(payload)


def to_payload(node: Expression) -> dict[str, Any]:
    if isinstance(node, Number):
        return {"number": node.value}
    if isinstance(node, BinaryExpression):
        return {"op": node.symbol, "left": to_payload(node.left), "right": to_payload(node.right)}
    raise TypeError(f"Not an expression node: {type(node).__name__}")
