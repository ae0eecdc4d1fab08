"""Domain enums for the order lifecycle.

Responsibilities:
  - Define OrderState, OrderOperation and OutcomeCode identifiers.
  - Provide one consistent message and category per outcome.

Invariants:
  - Enum values are stable strings.
  - OUTCOME_METADATA must be complete and deterministic.
"""

from __future__ import annotations

from enum import Enum


class OrderState(Enum):
    PLACED = "PLACED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"


class OrderOperation(Enum):
    PROCESS = "PROCESS"
    SHIP = "SHIP"
    DELIVER = "DELIVER"


class OutcomeCategory(Enum):
    SUCCESS = "SUCCESS"
    REJECTED = "REJECTED"


class OutcomeCode(Enum):
    PROCESSED = "PROCESSED"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    NOT_PROCESSED = "NOT_PROCESSED"
    NOT_SHIPPED = "NOT_SHIPPED"
    ALREADY_PROCESSED = "ALREADY_PROCESSED"
    ALREADY_SHIPPED = "ALREADY_SHIPPED"
    ALREADY_DELIVERED = "ALREADY_DELIVERED"


OUTCOME_METADATA: dict[OutcomeCode, dict[str, object]] = {
    OutcomeCode.PROCESSED: {
        "category": OutcomeCategory.SUCCESS,
        "message": "Order processed.",
    },
    OutcomeCode.SHIPPED: {
        "category": OutcomeCategory.SUCCESS,
        "message": "Order shipped.",
    },
    OutcomeCode.DELIVERED: {
        "category": OutcomeCategory.SUCCESS,
        "message": "Order is complete.",
    },
    OutcomeCode.NOT_PROCESSED: {
        "category": OutcomeCategory.REJECTED,
        "message": "Order cannot be shipped before processing.",
    },
    OutcomeCode.NOT_SHIPPED: {
        "category": OutcomeCategory.REJECTED,
        "message": "Order cannot be delivered before shipping.",
    },
    OutcomeCode.ALREADY_PROCESSED: {
        "category": OutcomeCategory.REJECTED,
        "message": "Order has already been processed.",
    },
    OutcomeCode.ALREADY_SHIPPED: {
        "category": OutcomeCategory.REJECTED,
        "message": "Order has already been shipped.",
    },
    OutcomeCode.ALREADY_DELIVERED: {
        "category": OutcomeCategory.REJECTED,
        "message": "Order has already been delivered.",
    },
}


def outcome_message(code: OutcomeCode) -> str:
    return str(OUTCOME_METADATA[code]["message"])


def outcome_category(code: OutcomeCode) -> OutcomeCategory:
    return OUTCOME_METADATA[code]["category"]  # type: ignore[return-value]


def operation_from_name(name: str) -> OrderOperation:
    if not isinstance(name, str):
        raise ValueError(f"operation name must be a string, got {type(name).__name__}")
    if not name.strip():
        raise ValueError("operation name must be non-empty")
    try:
        return OrderOperation(name.strip().upper())
    except ValueError:
        raise ValueError(f"Unknown order operation: {name}") from None


_missing = [code for code in OutcomeCode if code not in OUTCOME_METADATA]
if _missing:
    raise RuntimeError(f"Missing OUTCOME_METADATA for: {[m.value for m in _missing]}")

_extra = [k for k in OUTCOME_METADATA.keys() if k not in set(OutcomeCode)]
if _extra:
    raise RuntimeError(f"Extra OUTCOME_METADATA keys: {[e.value for e in _extra]}")
