"""Transition table for the order lifecycle state machine.

Responsibilities:
  - Define the outcome of every (state, operation) pair.
  - Derive the legal next states per current state.

Invariants:
  - The table is total over OrderState x OrderOperation.
  - Transitions only move forward: PLACED -> SHIPPED -> DELIVERED.
"""

from __future__ import annotations

from .enums import OrderOperation, OrderState, OutcomeCategory, OutcomeCode, outcome_category

INITIAL_STATE = OrderState.PLACED
TERMINAL_STATE = OrderState.DELIVERED

# Lifecycle position; a transition may only advance by one step.
STATE_ORDER: dict[OrderState, int] = {
    OrderState.PLACED: 0,
    OrderState.SHIPPED: 1,
    OrderState.DELIVERED: 2,
}

TRANSITIONS: dict[tuple[OrderState, OrderOperation], tuple[OrderState, OutcomeCode]] = {
    (OrderState.PLACED, OrderOperation.PROCESS): (OrderState.SHIPPED, OutcomeCode.PROCESSED),
    (OrderState.PLACED, OrderOperation.SHIP): (OrderState.PLACED, OutcomeCode.NOT_PROCESSED),
    (OrderState.PLACED, OrderOperation.DELIVER): (OrderState.PLACED, OutcomeCode.NOT_SHIPPED),
    (OrderState.SHIPPED, OrderOperation.PROCESS): (OrderState.SHIPPED, OutcomeCode.ALREADY_PROCESSED),
    (OrderState.SHIPPED, OrderOperation.SHIP): (OrderState.DELIVERED, OutcomeCode.SHIPPED),
    (OrderState.SHIPPED, OrderOperation.DELIVER): (OrderState.SHIPPED, OutcomeCode.NOT_SHIPPED),
    (OrderState.DELIVERED, OrderOperation.PROCESS): (OrderState.DELIVERED, OutcomeCode.ALREADY_DELIVERED),
    (OrderState.DELIVERED, OrderOperation.SHIP): (OrderState.DELIVERED, OutcomeCode.ALREADY_SHIPPED),
    (OrderState.DELIVERED, OrderOperation.DELIVER): (OrderState.DELIVERED, OutcomeCode.DELIVERED),
}

ALLOWED_TRANSITIONS: dict[OrderState, set[OrderState]] = {state: {state} for state in OrderState}
for (_from_state, _op), (_to_state, _code) in TRANSITIONS.items():
    ALLOWED_TRANSITIONS[_from_state].add(_to_state)


_undefined = [
    f"{state.value}/{op.value}"
    for state in OrderState
    for op in OrderOperation
    if (state, op) not in TRANSITIONS
]
if _undefined:
    raise RuntimeError(f"Undefined order transitions: {_undefined}")

for (_from_state, _op), (_to_state, _code) in TRANSITIONS.items():
    _delta = STATE_ORDER[_to_state] - STATE_ORDER[_from_state]
    if _delta not in (0, 1):
        raise RuntimeError(f"Non-forward transition {_from_state.value}->{_to_state.value}")
    if _delta == 0 and _from_state != TERMINAL_STATE and outcome_category(_code) != OutcomeCategory.REJECTED:
        raise RuntimeError(f"Stay outcome must be a rejection: {_from_state.value}/{_op.value}")
