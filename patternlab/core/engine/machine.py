"""Pure transition function for the order lifecycle.

Responsibilities:
  - Resolve (state, operation) to the final state and outcome code.
  - Build a Transition only when the state actually changes.

Invariants:
  - No side effects; the same inputs always yield the same StepResult.
  - Illegal operations are outcomes, never exceptions.
"""

from __future__ import annotations

from ..domain.enums import OrderOperation, OrderState
from ..domain.models import Transition
from ..domain.transition_graph import TRANSITIONS
from .result import StepResult


def step(state: OrderState, operation: OrderOperation) -> StepResult:
    final_state, outcome = TRANSITIONS[(state, operation)]

    transition: Transition | None
    if final_state != state:
        transition = Transition(
            from_state=state,
            to_state=final_state,
            operation=operation,
            outcome=outcome,
        )
    else:
        transition = None

    return StepResult(
        prev_state=state,
        operation=operation,
        final_state=final_state,
        outcome=outcome,
        transition=transition,
    )
