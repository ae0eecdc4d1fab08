"""Order context holding the current lifecycle state.

Responsibilities:
  - Start every order in PLACED and advance it only through step().
  - Keep the ordered history of StepResults for reporting.

Invariants:
  - State changes only via process_order, ship_order, deliver_order or apply.
  - DELIVERED is terminal; later operations are reported no-ops.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..domain.enums import OrderOperation, OrderState, operation_from_name
from ..domain.transition_graph import INITIAL_STATE, TERMINAL_STATE
from .machine import step
from .result import StepResult

_DEBUG_FN: Callable[[str], None] | None = None


def set_machine_debug(fn: Callable[[str], None] | None) -> None:
    global _DEBUG_FN
    _DEBUG_FN = fn


class OrderContext:
    def __init__(self, order_id: Optional[str] = None) -> None:
        self.order_id = order_id
        self._state = INITIAL_STATE
        self._history: list[StepResult] = []

    @property
    def state(self) -> OrderState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state == TERMINAL_STATE

    @property
    def history(self) -> tuple[StepResult, ...]:
        return tuple(self._history)

    def apply(self, operation: OrderOperation | str) -> StepResult:
        if not isinstance(operation, OrderOperation):
            operation = operation_from_name(operation)
        result = step(self._state, operation)
        self._state = result.final_state
        self._history.append(result)

        if _DEBUG_FN is not None:
            _DEBUG_FN(
                f"STEP order={self.order_id} op={operation.value} "
                f"{result.prev_state.value}->{result.final_state.value} "
                f"outcome={result.outcome.value}"
            )
        return result

    def process_order(self) -> StepResult:
        return self.apply(OrderOperation.PROCESS)

    def ship_order(self) -> StepResult:
        return self.apply(OrderOperation.SHIP)

    def deliver_order(self) -> StepResult:
        return self.apply(OrderOperation.DELIVER)
