"""Result payload for a single order lifecycle step.

Responsibilities:
  - Capture previous/final state, outcome and optional transition of one operation.

Inputs/Outputs:
  - Inputs: produced by machine.step.
  - Outputs: immutable dataclass consumed by OrderContext, history tables and CLIs.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.enums import (
    OrderOperation,
    OrderState,
    OutcomeCategory,
    OutcomeCode,
    outcome_category,
    outcome_message,
)
from ..domain.models import Transition


@dataclass(frozen=True)
class StepResult:
    prev_state: OrderState
    operation: OrderOperation
    final_state: OrderState
    outcome: OutcomeCode
    transition: Transition | None

    @property
    def changed(self) -> bool:
        return self.final_state != self.prev_state

    @property
    def category(self) -> OutcomeCategory:
        return outcome_category(self.outcome)

    @property
    def accepted(self) -> bool:
        return self.category == OutcomeCategory.SUCCESS

    @property
    def message(self) -> str:
        return outcome_message(self.outcome)
