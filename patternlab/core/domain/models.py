"""Domain models for order lifecycle steps.

Responsibilities:
  - Define the Transition data carrier recorded when state actually changes.

Invariants:
  - Models are plain containers with no behavior.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import OrderOperation, OrderState, OutcomeCode


@dataclass(frozen=True)
class Transition:
    from_state: OrderState
    to_state: OrderState
    operation: OrderOperation
    outcome: OutcomeCode
