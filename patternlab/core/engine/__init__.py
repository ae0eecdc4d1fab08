"""Order lifecycle engine.

Responsibilities:
  - Provide the pure step function, the OrderContext and step result types.
  - Rejected operations are reported through StepResult, never raised.
"""

from .context import OrderContext, set_machine_debug
from .machine import step
from .result import StepResult

__all__ = ["OrderContext", "StepResult", "set_machine_debug", "step"]
