"""Expression interpreter and order lifecycle state machine."""

__version__ = "0.1.0"
