"""
errors.py — Error Taxonomy
==========================
    SortEngineError
      ├── Cancelled        – cooperative unwind signal; only the controller stops on it
      ├── InvalidState     – operation not allowed in the current RunState
      └── InvalidArgument  – bad size / speed / index / algorithm name
"""


class SortEngineError(RuntimeError):
    """Base class for sorting engine errors."""


class Cancelled(SortEngineError):
    """Raised at a gate step once cancellation has been requested."""


class InvalidState(SortEngineError):
    """Raised when an operation is attempted while the run state forbids it."""


class InvalidArgument(SortEngineError, ValueError):
    """Raised for out-of-range configuration or unknown algorithm names."""
