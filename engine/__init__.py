"""
engine/
-------
Pacing, run lifecycle & recording layer.

    from engine import RunController, RunState, RunRecorder, EngineConfig
"""

from engine.config     import EngineConfig
from engine.gate       import PauseGate, CancellationToken
from engine.controller import RunController, RunState
from engine.recorder   import RunRecorder
from engine.log        import configure_logging

__all__ = [
    "EngineConfig",
    "PauseGate",
    "CancellationToken",
    "RunController",
    "RunState",
    "RunRecorder",
    "configure_logging",
]
