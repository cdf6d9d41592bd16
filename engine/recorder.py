"""
recorder.py — Run Recorder
============================
A Renderer that keeps a mirror of everything the web UI needs to draw one
frame: the values, the indices highlighted by the latest step, the sorted
prefix painted by the completion sweep, the statistics and the RunState.

The worker thread writes through the Renderer hooks; request threads read
with export().  A lock keeps each export() a consistent frame.

Usage:
    rec  = RunRecorder()
    ctl  = RunController(renderer=rec)
    ctl.start_background("quick")
    rec.export()                    # poll from the UI

With keep_events=True every StepEvent is also appended to `events`
(tests use this to check ordering).
"""

import threading
from typing import Any, Dict, List, Optional, Tuple

from algorithms.step import Number, StepEvent, StepKind
from engine.controller import RunState
from sequence.renderer import Renderer
from sequence.store import RunStatistics


class RunRecorder(Renderer):
    """
    Attributes:
        values     : Mirror of the sequence, updated from events.
        highlight  : (kind, indices) of the latest compare/swap/overwrite, or None.
        sorted     : Number of leading positions marked by the sweep.
        stats      : Latest RunStatistics.
        state      : Latest RunState value string ("idle", "running", …).
        events     : Every StepEvent of the current run (keep_events only).
    """

    def __init__(self, keep_events: bool = False):
        self.keep_events = keep_events
        self.values:    List[Number]                       = []
        self.highlight: Optional[Tuple[str, Tuple[int, ...]]] = None
        self.sorted:    int                                = 0
        self.stats:     RunStatistics                      = RunStatistics()
        self.state:     str                                = "idle"
        self.epoch:     int                                = 0
        self.events:    List[StepEvent]                    = []
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Renderer hooks
    # ------------------------------------------------------------------
    def on_reset(self, values: Tuple[Number, ...]) -> None:
        with self._lock:
            self.values    = list(values)
            self.highlight = None
            self.sorted    = 0
            self.epoch     = 0
            self.events    = []

    def on_step(self, event: StepEvent) -> None:
        with self._lock:
            self.epoch = event.epoch
            if self.keep_events:
                self.events.append(event)

            if event.kind is StepKind.SORTED:
                self.sorted    = event.indices[0] + 1
                self.highlight = None
                return

            if event.kind is StepKind.SWAP:
                i, j = event.indices
                self.values[i], self.values[j] = self.values[j], self.values[i]
            elif event.kind is StepKind.OVERWRITE:
                self.values[event.indices[0]] = event.value
            self.highlight = (event.kind.value, event.indices)

    def on_statistics(self, stats: RunStatistics) -> None:
        with self._lock:
            self.stats = stats

    def on_run_state_changed(self, state: RunState) -> None:
        with self._lock:
            self.state = state.value
            if state is RunState.RUNNING:
                self.highlight = None
                self.sorted    = 0
                self.epoch     = 0
                self.events    = []
            elif state is not RunState.COMPLETED:
                self.highlight = None

    # ------------------------------------------------------------------
    # Export (serialisable frame)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        with self._lock:
            kind, indices = self.highlight if self.highlight else (None, ())
            return {
                "values":    list(self.values),
                "highlight": {"kind": kind, "indices": list(indices)},
                "sorted":    self.sorted,
                "stats":     self.stats.to_dict(),
                "state":     self.state,
                "epoch":     self.epoch,
            }
