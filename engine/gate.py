"""
gate.py — Instrumented Pause Gate
===================================
The ONLY path by which algorithm code touches the sequence.  Every gate
operation is a small generator that:

    (a) raises Cancelled if cancellation was requested  (before any work)
    (b) performs the SequenceStore operation            (count + mutate)
    (c) notifies the renderer                           (on_step, on_statistics)
    (d) yields the StepEvent                            (suspension point)

and finally returns the operation's result to the algorithm:

    order = yield from gate.compare(j, j + 1)
    if order > 0:
        yield from gate.swap(j, j + 1)

`PauseGate.run()` is the driver: it pulls events out of an algorithm
generator and sleeps `pause_seconds(event)` between them.  The sleep waits
on the CancellationToken, so cancel() wakes a sleeping run immediately and
the next gate call unwinds it.

Thread safety:
  CancellationToken may be set from any thread.  Everything else belongs
  to the single thread that drives the run.
"""

import logging
import threading
from typing import Callable, Generator, Optional, Sequence, Tuple, TypeVar

from algorithms.step import Number, StepEvent, StepKind
from engine.config import EngineConfig
from sequence.errors import Cancelled
from sequence.renderer import Renderer
from sequence.store import SequenceStore

LOG = logging.getLogger(__name__)

T = TypeVar("T")
Steps = Generator[StepEvent, None, T]


# ---------------------------------------------------------------------------
# Cancellation token
# ---------------------------------------------------------------------------
class CancellationToken:
    """Shared flag checked at every suspension point."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def clear(self) -> None:
        self._event.clear()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise Cancelled("run cancelled")

    def wait(self, seconds: float) -> bool:
        """Sleep up to `seconds`; returns True early if cancelled meanwhile."""
        if seconds <= 0:
            return self._event.is_set()
        return self._event.wait(seconds)


# ---------------------------------------------------------------------------
# Gate
# ---------------------------------------------------------------------------
class PauseGate:
    """
    Attributes:
        store    : The SequenceStore being sorted.
        token    : CancellationToken shared with the RunController.
        speed    : Zero-arg callable returning the current speed level;
                   read on every step so slider changes apply mid-run.
        config   : EngineConfig with the pacing constants.
        renderer : Receives on_step / on_statistics (defaults to store.renderer).
    """

    def __init__(
        self,
        store: SequenceStore,
        token: CancellationToken,
        speed: Callable[[], int],
        config: Optional[EngineConfig] = None,
        renderer: Optional[Renderer] = None,
    ):
        self.store    = store
        self.token    = token
        self.speed    = speed
        self.config   = config or EngineConfig()
        self.renderer = renderer or store.renderer

    # ------------------------------------------------------------------
    # Reads and restores (not steps: no counting, no pause)
    # ------------------------------------------------------------------
    def value(self, i: int) -> Number:
        return self.store.value(i)

    def __len__(self) -> int:
        return len(self.store)

    def restore(self, start: int, values: Sequence[Number]) -> None:
        """Write held values back without a step; ignores cancellation."""
        self.store.restore(start, values)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def compare(self, i: int, j: int) -> Steps[int]:
        """Three-way comparison of positions i and j."""
        self.token.raise_if_cancelled()
        order, event = self.store.compare_values(i, j)
        yield from self._emit(event)
        return order

    def compare_held(self, a: Number, b: Number, indices: Tuple[int, ...]) -> Steps[int]:
        """Three-way comparison of two values already copied out of the sequence."""
        self.token.raise_if_cancelled()
        order, event = self.store.compare_held(a, b, indices)
        yield from self._emit(event)
        return order

    def swap(self, i: int, j: int) -> Steps[None]:
        self.token.raise_if_cancelled()
        yield from self._emit(self.store.exchange(i, j))

    def overwrite(self, i: int, value: Number, counted: bool = True) -> Steps[None]:
        self.token.raise_if_cancelled()
        yield from self._emit(self.store.overwrite(i, value, counted=counted))

    def mark_sorted(self, i: int) -> Steps[None]:
        self.token.raise_if_cancelled()
        yield from self._emit(self.store.mark_sorted(i))

    # ------------------------------------------------------------------
    # Pacing / driver
    # ------------------------------------------------------------------
    def pause_seconds(self, event: StepEvent) -> float:
        if event.kind is StepKind.SORTED:
            return self.config.sweep_pause_ms / 1000.0
        return self.config.pause_ms(self.speed()) / 1000.0

    def run(self, steps: Steps[T]) -> None:
        """
        Drive an algorithm generator to completion, pausing after every
        event.  Cancelled propagates out of the generator unchanged.
        """
        for event in steps:
            self.token.wait(self.pause_seconds(event))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _emit(self, event: StepEvent) -> Steps[None]:
        LOG.debug("step %d %s %s", event.epoch, event.kind.value, event.indices)
        self.renderer.on_step(event)
        self.renderer.on_statistics(self.store.stats.copy())
        yield event
