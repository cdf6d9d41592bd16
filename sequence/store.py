"""
store.py — Sequence Store
==========================
Owns the mutable list of numeric values and the run statistics.

Every mutating / counting operation returns the StepEvent describing it;
the gate forwards that event to the renderer.  The store itself never
pauses and never looks at cancellation.

    store = SequenceStore([5, 1, 4])
    order, ev = store.compare_values(0, 1)   # order == 1, ev.kind == COMPARE
    ev = store.exchange(0, 1)                # [1, 5, 4]
"""

import logging
from dataclasses import dataclass, asdict
from typing import Iterable, List, Optional, Tuple

from algorithms.step import Number, StepEvent, StepKind
from sequence.errors import InvalidArgument, InvalidState
from sequence.renderer import Renderer, NullRenderer

LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# RunStatistics
# ---------------------------------------------------------------------------
@dataclass
class RunStatistics:
    comparisons: int = 0
    exchanges:   int = 0
    elapsed_ms:  int = 0

    def copy(self) -> "RunStatistics":
        return RunStatistics(self.comparisons, self.exchanges, self.elapsed_ms)

    def to_dict(self) -> dict:
        return asdict(self)


def three_way(a: Number, b: Number) -> int:
    """-1, 0 or 1 as a is below, equal to or above b."""
    return (a > b) - (a < b)


# ---------------------------------------------------------------------------
# SequenceStore
# ---------------------------------------------------------------------------
class SequenceStore:
    """
    Attributes:
        stats    : RunStatistics for the current (or last) run.
        renderer : Receives on_reset() whenever the sequence is replaced.
    """

    def __init__(self, values: Iterable[Number] = (), renderer: Optional[Renderer] = None):
        self.renderer: Renderer      = renderer or NullRenderer()
        self.stats:    RunStatistics = RunStatistics()
        self._values:  List[Number]  = _validated(values)
        self._epoch:   int           = 0
        self._held:    bool          = False

    # ------------------------------------------------------------------
    # Run ownership (the controller holds the store while RUNNING)
    # ------------------------------------------------------------------
    def hold(self) -> None:
        self._held = True

    def release(self) -> None:
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    # ------------------------------------------------------------------
    # Whole-sequence operations
    # ------------------------------------------------------------------
    def replace(self, values: Iterable[Number]) -> None:
        """Install a new sequence, reset statistics and redraw."""
        if self._held:
            raise InvalidState("cannot replace the sequence while a run is in progress")
        new_values = _validated(values)
        self._values = new_values
        self.reset_statistics()
        LOG.debug("sequence replaced (%d values)", len(new_values))
        self.renderer.on_reset(self.snapshot())

    def reset_statistics(self) -> None:
        self.stats  = RunStatistics()
        self._epoch = 0

    def snapshot(self) -> Tuple[Number, ...]:
        return tuple(self._values)

    def value(self, i: int) -> Number:
        self._check_index(i)
        return self._values[i]

    def __len__(self) -> int:
        return len(self._values)

    @property
    def epoch(self) -> int:
        return self._epoch

    # ------------------------------------------------------------------
    # Step operations
    # ------------------------------------------------------------------
    def compare_values(self, i: int, j: int) -> Tuple[int, StepEvent]:
        """Three-way compare values[i] with values[j]; always counted."""
        self._check_index(i)
        self._check_index(j)
        self.stats.comparisons += 1
        return three_way(self._values[i], self._values[j]), self._event(StepKind.COMPARE, (i, j))

    def compare_held(self, a: Number, b: Number, indices: Tuple[int, ...]) -> Tuple[int, StepEvent]:
        """Compare two values the caller copied out (merge heads)."""
        for i in indices:
            self._check_index(i)
        self.stats.comparisons += 1
        return three_way(a, b), self._event(StepKind.COMPARE, tuple(indices))

    def exchange(self, i: int, j: int) -> StepEvent:
        self._check_index(i)
        self._check_index(j)
        self._values[i], self._values[j] = self._values[j], self._values[i]
        self.stats.exchanges += 1
        return self._event(StepKind.SWAP, (i, j))

    def overwrite(self, i: int, value: Number, counted: bool = True) -> StepEvent:
        """Write one position.  `counted` adds one to the exchange tally."""
        self._check_index(i)
        _check_number(value)
        self._values[i] = value
        if counted:
            self.stats.exchanges += 1
        return self._event(StepKind.OVERWRITE, (i,), value=value)

    def mark_sorted(self, i: int) -> StepEvent:
        self._check_index(i)
        return self._event(StepKind.SORTED, (i,))

    def restore(self, start: int, values: Iterable[Number]) -> None:
        """
        Put values an algorithm was holding back into [start, start+len).
        Not a step: no count, no epoch, no event.  Used while unwinding a
        cancelled run so the sequence stays a permutation of its input.
        """
        held = _validated(values)
        if not held:
            return
        self._check_index(start)
        self._check_index(start + len(held) - 1)
        self._values[start:start + len(held)] = held
        LOG.debug("restored %d held value(s) at %d", len(held), start)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _event(self, kind: StepKind, indices: Tuple[int, ...], value: Optional[Number] = None) -> StepEvent:
        self._epoch += 1
        return StepEvent(kind=kind, indices=indices, epoch=self._epoch, value=value)

    def _check_index(self, i: int) -> None:
        if not 0 <= i < len(self._values):
            raise InvalidArgument(f"index {i} out of range for sequence of length {len(self._values)}")


def _check_number(value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"sequence values must be numeric, got {value!r}")


def _validated(values: Iterable[Number]) -> List[Number]:
    out = list(values)
    for v in out:
        _check_number(v)
    return out
