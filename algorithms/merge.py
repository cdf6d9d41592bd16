"""
merge.py — Merge Sort
======================
Top-down merge sort.  Both halves [low, mid] and [mid+1, high] are sorted
recursively, then merged back through a pair of copied-out buffers.

During the merge the heads are compared by value (their original slots may
already be overwritten) and reported at the slots they came from.  Every
position written back counts as an exchange, whichever half it came from.
Ties take the left head, which keeps the sort stable.

If the run is cancelled mid-merge, the values still in the buffers
(left[i:] then right[j:]) fill [k, high] exactly, so they are restored
there before unwinding.
"""

from typing import TYPE_CHECKING

from sequence.errors import Cancelled

if TYPE_CHECKING:
    from engine.gate import PauseGate, Steps


def merge_sort(gate: "PauseGate", low: int, high: int) -> "Steps[None]":
    if low >= high:
        return
    mid = (low + high) // 2
    yield from merge_sort(gate, low, mid)
    yield from merge_sort(gate, mid + 1, high)
    yield from merge(gate, low, mid, high)


def merge(gate: "PauseGate", low: int, mid: int, high: int) -> "Steps[None]":
    left  = [gate.value(k) for k in range(low, mid + 1)]
    right = [gate.value(k) for k in range(mid + 1, high + 1)]

    i = j = 0
    k = low
    try:
        while i < len(left) and j < len(right):
            order = yield from gate.compare_held(left[i], right[j], (low + i, mid + 1 + j))
            if order <= 0:
                yield from gate.overwrite(k, left[i])
                i += 1
            else:
                yield from gate.overwrite(k, right[j])
                j += 1
            k += 1

        # drain whichever half is left over
        while i < len(left):
            yield from gate.overwrite(k, left[i])
            i += 1
            k += 1
        while j < len(right):
            yield from gate.overwrite(k, right[j])
            j += 1
            k += 1
    except Cancelled:
        gate.restore(k, left[i:] + right[j:])
        raise
