"""
insertion.py — Insertion Sort
==============================
Captures key = value[i], then scans left from i-1.  Each scan position
is shown as compare(j, i); the decision itself is `value[j] <= key`,
because position i may already hold a shifted value.

Shifts are counted overwrites (they make up the exchange tally).  The
key is written back once per outer iteration with an uncounted overwrite,
even when nothing moved.  The comparison that ends the scan is counted
too, so sorted input costs exactly n-1 comparisons and no exchanges.

While the key is held, slot j+1 is the hole (it holds a stale copy of its
right neighbour).  A cancelled run puts the key back into the hole before
unwinding.
"""

from typing import TYPE_CHECKING

from sequence.errors import Cancelled

if TYPE_CHECKING:
    from engine.gate import PauseGate, Steps


def insertion_sort(gate: "PauseGate", low: int, high: int) -> "Steps[None]":
    for i in range(low + 1, high + 1):
        key = gate.value(i)
        j = i - 1
        try:
            while j >= low:
                yield from gate.compare(j, i)
                left = gate.value(j)
                if left <= key:
                    break
                yield from gate.overwrite(j + 1, left)
                j -= 1
            yield from gate.overwrite(j + 1, key, counted=False)
        except Cancelled:
            gate.restore(j + 1, (key,))
            raise
