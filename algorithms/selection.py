"""
selection.py — Selection Sort
==============================
Per outer position i, scans (min_idx, j) for j = i+1..high and remembers
the smallest value seen.  At most one swap per pass, and only when the
minimum moved; a pass without a swap still pays for all its comparisons.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from engine.gate import PauseGate, Steps


def selection_sort(gate: "PauseGate", low: int, high: int) -> "Steps[None]":
    for i in range(low, high):
        min_idx = i
        for j in range(i + 1, high + 1):
            order = yield from gate.compare(min_idx, j)
            if order > 0:
                min_idx = j
        if min_idx != i:
            yield from gate.swap(i, min_idx)
