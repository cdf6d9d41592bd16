"""
bubble.py — Bubble Sort
========================
Compares adjacent pairs (j, j+1) and swaps when the left value is larger.
Each outer pass bubbles the largest remaining value to the end, so the
scanned range shrinks by one per pass.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from engine.gate import PauseGate, Steps


def bubble_sort(gate: "PauseGate", low: int, high: int) -> "Steps[None]":
    n = high - low + 1
    for i in range(n - 1):
        for j in range(low, high - i):
            order = yield from gate.compare(j, j + 1)
            if order > 0:
                yield from gate.swap(j, j + 1)
