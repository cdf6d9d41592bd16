"""
quick.py — Quick Sort
======================
Lomuto partition with the last element as pivot.

partition(low, high):
    pivot = value[high]
    for j in low..high-1: compare(j, high); on value[j] < pivot, i += 1
    and swap(i, j) unless i == j.  Finally swap(i+1, high) (always, even
    when i+1 == high) and return i+1.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from engine.gate import PauseGate, Steps


def quick_sort(gate: "PauseGate", low: int, high: int) -> "Steps[None]":
    if low < high:
        pivot_pos = yield from partition(gate, low, high)
        yield from quick_sort(gate, low, pivot_pos - 1)
        yield from quick_sort(gate, pivot_pos + 1, high)


def partition(gate: "PauseGate", low: int, high: int) -> "Steps[int]":
    i = low - 1
    for j in range(low, high):
        order = yield from gate.compare(j, high)
        if order < 0:
            i += 1
            if i != j:
                yield from gate.swap(i, j)
    yield from gate.swap(i + 1, high)
    return i + 1
