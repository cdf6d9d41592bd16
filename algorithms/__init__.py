"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every sorting algorithm the visualizer knows.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bubble": AlgoInfo(key, label, fn, description, complexities, tags),
        …
    }

Every `fn` has the same shape:

    fn(gate, low, high) -> generator of StepEvents

and touches the sequence only through the gate.  The engine and the UI
both consume AlgoInfo; the set of keys is closed (ALGORITHM_NAMES).
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bubble    import bubble_sort    as _bubble
from algorithms.selection import selection_sort as _selection
from algorithms.insertion import insertion_sort as _insertion
from algorithms.merge     import merge_sort     as _merge
from algorithms.quick     import quick_sort     as _quick


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bubble"
    label:            str                    # human label, e.g. "Bubble Sort"
    fn:               Callable               # the step generator
    description:      str      = ""          # one-liner for the info card
    best:             str      = ""          # e.g. "O(n)"
    average:          str      = ""
    worst:            str      = ""
    space:            str      = ""
    tags:             List[str] = field(default_factory=list)   # e.g. ["stable", "in-place"]

    def to_dict(self) -> dict:
        return {
            "key":         self.key,
            "label":       self.label,
            "description": self.description,
            "best":        self.best,
            "average":     self.average,
            "worst":       self.worst,
            "space":       self.space,
            "tags":        list(self.tags),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bubble": AlgoInfo(
        key="bubble", label="Bubble Sort", fn=_bubble,
        description=(
            "Bubble sort repeatedly steps through the list, compares adjacent "
            "elements and swaps them if they are in the wrong order."
        ),
        best="O(n)", average="O(n²)", worst="O(n²)", space="O(1)",
        tags=["stable", "in-place", "quadratic"],
    ),

    "selection": AlgoInfo(
        key="selection", label="Selection Sort", fn=_selection,
        description=(
            "Selection sort divides the list into sorted and unsorted parts, "
            "repeatedly finding the minimum element and placing it at the beginning."
        ),
        best="O(n²)", average="O(n²)", worst="O(n²)", space="O(1)",
        tags=["in-place", "quadratic"],
    ),

    "insertion": AlgoInfo(
        key="insertion", label="Insertion Sort", fn=_insertion,
        description=(
            "Insertion sort builds the sorted array one item at a time by repeatedly "
            "taking elements and inserting them into their correct position."
        ),
        best="O(n)", average="O(n²)", worst="O(n²)", space="O(1)",
        tags=["stable", "in-place", "quadratic"],
    ),

    "merge": AlgoInfo(
        key="merge", label="Merge Sort", fn=_merge,
        description=(
            "Merge sort divides the array into halves, recursively sorts them, "
            "and then merges the sorted halves back together."
        ),
        best="O(n log n)", average="O(n log n)", worst="O(n log n)", space="O(n)",
        tags=["stable", "divide-and-conquer"],
    ),

    "quick": AlgoInfo(
        key="quick", label="Quick Sort", fn=_quick,
        description=(
            "Quick sort picks a pivot element and partitions the array around it, "
            "then recursively sorts the sub-arrays."
        ),
        best="O(n log n)", average="O(n log n)", worst="O(n²)", space="O(log n)",
        tags=["in-place", "divide-and-conquer"],
    ),
}

ALGORITHM_NAMES = tuple(REGISTRY)


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "ALGORITHM_NAMES",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
