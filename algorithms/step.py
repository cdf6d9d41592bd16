"""
step.py — Step Events
======================
Every comparison, exchange and overwrite an algorithm performs becomes
one StepEvent.  The gate is the only producer; renderers are pure readers.

Design decisions:
  - StepEvent is a frozen dataclass.  It is TRANSIENT: the renderer
    consumes it inside on_step() and nothing retains it.
  - `indices` is a tuple of positions (two for compare/swap, one for
    overwrite/sorted) in the order the algorithm touched them.
  - `epoch` counts events within the current run (1-based), so a renderer
    can tell whether its mirror of the sequence is up to date.
  - `value` is only set for OVERWRITE so a renderer can keep a mirror of
    the sequence without reading the store.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

Number = Union[int, float]


class StepKind(Enum):
    COMPARE   = "compare"     # two positions compared
    SWAP      = "swap"        # two positions exchanged
    OVERWRITE = "overwrite"   # one position written (insertion shift, merge write)
    SORTED    = "sorted"      # terminal sweep marks one position as final


@dataclass(frozen=True)
class StepEvent:
    """
    Attributes:
        kind    : What happened.
        indices : Positions involved, in algorithm order.
        epoch   : 1-based event counter within the run.
        value   : Written value (OVERWRITE only).
    """

    kind:    StepKind
    indices: Tuple[int, ...]
    epoch:   int              = 0
    value:   Optional[Number] = None

    def to_dict(self) -> dict:
        return {
            "kind":    self.kind.value,
            "indices": list(self.indices),
            "epoch":   self.epoch,
            "value":   self.value,
        }
