"""
renderer.py — Renderer Collaborator Interface
===============================================
The only channel from the core to whatever draws the bars.

    on_reset(values)           – the whole sequence was replaced; full redraw
    on_step(event)             – one StepEvent, in algorithm order
    on_statistics(stats)       – counters changed (after every step / at run end)
    on_run_state_changed(st)   – RunState transition

Renderers MUST NOT mutate the sequence.  Delivery of a callback is the
only point at which reading the sequence is defined.  Callbacks run on
whichever thread drives the run.
"""

from typing import TYPE_CHECKING, Tuple

from algorithms.step import Number, StepEvent

if TYPE_CHECKING:
    from engine.controller import RunState
    from sequence.store import RunStatistics


class Renderer:
    """Base class; every hook is a no-op so subclasses override what they need."""

    def on_reset(self, values: Tuple[Number, ...]) -> None:
        pass

    def on_step(self, event: StepEvent) -> None:
        pass

    def on_statistics(self, stats: "RunStatistics") -> None:
        pass

    def on_run_state_changed(self, state: "RunState") -> None:
        pass


class NullRenderer(Renderer):
    """Discards everything.  Default when no renderer is attached."""
