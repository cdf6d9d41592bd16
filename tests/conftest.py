from __future__ import annotations

from typing import Callable, List, Optional

import pytest

from algorithms.step import StepEvent
from engine import EngineConfig, RunController
from sequence.renderer import Renderer


NO_PAUSE = EngineConfig(base_pause_ms=0, pause_step_ms=0, min_pause_ms=0, sweep_pause_ms=0)


class HookRenderer(Renderer):
    """Records everything and lets a test react to each step."""

    def __init__(self, on_event: Optional[Callable[[StepEvent], None]] = None) -> None:
        self.events: List[StepEvent] = []
        self.states: List[str] = []
        self.resets: List[tuple] = []
        self.stats: List[tuple] = []
        self.on_event = on_event

    def on_reset(self, values) -> None:
        self.resets.append(tuple(values))

    def on_step(self, event: StepEvent) -> None:
        self.events.append(event)
        if self.on_event is not None:
            self.on_event(event)

    def on_statistics(self, stats) -> None:
        self.stats.append((stats.comparisons, stats.exchanges, stats.elapsed_ms))

    def on_run_state_changed(self, state) -> None:
        self.states.append(state.value)


@pytest.fixture
def make_controller():
    def factory(values, renderer=None, **kwargs) -> RunController:
        kwargs.setdefault("config", NO_PAUSE)
        return RunController(renderer=renderer, values=values, **kwargs)

    return factory
