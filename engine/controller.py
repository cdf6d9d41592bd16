"""
controller.py — Run Controller
================================
The RunController is the ONLY object the UI talks to.  It owns the
SequenceStore, the CancellationToken, the PauseGate and the run lifecycle,
and exposes a small configure / start / cancel API.

State machine:
    IDLE       →  start()            →  RUNNING
    RUNNING    →  (natural finish)   →  COMPLETED
    RUNNING    →  cancel()           →  CANCELLED
    RUNNING    →  (fault)            →  IDLE, exception re-raised
    COMPLETED  →  reset() / new seq  →  IDLE
    CANCELLED  →  reset() / new seq  →  IDLE

start() is also accepted from COMPLETED and CANCELLED; it never is from
RUNNING.

Threading:
  start() drives the whole run on the calling thread and returns the final
  RunState.  start_background() does the RUNNING transition on the calling
  thread (so a second start is rejected immediately) and drives the run on
  a worker thread.  cancel() is safe from any thread and never waits for
  the run to unwind.
"""

import logging
import random
import threading
import time
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple

from algorithms import AlgoInfo, get_algorithm, ALGORITHM_NAMES
from algorithms.step import Number
from engine.config import EngineConfig
from engine.gate import CancellationToken, PauseGate, Steps
from sequence.errors import Cancelled, InvalidArgument, InvalidState
from sequence.renderer import Renderer, NullRenderer
from sequence.store import RunStatistics, SequenceStore

LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


# ---------------------------------------------------------------------------
# RunController
# ---------------------------------------------------------------------------
class RunController:
    """
    Attributes:
        state     : Current RunState.
        size      : Length of generated sequences.
        speed     : Speed level; the gate reads it on every step.
        algorithm : Selected algorithm key (one of ALGORITHM_NAMES).
        store     : The SequenceStore.
        gate      : The PauseGate all algorithms run through.
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        config: Optional[EngineConfig] = None,
        values: Optional[Iterable[Number]] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config    = config or EngineConfig()
        self.renderer  = renderer or NullRenderer()
        self.state     = RunState.IDLE
        self.size      = self.config.check_size(self.config.default_size)
        self.speed     = self.config.check_speed(self.config.default_speed)
        self.algorithm = _check_algorithm(self.config.default_algorithm).key

        self.store = SequenceStore(renderer=self.renderer)
        self.token = CancellationToken()
        self.gate  = PauseGate(
            self.store, self.token,
            speed=lambda: self.speed,
            config=self.config,
            renderer=self.renderer,
        )

        self._rng     = rng or random.Random()
        self._clock   = clock
        self._started = 0.0
        self._lock    = threading.Lock()

        if values is None:
            self.request_new_sequence()
        else:
            self.load(values)

    # ------------------------------------------------------------------
    # Configuration (controller collaborator surface)
    # ------------------------------------------------------------------
    def configure_size(self, n: int) -> None:
        """Change the sequence length and generate a fresh sequence."""
        self._reject_while_running("resize")
        self.size = self.config.check_size(n)
        self.request_new_sequence()

    def configure_speed(self, level: int) -> None:
        """Allowed mid-run; takes effect at the next step."""
        self.speed = self.config.check_speed(level)

    def select_algorithm(self, name: str) -> None:
        self.algorithm = _check_algorithm(name).key

    def request_new_sequence(self) -> None:
        self._reject_while_running("generate a new sequence")
        cfg = self.config
        self.load(self._rng.randrange(cfg.min_value, cfg.max_value) for _ in range(self.size))

    def load(self, values: Iterable[Number]) -> None:
        """Install an explicit sequence (tests, imports)."""
        self._reject_while_running("replace the sequence")
        self.store.replace(values)
        self.renderer.on_statistics(self.store.stats.copy())
        self._set_state(RunState.IDLE)

    def reset(self) -> None:
        """COMPLETED / CANCELLED → IDLE, keeping the current sequence."""
        self._reject_while_running("reset")
        self.store.reset_statistics()
        self.renderer.on_statistics(self.store.stats.copy())
        self._set_state(RunState.IDLE)

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------
    def start(self, algorithm: Optional[str] = None) -> RunState:
        """Run to the end (or to cancellation) on this thread."""
        info = self._begin(algorithm)
        return self._drive(info)

    def start_background(self, algorithm: Optional[str] = None) -> threading.Thread:
        """Enter RUNNING now, drive the run on a daemon worker thread."""
        info = self._begin(algorithm)
        worker = threading.Thread(target=self._drive, args=(info,), name=f"sort-{info.key}", daemon=True)
        worker.start()
        return worker

    def cancel(self) -> None:
        """Request cancellation; observed at the next gate step."""
        with self._lock:
            if self.state is not RunState.RUNNING:
                return
            self.token.cancel()
        LOG.info("cancellation requested")

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def statistics(self) -> RunStatistics:
        return self.store.stats.copy()

    @property
    def values(self) -> Tuple[Number, ...]:
        return self.store.snapshot()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _begin(self, algorithm: Optional[str]) -> AlgoInfo:
        info = _check_algorithm(self.algorithm if algorithm is None else algorithm)
        with self._lock:
            if self.state is RunState.RUNNING:
                LOG.warning("start rejected: a run is already in progress")
                raise InvalidState("a run is already in progress")
            self.token.clear()
            self.store.reset_statistics()
            self.store.hold()
            self._started = self._clock()
            self.state = RunState.RUNNING
        self.renderer.on_run_state_changed(RunState.RUNNING)
        self.renderer.on_statistics(self.store.stats.copy())
        LOG.info("run started: %s on %d values", info.key, len(self.store))
        return info

    def _drive(self, info: AlgoInfo) -> RunState:
        final = RunState.IDLE
        try:
            self.gate.run(info.fn(self.gate, 0, len(self.store) - 1))
            self.gate.run(self._sorted_sweep())
            final = RunState.COMPLETED
        except Cancelled:
            final = RunState.CANCELLED
            LOG.info("run cancelled: %s after %d steps", info.key, self.store.epoch)
            # held values were restored without events; redraw from the store
            self.renderer.on_reset(self.store.snapshot())
        except Exception:
            LOG.exception("run failed: %s after %d steps", info.key, self.store.epoch)
            raise
        finally:
            self.store.stats.elapsed_ms = int(round((self._clock() - self._started) * 1000))
            self.store.release()
            self.renderer.on_statistics(self.store.stats.copy())
            self._set_state(final)

        stats = self.store.stats
        LOG.info(
            "run %s: %s, %d comparisons, %d exchanges, %d ms",
            final.value, info.key, stats.comparisons, stats.exchanges, stats.elapsed_ms,
        )
        return final

    def _sorted_sweep(self) -> Steps[None]:
        for i in range(len(self.store)):
            yield from self.gate.mark_sorted(i)

    def _set_state(self, state: RunState) -> None:
        self.state = state
        self.renderer.on_run_state_changed(state)

    def _reject_while_running(self, action: str) -> None:
        if self.state is RunState.RUNNING:
            LOG.warning("%s rejected: a run is in progress", action)
            raise InvalidState(f"cannot {action} while a run is in progress")


def _check_algorithm(name) -> AlgoInfo:
    info = get_algorithm(name) if isinstance(name, str) else None
    if info is None:
        raise InvalidArgument(f"unknown algorithm {name!r}; expected one of {', '.join(ALGORITHM_NAMES)}")
    return info
