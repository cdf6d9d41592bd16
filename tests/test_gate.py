import pytest

from algorithms.step import StepKind
from engine import CancellationToken, EngineConfig, PauseGate
from sequence import Cancelled, InvalidArgument, SequenceStore

from conftest import NO_PAUSE, HookRenderer


def make_gate(values, speed=5, config=NO_PAUSE, renderer=None):
    store = SequenceStore(values, renderer=renderer)
    token = CancellationToken()
    level = {"speed": speed}
    gate = PauseGate(store, token, speed=lambda: level["speed"], config=config)
    return gate, store, token, level


def test_pause_duration_is_inverse_in_speed() -> None:
    cfg = EngineConfig()

    assert cfg.pause_ms(1) == 200
    assert cfg.pause_ms(5) == 120
    assert cfg.pause_ms(10) == 20
    pauses = [cfg.pause_ms(s) for s in range(1, 11)]
    assert pauses == sorted(pauses, reverse=True)


def test_pause_duration_has_a_floor() -> None:
    cfg = EngineConfig(base_pause_ms=50, pause_step_ms=20, min_pause_ms=15)

    assert cfg.pause_ms(1) == 30
    assert cfg.pause_ms(2) == 15
    assert cfg.pause_ms(10) == 15


def test_pause_seconds_reads_speed_every_step() -> None:
    gate, _, _, level = make_gate([2, 1], config=EngineConfig())
    steps = gate.compare(0, 1)
    event = next(steps)

    assert gate.pause_seconds(event) == pytest.approx(0.12)
    level["speed"] = 10
    assert gate.pause_seconds(event) == pytest.approx(0.02)


def test_sorted_sweep_uses_fixed_pause() -> None:
    gate, store, _, _ = make_gate([1], config=EngineConfig(sweep_pause_ms=20))
    event = store.mark_sorted(0)

    assert gate.pause_seconds(event) == pytest.approx(0.02)


def test_compare_notifies_then_returns_order() -> None:
    renderer = HookRenderer()
    gate, store, _, _ = make_gate([3, 1], renderer=renderer)

    steps = gate.compare(0, 1)
    event = next(steps)
    assert event.kind is StepKind.COMPARE
    assert renderer.events == [event]
    assert renderer.stats == [(1, 0, 0)]

    with pytest.raises(StopIteration) as done:
        next(steps)
    assert done.value.value == 1


def test_cancelled_before_work() -> None:
    renderer = HookRenderer()
    gate, store, token, _ = make_gate([3, 1], renderer=renderer)
    token.cancel()

    with pytest.raises(Cancelled):
        next(gate.swap(0, 1))

    assert store.snapshot() == (3, 1)
    assert store.stats.exchanges == 0
    assert renderer.events == []


def test_run_drives_generator_and_propagates_cancel() -> None:
    gate, store, token, _ = make_gate([4, 3, 2, 1])

    def algo():
        yield from gate.swap(0, 3)
        token.cancel()
        yield from gate.swap(1, 2)

    with pytest.raises(Cancelled):
        gate.run(algo())
    assert store.snapshot() == (1, 3, 2, 4)


def test_token_wait_returns_early_when_cancelled() -> None:
    token = CancellationToken()
    token.cancel()

    assert token.wait(5.0) is True
    assert token.cancelled

    token.clear()
    assert token.wait(0) is False
    token.raise_if_cancelled()


def test_gate_rejects_bad_index() -> None:
    gate, store, _, _ = make_gate([1, 2])

    with pytest.raises(InvalidArgument):
        next(gate.compare(0, 5))
    assert store.stats.comparisons == 0


def test_restore_ignores_cancellation() -> None:
    renderer = HookRenderer()
    gate, store, token, _ = make_gate([1, 1, 3], renderer=renderer)
    token.cancel()

    gate.restore(1, (2,))

    assert store.snapshot() == (1, 2, 3)
    assert renderer.events == []
