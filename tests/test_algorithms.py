import random
from collections import Counter

import pytest

from algorithms import ALGORITHM_NAMES, REGISTRY, algorithms_by_tag, get_algorithm
from algorithms.quick import partition
from algorithms.step import StepKind
from engine import CancellationToken, PauseGate
from sequence import SequenceStore

from conftest import NO_PAUSE, HookRenderer


def sort_with(name, values, renderer=None):
    """Run one algorithm straight through the gate, no controller."""
    store = SequenceStore(values, renderer=renderer)
    gate = PauseGate(store, CancellationToken(), speed=lambda: 5, config=NO_PAUSE)
    gate.run(REGISTRY[name].fn(gate, 0, len(store) - 1))
    return store


def inputs():
    rng = random.Random(1234)
    yield []
    yield [7]
    yield [2, 1]
    yield [5, 1, 4, 2, 3]
    yield [3, 3, 1, 3, 1]
    yield [2.5, -1.0, 0, 10, 2.5]
    yield list(range(20, 0, -1))
    yield [rng.randrange(10, 360) for _ in range(60)]


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
@pytest.mark.parametrize("values", list(inputs()), ids=lambda v: f"n{len(v)}")
def test_sorts_into_permutation(name, values) -> None:
    store = sort_with(name, values)

    out = list(store.snapshot())
    assert out == sorted(values)
    assert Counter(out) == Counter(values)


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_sorts_largest_size(name) -> None:
    rng = random.Random(99)
    values = [rng.randrange(10, 360) for _ in range(500)]

    store = sort_with(name, values)

    assert list(store.snapshot()) == sorted(values)


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_counts_are_deterministic(name) -> None:
    rng = random.Random(7)
    values = [rng.randrange(10, 360) for _ in range(40)]

    first = sort_with(name, values).stats
    second = sort_with(name, values).stats

    assert (first.comparisons, first.exchanges) == (second.comparisons, second.exchanges)
    assert first.comparisons > 0


@pytest.mark.parametrize("name", ALGORITHM_NAMES)
def test_sorted_input_unchanged(name) -> None:
    values = list(range(1, 11))

    store = sort_with(name, values)

    assert list(store.snapshot()) == values


def test_insertion_trace() -> None:
    renderer = HookRenderer()
    store = sort_with("insertion", [5, 1, 4, 2, 3], renderer)

    assert list(store.snapshot()) == [1, 2, 3, 4, 5]
    assert store.stats.comparisons == 9
    # exchanges are the shift overwrites only
    assert store.stats.exchanges == 6
    compares = [e.indices for e in renderer.events if e.kind is StepKind.COMPARE]
    assert compares == [(0, 1), (1, 2), (0, 2), (2, 3), (1, 3), (0, 3), (3, 4), (2, 4), (1, 4)]
    assert all(e.kind is not StepKind.SWAP for e in renderer.events)


def test_insertion_best_case() -> None:
    renderer = HookRenderer()
    store = sort_with("insertion", [1, 2, 3, 4, 5, 6], renderer)

    assert store.stats.comparisons == 5
    assert store.stats.exchanges == 0
    # the key is still written back once per outer iteration
    writes = [e for e in renderer.events if e.kind is StepKind.OVERWRITE]
    assert [e.indices for e in writes] == [(1,), (2,), (3,), (4,), (5,)]


def test_quick_trace() -> None:
    store = sort_with("quick", [3, 6, 1, 8, 2])

    assert list(store.snapshot()) == [1, 2, 3, 6, 8]
    assert store.stats.comparisons == 6
    assert store.stats.exchanges == 3


def test_quick_first_partition() -> None:
    store = SequenceStore([3, 6, 1, 8, 2])
    gate = PauseGate(store, CancellationToken(), speed=lambda: 5, config=NO_PAUSE)
    steps = partition(gate, 0, 4)

    with pytest.raises(StopIteration) as done:
        while True:
            next(steps)

    assert done.value.value == 1
    assert list(store.snapshot()) == [1, 2, 3, 8, 6]


def test_quick_sorted_input_swaps_pivot_in_place() -> None:
    store = sort_with("quick", list(range(10)))

    assert store.stats.comparisons == 45
    # one (self-)swap per partition
    assert store.stats.exchanges == 9


def test_bubble_and_selection_sorted_input() -> None:
    for name in ("bubble", "selection"):
        store = sort_with(name, list(range(8)))
        assert store.stats.comparisons == 28
        assert store.stats.exchanges == 0


def test_bubble_event_order() -> None:
    renderer = HookRenderer()
    sort_with("bubble", [2, 1], renderer)

    assert [(e.kind, e.indices, e.epoch) for e in renderer.events] == [
        (StepKind.COMPARE, (0, 1), 1),
        (StepKind.SWAP, (0, 1), 2),
    ]


def test_selection_swaps_once_per_pass() -> None:
    renderer = HookRenderer()
    store = sort_with("selection", [3, 1, 2], renderer)

    assert store.stats.comparisons == 3
    swaps = [e.indices for e in renderer.events if e.kind is StepKind.SWAP]
    assert swaps == [(0, 1), (1, 2)]


def test_merge_counts_every_write() -> None:
    renderer = HookRenderer()
    store = sort_with("merge", list(range(8)), renderer)

    assert store.stats.comparisons == 12
    assert store.stats.exchanges == 24
    assert all(e.kind is not StepKind.SWAP for e in renderer.events)


def test_merge_reports_head_positions() -> None:
    renderer = HookRenderer()
    sort_with("merge", [2, 1], renderer)

    assert [(e.kind, e.indices) for e in renderer.events] == [
        (StepKind.COMPARE, (0, 1)),
        (StepKind.OVERWRITE, (0,)),
        (StepKind.OVERWRITE, (1,)),
    ]
    assert [e.value for e in renderer.events[1:]] == [1, 2]


def test_registry_is_closed_set() -> None:
    assert ALGORITHM_NAMES == ("bubble", "selection", "insertion", "merge", "quick")
    assert get_algorithm("heap") is None
    assert {a.key for a in algorithms_by_tag("stable")} == {"bubble", "insertion", "merge"}
    card = get_algorithm("merge").to_dict()
    assert card["worst"] == "O(n log n)"
    assert card["space"] == "O(n)"
