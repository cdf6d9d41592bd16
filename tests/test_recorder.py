import pytest

from engine import EngineConfig, RunController, RunRecorder, RunState
from sequence import InvalidArgument

from conftest import NO_PAUSE


def test_recorder_mirrors_the_sequence() -> None:
    rec = RunRecorder(keep_events=True)
    ctl = RunController(renderer=rec, config=NO_PAUSE, values=[4, 1, 3, 2])

    for name in ("bubble", "insertion", "merge", "quick", "selection"):
        ctl.load([4, 1, 3, 2])
        ctl.start(name)
        frame = rec.export()
        assert frame["values"] == list(ctl.values) == [1, 2, 3, 4]
        assert frame["sorted"] == 4
        assert frame["state"] == "completed"
        assert frame["stats"]["comparisons"] == ctl.statistics.comparisons


def test_recorder_highlight_follows_last_step() -> None:
    rec = RunRecorder()
    rec.on_reset((2, 1))

    ctl = RunController(renderer=rec, config=NO_PAUSE, values=[2, 1])
    seen = []
    original = rec.on_step

    def spy(event):
        original(event)
        seen.append(rec.export()["highlight"])

    rec.on_step = spy
    ctl.start("bubble")

    assert seen[0] == {"kind": "compare", "indices": [0, 1]}
    assert seen[1] == {"kind": "swap", "indices": [0, 1]}
    assert seen[2] == {"kind": None, "indices": []}


def test_recorder_clears_on_new_run() -> None:
    rec = RunRecorder(keep_events=True)
    ctl = RunController(renderer=rec, config=NO_PAUSE, values=[3, 1, 2])

    ctl.start("quick")
    assert rec.events
    ctl.reset()
    assert rec.state == "idle"

    rec.on_run_state_changed(RunState.RUNNING)
    assert rec.events == []
    assert rec.sorted == 0


def test_config_from_mapping() -> None:
    cfg = EngineConfig.from_mapping({
        "SORTVIZ_BASE_PAUSE_MS": "100",
        "SORTVIZ_DEFAULT_SIZE": 20,
        "SORTVIZ_DEFAULT_ALGORITHM": "merge",
        "UNRELATED": "x",
    })

    assert cfg.base_pause_ms == 100
    assert cfg.default_size == 20
    assert cfg.default_algorithm == "merge"
    assert cfg.max_size == 500


def test_config_rejects_garbage() -> None:
    with pytest.raises(InvalidArgument):
        EngineConfig.from_mapping({"SORTVIZ_MAX_SPEED": "fast"})
    with pytest.raises(InvalidArgument):
        EngineConfig(min_size=10, max_size=5)
    with pytest.raises(InvalidArgument):
        EngineConfig(min_pause_ms=-1)


def test_controller_rejects_bad_default_algorithm() -> None:
    with pytest.raises(InvalidArgument):
        RunController(config=EngineConfig(default_algorithm="bogo"), values=[1])
