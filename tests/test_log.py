import logging

import pytest

from engine import configure_logging
from engine.log import resolve_level
from main import create_app
from sequence import InvalidArgument


@pytest.mark.parametrize(
    "level, expected",
    [(None, logging.INFO), ("debug", logging.DEBUG), (" Warning ", logging.WARNING), (logging.ERROR, logging.ERROR)],
)
def test_resolve_level(level, expected) -> None:
    assert resolve_level(level) == expected


@pytest.mark.parametrize("level", ["chatty", "", True])
def test_unknown_level_rejected(level) -> None:
    with pytest.raises(InvalidArgument):
        resolve_level(level)


def test_configure_logging_installs_once() -> None:
    root = logging.getLogger()
    saved, saved_level = list(root.handlers), root.level
    for handler in saved:
        root.removeHandler(handler)
    try:
        assert configure_logging("debug", "%(levelname)s %(message)s")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        record = logging.makeLogRecord({"levelname": "INFO", "msg": "hi"})
        assert root.handlers[0].format(record) == "INFO hi"

        # a second call leaves the existing setup alone
        assert not configure_logging("error")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_app_rejects_unknown_log_level() -> None:
    with pytest.raises(InvalidArgument):
        create_app({"SORTVIZ_LOG_LEVEL": "chatty"})
