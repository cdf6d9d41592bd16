"""
log.py — Logging setup
========================
One stdout handler on the root logger, installed once.  The Flask app
passes SORTVIZ_LOG_LEVEL / SORTVIZ_LOG_FORMAT from app.config:

    configure_logging(app.config["SORTVIZ_LOG_LEVEL"], app.config["SORTVIZ_LOG_FORMAT"])

Every module logs through its own `LOG = logging.getLogger(__name__)`;
per-step events go out at DEBUG, so "DEBUG" traces a whole run.
"""

import logging
import sys
from typing import Optional, Union

from sequence.errors import InvalidArgument

DEFAULT_LEVEL  = "INFO"
DEFAULT_FORMAT = "[%(asctime)s] %(levelname)-8s %(threadName)s %(name)s: %(message)s"


def resolve_level(level: Union[int, str, None]) -> int:
    """Accept a level number or a name such as "debug"; None means INFO."""
    if level is None:
        level = DEFAULT_LEVEL
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise InvalidArgument(f"unknown log level {level!r}")
    return resolved


def configure_logging(level: Union[int, str, None] = DEFAULT_LEVEL, format: Optional[str] = None) -> bool:
    """
    Install the handler unless the root logger already has one (a host
    application's own setup wins).  Returns True if it installed.
    """
    resolved = resolve_level(level)
    root = logging.getLogger()
    if root.handlers:
        return False

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))
    root.addHandler(handler)
    root.setLevel(resolved)
    return True
