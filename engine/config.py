"""
config.py — Engine Configuration
==================================
Pacing constants, configuration bounds and defaults.

    cfg = EngineConfig()                                  # defaults
    cfg = EngineConfig.from_mapping(app.config)           # SORTVIZ_* keys
    cfg.pause_ms(speed=5)                                 # → 120

Pause formula (per gate step):
    pause = max(min_pause_ms, base_pause_ms - speed * pause_step_ms)

so speed 1 → 200 ms and speed 10 → 20 ms with the defaults.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

from sequence.errors import InvalidArgument


CONFIG_PREFIX = "SORTVIZ_"


@dataclass(frozen=True)
class EngineConfig:
    # pacing (milliseconds)
    base_pause_ms:   int = 220
    pause_step_ms:   int = 20
    min_pause_ms:    int = 10
    sweep_pause_ms:  int = 20          # fixed pause of the terminal "sorted" sweep

    # sequence size
    min_size:        int = 5
    max_size:        int = 500
    default_size:    int = 50

    # speed slider
    min_speed:       int = 1
    max_speed:       int = 10
    default_speed:   int = 5

    # generated values are uniform in [min_value, max_value)
    min_value:       int = 10
    max_value:       int = 360

    default_algorithm: str = "bubble"

    def __post_init__(self):
        if self.min_size > self.max_size:
            raise InvalidArgument("min_size must not exceed max_size")
        if self.min_speed > self.max_speed:
            raise InvalidArgument("min_speed must not exceed max_speed")
        if self.min_value >= self.max_value:
            raise InvalidArgument("min_value must be below max_value")
        if min(self.base_pause_ms, self.pause_step_ms, self.min_pause_ms, self.sweep_pause_ms) < 0:
            raise InvalidArgument("pause settings must be non-negative")

    # ------------------------------------------------------------------
    # Pacing
    # ------------------------------------------------------------------
    def pause_ms(self, speed: int) -> int:
        """Per-step pause for a speed level; higher speed, shorter pause."""
        return max(self.min_pause_ms, self.base_pause_ms - speed * self.pause_step_ms)

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------
    def check_size(self, size: Any) -> int:
        return _check_int("array size", size, self.min_size, self.max_size)

    def check_speed(self, speed: Any) -> int:
        return _check_int("speed", speed, self.min_speed, self.max_speed)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], prefix: str = CONFIG_PREFIX) -> "EngineConfig":
        """
        Build from a mapping such as Flask's ``app.config``.  Only keys of the
        form ``SORTVIZ_<FIELD>`` are read; everything else is ignored.
        """
        kwargs = {}
        for f in fields(cls):
            key = prefix + f.name.upper()
            if key not in mapping:
                continue
            raw = mapping[key]
            try:
                kwargs[f.name] = raw if f.type in (str, "str") else int(raw)
            except (TypeError, ValueError):
                raise InvalidArgument(f"{key} must be an integer, got {raw!r}") from None
        return cls(**kwargs)


def _check_int(name: str, value: Any, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if not low <= value <= high:
        raise InvalidArgument(f"{name} must be in [{low}, {high}], got {value}")
    return value
