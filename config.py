"""
config.py — Visualizer Configuration
======================================
Central home for the engine's tunable constants.

    from config import VisualizerConfig

    cfg = VisualizerConfig.from_env()

Environment overrides (all optional):
    SORTVIZ_SIZE      – number of bars (default 100)
    SORTVIZ_SEED      – RNG seed for reproducible datasets
    SORTVIZ_SPEED_MS  – initial tick interval in milliseconds
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class VisualizerConfig:
    size:           int           = 100
    value_low:      int           = 50       # inclusive
    value_high:     int           = 600      # inclusive
    speed_ms:       int           = 50       # initial tick interval
    speed_min_ms:   int           = 10
    speed_max_ms:   int           = 500
    speed_step_ms:  int           = 10       # one SPEED_UP / SPEED_DOWN press
    seed:           Optional[int] = None

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"Dataset size must be >= 0, got {self.size}")
        if self.value_low > self.value_high:
            raise ValueError(
                f"Empty value range: [{self.value_low}, {self.value_high}]"
            )
        if self.speed_min_ms > self.speed_max_ms:
            raise ValueError(
                f"Empty speed range: [{self.speed_min_ms}, {self.speed_max_ms}]"
            )
        self.speed_ms = self.clamp_speed(self.speed_ms)

    def clamp_speed(self, value: int) -> int:
        return max(self.speed_min_ms, min(self.speed_max_ms, value))

    @classmethod
    def from_env(cls, environ=None) -> "VisualizerConfig":
        """Build a config from SORTVIZ_* environment variables."""
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get("SORTVIZ_SIZE"):
            kwargs["size"] = _parse_int(env, "SORTVIZ_SIZE")
        if env.get("SORTVIZ_SEED"):
            kwargs["seed"] = _parse_int(env, "SORTVIZ_SEED")
        if env.get("SORTVIZ_SPEED_MS"):
            kwargs["speed_ms"] = _parse_int(env, "SORTVIZ_SPEED_MS")
        return cls(**kwargs)


def _parse_int(env, name: str) -> int:
    raw = env[name]
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
