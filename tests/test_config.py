import pytest

from config import VisualizerConfig


def test_defaults():
    cfg = VisualizerConfig()
    assert cfg.size == 100
    assert (cfg.value_low, cfg.value_high) == (50, 600)
    assert cfg.speed_ms == 50
    assert (cfg.speed_min_ms, cfg.speed_max_ms) == (10, 500)


def test_initial_speed_is_clamped():
    assert VisualizerConfig(speed_ms=1).speed_ms == 10
    assert VisualizerConfig(speed_ms=9999).speed_ms == 500


def test_from_env():
    cfg = VisualizerConfig.from_env(
        {"SORTVIZ_SIZE": "20", "SORTVIZ_SEED": "3", "SORTVIZ_SPEED_MS": "120"}
    )
    assert (cfg.size, cfg.seed, cfg.speed_ms) == (20, 3, 120)


def test_from_env_ignores_empty_values():
    assert VisualizerConfig.from_env({"SORTVIZ_SIZE": ""}).size == 100


def test_from_env_rejects_garbage():
    with pytest.raises(ValueError, match="SORTVIZ_SIZE"):
        VisualizerConfig.from_env({"SORTVIZ_SIZE": "lots"})


@pytest.mark.parametrize("kwargs", [
    {"size": -1},
    {"value_low": 10, "value_high": 5},
    {"speed_min_ms": 100, "speed_max_ms": 50},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        VisualizerConfig(**kwargs)
