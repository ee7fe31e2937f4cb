import dataclasses
import pytest
from waypoint_smoother.config import SplineConfig


def test_defaults():
    cfg = SplineConfig()
    assert cfg.alpha == 0.75
    assert cfg.tension == 0.0
    assert cfg.samples_per_segment == 10
    assert cfg.legacy_distance is False


@pytest.mark.parametrize("kwargs", [
    {"alpha": 0.0},
    {"alpha": -0.5},
    {"alpha": 1.5},
    {"tension": float("nan")},
    {"samples_per_segment": 0},
    {"samples_per_segment": 2.5},
    {"samples_per_segment": True},
])
def test_invalid_settings_raise(kwargs):
    with pytest.raises(ValueError):
        SplineConfig(**kwargs)


def test_config_is_frozen():
    cfg = SplineConfig(alpha=0.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.alpha = 1.0
