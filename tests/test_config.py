import dataclasses

import pytest

from flappy.config import ConfigError, DEFAULT_CONFIG, GameConfig


def test_defaults_match_the_design_constants():
    config = GameConfig()
    assert config.fall_speed == 18
    assert config.flap_speed == 320
    assert config.flap_timeout == 0.35
    assert config.move_speed == 2
    assert config.pair_count == 10
    assert config.tick_time == pytest.approx(1 / 60)


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.fall_speed = 1


def test_replace_returns_a_new_config():
    changed = DEFAULT_CONFIG.replace(seed=7, countdown_seconds=3)
    assert changed.seed == 7
    assert changed.countdown_seconds == 3
    assert DEFAULT_CONFIG.seed is None


@pytest.mark.parametrize("changes", [
    {"fps": 0},
    {"fall_speed": -1},
    {"pair_count": 0},
    {"countdown_seconds": -0.5},
    {"flap_timeout": -1},
    {"min_range": 256},
    {"player_bbox": (1, 2, 3)},
    {"player_bbox": 5},
    {"player_bbox": (-1, 2)},
    {"pipe_bbox": (26, 0)},
    {"pipe_sprite_width": 0},
])
def test_invalid_values_raise_config_error(changes):
    with pytest.raises(ConfigError):
        DEFAULT_CONFIG.replace(**changes)


def test_config_error_is_a_value_error():
    assert issubclass(ConfigError, ValueError)
