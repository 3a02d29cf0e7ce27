"""
config.py: Immutable game configuration, built once at startup and threaded
through the engine, the obstacle generator and the collision core.
"""

from dataclasses import dataclass, replace as dc_replace
from typing import Optional, Tuple

from . import constants as c


class ConfigError(ValueError):
    """Raised when a GameConfig holds values the simulation cannot run with."""


@dataclass(frozen=True)
class GameConfig:
    fall_speed: float = c.FALL_SPEED
    flap_speed: float = c.FLAP_SPEED
    flap_timeout: float = c.FLAP_TIMEOUT
    move_speed: float = c.MOVE_SPEED
    fps: int = c.DESIRED_FPS

    screen_width: float = c.SCREEN_WIDTH
    screen_height: float = c.SCREEN_HEIGHT
    background_height: float = c.BACKGROUND_HEIGHT

    pipe_sprite_width: float = c.PIPE_SPRITE_WIDTH
    pipe_sprite_height: float = c.PIPE_SPRITE_HEIGHT
    player_bbox: Tuple[float, float] = c.PLAYER_BBOX
    pipe_bbox: Tuple[float, float] = c.PIPE_BBOX

    pipe_gap: float = c.PIPE_GAP
    pair_spacing: float = c.PAIR_SPACING
    pair_count: int = c.PAIR_COUNT
    first_pipe_x_offset: float = c.FIRST_PIPE_X_OFFSET
    min_range: float = c.MIN_RANGE

    countdown_seconds: float = c.COUNTDOWN_SECONDS
    points_per_level: int = c.POINTS_PER_LEVEL
    seed: Optional[int] = None

    def __post_init__(self):
        positive = {
            "fall_speed": self.fall_speed,
            "flap_speed": self.flap_speed,
            "move_speed": self.move_speed,
            "fps": self.fps,
            "screen_width": self.screen_width,
            "screen_height": self.screen_height,
            "background_height": self.background_height,
            "pipe_sprite_width": self.pipe_sprite_width,
            "pipe_sprite_height": self.pipe_sprite_height,
            "pair_spacing": self.pair_spacing,
            "pair_count": self.pair_count,
            "points_per_level": self.points_per_level,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value!r}")

        if self.flap_timeout < 0:
            raise ConfigError(f"flap_timeout must not be negative, got {self.flap_timeout!r}")
        if self.countdown_seconds < 0:
            raise ConfigError(
                f"countdown_seconds must not be negative, got {self.countdown_seconds!r}")
        if 2 * self.min_range >= self.background_height:
            raise ConfigError(
                f"min_range {self.min_range!r} leaves no room for an opening "
                f"in a background of height {self.background_height!r}")
        for name, bbox in (("player_bbox", self.player_bbox), ("pipe_bbox", self.pipe_bbox)):
            if not isinstance(bbox, (tuple, list)) or len(bbox) != 2:
                raise ConfigError(f"{name} must be a (half_width, half_height) pair, got {bbox!r}")
            if any(not isinstance(v, (int, float)) or v <= 0 for v in bbox):
                raise ConfigError(f"{name} half extents must be positive numbers, got {bbox!r}")

    @property
    def tick_time(self) -> float:
        """Length of one simulation tick in seconds."""
        return 1.0 / self.fps

    def replace(self, **changes) -> "GameConfig":
        return dc_replace(self, **changes)


DEFAULT_CONFIG = GameConfig()
