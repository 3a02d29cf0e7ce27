"""
data_models.py: Data structures for the player, the pipes and the
render-facing world snapshot.
"""

import enum
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple

from pygame.math import Vector2

from .config import GameConfig, DEFAULT_CONFIG
from .constants import (
    UP_ANGLE_MAX, DOWN_ANGLE_MAX, TOP_PIPE_FACING, BOTTOM_PIPE_FACING,
    SPRITE_CYCLE_FRAMES,
)
from .gamestate import GamePhase
from .vectors import Point2, unit_vector_from_angle


class FlapSprite(enum.Enum):
    """Which wing frame the host should draw for the player."""
    UP = "upflap"
    MID = "midflap"
    DOWN = "downflap"


_WING_CYCLE = (FlapSprite.UP, FlapSprite.MID, FlapSprite.DOWN)


@dataclass
class Player:
    """The player avatar. Position is in world space (origin-centred, Y up)."""
    position: Point2 = field(default_factory=Point2)
    velocity: Vector2 = field(default_factory=Vector2)
    facing: float = 0.0
    bbox_half_extents: Vector2 = field(default_factory=lambda: Vector2(DEFAULT_CONFIG.player_bbox))
    fall_speed: float = DEFAULT_CONFIG.fall_speed
    flap_speed: float = DEFAULT_CONFIG.flap_speed

    UP_ANGLE_MAX = UP_ANGLE_MAX
    DOWN_ANGLE_MAX = DOWN_ANGLE_MAX

    @classmethod
    def new(cls, config: Optional[GameConfig] = None) -> "Player":
        config = config or DEFAULT_CONFIG
        return cls(
            bbox_half_extents=Vector2(config.player_bbox),
            fall_speed=config.fall_speed,
            flap_speed=config.flap_speed,
        )

    def flap(self, dt: float):
        """Replaces the velocity with a fixed upward impulse. Never additive."""
        self.velocity = unit_vector_from_angle(0.0) * self.flap_speed * dt
        self.facing = self.UP_ANGLE_MAX

    def update_pos(self, dt: float):
        """Applies one tick of gravity. Velocity is a per-tick displacement."""
        self.velocity -= unit_vector_from_angle(0.0) * self.fall_speed * dt
        self.position += self.velocity

        self.facing -= self.velocity.y * dt
        if self.facing >= self.DOWN_ANGLE_MAX:
            self.facing = self.DOWN_ANGLE_MAX
        elif self.facing <= self.UP_ANGLE_MAX:
            self.facing = self.UP_ANGLE_MAX

    def sprite(self, frames: int) -> FlapSprite:
        """Falling shows the down-flap frame; otherwise the wings cycle."""
        if self.velocity.y < 0:
            return FlapSprite.DOWN
        phase = frames % SPRITE_CYCLE_FRAMES
        return _WING_CYCLE[phase * len(_WING_CYCLE) // SPRITE_CYCLE_FRAMES]


@dataclass
class Pipe:
    """
    One half of an obstacle pair. Position is in obstacle space: screen
    coordinates before the world scroll offset is applied.
    """
    position: Point2 = field(default_factory=Point2)
    facing: float = BOTTOM_PIPE_FACING
    bbox_half_extents: Vector2 = field(default_factory=lambda: Vector2(DEFAULT_CONFIG.pipe_bbox))

    @classmethod
    def new(cls, config: Optional[GameConfig] = None) -> "Pipe":
        config = config or DEFAULT_CONFIG
        return cls(bbox_half_extents=Vector2(config.pipe_bbox))

    @property
    def is_top(self) -> bool:
        return self.facing != BOTTOM_PIPE_FACING

    def view(self) -> "PipeView":
        return (self.position.x, self.position.y, self.facing)


class PipePair(NamedTuple):
    bottom: Pipe
    top: Pipe

    @property
    def x(self) -> float:
        return self.bottom.position.x


# (x, y, facing) of a single pipe, as handed to the host.
PipeView = Tuple[float, float, float]


@dataclass(frozen=True)
class WorldSnapshot:
    """Settled, post-tick world state for the renderer and the HUD."""
    player_position: Tuple[float, float]
    player_velocity: Tuple[float, float]
    player_facing: float
    player_sprite: FlapSprite
    pipes: Tuple[Tuple[PipeView, PipeView], ...]
    phase: GamePhase
    score: int
    level: int
    offset: float
    frames: int
    countdown_remaining: float

    def to_dict(self):
        """Prepares a plain dictionary, e.g. for a debug overlay or JSON."""
        return {
            "player": {
                "x": round(self.player_position[0], 2),
                "y": round(self.player_position[1], 2),
                "vy": round(self.player_velocity[1], 4),
                "facing": round(self.player_facing, 4),
                "sprite": self.player_sprite.value,
            },
            "pipes": [list(pair) for pair in self.pipes],
            "phase": self.phase.value,
            "score": self.score,
            "level": self.level,
            "offset": self.offset,
            "frames": self.frames,
            "countdown": round(self.countdown_remaining, 2),
        }
