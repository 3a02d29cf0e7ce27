"""
physics_core.py: Collision detection and scoring against the pipe sequence.
"""

from typing import List, NamedTuple, Optional

from .config import GameConfig, DEFAULT_CONFIG
from .data_models import Player, Pipe, PipePair
from .gamestate import GamePhase
from .vectors import Point2, world_to_screen


class PlayerBounds(NamedTuple):
    """Player edges in obstacle space (screen axes, Y down)."""
    right: float
    top: float
    bottom: float


def player_bounds(position: Point2, half_extents) -> PlayerBounds:
    return PlayerBounds(
        right=position.x + half_extents[0],
        top=position.y - half_extents[1],
        bottom=position.y + half_extents[1],
    )


def is_hit(bounds: PlayerBounds, pipe: Pipe) -> GamePhase:
    """
    Edge-crossing test: fires while the player's leading edge is inside the
    pipe's horizontal span and the player reaches into the pipe vertically.
    The player's x never changes, so only the leading edge can enter a pipe.
    """
    half_w, half_h = pipe.bbox_half_extents
    pipe_right = pipe.position.x + half_w
    pipe_left = pipe.position.x - half_w
    pipe_top = pipe.position.y - half_h
    pipe_bottom = pipe.position.y + half_h

    crosses_left = pipe_left <= bounds.right <= pipe_right
    if pipe.is_top:
        reaches = bounds.top <= pipe_bottom
    else:
        reaches = bounds.bottom >= pipe_top

    if crosses_left and (reaches or bounds.bottom <= 0):
        return GamePhase.GAME_OVER
    return GamePhase.PLAYING


class PhysicsCore:
    """
    Shared collision and scoring rules. Works in obstacle space: the player's
    world position is translated to screen space, then shifted by the world
    scroll offset so it can be compared to unscrolled pipe positions.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or DEFAULT_CONFIG

    def player_obstacle_position(self, player: Player, offset: float) -> Point2:
        pos = world_to_screen(player.position, self.config.screen_width, self.config.screen_height)
        pos.x -= offset
        return pos

    def check_collisions(
        self, player: Player, pairs: List[PipePair], offset: float, phase: GamePhase
    ) -> GamePhase:
        """Checks for collisions with the floor and with pipes in view."""
        pos = self.player_obstacle_position(player, offset)
        bounds = player_bounds(pos, player.bbox_half_extents)

        # 1. Floor
        if bounds.bottom >= self.config.background_height:
            return GamePhase.GAME_OVER

        # 2. Pipes within half a screen either side of the player
        half_width = self.config.screen_width / 2
        start = pos.x - half_width
        end = pos.x + half_width
        for pair in pairs:
            if phase.is_gameover():
                break
            if start <= pair.bottom.position.x <= end:
                phase = phase | (is_hit(bounds, pair.top) | is_hit(bounds, pair.bottom))
        return phase

    def count_points(self, player: Player, pairs: List[PipePair], offset: float) -> int:
        """Number of pairs the player has already passed."""
        player_x = self.player_obstacle_position(player, offset).x
        return sum(1 for pair in pairs if pair.bottom.position.x < player_x)
