"""
obstacles.py: Procedural layout of the pipe pairs and the off-screen sweep.
"""

import logging
import random
from typing import List, Optional

from pygame.math import Vector2

from .config import GameConfig, DEFAULT_CONFIG
from .constants import TOP_PIPE_FACING, BOTTOM_PIPE_FACING
from .data_models import Pipe, PipePair

logger = logging.getLogger(__name__)


def generate_obstacles(
    background_height: float,
    pipe_sprite_height: float,
    screen_width: float,
    config: Optional[GameConfig] = None,
    rng: Optional[random.Random] = None,
) -> List[PipePair]:
    """
    Lays out ``config.pair_count`` pipe pairs ahead of the player, spaced
    ``pair_spacing`` apart, each with a random opening kept ``min_range``
    away from the top and bottom of the background.
    """
    config = config or DEFAULT_CONFIG
    uniform = (rng or random).uniform
    half_pipe = pipe_sprite_height / 2
    base_x = screen_width / 2 + config.first_pipe_x_offset

    pairs = []
    for i in range(1, config.pair_count + 1):
        x = base_x + i * config.pair_spacing
        opening = uniform(config.min_range, background_height - config.min_range)

        bottom = Pipe.new(config)
        bottom.position = Vector2(x, opening + config.pipe_gap + half_pipe)
        bottom.facing = BOTTOM_PIPE_FACING

        top = Pipe.new(config)
        top.position = Vector2(x, opening - config.pipe_gap - half_pipe)
        top.facing = TOP_PIPE_FACING

        pairs.append(PipePair(bottom, top))

    logger.debug("Generated %d pipe pairs from x=%.1f", len(pairs), base_x + config.pair_spacing)
    return pairs


def prune_obstacles(pairs: List[PipePair], offset: float) -> List[PipePair]:
    """Drops pairs whose bottom pipe has scrolled to or past the left edge."""
    return [p for p in pairs if p.bottom.position.x + offset > 0]
