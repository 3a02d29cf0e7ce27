"""
vectors.py: Angle and coordinate helpers shared by the core and the host.
"""

import math

from pygame.math import Vector2

# Positions use the same type as directions.
Point2 = Vector2


def unit_vector_from_angle(angle: float) -> Vector2:
    """Angle 0 points straight up the Y axis."""
    return Vector2(math.sin(angle), math.cos(angle))


def world_to_screen(point: Vector2, screen_width: float, screen_height: float) -> Point2:
    """
    Translates the world coordinate system (Y up, origin at the centre)
    to the screen coordinate system (Y down, origin at the top-left).
    """
    x = point.x + screen_width / 2
    y = screen_height - (point.y + screen_height / 2)
    return Point2(x, y)


def first_tile_x(offset: float, tile_width: float) -> float:
    """Left edge, in scrolled space, of the first background tile to draw."""
    return -1.0 * (offset - math.fmod(offset, tile_width))
