import math
import random

import pytest
from pygame.math import Vector2

from flappy.config import DEFAULT_CONFIG
from flappy.data_models import FlapSprite, Pipe, PipePair, Player
from flappy.vectors import unit_vector_from_angle

DT = 1 / 60


def test_new_player_starts_at_rest_at_the_origin():
    player = Player.new()
    assert player.position == Vector2(0, 0)
    assert player.velocity == Vector2(0, 0)
    assert player.facing == 0.0
    assert tuple(player.bbox_half_extents) == DEFAULT_CONFIG.player_bbox


def test_new_player_takes_speeds_from_config():
    config = DEFAULT_CONFIG.replace(fall_speed=30, flap_speed=100, player_bbox=(5, 6))
    player = Player.new(config)
    assert player.fall_speed == 30
    assert player.flap_speed == 100
    assert tuple(player.bbox_half_extents) == (5, 6)


def test_single_update_from_rest():
    player = Player.new()
    player.update_pos(DT)
    assert player.velocity.y == pytest.approx(-0.3)
    assert player.position.y == pytest.approx(-0.3)
    assert player.position.x == 0


def test_gravity_keeps_lowering_velocity_without_a_floor():
    player = Player.new()
    previous = player.velocity.y
    for _ in range(2000):
        player.update_pos(DT)
        assert player.velocity.y < previous
        previous = player.velocity.y
    # Nothing clamps the fall speed.
    assert player.velocity.y == pytest.approx(-0.3 * 2000)


@pytest.mark.parametrize("prior", [Vector2(0, -50), Vector2(3, 7), Vector2(0, 0)])
def test_flap_replaces_velocity(prior):
    player = Player.new()
    player.velocity = Vector2(prior)
    player.flap(DT)
    assert player.velocity == unit_vector_from_angle(0) * DEFAULT_CONFIG.flap_speed * DT
    assert player.facing == Player.UP_ANGLE_MAX


def test_facing_stays_clamped():
    rng = random.Random(1234)
    player = Player.new()
    for _ in range(5000):
        if rng.random() < 0.05:
            player.flap(DT)
        player.update_pos(DT)
        assert Player.UP_ANGLE_MAX <= player.facing <= Player.DOWN_ANGLE_MAX


def test_long_fall_tilts_fully_down():
    player = Player.new()
    for _ in range(600):
        player.update_pos(DT)
    assert player.facing == Player.DOWN_ANGLE_MAX


def test_sprite_is_downflap_while_falling():
    player = Player.new()
    player.update_pos(DT)
    assert all(player.sprite(frame) is FlapSprite.DOWN for frame in range(30))


def test_sprite_cycles_wings_while_rising():
    player = Player.new()
    player.flap(DT)
    assert player.sprite(0) is FlapSprite.UP
    assert player.sprite(5) is FlapSprite.MID
    assert player.sprite(10) is FlapSprite.DOWN
    assert player.sprite(15) is FlapSprite.UP


def test_pipe_top_is_told_apart_by_facing():
    pipe = Pipe.new()
    assert not pipe.is_top
    pipe.facing = math.pi
    assert pipe.is_top
    assert tuple(pipe.bbox_half_extents) == DEFAULT_CONFIG.pipe_bbox


def test_pipe_pair_x_is_the_bottom_pipe_x():
    bottom, top = Pipe.new(), Pipe.new()
    bottom.position = Vector2(42, 10)
    top.position = Vector2(42, -10)
    assert PipePair(bottom, top).x == 42
