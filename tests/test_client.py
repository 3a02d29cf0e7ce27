import pygame
import pytest

from flappy.client import map_event, print_instructions
from flappy.gamestate import InputEvent


@pytest.mark.parametrize("key, expected", [
    (pygame.K_a, InputEvent.FLAP_DOWN),
    (pygame.K_SPACE, InputEvent.FLAP_DOWN),
    (pygame.K_RETURN, InputEvent.PAUSE_TOGGLE),
    (pygame.K_p, None),
    (pygame.K_r, InputEvent.RESTART),
    (pygame.K_ESCAPE, InputEvent.QUIT),
    (pygame.K_z, None),
])
def test_key_down_mapping(key, expected):
    assert map_event(pygame.event.Event(pygame.KEYDOWN, key=key)) is expected


def test_key_up_releases_flap_only():
    assert map_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a)) is InputEvent.FLAP_UP
    assert map_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_r)) is None


def test_left_mouse_button_is_the_primary_input():
    down = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0))
    up = pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0))
    right = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0))
    assert map_event(down) is InputEvent.PRIMARY_DOWN
    assert map_event(up) is InputEvent.PRIMARY_UP
    assert map_event(right) is None


def test_window_close_quits():
    assert map_event(pygame.event.Event(pygame.QUIT)) is InputEvent.QUIT


def test_instructions_banner(capsys):
    print_instructions()
    out = capsys.readouterr().out
    assert "Welcome to Flappy Bird!" in out
    assert "<r> to restart" in out
