"""
client.py

pygame host for the simulation core: maps window events to input events,
drives the fixed-timestep engine from the render clock and draws the world
snapshot with plain shapes.
"""

import logging
import math
from typing import Optional

import pygame

from .constants import RENDER_FPS, BACKGROUND_TILE_WIDTH, BASE_TILE_WIDTH
from .config import GameConfig, DEFAULT_CONFIG
from .data_models import FlapSprite, WorldSnapshot
from .gamestate import GamePhase, InputEvent
from .physics_engine import GameEngine
from .vectors import Point2, first_tile_x, world_to_screen

logger = logging.getLogger(__name__)

SKY = (78, 192, 202)
SKY_BAND = (92, 204, 214)
BASE = (222, 216, 149)
BASE_STRIPE = (115, 191, 46)
PIPE = (0, 150, 0)
PIPE_EDGE = (0, 100, 0)
WHITE = (255, 255, 255)
SPRITE_COLORS = {
    FlapSprite.UP: (255, 230, 80),
    FlapSprite.MID: (250, 200, 40),
    FlapSprite.DOWN: (235, 160, 30),
}

KEY_DOWN_EVENTS = {
    pygame.K_a: InputEvent.FLAP_DOWN,
    pygame.K_SPACE: InputEvent.FLAP_DOWN,
    pygame.K_RETURN: InputEvent.PAUSE_TOGGLE,
    pygame.K_r: InputEvent.RESTART,
    pygame.K_ESCAPE: InputEvent.QUIT,
}
KEY_UP_EVENTS = {
    pygame.K_a: InputEvent.FLAP_UP,
    pygame.K_SPACE: InputEvent.FLAP_UP,
}


def map_event(event) -> Optional[InputEvent]:
    """Translates a pygame event into an engine input event, if it is one."""
    if event.type == pygame.QUIT:
        return InputEvent.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_DOWN_EVENTS.get(event.key)
    if event.type == pygame.KEYUP:
        return KEY_UP_EVENTS.get(event.key)
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        return InputEvent.PRIMARY_DOWN
    if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        return InputEvent.PRIMARY_UP
    return None


def print_instructions():
    print(f"{'Welcome to Flappy Bird!':-^60}")
    print()
    print("How to play:")
    print(f"{'<a> / <space> / click to flap -- avoid the pipes!': <40}")
    print(f"{'<enter> to pause': <40}")
    print(f"{'<r> to restart': <40}")
    print(f"{'<esc> to quit': <40}")
    print()


class FlappyClient:
    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or DEFAULT_CONFIG
        self.engine = GameEngine(self.config)

        pygame.init()
        self.screen = pygame.display.set_mode(
            (int(self.config.screen_width), int(self.config.screen_height)))
        pygame.display.set_caption("Flappy Bird!")

        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 24)

    def run(self):
        """The main client execution loop."""
        print_instructions()
        try:
            while not self.engine.quit_requested:
                render_delta_time = self.clock.tick(RENDER_FPS) / 1000.0

                for event in pygame.event.get():
                    mapped = map_event(event)
                    if mapped is not None:
                        self.engine.handle_input(mapped)

                self.engine.advance(render_delta_time)
                self._draw_game(self.engine.snapshot())
        finally:
            pygame.quit()
            logger.info("Window closed")

    # ------------------------------------------------------------------ #
    # Drawing
    # ------------------------------------------------------------------ #
    def _draw_game(self, snap: WorldSnapshot):
        """Renders the snapshot using pygame shapes."""
        screen = self.screen
        screen.fill(SKY)
        self._draw_background(snap.offset)
        self._draw_pipes(snap)
        self._draw_base(snap.offset)
        self._draw_bird(snap)
        self._draw_hud(snap)
        pygame.display.flip()

    def _draw_background(self, offset: float):
        height = self.config.background_height
        first = first_tile_x(offset, BACKGROUND_TILE_WIDTH) + offset
        x = first
        band = 0
        while x < self.config.screen_width:
            if band % 2:
                pygame.draw.rect(self.screen, SKY_BAND,
                                 (x, height * 0.6, BACKGROUND_TILE_WIDTH, height * 0.4))
            x += BACKGROUND_TILE_WIDTH
            band += 1

    def _draw_base(self, offset: float):
        top = self.config.background_height
        height = self.config.screen_height - top
        pygame.draw.rect(self.screen, BASE, (0, top, self.config.screen_width, height))
        x = first_tile_x(offset, BASE_TILE_WIDTH) + offset
        while x < self.config.screen_width:
            pygame.draw.rect(self.screen, BASE_STRIPE, (x, top, BASE_TILE_WIDTH // 2, 12))
            x += BASE_TILE_WIDTH

    def _draw_pipes(self, snap: WorldSnapshot):
        w = self.config.pipe_sprite_width
        h = self.config.pipe_sprite_height
        for pair in snap.pipes:
            for x, y, _facing in pair:
                rect = pygame.Rect(0, 0, w, h)
                rect.center = (round(x + snap.offset), round(y))
                pygame.draw.rect(self.screen, PIPE, rect)
                pygame.draw.rect(self.screen, PIPE_EDGE, rect, 3)

    def _draw_bird(self, snap: WorldSnapshot):
        pos = world_to_screen(Point2(snap.player_position),
                              self.config.screen_width, self.config.screen_height)
        half_w, half_h = self.config.player_bbox
        body = pygame.Surface((int(half_w * 2) + 8, int(half_h * 2)), pygame.SRCALPHA)
        pygame.draw.ellipse(body, SPRITE_COLORS[snap.player_sprite], body.get_rect())
        pygame.draw.circle(body, WHITE, (body.get_width() - 8, 7), 4)
        # pygame rotates counter-clockwise in degrees; facing is clockwise radians.
        rotated = pygame.transform.rotate(body, -math.degrees(snap.player_facing))
        self.screen.blit(rotated, rotated.get_rect(center=(round(pos.x), round(pos.y))))

    def _draw_hud(self, snap: WorldSnapshot):
        self.screen.blit(self.font.render(f"Score: {snap.score}", True, WHITE), (10, 10))
        self.screen.blit(self.font.render(f"Level: {snap.level}", True, WHITE), (100, 10))

        messages = {
            GamePhase.PAUSED: "Press A / SPACE / click to flap",
            GamePhase.GAME_OVER: "Game over - press R to restart",
        }
        text = messages.get(snap.phase)
        if snap.phase.is_countdown():
            text = f"{snap.countdown_remaining:.0f}" if snap.countdown_remaining >= 0.5 else "Go!"
        if text:
            surf = self.large_font.render(text, True, WHITE)
            self.screen.blit(surf, surf.get_rect(
                center=(self.config.screen_width // 2, self.config.screen_height // 3)))
