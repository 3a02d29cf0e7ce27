"""
physics_engine.py: The authoritative game engine. Owns the world state,
runs the fixed-timestep tick loop and the phase state machine.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .config import GameConfig, DEFAULT_CONFIG
from .data_models import Player, PipePair, WorldSnapshot
from .gamestate import GamePhase, InputEvent, InputState
from .obstacles import generate_obstacles, prune_obstacles
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class GameEngine:
    """
    Single-threaded simulation. Input events and ``advance`` are the only
    ways in; ``snapshot`` is the only way out.
    """
    config: GameConfig = DEFAULT_CONFIG
    rng: Optional[random.Random] = None

    player: Player = field(init=False)
    pipes: List[PipePair] = field(init=False)
    phase: GamePhase = field(init=False, default=GamePhase.PAUSED)
    score: int = field(init=False, default=0)
    level: int = field(init=False, default=0)
    offset: float = field(init=False, default=0.0)
    frames: int = field(init=False, default=0)
    flap_timeout: float = field(init=False, default=0.0)
    countdown_timer: float = field(init=False, default=0.0)
    accumulator: float = field(init=False, default=0.0)
    passed_pruned: int = field(init=False, default=0)
    input: InputState = field(init=False, default_factory=InputState)
    quit_requested: bool = field(init=False, default=False)

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        self.core = PhysicsCore(self.config)
        self._reset_world()

    # ------------------------------------------------------------------ #
    # World lifecycle
    # ------------------------------------------------------------------ #
    def _reset_world(self):
        self.player = Player.new(self.config)
        self.pipes = generate_obstacles(
            self.config.background_height,
            self.config.pipe_sprite_height,
            self.config.screen_width,
            config=self.config,
            rng=self.rng,
        )
        self.phase = GamePhase.PAUSED
        self.score = 0
        self.level = 0
        self.offset = 0.0
        self.frames = 0
        self.flap_timeout = 0.0
        self.countdown_timer = 0.0
        self.accumulator = 0.0
        self.passed_pruned = 0
        self.input = InputState()

    def restart(self):
        """Full reset back to PAUSED. Only honoured after a game over."""
        if not self.phase.is_gameover():
            return
        final_score = self.score
        self._reset_world()
        logger.info("Restarted after game over (final score %d)", final_score)

    def _set_phase(self, phase: GamePhase):
        if phase is self.phase:
            return
        logger.info("Phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    # ------------------------------------------------------------------ #
    # Input
    # ------------------------------------------------------------------ #
    def handle_input(self, event: InputEvent):
        """Applies one discrete input event from the host."""
        if event in (InputEvent.FLAP_DOWN, InputEvent.PRIMARY_DOWN):
            if self.phase.is_paused():
                self._start()
            self.input.flap = True
        elif event in (InputEvent.FLAP_UP, InputEvent.PRIMARY_UP):
            self.input.flap = False
        elif event is InputEvent.PAUSE_TOGGLE:
            if self.phase.is_paused():
                self._start()
            else:
                self._set_phase(self.phase.toggled_pause())
        elif event is InputEvent.RESTART:
            self.restart()
        elif event is InputEvent.QUIT:
            self.quit_requested = True

    def _start(self):
        """Leaves PAUSED, through the countdown when one is configured."""
        if self.config.countdown_seconds > 0:
            self.countdown_timer = self.config.countdown_seconds
            self._set_phase(GamePhase.COUNTDOWN)
        else:
            self.countdown_timer = 0.0
            self._set_phase(GamePhase.PLAYING)

    # ------------------------------------------------------------------ #
    # Simulation
    # ------------------------------------------------------------------ #
    def step(self):
        """Runs exactly one fixed simulation tick."""
        dt = self.config.tick_time

        if self.phase.is_countdown():
            self.countdown_timer -= dt
            if self.countdown_timer <= 0:
                self.countdown_timer = 0.0
                self._set_phase(GamePhase.PLAYING)
            return

        if not self.phase.is_playing():
            return

        # 1. Rate-limited flap while the input is held
        self.flap_timeout -= dt
        if self.input.flap and self.flap_timeout < 0:
            self.flap_timeout = self.config.flap_timeout
            self.player.flap(dt)

        # 2. Scroll the world and move the player
        self.offset -= self.config.move_speed
        self.frames += 1
        self.player.update_pos(dt)

        # 3. Collision and score
        self._set_phase(self.core.check_collisions(self.player, self.pipes, self.offset, self.phase))
        # Pruned pairs are all behind the player.
        self.score = self.passed_pruned + self.core.count_points(self.player, self.pipes, self.offset)
        self.level = self.score // self.config.points_per_level

    def advance(self, elapsed: float) -> int:
        """
        Feeds wall-clock time into the fixed-timestep accumulator and drains
        as many whole ticks as it covers. Returns the number of ticks run.
        """
        tick_time = self.config.tick_time
        self.accumulator += elapsed

        ticks = 0
        while self.accumulator >= tick_time:
            self.accumulator -= tick_time
            self.step()
            ticks += 1

        kept = prune_obstacles(self.pipes, self.offset)
        self.passed_pruned += len(self.pipes) - len(kept)
        self.pipes = kept
        return ticks

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #
    def snapshot(self) -> WorldSnapshot:
        player = self.player
        return WorldSnapshot(
            player_position=(player.position.x, player.position.y),
            player_velocity=(player.velocity.x, player.velocity.y),
            player_facing=player.facing,
            player_sprite=player.sprite(self.frames),
            pipes=tuple((pair.bottom.view(), pair.top.view()) for pair in self.pipes),
            phase=self.phase,
            score=self.score,
            level=self.level,
            offset=self.offset,
            frames=self.frames,
            countdown_remaining=self.countdown_timer,
        )
