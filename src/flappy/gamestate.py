"""
gamestate.py: Game phases and the input events that drive them.
"""

import enum
from dataclasses import dataclass


class GamePhase(enum.Enum):
    PAUSED = "paused"
    COUNTDOWN = "countdown"
    PLAYING = "playing"
    GAME_OVER = "game_over"

    def is_playing(self) -> bool:
        return self is GamePhase.PLAYING

    def is_paused(self) -> bool:
        return self is GamePhase.PAUSED

    def is_countdown(self) -> bool:
        return self is GamePhase.COUNTDOWN

    def is_gameover(self) -> bool:
        return self is GamePhase.GAME_OVER

    def toggled_pause(self) -> "GamePhase":
        """Manual pause toggle. GAME_OVER is left alone."""
        if self.is_gameover():
            return self
        if self.is_paused():
            return GamePhase.PLAYING
        return GamePhase.PAUSED

    def __or__(self, other: "GamePhase") -> "GamePhase":
        # GAME_OVER absorbs; otherwise the newer result wins.
        if not isinstance(other, GamePhase):
            return NotImplemented
        if self.is_gameover() or other.is_gameover():
            return GamePhase.GAME_OVER
        return other


class InputEvent(enum.Enum):
    FLAP_DOWN = "flap_down"
    FLAP_UP = "flap_up"
    PRIMARY_DOWN = "primary_down"
    PRIMARY_UP = "primary_up"
    PAUSE_TOGGLE = "pause_toggle"
    RESTART = "restart"
    QUIT = "quit"


@dataclass
class InputState:
    """Held-input flags, written by event callbacks and read once per tick."""
    flap: bool = False
