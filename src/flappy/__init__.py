"""Flappy Bird simulation core with a thin pygame host."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .config import GameConfig, ConfigError, DEFAULT_CONFIG  # noqa: E402
from .gamestate import GamePhase, InputEvent  # noqa: E402
from .physics_engine import GameEngine  # noqa: E402

__all__ = ["GameConfig", "ConfigError", "DEFAULT_CONFIG", "GamePhase", "InputEvent", "GameEngine"]
