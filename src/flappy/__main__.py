import argparse
import logging
import sys

import pygame

from .client import FlappyClient
from .config import ConfigError, DEFAULT_CONFIG
from .log import setup_logging

logger = logging.getLogger("flappy")


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy", description="Play Flappy Bird.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the pipe layout (default: random).")
    parser.add_argument("--countdown", type=float, default=DEFAULT_CONFIG.countdown_seconds,
                        help="Seconds of countdown before play starts (default: none).")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = DEFAULT_CONFIG.replace(seed=args.seed, countdown_seconds=args.countdown)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        client = FlappyClient(config)
    except pygame.error as e:
        logger.error("Could not open the game window: %s", e)
        return 1

    client.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
