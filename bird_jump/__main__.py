import argparse
import logging
import random
import sys

import pygame

from . import config
from .app import App
from .log import setup_logging

logger = logging.getLogger("bird_jump")


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="bird-jump", description="Flappy-style bird jump game.")
    parser.add_argument("--width", type=int, default=config.WIDTH, help="Initial window width.")
    parser.add_argument("--height", type=int, default=config.HEIGHT, help="Initial window height.")
    parser.add_argument("--fps", type=int, default=config.FPS, help="Frames per second.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a repeatable obstacle layout.")
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error"],
        help="Logging verbosity.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)
    setup_logging(args.log_level)

    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        app = App(args.width, args.height, fps=args.fps, rng=rng)
    except pygame.error as exc:
        logger.error("could not open the game window: %s", exc)
        pygame.quit()
        return 1

    try:
        app.run()
    except KeyboardInterrupt:
        logger.info("interrupted")
        app.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
