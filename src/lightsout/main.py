"""Entry point for the linear lights out puzzle.

Parses the command line, configures logging and opens the Arcade window.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys

from lightsout.constants import DEFAULT_NUM_BUTTONS, MIN_NUM_BUTTONS

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Send lightsout log records to stdout as ``[time] [level] [name] message``."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("lightsout")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play linear lights out: make every light match.")
    parser.add_argument(
        "--buttons",
        type=int,
        default=DEFAULT_NUM_BUTTONS,
        help=f"Number of buttons in the row (default: {DEFAULT_NUM_BUTTONS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible puzzles",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject button counts below the minimum instead of raising them",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.strict and args.buttons < MIN_NUM_BUTTONS:
        parser.error(f"--buttons must be at least {MIN_NUM_BUTTONS} in strict mode")
    configure_logging(args.log_level)
    rng = random.Random(args.seed) if args.seed is not None else None
    # Local import keeps argument handling usable without a display.
    from arcade import run
    from lightsout.window import LightsOutWindow

    LightsOutWindow(args.buttons, strict=args.strict, rng=rng)
    run()

if __name__ == "__main__":
    main()
