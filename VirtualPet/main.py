#!/usr/bin/env python3
"""Console entry point for the virtual pet simulator.

Run:
  python3 main.py [--log-level INFO] [--no-color] [--mute] [--seed 42]
"""
import sys
import random
import logging
import argparse

from constants import LOG_LEVEL, NO_COLOR, MUTE
from console_ui import ConsoleUI
from input_utils import InputReader
from sounds import SoundManager
from game_manager import GameManager

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Adopt a Dog, Cat or Bird and keep it alive.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity (default: %(default)s, or VIRTUALPET_LOG_LEVEL).",
    )
    parser.add_argument("--no-color", action="store_true", default=NO_COLOR,
                        help="Disable colored output.")
    parser.add_argument("--mute", action="store_true", default=MUTE,
                        help="Do not initialise the audio mixer.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the illness random generator for a reproducible game.")
    args = parser.parse_args(argv)
    # argparse does not check a string default against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"VIRTUALPET_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, "
                     f"got {LOG_LEVEL!r}")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    ui = ConsoleUI(use_color=not args.no_color)
    reader = InputReader()
    sounds = SoundManager(enabled=not args.mute)
    rng = random.Random(args.seed) if args.seed is not None else None
    game = GameManager(ui, reader, rng=rng, sounds=sounds)

    try:
        phase = game.run()
        logger.info("Session ended in phase %s", phase.name)
    except (KeyboardInterrupt, EOFError):
        ui.display_message("\nThanks for playing! Goodbye!")
    finally:
        sounds.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
