#!/usr/bin/env python3
"""
Command-line entry point: opens the game window.
"""

import argparse
import logging
import random

from .config import GameConfig
from .constants import FPS
from .simulation import Simulation


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dino-runner", description="Endless runner. Space to jump.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle spacing.")
    parser.add_argument("--fps", type=int, default=FPS, help="Display frames per second.")
    parser.add_argument(
        "--fixed-timestep", action="store_true",
        help="Tick on wall-clock time instead of once per rendered frame.")
    parser.add_argument(
        "--log-level", default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging verbosity.")
    args = parser.parse_args(argv)

    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def main(argv=None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Imported late so --help works without a display
    from .runner_client import RunnerClient

    simulation = Simulation(GameConfig(fps=args.fps), rng=random.Random(args.seed))
    try:
        RunnerClient(simulation, fixed_timestep=args.fixed_timestep).run()
    except KeyboardInterrupt:
        print("Interrupted.")


if __name__ == "__main__":
    main()
