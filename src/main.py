"""Entry point kept minimal by delegating to Engine.

Command-line flags override the defaults from `config.py`; everything else
(window, loop, scene) lives in `core/engine.py`.
"""

import argparse
import logging

import config
from core.engine import Engine  # noqa: E402 (local import order)
from dodge.settings import GameSettings
from storage.best_score import JsonBestScoreStore


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Dodge the gray squares for as long as you can.")
    p.add_argument("--width", type=int, default=config.WIDTH, help="surface width in pixels")
    p.add_argument("--height", type=int, default=config.HEIGHT, help="surface height in pixels")
    p.add_argument("--fps", type=float, default=config.FPS, help="simulation ticks per second")
    p.add_argument("--obstacles", type=int, default=config.NUM_OBSTACLES, help="obstacles per batch")
    p.add_argument(
        "--max-obstacles",
        type=int,
        default=config.MAX_OBSTACLES,
        help="cap on obstacles after a refresh (default: no cap)",
    )
    p.add_argument("--seed", type=int, default=None, help="random seed for obstacle spawning")
    p.add_argument("--scores-file", default=config.BEST_SCORE_PATH, help="best score JSON file")
    p.add_argument("--log-level", default="INFO", help="logging level (DEBUG, INFO, ...)")
    return p


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    return GameSettings(
        width=args.width,
        height=args.height,
        fps=args.fps,
        num_obstacles=args.obstacles,
        max_obstacles=args.max_obstacles,
        seed=args.seed,
    ).validate()


def main(argv=None):  # small wrapper for clarity / debuggers
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Engine(settings_from_args(args), JsonBestScoreStore(args.scores_file)).run()


if __name__ == "__main__":
    main()
