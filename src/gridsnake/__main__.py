from __future__ import annotations

import argparse
import logging

from . import config
from .game import main as run_game
from .store import JsonFileStore, default_store_path


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog=config.APP_NAME, add_help=True)
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="INFO",
        help="Logging verbosity.",
    )
    parser.add_argument(
        "--store",
        default=None,
        help="Path of the JSON file holding the best score (default: per-user data dir).",
    )
    parser.add_argument("--fps-limit", type=int, default=config.FPS_LIMIT, help="Frame rate cap.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    store = JsonFileStore(args.store or default_store_path())
    run_game(store, fps_limit=args.fps_limit, seed=args.seed)


if __name__ == "__main__":
    main()
