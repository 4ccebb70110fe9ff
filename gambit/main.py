import argparse
import logging
from typing import Optional, Sequence

from gambit.config import Config
from gambit.difficulty import Difficulty


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = Config.from_env()
    parser = argparse.ArgumentParser(
        description="Play chess against a computer opponent of selectable strength"
    )
    parser.add_argument(
        "--mode",
        choices=["uci", "api"],
        default="uci",
        help="Speak UCI on stdin/stdout or serve the HTTP API",
    )
    parser.add_argument(
        "--difficulty",
        choices=[difficulty.name for difficulty in Difficulty],
        default=defaults.difficulty,
    )
    parser.add_argument(
        "--algorithm", choices=["alpha_beta", "random"], default=defaults.algorithm
    )
    parser.add_argument("--seed", type=int, default=defaults.seed)
    parser.add_argument(
        "--time-limit",
        type=float,
        default=defaults.time_limit,
        help="Seconds per move, searches run to completion when unset",
    )
    parser.add_argument("--log-level", default=defaults.log_level)
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    return Config(
        algorithm=args.algorithm,
        difficulty=args.difficulty,
        seed=args.seed,
        time_limit=args.time_limit,
        log_level=args.log_level.upper(),
    )


def main(argv: Optional[Sequence[str]] = None):
    args = parse_args(argv)
    config = build_config(args)

    # logs go to stderr, stdout belongs to the UCI protocol
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.mode == "uci":
        from gambit.mode import uci

        uci.main(config)
    else:
        from gambit.play.server import app

        app.main(host=args.host, port=args.port, config=config)


if __name__ == "__main__":
    main()
