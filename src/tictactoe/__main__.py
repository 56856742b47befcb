"""Entry point for running the game via ``python -m tictactoe``."""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .cli import play
from .game import Player, TicTacToeError

FIRST_CHOICES = ("o", "x")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tic-tac-toe against a minimax opponent")
    p.add_argument(
        "--first",
        type=str.lower,
        choices=FIRST_CHOICES,
        default=os.environ.get("TICTACTOE_FIRST", "o").lower(),
        help="side you play; it moves first",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=_env_flag("TICTACTOE_STRICT"),
        help="abort on a malformed or illegal move instead of asking again",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.environ.get("TICTACTOE_LOG_LEVEL", "WARNING").upper(),
        help="logging level (default WARNING)",
    )
    args = p.parse_args(argv)

    # argparse does not check defaults against choices.
    if args.first not in FIRST_CHOICES:
        p.error(f"TICTACTOE_FIRST must be one of {', '.join(FIRST_CHOICES)}")
    if args.log_level not in LOG_LEVELS:
        p.error(f"TICTACTOE_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Play one game on stdin/stdout."""

    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        play(human=Player(args.first), strict=args.strict)
    except EOFError:
        return 0
    except TicTacToeError as exc:
        logging.getLogger(__name__).error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
