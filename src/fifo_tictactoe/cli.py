"""
Command-line interface for hot-seat three-piece tic-tac-toe.
"""

import argparse
import logging
from typing import List, Optional

from fifo_tictactoe.api import start_game
from fifo_tictactoe.core.rules import MAX_PIECES_LIMIT
from fifo_tictactoe.utils.config import (
    DEFAULT_MAX_PIECES,
    DEFAULT_STARTING_PLAYER,
    PLAYER_NAMES,
    Config,
)
from fifo_tictactoe.utils.factory import create_engine


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe where each player keeps only their newest pieces"
    )
    parser.add_argument(
        "--first", "-f",
        type=str.upper,
        choices=list(PLAYER_NAMES.keys()),
        default=DEFAULT_STARTING_PLAYER.symbol,
        help=f"Player who moves first (default: {DEFAULT_STARTING_PLAYER.symbol})",
    )
    parser.add_argument(
        "--max-pieces", "-m",
        type=int,
        default=DEFAULT_MAX_PIECES,
        help=f"Pieces each player may keep on the board, 1-{MAX_PIECES_LIMIT} (default: {DEFAULT_MAX_PIECES})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every move, eviction and rejection",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        config = Config(starting_player=args.first, max_pieces=args.max_pieces)
    except ValueError as e:
        raise SystemExit(f"error: {e}") from e

    start_game(create_engine(config))


if __name__ == "__main__":
    main()
