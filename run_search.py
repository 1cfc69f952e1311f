#!/usr/bin/env python3
"""Run the minimax search on a saved position file."""
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from othello.config import Settings
from othello.game import index_to_move
from othello.loader import BoardFormatError, load_state
from othello.search import best_move, simulate_full_game


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Search the best Othello move for a saved position")
    parser.add_argument("file", type=Path, help="Position file (65 integer text format or JSON)")
    parser.add_argument(
        "--depth", type=int, default=None, help="Plies to search (default: OTHELLO_DEPTH or 4)"
    )
    parser.add_argument(
        "--full-game", action="store_true", help="Play best moves for both sides to the end"
    )
    parser.add_argument(
        "--no-prune", action="store_true", help="Disable alpha-beta pruning"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log the search as it runs"
    )
    args = parser.parse_args(argv)
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    depth = args.depth if args.depth is not None else settings.depth

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="[%(asctime)s] %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )
    if depth < 1:
        parser.error("--depth must be at least 1")
    try:
        state = load_state(args.file)
    except (OSError, BoardFormatError) as exc:
        parser.error(str(exc))
    prune = settings.prune and not args.no_prune

    if args.full_game:
        record = simulate_full_game(state, depth, prune)
        print(" ".join(str(entry) for entry in record.moves))
        for index in record.moves[1:]:
            row, col = index_to_move(index)
            print(f"{index}: {row} {col}")
        winner = record.winner.name.lower() if record.winner is not None else "tie"
        print(f"Winner: {winner}")
        return

    move = best_move(state, depth, prune)
    if move:
        print(f"Next move: {move[0]} {move[1]}")
    else:
        print("No valid moves available.")


if __name__ == "__main__":
    main()
