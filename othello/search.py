"""Minimax search with alpha-beta pruning for Othello."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .game import Board, Cell, GameState, Move, move_index

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters collected while searching."""

    nodes: int = 0
    cutoffs: int = 0


@dataclass
class GameRecord:
    """Result of a simulated game.

    ``moves[0]`` is the player who moved first; every later entry is a move
    encoded as ``row * 8 + col``.
    """

    moves: List[int] = field(default_factory=list)
    winner: Optional[Cell] = None
    final: Optional[GameState] = None


def minimax(
    board: Board,
    row: int,
    col: int,
    depth: int,
    alpha: float,
    beta: float,
    current: Cell,
    maximizing: bool,
    perspective: Cell,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> int:
    """Value of ``current`` playing ``(row, col)`` on ``board``.

    The move is applied first; ``depth`` counts the plies still to search
    after it and ``maximizing`` says whether the position reached is one
    where ``perspective`` picks the reply. Leaves are scored by disc
    differential from ``perspective``, which stays fixed for the whole tree.
    A position whose player to move has no legal move is a leaf.
    """
    successor = board.apply_move(row, col, current)
    if stats is not None:
        stats.nodes += 1
    if depth == 0:
        return successor.score(perspective)
    to_move = current.opponent()
    moves = successor.legal_moves(to_move)
    if not moves:
        return successor.score(perspective)

    if maximizing:
        best = -math.inf
        for r, c in moves:
            value = minimax(
                successor, r, c, depth - 1, alpha, beta, to_move, False, perspective, prune, stats
            )
            best = max(best, value)
            alpha = max(alpha, value)
            if prune and beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
    else:
        best = math.inf
        for r, c in moves:
            value = minimax(
                successor, r, c, depth - 1, alpha, beta, to_move, True, perspective, prune, stats
            )
            best = min(best, value)
            beta = min(beta, value)
            if prune and beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
    return int(best)


def root_scores(
    state: GameState,
    depth: int,
    prune: bool = True,
    stats: Optional[SearchStats] = None,
) -> List[Tuple[Move, int]]:
    """Score every legal move of the side to move, in row-major order.

    Each root move gets its own full window, so the scores are exact
    whether or not pruning is enabled.
    """
    if depth < 1:
        raise ValueError(f"search depth must be at least 1, got {depth}")
    mover = state.turn
    return [
        (
            (row, col),
            minimax(
                state.board, row, col, depth - 1, -math.inf, math.inf,
                mover, False, mover, prune, stats,
            ),
        )
        for row, col in state.legal_moves()
    ]


def select_best(scored: List[Tuple[Move, int]]) -> Tuple[Optional[Move], Optional[int]]:
    """Pick the first move with the highest score from ``root_scores`` output."""
    best: Optional[Move] = None
    best_score: Optional[int] = None
    for move, score in scored:
        if best_score is None or score > best_score:
            best_score = score
            best = move
    return best, best_score


def best_move(state: GameState, depth: int, prune: bool = True) -> Optional[Move]:
    """Return the highest scoring move for the side to move.

    ``None`` is returned when no move is available. Ties go to the first
    move in row-major order.
    """
    stats = SearchStats()
    best, best_score = select_best(root_scores(state, depth, prune, stats))
    logger.debug(
        "%s best move %s (score %s) at depth %d: %d nodes, %d cutoffs",
        state.turn.name, best, best_score, depth, stats.nodes, stats.cutoffs,
    )
    return best


def simulate_full_game(state: GameState, depth: int, prune: bool = True) -> GameRecord:
    """Play best moves for both sides until the side to move is stuck."""
    record = GameRecord(moves=[int(state.turn)])
    while not state.is_game_over():
        move = best_move(state, depth, prune)
        if move is None:
            raise RuntimeError(f"no move found for {state.turn.name} in an unfinished game")
        row, col = move
        state = state.play(row, col)
        record.moves.append(move_index(row, col))
    record.winner = state.winner()
    record.final = state
    logger.info(
        "game finished after %d moves: black %d, white %d, winner %s",
        len(record.moves) - 1,
        state.board.count(Cell.BLACK),
        state.board.count(Cell.WHITE),
        record.winner.name if record.winner is not None else "tie",
    )
    return record
