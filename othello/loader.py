"""Reading and writing Othello positions."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from .game import BOARD_SIZE, Board, Cell, GameState

logger = logging.getLogger(__name__)

CELL_COUNT = BOARD_SIZE * BOARD_SIZE
PLAYER_VALUES = (int(Cell.BLACK), int(Cell.WHITE))
CELL_VALUES = tuple(int(cell) for cell in Cell)


class BoardFormatError(ValueError):
    """Raised when external position data cannot be turned into a game state."""


def state_from_values(values: Sequence[int]) -> GameState:
    """Build a state from the turn followed by 64 cells in row-major order."""
    if len(values) != CELL_COUNT + 1:
        raise BoardFormatError(
            f"expected {CELL_COUNT + 1} values (turn and {CELL_COUNT} cells), got {len(values)}"
        )
    turn, cells = values[0], values[1:]
    rows = [cells[i:i + BOARD_SIZE] for i in range(0, CELL_COUNT, BOARD_SIZE)]
    return state_from_grid(turn, rows)


def state_from_grid(turn: Any, board: Any) -> GameState:
    """Build a state from a turn value and an 8x8 nested list of cells."""
    if isinstance(turn, bool) or turn not in PLAYER_VALUES:
        raise BoardFormatError(f"turn must be 0 (black) or 1 (white), got {turn!r}")
    if not isinstance(board, (list, tuple)) or len(board) != BOARD_SIZE:
        raise BoardFormatError(f"board must have {BOARD_SIZE} rows")
    for r, row in enumerate(board):
        if not isinstance(row, (list, tuple)) or len(row) != BOARD_SIZE:
            raise BoardFormatError(f"row {r} must have {BOARD_SIZE} cells")
        for c, value in enumerate(row):
            if isinstance(value, bool) or value not in CELL_VALUES:
                raise BoardFormatError(
                    f"cell ({r}, {c}) must be -1, 0 or 1, got {value!r}"
                )
    return GameState(Board(board), Cell(turn))


def parse_state(text: str) -> GameState:
    """Parse the whitespace separated 65 integer format."""
    tokens = text.split()
    try:
        values = [int(token) for token in tokens]
    except ValueError as exc:
        raise BoardFormatError(f"non-integer value in position: {exc}") from exc
    return state_from_values(values)


def format_state(state: GameState) -> str:
    """Inverse of :func:`parse_state`: the turn, then one line per row."""
    lines = [str(int(state.turn))]
    for row in state.board.rows:
        lines.append(" ".join(str(int(cell)) for cell in row))
    return "\n".join(lines) + "\n"


def load_state(path: Path) -> GameState:
    """Load a position from ``path``.

    ``.json`` files hold ``{"turn": ..., "board": [[...], ...]}`` or a
    ``{"history": [...]}`` list of such states, in which case the last state
    in the history is used. Any other file is read as the 65 integer text
    format.
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() != ".json":
        state = parse_state(text)
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise BoardFormatError(f"{path}: invalid JSON: {exc}") from exc
        if isinstance(data, dict) and "history" in data:
            history = data["history"]
            if not isinstance(history, list) or not history:
                raise BoardFormatError(f"{path}: history must be a non-empty list")
            data = history[-1]
        if not isinstance(data, dict):
            raise BoardFormatError(f"{path}: expected a JSON object")
        state = state_from_grid(data.get("turn"), data.get("board"))
    logger.debug("loaded %s to move from %s", state.turn.name, path)
    return state
