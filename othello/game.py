"""Othello board and rules."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Tuple

BOARD_SIZE = 8

# Directions: 8 surrounding directions
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]

Move = Tuple[int, int]


class Cell(IntEnum):
    """Contents of a square. ``BLACK`` and ``WHITE`` also name the players."""

    EMPTY = -1
    BLACK = 0
    WHITE = 1

    def opponent(self) -> "Cell":
        if self is Cell.BLACK:
            return Cell.WHITE
        if self is Cell.WHITE:
            return Cell.BLACK
        raise ValueError("an empty cell has no opponent")


class IllegalMoveError(ValueError):
    """Raised when a move is applied that the rules do not allow."""


def move_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


def index_to_move(index: int) -> Move:
    return divmod(index, BOARD_SIZE)


def inside(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """Immutable 8x8 Othello board.

    Boards are values: two boards holding the same discs compare equal and
    every move produces a new board, so search branches never share state.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: Iterable[Iterable[int]]) -> None:
        cells = tuple(tuple(Cell(value) for value in row) for row in rows)
        if len(cells) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cells):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        self._rows: Tuple[Tuple[Cell, ...], ...] = cells

    @classmethod
    def _from_rows(cls, rows: Tuple[Tuple[Cell, ...], ...]) -> "Board":
        # Bypass ``__init__``; ``rows`` is already validated.
        board = cls.__new__(cls)
        board._rows = rows
        return board

    @classmethod
    def empty(cls) -> "Board":
        return cls([[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def initial(cls) -> "Board":
        """Return the standard four-disc starting position."""
        rows = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        mid = BOARD_SIZE // 2
        rows[mid - 1][mid - 1] = Cell.WHITE
        rows[mid][mid] = Cell.WHITE
        rows[mid - 1][mid] = Cell.BLACK
        rows[mid][mid - 1] = Cell.BLACK
        return cls(rows)

    def __getitem__(self, square: Move) -> Cell:
        row, col = square
        if not inside(row, col):
            raise IndexError(f"square ({row}, {col}) is off the board")
        return self._rows[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        return f"Board({self.to_list()!r})"

    @property
    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self._rows

    def to_list(self) -> List[List[int]]:
        return [[int(cell) for cell in row] for row in self._rows]

    def count(self, cell: Cell) -> int:
        return sum(value == cell for row in self._rows for value in row)

    def score(self, perspective: Cell) -> int:
        """Disc differential from ``perspective``'s side."""
        black = self.count(Cell.BLACK)
        white = self.count(Cell.WHITE)
        return black - white if perspective == Cell.BLACK else white - black

    def captures(self, row: int, col: int, mover: Cell) -> List[Move]:
        """Return the opponent discs ``mover`` would flip by playing here."""
        if not inside(row, col):
            raise IllegalMoveError(f"square ({row}, {col}) is off the board")
        if self._rows[row][col] != Cell.EMPTY:
            return []
        opponent = mover.opponent()
        captured: List[Move] = []
        for dr, dc in DIRECTIONS:
            r, c = row + dr, col + dc
            run = []
            while inside(r, c) and self._rows[r][c] == opponent:
                run.append((r, c))
                r += dr
                c += dc
            if run and inside(r, c) and self._rows[r][c] == mover:
                captured.extend(run)
        return captured

    def is_legal_move(self, row: int, col: int, mover: Cell) -> bool:
        return bool(self.captures(row, col, mover))

    def legal_moves(self, mover: Cell) -> List[Move]:
        """All legal moves for ``mover`` in row-major order."""
        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self._rows[row][col] == Cell.EMPTY and self.captures(row, col, mover)
        ]

    def has_legal_move(self, mover: Cell) -> bool:
        return any(
            self._rows[row][col] == Cell.EMPTY and self.captures(row, col, mover)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
        )

    def apply_move(self, row: int, col: int, mover: Cell) -> "Board":
        """Return the board after ``mover`` plays at ``(row, col)``."""
        captured = self.captures(row, col, mover)
        if not captured:
            raise IllegalMoveError(f"{mover.name} cannot play at ({row}, {col})")
        rows = [list(r) for r in self._rows]
        rows[row][col] = mover
        for r, c in captured:
            rows[r][c] = mover
        return Board._from_rows(tuple(tuple(r) for r in rows))

    def is_game_over(self, turn: Cell) -> bool:
        """The game ends as soon as the side to move has no legal move.

        There is no pass: the opponent having moves does not keep the game
        alive.
        """
        return not self.has_legal_move(turn)

    def winner(self) -> Optional[Cell]:
        """Player with more discs, or ``None`` on a tie."""
        black = self.count(Cell.BLACK)
        white = self.count(Cell.WHITE)
        if black > white:
            return Cell.BLACK
        if white > black:
            return Cell.WHITE
        return None


@dataclass(frozen=True)
class GameState:
    """A board together with the player to move."""

    board: Board
    turn: Cell = Cell.BLACK

    def __post_init__(self) -> None:
        turn = Cell(self.turn)
        if turn == Cell.EMPTY:
            raise ValueError("turn must be BLACK or WHITE")
        object.__setattr__(self, "turn", turn)

    @classmethod
    def initial(cls) -> "GameState":
        return cls(Board.initial(), Cell.BLACK)

    def score(self) -> int:
        """Disc differential from the mover's perspective."""
        return self.board.score(self.turn)

    def legal_moves(self) -> List[Move]:
        return self.board.legal_moves(self.turn)

    def is_game_over(self) -> bool:
        return self.board.is_game_over(self.turn)

    def play(self, row: int, col: int) -> "GameState":
        return GameState(self.board.apply_move(row, col, self.turn), self.turn.opponent())

    def winner(self) -> Optional[Cell]:
        return self.board.winner()
