"""Board state and rules for 3x3 tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple


SIZE = 3
EMPTY = "."
WIN_SCORE = 10


class Player(str, Enum):
    """Side to move; the value doubles as the encoding character."""

    X = "x"
    O = "o"

    @property
    def other(self) -> "Player":
        return Player.O if self is Player.X else Player.X


class Move(NamedTuple):
    row: int
    col: int


Cell = Optional[Player]
Grid = Tuple[Tuple[Cell, ...], ...]

# Rows, then columns, then diagonals.
WINNING_LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


# ---------- Errors ----------


class TicTacToeError(ValueError):
    """Base class for rule and input violations."""


class InvalidEncoding(TicTacToeError):
    pass


class InvalidMove(TicTacToeError):
    pass


class CellOccupied(TicTacToeError):
    pass


class MalformedMoveInput(TicTacToeError):
    pass


# ---------- Board ----------


def _empty_grid() -> Grid:
    return tuple(tuple(None for _ in range(SIZE)) for _ in range(SIZE))


@dataclass(frozen=True)
class BoardState:
    """One position in the game. Every move produces a new instance."""

    grid: Grid = field(default_factory=_empty_grid)
    to_move: Player = Player.X
    is_maximizing: bool = True
    history: Tuple[Move, ...] = ()

    def __post_init__(self) -> None:
        if self.is_maximizing != (self.to_move is Player.X):
            raise ValueError("is_maximizing must be True exactly when X is to move")

    @classmethod
    def from_string(cls, encoding: str, starting_player: Player) -> "BoardState":
        """Build a position from 9 row-major characters over ``.xo``."""
        if len(encoding) != SIZE * SIZE:
            raise InvalidEncoding(
                f"Board encoding must be {SIZE * SIZE} characters, got {len(encoding)}"
            )
        cells: List[Cell] = []
        for ch in encoding:
            if ch == EMPTY:
                cells.append(None)
            elif ch in (Player.X.value, Player.O.value):
                cells.append(Player(ch))
            else:
                raise InvalidEncoding(f"Unexpected character {ch!r} in board encoding")
        grid = tuple(tuple(cells[r * SIZE : (r + 1) * SIZE]) for r in range(SIZE))
        return cls(
            grid=grid,
            to_move=starting_player,
            is_maximizing=starting_player is Player.X,
        )

    # ---- serialization ----

    def encode(self) -> str:
        return "".join(
            EMPTY if cell is None else cell.value for row in self.grid for cell in row
        )

    def render(self) -> str:
        lines = [
            "".join(EMPTY if cell is None else cell.value for cell in row)
            for row in self.grid
        ]
        return "\n".join(lines) + "\n\n"

    # ---- evaluation ----

    def winner(self) -> Optional[Player]:
        for player in (Player.X, Player.O):
            for line in WINNING_LINES:
                if all(self.grid[r][c] is player for r, c in line):
                    return player
        return None

    def score(self) -> int:
        """+10 if X holds a line, -10 if O does, 0 otherwise."""
        w = self.winner()
        if w is Player.X:
            return WIN_SCORE
        if w is Player.O:
            return -WIN_SCORE
        return 0

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def is_terminal(self) -> bool:
        return self.score() != 0 or self.is_full()

    # ---- successors ----

    def legal_moves(self) -> List[Move]:
        if self.is_terminal():
            return []
        return [
            Move(r, c)
            for r in range(SIZE)
            for c in range(SIZE)
            if self.grid[r][c] is None
        ]

    def apply_move(self, move: Move) -> "BoardState":
        row, col = move
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidMove(f"Move {row}{col} is off the board")
        if self.grid[row][col] is not None:
            raise CellOccupied(f"Cell {row}{col} is already occupied")

        grid = tuple(
            tuple(
                self.to_move if (r, c) == (row, col) else cell
                for c, cell in enumerate(cells)
            )
            for r, cells in enumerate(self.grid)
        )
        return BoardState(
            grid=grid,
            to_move=self.to_move.other,
            is_maximizing=not self.is_maximizing,
            history=self.history + (Move(row, col),),
        )

    def children(self) -> List["BoardState"]:
        return [self.apply_move(m) for m in self.legal_moves()]
