"""Text front end: move parsing and the human-vs-computer game loop."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ai import MinimaxAI
from .game import (
    BoardState,
    CellOccupied,
    InvalidMove,
    MalformedMoveInput,
    Move,
    Player,
)

logger = logging.getLogger(__name__)

INITIAL_BOARD = "........."
BANNER = "Tic-tac-toe: type a move as two digits, row then column (e.g. 11)."


class MoveInput(BaseModel):
    """A human move as typed: two single-digit coordinates."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, le=2)
    col: int = Field(ge=0, le=2)

    def to_move(self) -> Move:
        return Move(self.row, self.col)


def parse_move(text: str) -> Move:
    """Parse ``"RC"`` into a Move, raising MalformedMoveInput on anything else."""
    cleaned = text.rstrip("\r\n")
    if len(cleaned) != 2 or not all(ch in "0123456789" for ch in cleaned):
        raise MalformedMoveInput(f"Expected two digits like 12, got {cleaned!r}")
    try:
        return MoveInput(row=int(cleaned[0]), col=int(cleaned[1])).to_move()
    except ValidationError as exc:
        raise MalformedMoveInput(
            f"Row and column must each be 0, 1 or 2, got {cleaned!r}"
        ) from exc


def read_move(stream: TextIO) -> Move:
    line = stream.readline()
    if not line:
        raise EOFError("No more input")
    return parse_move(line)


def human_turn(
    state: BoardState, stream: TextIO, out: TextIO, strict: bool = False
) -> BoardState:
    """Read moves until one applies; in strict mode the first bad one raises."""
    while True:
        try:
            move = read_move(stream)
            return state.apply_move(move)
        except (MalformedMoveInput, CellOccupied, InvalidMove) as exc:
            if strict:
                raise
            logger.warning("Rejected move: %s", exc)
            out.write(f"Illegal move ({exc}). Try again.\n")


def outcome(state: BoardState) -> str:
    w = state.winner()
    if w is not None:
        return f"{w.value} wins"
    return "draw"


def play(
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    human: Player = Player.O,
    strict: bool = False,
) -> BoardState:
    """Run one game; the human moves first as ``human``. Returns the final state."""
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout

    out.write(BANNER + "\n")
    ai = MinimaxAI(player=human.other)
    state = BoardState.from_string(INITIAL_BOARD, human)

    while True:
        state = human_turn(state, stream, out, strict=strict)
        logger.info("%s played %d%d", human.value, *state.history[-1])
        out.write(state.render())
        if state.is_terminal():
            break

        state = state.apply_move(ai.choose(state))
        logger.info("%s played %d%d", ai.player.value, *state.history[-1])
        out.write(state.render())
        if state.is_terminal():
            break

    result = outcome(state)
    logger.info("Game over: %s", result)
    out.write(result + "\n")
    return state
