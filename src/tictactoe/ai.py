"""Exhaustive minimax search for tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .game import BoardState, Move, Player

logger = logging.getLogger(__name__)

# Outside the real [-10, 10] range so any actual score beats them.
WORST_FOR_MAX = -100
WORST_FOR_MIN = 100


def minimax(state: BoardState) -> BoardState:
    """Return the leaf reached by best play from ``state``.

    The result's history holds the moves already played plus the best-play
    continuation. Ties keep the first child found in ``legal_moves()`` order.
    """
    if state.is_terminal():
        return state

    best_score = WORST_FOR_MAX if state.is_maximizing else WORST_FOR_MIN
    best_node = state

    for child in state.children():
        variation = minimax(child)
        score = variation.score()
        if state.is_maximizing:
            if score > best_score:
                best_score, best_node = score, variation
        elif score < best_score:
            best_score, best_node = score, variation

    return best_node


@dataclass
class MinimaxAI:
    """Computer player that consumes the first move of the minimax line."""

    player: Player

    def choose(self, state: BoardState) -> Move:
        if state.to_move is not self.player:
            raise ValueError("It is not this AI player's turn")
        if state.is_terminal():
            raise RuntimeError("No valid moves available")

        leaf = minimax(state)
        move = leaf.history[len(state.history)]
        logger.debug(
            "%s picks %d%d on %s; line %s ends at %s with score %d",
            self.player.value,
            move.row,
            move.col,
            state.encode(),
            " ".join(f"{m.row}{m.col}" for m in leaf.history[len(state.history) :]),
            leaf.encode(),
            leaf.score(),
        )
        return move
