"""Tic-tac-toe package exposing the board state, minimax search, and CLI driver."""

from .ai import MinimaxAI, minimax
from .cli import play
from .game import BoardState, Move, Player

__all__ = ["BoardState", "MinimaxAI", "Move", "Player", "minimax", "play"]
