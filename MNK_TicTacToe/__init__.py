"""MNK_TicTacToe package exports."""

from .Board import Board, Piece
from .TicTacToegame import TicTacToegame
from .Player import Player, HumanPlayer, ComputerPlayer
from .engine.referee import GameStatus

# Subpackages for line scanning/detection, move choice, console view, and helpers
from . import ai, engine, gui, utils

__all__ = [
    "Board",
    "Piece",
    "TicTacToegame",
    "Player",
    "HumanPlayer",
    "ComputerPlayer",
    "GameStatus",
    "ai",
    "engine",
    "gui",
    "utils",
]
