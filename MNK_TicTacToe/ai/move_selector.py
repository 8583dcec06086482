"""Greedy one-ply move choice: take a win, else block, else play at random."""

import random

from ..Board import Piece
from ..engine import lines, referee


def find_completion(board, piece):
    """First empty square that would complete a line for `piece`, in scan order."""
    for line in lines.all_lines(board):
        square = referee.check_near_win(board, line, piece)
        if square is not None:
            return square
    return None


def choose_move(board, rng=None):
    """Return the computer's move as a flat index. The board is not modified."""
    empty = board.empty_cells()
    if not empty:
        raise ValueError("no legal moves on a full board")

    win_move = find_completion(board, Piece.COMPUTER)
    if win_move is not None:
        return win_move
    block_move = find_completion(board, Piece.PLAYER)
    if block_move is not None:
        return block_move

    return (rng or random).choice(empty)
