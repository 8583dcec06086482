"""Win, draw, and near-win detection plus move validation for the session."""

from enum import Enum

from ..Board import Piece
from . import lines


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    PLAYER_WON = "player_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"
    TERMINATED = "terminated"

    @property
    def is_over(self):
        return self != GameStatus.IN_PROGRESS


def min_moves_to_win(board):
    """Fewest total moves after which the shortest line can be complete."""
    shortest = min(board.width, board.height)
    return 2 * shortest - 1


def _is_complete(board, line, piece):
    return all(cell == piece for cell in lines.line_values(board, line))


def winning_line(board, piece):
    """Return the first full line owned by `piece`, or None."""
    if piece == Piece.EMPTY:
        return None
    if board.move_count < min_moves_to_win(board):
        return None
    for line in lines.all_lines(board):
        if _is_complete(board, line, piece):
            return line
    return None


def did_win(board, piece):
    return winning_line(board, piece) is not None


def is_draw(board):
    if not board.is_full():
        return False
    return not did_win(board, Piece.PLAYER) and not did_win(board, Piece.COMPUTER)


def check_near_win(board, line, piece):
    """
    Return the one Empty index in `line` if every other cell holds `piece`,
    otherwise None.
    """
    blank = None
    for i in line:
        cell = board.cells[i]
        if cell == Piece.EMPTY:
            if blank is not None:
                return None
            blank = i
        elif cell != piece:
            return None
    return blank


def game_status(board):
    if did_win(board, Piece.PLAYER):
        return GameStatus.PLAYER_WON
    if did_win(board, Piece.COMPUTER):
        return GameStatus.COMPUTER_WON
    if is_draw(board):
        return GameStatus.DRAW
    return GameStatus.IN_PROGRESS


def check_move(board, index, piece):
    """
    Validate a move before it reaches the board.
    Raises ValueError with a reason suitable for showing to the user.
    """
    if not board.in_bounds(index):
        raise ValueError(f"Square {index} is off the board (0-{board.size - 1})")
    if board.piece_at(index) != Piece.EMPTY:
        raise ValueError(f"Square {index} is already taken")
    if board.current_turn != piece:
        raise ValueError(f"It is not the {piece.name.lower()}'s turn")
    return True
