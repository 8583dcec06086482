"""Player interfaces: the human types commands, the computer picks squares."""

from .Board import Piece
from .ai import move_selector


class Player:
    def __init__(self, piece):
        self.piece = piece


class HumanPlayer(Player):
    PROMPT = "\nIt is your move... what would you like to do?\n> "

    def __init__(self, input_fn=None):
        super().__init__(Piece.PLAYER)
        self.input_fn = input_fn

    def next_command(self, prompt=None):
        """Return one raw line of user input (stripped)."""
        read = self.input_fn or input
        return read(self.PROMPT if prompt is None else prompt).strip()


class ComputerPlayer(Player):
    def __init__(self, rng=None):
        super().__init__(Piece.COMPUTER)
        self.rng = rng

    def next_move(self, board):
        return move_selector.choose_move(board, rng=self.rng)
