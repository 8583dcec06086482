"""Board state container: cells, move history, and turn bookkeeping."""

import logging
from enum import Enum

LOGGER = logging.getLogger(__name__)

MIN_DIMENSION = 3


class Piece(Enum):
    """Cell contents. Values double as the console symbols."""
    EMPTY = " "
    PLAYER = "X"
    COMPUTER = "O"

    def opposite(self) -> "Piece":
        if self == Piece.PLAYER:
            return Piece.COMPUTER
        if self == Piece.COMPUTER:
            return Piece.PLAYER
        raise ValueError("EMPTY has no opposite")


def _clamp(value, name):
    if value < MIN_DIMENSION:
        LOGGER.debug("%s %s below minimum, clamped to %s", name, value, MIN_DIMENSION)
        return MIN_DIMENSION
    return value


class Board:
    def __init__(self, width=3, height=3):
        # Cells are stored flat, index = row * width + col
        self.width = _clamp(int(width), "width")
        self.height = _clamp(int(height), "height")
        self.cells = [Piece.EMPTY] * (self.width * self.height)
        self.history = []
        self.current_turn = Piece.PLAYER

    @property
    def move_count(self):
        return len(self.history)

    @property
    def size(self):
        return self.width * self.height

    def reset(self):
        """Empty every cell and forget the history; dimensions are kept."""
        self.cells = [Piece.EMPTY] * self.size
        self.history = []
        self.current_turn = Piece.PLAYER

    def resize(self, width, height):
        """Discard the current game and start over on a width x height board."""
        self.width = _clamp(int(width), "width")
        self.height = _clamp(int(height), "height")
        self.reset()

    def in_bounds(self, index):
        return 0 <= index < self.size

    def index_of(self, col, row):
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise ValueError(f"({col}, {row}) is off a {self.width}x{self.height} board")
        return row * self.width + col

    def coords_of(self, index):
        """Return (col, row) for a flat index."""
        if not self.in_bounds(index):
            raise ValueError(f"index {index} out of range 0..{self.size - 1}")
        return index % self.width, index // self.width

    def piece_at(self, index):
        return self.cells[index]

    def is_legal_move(self, index):
        return self.in_bounds(index) and self.cells[index] == Piece.EMPTY

    def is_full(self):
        return self.move_count >= self.size

    def empty_cells(self):
        return [i for i, cell in enumerate(self.cells) if cell == Piece.EMPTY]

    def place_player_move(self, index):
        self._place(index, Piece.PLAYER)

    def place_computer_move(self, index):
        self._place(index, Piece.COMPUTER)

    def _place(self, index, piece):
        """Place a piece; raise on any contract violation before touching state."""
        if self.is_full():
            raise ValueError("board is already full")
        if not self.is_legal_move(index):
            raise ValueError(f"illegal move at index {index}")
        if piece != self.current_turn:
            raise ValueError(f"it is not {piece.name.lower()}'s turn")
        self.cells[index] = piece
        self.history.append(index)
        self.current_turn = piece.opposite()

    def undo_last_pair(self):
        """
        Take back the last Computer move and the Player move before it.
        With an odd history (game ended on the Player's move) this still pops
        two entries, so the turn is recomputed from what remains.
        """
        if not self.history:
            return
        for _ in range(min(2, self.move_count)):
            index = self.history.pop()
            self.cells[index] = Piece.EMPTY
        self.current_turn = self.owner_of_move(self.move_count)

    @staticmethod
    def owner_of_move(move_number):
        """Player moves first, so even history slots belong to the Player."""
        return Piece.PLAYER if move_number % 2 == 0 else Piece.COMPUTER

    def clone(self):
        new_board = Board(self.width, self.height)
        new_board.cells = self.cells[:]
        new_board.history = self.history[:]
        new_board.current_turn = self.current_turn
        return new_board
