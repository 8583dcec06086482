"""Line scan shapes and the canonical scan order."""

import pytest

from MNK_TicTacToe.Board import Board, Piece
from MNK_TicTacToe.engine import lines


def test_row_and_column_scans():
    b = Board(4, 3)
    assert lines.row_scan(b, 1) == (4, 5, 6, 7)
    assert lines.column_scan(b, 1) == (1, 5, 9)


def test_plain_diagonals_on_square_board():
    b = Board(3, 3)
    assert lines.diagonal_scan(b, 0, forward=True) == (0, 4, 8)
    assert lines.diagonal_scan(b, 2, forward=False) == (2, 4, 6)


def test_diagonals_wrap_around_edges():
    b = Board(3, 3)
    assert lines.diagonal_scan(b, 2, forward=True) == (2, 3, 7)
    b = Board(4, 3)
    assert lines.diagonal_scan(b, 0, forward=False) == (0, 7, 10)


def test_diagonal_has_one_cell_per_row():
    b = Board(5, 7)
    for start in range(b.width):
        for forward in (True, False):
            line = lines.diagonal_scan(b, start, forward)
            assert len(line) == b.height
            assert [i // b.width for i in line] == list(range(b.height))


def test_all_lines_order_and_count():
    b = Board(4, 3)
    every = list(lines.all_lines(b))
    assert len(every) == b.width + b.height + 2 * b.width
    assert every[0] == lines.column_scan(b, 0)
    assert every[b.width] == lines.row_scan(b, 0)
    assert every[b.width + b.height] == lines.diagonal_scan(b, 0, forward=True)
    assert every[b.width + b.height + 1] == lines.diagonal_scan(b, 0, forward=False)


@pytest.mark.parametrize(
    "scan, arg",
    [(lines.row_scan, 3), (lines.column_scan, 4), (lines.diagonal_scan, -1)],
)
def test_out_of_range_scan_raises(scan, arg):
    with pytest.raises(IndexError):
        scan(Board(4, 3), arg)


def test_line_values_reads_cells_in_scan_order():
    b = Board()
    b.place_player_move(4)
    b.place_computer_move(8)
    assert lines.line_values(b, lines.diagonal_scan(b, 0)) == [Piece.EMPTY, Piece.PLAYER, Piece.COMPUTER]
