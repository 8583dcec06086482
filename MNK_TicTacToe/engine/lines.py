"""Row, column, and toroidal diagonal scans over a flat board."""


def row_scan(board, row):
    if not 0 <= row < board.height:
        raise IndexError(f"row {row} out of range")
    start = row * board.width
    return tuple(range(start, start + board.width))


def column_scan(board, col):
    if not 0 <= col < board.width:
        raise IndexError(f"column {col} out of range")
    return tuple(col + y * board.width for y in range(board.height))


def diagonal_scan(board, start_col, forward=True):
    """
    One cell per row starting at (start_col, 0). The column moves one step
    right (forward) or left (backward) per row and wraps around the edges.
    """
    if not 0 <= start_col < board.width:
        raise IndexError(f"start column {start_col} out of range")
    step = 1 if forward else -1
    width = board.width
    return tuple(y * width + (start_col + step * y) % width for y in range(board.height))


def all_columns(board):
    for x in range(board.width):
        yield column_scan(board, x)


def all_rows(board):
    for y in range(board.height):
        yield row_scan(board, y)


def all_diagonals(board):
    for x in range(board.width):
        yield diagonal_scan(board, x, forward=True)
        yield diagonal_scan(board, x, forward=False)


def all_lines(board):
    """Yield every win-checkable line: columns, then rows, then diagonals."""
    yield from all_columns(board)
    yield from all_rows(board)
    yield from all_diagonals(board)


def line_values(board, line):
    return [board.cells[i] for i in line]
