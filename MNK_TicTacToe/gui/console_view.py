"""Plain-text board rendering and help output for the console game."""

from ..engine.referee import GameStatus


def _dash_row(width, cell_width):
    return "-" * (width * (cell_width + 3) + 1)


def render_board(board):
    """Draw the board as a pipe/dash grid, one symbol per square."""
    rows = [_dash_row(board.width, 1)]
    for y in range(board.height):
        start = y * board.width
        squares = board.cells[start:start + board.width]
        rows.append("".join(f"| {piece.value} " for piece in squares) + "|")
        rows.append(_dash_row(board.width, 1))
    return "\n".join(rows)


def render_index_map(width, height):
    """Grid showing the number to type for each square."""
    cell_width = len(str(width * height - 1))
    rows = [_dash_row(width, cell_width)]
    for y in range(height):
        numbers = (str(y * width + x).rjust(cell_width) for x in range(width))
        rows.append("".join(f"| {n} " for n in numbers) + "|")
        rows.append(_dash_row(width, cell_width))
    return "\n".join(rows)


def help_text(width, height, max_dimension=12):
    return "\n".join([
        "You will play against the computer. You play 'X' and the computer plays 'O'.",
        "You get to move first :)",
        "",
        "A full row, a full column, or a full top-to-bottom diagonal wins.",
        "Diagonals wrap around the left and right edges of the board.",
        "",
        "The squares are numbered like this:",
        "",
        render_index_map(width, height),
        "",
        "Commands:",
        "    help: prints this help",
        "    reset (or restart): starts the game over",
        "    N: places your piece on square N",
        "    C R: places your piece at column C, row R (0-indexed)",
        f"    resize [W H]: starts over on a W x H board (3 to {max_dimension})",
        "    undo: takes back your last move and the computer's reply",
        "    quit: exits the game",
    ])


RESULT_MESSAGES = {
    GameStatus.PLAYER_WON: "You win! Nicely played.",
    GameStatus.COMPUTER_WON: "The computer wins this one.",
    GameStatus.DRAW: "It's a draw!",
}


class ConsoleView:
    """Renderer callback for TicTacToegame that writes to stdout (or `out`)."""

    def __init__(self, out=print):
        self.out = out

    def render(self, board, status):
        self.out("\nHere is the current state of the board:\n")
        self.out(render_board(board))
        message = RESULT_MESSAGES.get(status)
        if message:
            self.out(message)
