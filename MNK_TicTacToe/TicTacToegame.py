"""Game session: command dispatch, turn sequencing, and the status state machine."""

from .Board import Board, MIN_DIMENSION
from .engine import referee
from .engine.referee import GameStatus
from .gui import console_view


def parse_int(text):
    try:
        return int(text)
    except (TypeError, ValueError):
        return None


class TicTacToegame:
    def __init__(self, width, height, human, computer, logger=print, renderer=None, max_dimension=12):
        self.max_dimension = max_dimension
        self.logger = logger
        self.renderer = renderer
        self.human = human
        self.computer = computer
        self.board = Board(*self._checked_dimensions(width, height))
        self.status = GameStatus.IN_PROGRESS
        self.results = []

    def _checked_dimensions(self, width, height):
        """Reject sizes outside 1..max_dimension; warn about (but allow) ones below 3."""
        dimensions = (("width", width), ("height", height))
        for name, value in dimensions:
            if value < 1:
                raise ValueError(f"{name} {value} must be at least 1")
            if value > self.max_dimension:
                raise ValueError(f"{name} {value} exceeds the maximum of {self.max_dimension}")
        for name, value in dimensions:
            if value < MIN_DIMENSION:
                self.logger(f"Warning: {name} {value} is below {MIN_DIMENSION}; using {MIN_DIMENSION}")
        return width, height

    def _render(self):
        if self.renderer:
            self.renderer(self.board, self.status)

    def process_input(self, text):
        """Handle one line of user input. Returns True if it was understood and succeeded."""
        words = text.strip().lower().split()
        if not words:
            self.logger("Please type a command, or 'help' for instructions")
            return False
        command, args = words[0], words[1:]

        if command == "help":
            self.logger(console_view.help_text(self.board.width, self.board.height, self.max_dimension))
            return True
        if command in ("reset", "restart"):
            self.reset()
            return True
        if command == "resize":
            return self._resize(args)
        if command == "undo":
            return self.undo()
        if command == "quit":
            self.quit()
            return True

        numbers = [parse_int(word) for word in words]
        if all(n is not None for n in numbers) and len(numbers) in (1, 2):
            if self.status.is_over:
                self.logger("The game is over; type 'reset' to play again")
                return False
            if len(numbers) == 2:
                col, row = numbers
                try:
                    index = self.board.index_of(col, row)
                except ValueError as exc:
                    self.logger(f"Illegal move, please try again! {exc}")
                    return False
            else:
                index = numbers[0]
            return self.play_turn(index)

        self.logger("That command was not understood, please try again. Type 'help' for instructions")
        return False

    def play_turn(self, index):
        """Apply the human's move and, if the game goes on, the computer's reply."""
        try:
            referee.check_move(self.board, index, self.human.piece)
        except ValueError as exc:
            self.logger(f"Illegal move, please try again! {exc}")
            return False

        self.board.place_player_move(index)
        self._log_move("X", index)
        self.status = referee.game_status(self.board)
        if not self.status.is_over:
            self._computer_turn()
        self._render()
        return True

    def _computer_turn(self):
        index = self.computer.next_move(self.board)
        self.board.place_computer_move(index)
        self._log_move("O", index)
        self.status = referee.game_status(self.board)

    def _log_move(self, symbol, index):
        col, row = self.board.coords_of(index)
        self.logger(f"Move {self.board.move_count}: {symbol} {index} (col {col}, row {row})")

    def undo(self):
        if self.board.move_count == 0:
            self.logger("Nothing to undo")
            return False
        self.board.undo_last_pair()
        self.status = referee.game_status(self.board)
        # Undoing a Player-ended game leaves the Computer to move.
        if not self.status.is_over and self.board.current_turn == self.computer.piece:
            self._computer_turn()
        self._render()
        return True

    def reset(self):
        self.board.reset()
        self.status = GameStatus.IN_PROGRESS
        self.logger("The board has been reset")
        self._render()

    def _resize(self, args):
        if len(args) == 2:
            width, height = parse_int(args[0]), parse_int(args[1])
        elif not args:
            width = parse_int(self.human.next_command(f"Please enter a new width (3 to {self.max_dimension}):\n> "))
            height = parse_int(self.human.next_command(f"Please enter a new height (3 to {self.max_dimension}):\n> "))
        else:
            width = height = None

        if width is None or height is None:
            self.logger("Invalid size; usage: resize W H")
            return False
        try:
            width, height = self._checked_dimensions(width, height)
        except ValueError as exc:
            self.logger(f"Invalid size: {exc}")
            return False

        self.board.resize(width, height)
        self.status = GameStatus.IN_PROGRESS
        self.logger(f"New board size is now {self.board.width}x{self.board.height}")
        self._render()
        return True

    def quit(self):
        self.status = GameStatus.TERMINATED
        self.logger("Thank you for playing! That was fun! Please come again. Goodbye for now...")

    def ask_to_play_again(self):
        response = self.human.next_command("Would you like to play again? (y/n)\n> ").lower()
        if response in ("n", "no"):
            return False
        if response not in ("y", "yes"):
            self.logger("Didn't quite catch that... I will assume you want to play again")
        return True

    def play(self):
        """Run commands until the user quits. Returns the list of finished game results."""
        self._render()
        try:
            while self.status != GameStatus.TERMINATED:
                self.process_input(self.human.next_command())
                if self.status in (GameStatus.PLAYER_WON, GameStatus.COMPUTER_WON, GameStatus.DRAW):
                    self.logger(f"Result: {self.status.name.replace('_', ' ').title()}")
                    self.results.append(self.status)
                    if self.ask_to_play_again():
                        self.reset()
                    else:
                        self.quit()
        except EOFError:
            self.quit()
        return self.results
