"""Entry point for console tic-tac-toe. Load config, wire players, start TicTacToegame."""

import random
from pathlib import Path

import yaml

from .utils.cli import parse_args
from .utils.logger import log_event
from .TicTacToegame import TicTacToegame
from .Player import HumanPlayer, ComputerPlayer
from .gui.console_view import ConsoleView
from .engine.referee import GameStatus


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_width": 3,
    "board_height": 3,
    "max_board_dimension": 12,
    "seed": None,
    "log_moves": True,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `MNK_TicTacToe/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML over the defaults; a missing file yields the defaults."""
    settings = dict(DEFAULT_SETTINGS)
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        log_event(f"Settings file {path} not found; using defaults")
    return settings


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    width = args.width if args.width is not None else settings["board_width"]
    height = args.height if args.height is not None else settings["board_height"]
    max_dimension = settings["max_board_dimension"]
    seed = args.seed if args.seed is not None else settings["seed"]
    log_moves = settings["log_moves"] and not args.quiet

    human = HumanPlayer()
    computer = ComputerPlayer(rng=random.Random(seed))
    view = ConsoleView()

    def logger(message):
        if log_moves or not message.startswith("Move "):
            log_event(message)

    print("Welcome to the TicTacToe Game! Type 'help' for instructions.")
    try:
        game = TicTacToegame(
            width=width,
            height=height,
            human=human,
            computer=computer,
            logger=logger,
            renderer=view.render,
            max_dimension=max_dimension,
        )
    except ValueError as exc:
        print(f"Invalid board size: {exc}")
        return 2

    results = game.play()
    if results:
        wins = results.count(GameStatus.PLAYER_WON)
        print(f"You won {wins} of {len(results)} game(s).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
