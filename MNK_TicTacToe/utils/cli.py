"""CLI options for board dimensions, random seed, and config path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="m x n Tic-Tac-Toe against the computer")
    parser.add_argument("--width", type=int, help="Board width, 3 to 12 (default from settings)")
    parser.add_argument("--height", type=int, help="Board height, 3 to 12 (default from settings)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--quiet", action="store_true", help="Do not log individual moves")
    return parser.parse_args(argv)
