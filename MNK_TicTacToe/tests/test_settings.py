"""Settings loading, CLI entry point wiring, and event log formatting."""

from MNK_TicTacToe import main as main_mod


def test_packaged_settings_load():
    settings = main_mod.load_settings("config/settings.yaml")
    assert settings["board_width"] == 3
    assert settings["max_board_dimension"] == 12


def test_settings_override_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("board_width: 5\nseed: 3\n", encoding="utf-8")
    settings = main_mod.load_settings(str(path))
    assert settings["board_width"] == 5
    assert settings["board_height"] == 3
    assert settings["seed"] == 3


def test_missing_settings_fall_back(tmp_path):
    settings = main_mod.load_settings(str(tmp_path / "nope.yaml"))
    assert settings == main_mod.DEFAULT_SETTINGS


def test_main_runs_until_quit(monkeypatch, tmp_path):
    answers = iter(["4", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    code = main_mod.main(["--settings", str(tmp_path / "none.yaml"), "--seed", "1", "--width", "4"])
    assert code == 0


def test_main_rejects_oversized_board(tmp_path):
    code = main_mod.main(["--settings", str(tmp_path / "none.yaml"), "--width", "13"])
    assert code == 2


def test_event_lines_are_timestamped():
    import datetime

    from MNK_TicTacToe.utils.logger import format_event

    when = datetime.datetime(2024, 1, 1, 9, 5, 7)
    assert format_event("Move 1: X 4", now=when) == "[09:05:07] Move 1: X 4"


def test_main_rejects_zero_width_instead_of_using_default(tmp_path):
    code = main_mod.main(["--settings", str(tmp_path / "none.yaml"), "--width", "0"])
    assert code == 2
