import io

import pytest

from bookexamples.cli import Command, get_command, main


@pytest.mark.parametrize(
    "name, command",
    [
        ("company-directory", Command.COMPANY_DIRECTORY),
        ("game", Command.GAME),
        ("mean-median-mode", Command.MEAN_MEDIAN_MODE),
        ("minigrep", Command.MINIGREP),
        ("pig-latin", Command.PIG_LATIN),
        ("web-server", Command.WEB_SERVER),
    ],
)
def test_get_command_recognises_names(name, command):
    assert get_command(["prog", name]) is command


def test_get_command_without_argument_is_default():
    assert get_command(["prog"]) is Command.DEFAULT


def test_get_command_unknown_is_default():
    assert get_command(["prog", "unknown"]) is Command.DEFAULT


def test_main_runs_pig_latin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("apple\nn\n"))
    assert main(["prog", "pig-latin"]) == 0
    assert "applehay" in capsys.readouterr().out.splitlines()


def test_main_runs_minigrep(monkeypatch, capsys, tmp_path):
    monkeypatch.delenv("CASE_INSENSITIVE", raising=False)
    poem = tmp_path / "poem.txt"
    poem.write_text(
        "Rust:\nsafe, fast, productive.\nPick three.\nDuct tape.", encoding="utf-8"
    )
    assert main(["prog", "minigrep", "duct", str(poem)]) == 0
    assert capsys.readouterr().out.splitlines() == ["safe, fast, productive."]


def test_main_minigrep_reports_missing_arguments(capsys):
    assert main(["prog", "minigrep", "the"]) == 1
    assert "not enough arguments" in capsys.readouterr().err


def test_main_runs_game_until_win(monkeypatch, capsys):
    guesses = "\n".join(str(n) for n in range(1, 101)) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(guesses))
    assert main(["prog", "game"]) == 0
    assert "You win" in capsys.readouterr().out


def test_main_default_lists_commands(capsys):
    assert main(["prog"]) == 0
    out = capsys.readouterr().out
    for command in Command:
        if command is not Command.DEFAULT:
            assert command.value in out