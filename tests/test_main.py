import builtins

import pytest

from tictactoe import main as main_mod
from tictactoe.ui.console import ConsoleInput


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_quit_exits_zero(monkeypatch, capsys):
    _feed(monkeypatch, ["q"])
    assert main_mod.main(["--no-color", "--no-clear"]) == 0
    assert "Game quit." in capsys.readouterr().out


def test_win_exits_zero(monkeypatch, capsys):
    _feed(monkeypatch, ["11", "22", "12", "21", "13"])
    assert main_mod.main(["--no-color", "--no-clear"]) == 0
    assert "=> Player1 won!" in capsys.readouterr().out


def test_end_of_input_quits(monkeypatch):
    _feed(monkeypatch, ["11"])
    assert main_mod.main(["--no-color", "--no-clear"]) == 0


def test_console_input_maps_eof_to_quit(monkeypatch):
    _feed(monkeypatch, [])
    assert ConsoleInput().read_line("=> Player1: ") == "q"


def test_interrupt_exits_130(monkeypatch):
    def boom(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr(builtins, "input", boom)
    assert main_mod.main(["--no-clear"]) == 130


def test_log_level_is_case_insensitive():
    args = main_mod.build_argparser().parse_args(["--log-level", "debug"])
    assert args.log_level == "DEBUG"


def test_bad_log_level_rejected():
    with pytest.raises(SystemExit):
        main_mod.build_argparser().parse_args(["--log-level", "loud"])
