import pytest

from kontra import ansi


def test_move_cursor_sequence(capsys):
    ansi.move_cursor(3, 5)
    assert capsys.readouterr().out == "\x1b[3;5H"


def test_move_up_default_and_count(capsys):
    ansi.move_up()
    assert capsys.readouterr().out == "\x1b[1A"
    ansi.move_up(2)
    assert capsys.readouterr().out == "\x1b[2A"


@pytest.mark.parametrize("func", [ansi.move_down, ansi.move_right, ansi.move_left])
def test_relative_moves_carry_count(func, capsys):
    func(7)
    out = capsys.readouterr().out
    assert out.startswith("\x1b[7")
    assert len(out) == len("\x1b[7") + 1


def test_relative_moves_use_distinct_letters(capsys):
    finals = set()
    for func in (ansi.move_up, ansi.move_down, ansi.move_right, ansi.move_left):
        func(1)
        finals.add(capsys.readouterr().out[-1])
    assert len(finals) == 4


def test_clear_screen_homes_cursor(capsys):
    ansi.clear_screen()
    assert capsys.readouterr().out == ansi.CLEAR_SCREEN + ansi.CURSOR_HOME


@pytest.mark.parametrize(
    "func, expected",
    [
        (ansi.clear_line, ansi.CLEAR_ENTIRE_LINE),
        (ansi.hide_cursor, ansi.HIDE_CURSOR),
        (ansi.show_cursor, ansi.SHOW_CURSOR),
        (ansi.save_cursor, ansi.SAVE_CURSOR),
        (ansi.restore_cursor, ansi.RESTORE_CURSOR),
    ],
)
def test_simple_commands(func, expected, capsys):
    func()
    assert capsys.readouterr().out == expected


def test_documented_sequences(capsys):
    ansi.clear_screen()
    assert capsys.readouterr().out == "\033[2J\033[H"
    ansi.hide_cursor()
    assert capsys.readouterr().out == "\033[?25l"
    ansi.show_cursor()
    assert capsys.readouterr().out == "\033[?25h"
    ansi.clear_line()
    assert capsys.readouterr().out == "\033[2K"


def test_terminal_size_from_environment(monkeypatch):
    monkeypatch.setenv("COLUMNS", "120")
    monkeypatch.setenv("LINES", "40")
    assert ansi.get_terminal_size() == (120, 40)