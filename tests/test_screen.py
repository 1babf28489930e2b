from kontra import ansi
from kontra.component import Component
from kontra.screen import Screen


class Recorder(Component):
    def __init__(self):
        self.calls = []

    def render(self, x, y, w, h):
        self.calls.append((x, y, w, h))


def test_full_percent_gives_terminal_size(monkeypatch):
    monkeypatch.setenv("COLUMNS", "120")
    monkeypatch.setenv("LINES", "40")
    child = Recorder()
    Screen(child).render(1, 1, 100, 100)
    assert child.calls == [(1, 1, 120, 40)]


def test_every_child_gets_same_area(monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "24")
    a, b = Recorder(), Recorder()
    Screen(a, b).render(2, 3, 50, 50)
    assert a.calls == b.calls
    (_, _, w, h), = a.calls
    assert w * 2 == 80
    assert h * 2 == 24


def test_output_clears_first_and_moves_down_last(monkeypatch, capsys):
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("LINES", "24")
    Screen().render(1, 1, 100, 100)
    out = capsys.readouterr().out
    assert out.startswith(ansi.CLEAR_SCREEN + ansi.CURSOR_HOME)
    assert out.endswith("\033[2B")