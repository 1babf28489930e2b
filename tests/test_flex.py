from kontra.component import Component
from kontra.flex import Flex, FlexDirection


class Recorder(Component):
    def __init__(self):
        self.calls = []

    def render(self, x, y, w, h):
        self.calls.append((x, y, w, h))


def test_row_splits_width_evenly():
    a, b = Recorder(), Recorder()
    Flex(FlexDirection.ROW, a, b).render(1, 1, 20, 7)
    (ax, ay, aw, ah), = a.calls
    (bx, by, bw, bh), = b.calls
    assert aw == bw
    assert aw * 2 == 20
    assert ah == bh == 7
    assert ay == by == 1
    assert bx == ax + aw


def test_row_respects_gap():
    a, b = Recorder(), Recorder()
    flex = Flex(FlexDirection.ROW, a, b).set_gap(4)
    flex.render(3, 2, 24, 5)
    (ax, _, aw, _), = a.calls
    (bx, _, bw, _), = b.calls
    assert ax == 3
    assert bx == ax + aw + 4
    assert aw == bw
    assert aw + bw + 4 <= 24


def test_column_splits_height_evenly():
    a, b, c = Recorder(), Recorder(), Recorder()
    Flex(FlexDirection.COLUMN, a, b, c).render(1, 1, 10, 30)
    heights = [r.calls[0][3] for r in (a, b, c)]
    ys = [r.calls[0][1] for r in (a, b, c)]
    assert len(set(heights)) == 1
    assert sum(heights) == 30
    assert ys[1] == ys[0] + heights[0]
    assert ys[2] == ys[1] + heights[1]
    assert all(r.calls[0][2] == 10 for r in (a, b, c))


def test_empty_flex_renders_nothing(capsys):
    Flex(FlexDirection.ROW).render(1, 1, 10, 10)
    assert capsys.readouterr().out == ""


def test_add_and_clear():
    a, b = Recorder(), Recorder()
    flex = Flex(FlexDirection.COLUMN, a)
    flex.add(b)
    assert flex.children == [a, b]
    flex.clear()
    flex.render(1, 1, 10, 10)
    assert a.calls == [] and b.calls == []


def test_setters_chain():
    flex = Flex(FlexDirection.ROW)
    assert flex.set_gap(2).set_padding(3) is flex
    assert (flex.gap, flex.padding) == (2, 3)