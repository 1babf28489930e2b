"""A box outline drawn around other components."""

import sys

from . import ansi
from .component import Component


class Border(Component):
    """Draws a frame and splits its inside evenly among its children."""

    def __init__(self, *components):
        self.children = list(components)
        self.padding = 0

    def set_padding(self, padding):
        self.padding = padding
        return self

    def render(self, x, y, w, h):
        count = len(self.children)
        if w < 2 or h < 2:
            if count:
                child_h = int(h / count)
                for i, child in enumerate(self.children):
                    child.render(x, y + i * child_h, w, child_h)
            return

        out = sys.stdout
        edge = ansi.H * (w - 2)
        ansi.move_cursor(y, x)
        out.write(ansi.TL + edge + ansi.TR)
        for i in range(1, h - 1):
            ansi.move_cursor(y + i, x)
            out.write(ansi.V + " " * (w - 2) + ansi.V)
        ansi.move_cursor(y + h - 1, x)
        out.write(ansi.BL + edge + ansi.BR)

        inner_w = w - 2
        inner_h = h - 2
        if inner_w <= 0 or inner_h <= 0 or count == 0:
            return

        child_h = inner_h // count
        pad = self.padding
        current = y + 1
        for child in self.children:
            child.render(x + 1 + pad, current + pad, inner_w - pad, child_h - pad)
            current += child_h