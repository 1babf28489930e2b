"""A container that splits its space evenly in a row or a column."""

from enum import Enum

from .component import Component


class FlexDirection(Enum):
    ROW = "row"
    COLUMN = "column"


def _share(total, count):
    # Integer division rounding toward zero.
    return int(total / count)


class Flex(Component):
    """Lays its children side by side or one above another."""

    def __init__(self, direction, *components):
        self.direction = direction
        self.children = list(components)
        self.gap = 0
        self.padding = 0

    def add(self, component):
        self.children.append(component)

    def set_gap(self, gap):
        self.gap = gap
        return self

    def set_padding(self, padding):
        self.padding = padding
        return self

    def clear(self):
        self.children.clear()

    def render(self, x, y, w, h):
        count = len(self.children)
        if count == 0:
            return
        total_gap = self.gap * (count - 1)
        if self.direction is FlexDirection.COLUMN:
            child_h = _share(h - total_gap, count)
            current = y
            for child in self.children:
                child.render(x, current, w, child_h)
                current += child_h + self.gap
        else:
            child_w = _share(w - total_gap, count)
            current = x
            for child in self.children:
                child.render(current, y, child_w, h)
                current += child_w + self.gap