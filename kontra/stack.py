"""A vertical stack where each child takes the height it prefers."""

from .component import Component


class List(Component):
    """Stacks children top to bottom using their preferred heights."""

    def __init__(self, *components):
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
        current = y
        for child in self.children:
            if current >= h:
                raise RuntimeError("List height exceeded available space.")
            child_h = child.get_preferred_height(w)
            child.render(x, current, w, child_h)
            current += child_h + self.gap