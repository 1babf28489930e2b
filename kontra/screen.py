"""The root component: clears the terminal and draws its children."""

import sys

from . import ansi
from .component import Component


class Screen(Component):
    """Renders children over a share of the terminal given in percent."""

    def __init__(self, *components):
        self.children = list(components)

    def render(self, x, y, w, h):
        """Draw children; w and h are percentages of the terminal size."""
        ansi.clear_screen()
        sys.stdout.write(ansi.CLEAR_SCREEN + ansi.CURSOR_HOME)
        term_w, term_h = ansi.get_terminal_size()
        abs_w = int(w * term_w / 100)
        abs_h = int(h * term_h / 100)
        for child in self.children:
            child.render(x, y, abs_w, abs_h)
        ansi.move_down(2)