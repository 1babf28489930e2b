"""A clickable label that changes look while active."""

import sys
from dataclasses import dataclass

from . import ansi
from .component import Component
from .text import _as_provider, _draw_wrapped, _emit_style


@dataclass(kw_only=True)
class ButtonStyle:
    """Colours for the idle and active states, plus text attributes."""

    color: str = ""
    color_active: str = ""
    background_color: str = ""
    background_color_active: str = ""
    bold: bool = False
    underline: bool = False
    italic: bool = False


class Button(Component):
    """A label from a string or callable, with a click callback."""

    def __init__(self, label, on_click=None, style=None):
        self._label = _as_provider(label)
        self.on_click = on_click
        self.style = style if style is not None else ButtonStyle()
        self.active = False

    @property
    def label(self):
        """The current label text."""
        return self._label()

    def click(self):
        """Call the click callback, if there is one."""
        if self.on_click is not None:
            self.on_click()

    def render(self, x, y, w, h):
        value = self.label
        if w <= 0 or h <= 0 or not value:
            return
        s = self.style
        if self.active:
            color, background = s.color_active, s.background_color_active
        else:
            color, background = s.color, s.background_color
        _emit_style(color, background, s.bold, s.underline, s.italic)
        _draw_wrapped(value, x, y, w, h)
        sys.stdout.write(ansi.RESET)