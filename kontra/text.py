"""Static or dynamic text, wrapped to the width it is given."""

import sys
from dataclasses import dataclass

from . import ansi
from .component import Component


@dataclass
class TextStyle:
    """Colours and attributes applied to a run of text."""

    color: str = ""
    background_color: str = ""
    bold: bool = False
    underline: bool = False
    italic: bool = False


def _as_provider(value):
    if callable(value):
        return value
    return lambda: value


def _emit_style(color, background_color, bold, underline, italic):
    out = sys.stdout
    if color:
        out.write(color)
    if background_color:
        out.write(background_color)
    if bold:
        out.write(ansi.BOLD)
    if underline:
        out.write(ansi.UNDERLINE)
    if italic:
        out.write(ansi.ITALIC)


def _draw_wrapped(text, x, y, w, h):
    """Write text in rows of width w, padded with spaces; return the next row."""
    out = sys.stdout
    row = y
    pos = 0
    while pos < len(text) and row - y < h:
        ansi.move_cursor(row, x)
        chunk = text[pos:pos + w]
        out.write(chunk.ljust(w))
        pos += len(chunk)
        row += 1
    return row


class Text(Component):
    """Text from a string or from a callable evaluated at every render."""

    def __init__(self, value, style=None):
        self._provider = _as_provider(value)
        self.style = style if style is not None else TextStyle()

    @property
    def text(self):
        """The current text."""
        return self._provider()

    def get_preferred_height(self, width):
        if width <= 0:
            return 1
        lines = 1
        length = 0
        for ch in self.text:
            if ch == "\n":
                lines += 1
                length = 0
            else:
                length += 1
                if length >= width:
                    lines += 1
                    length = 0
        return lines

    def render(self, x, y, w, h):
        value = self.text
        if w <= 0 or h <= 0 or not value:
            return
        s = self.style
        _emit_style(s.color, s.background_color, s.bold, s.underline, s.italic)
        row = _draw_wrapped(value, x, y, w, h)
        sys.stdout.write(ansi.RESET)
        while row - y < h:
            ansi.move_cursor(row, x)
            sys.stdout.write(" " * w)
            row += 1