"""A bordered single- or multi-line text entry field."""

import sys

from . import ansi
from .component import Component

KEY_BACKSPACE = "\b"
KEY_DELETE = chr(127)
KEY_ESCAPE = chr(27)
# Codes that follow the 0xE0 prefix the Windows console sends for arrow keys.
KEY_LEFT = chr(75)
KEY_RIGHT = chr(77)


def _is_printable(ch):
    return 32 <= ord(ch) <= 126


class InputBox(Component):
    """Editable text inside a box; only reacts to keys while active."""

    def __init__(self):
        self._text = ""
        self.cursor = 0
        self.active = False
        self.wrap = False

    @property
    def text(self):
        """The text typed so far."""
        return self._text

    def get_preferred_height(self, width):
        if width <= 2 or not self.wrap:
            return 3
        inner_w = width - 2
        lines = 1
        length = 0
        for ch in self._text:
            if ch == "\n":
                lines += 1
                length = 0
            else:
                length += 1
                if length >= inner_w:
                    lines += 1
                    length = 0
        return lines + 2

    def handle_input(self, ch):
        """Apply one key to the text and cursor."""
        if not self.active:
            return
        if ch in (KEY_BACKSPACE, KEY_DELETE):
            if self.cursor > 0:
                self._text = self._text[:self.cursor - 1] + self._text[self.cursor:]
                self.cursor -= 1
        elif ch == KEY_ESCAPE:
            pass
        elif ch == KEY_LEFT:
            if self.cursor > 0:
                self.cursor -= 1
        elif ch == KEY_RIGHT:
            if self.cursor < len(self._text):
                self.cursor += 1
        elif _is_printable(ch):
            self._text = self._text[:self.cursor] + ch + self._text[self.cursor:]
            self.cursor += 1

    def _row_content(self, row, inner_w):
        line = " " * inner_w
        if self.wrap:
            start = row * inner_w
            visible = self._text[start:start + inner_w] if start < len(self._text) else ""
        elif row == 0:
            offset = max(0, self.cursor - inner_w)
            visible = self._text[offset:offset + inner_w]
        else:
            visible = ""
        return visible + line[len(visible):]

    def render(self, x, y, w, h):
        out = sys.stdout
        inner_w = w - 2
        inner_h = h - 2

        ansi.move_cursor(y, x)
        out.write(ansi.TL + ansi.H * inner_w + ansi.TR)

        for row in range(inner_h):
            ansi.move_cursor(y + 1 + row, x)
            line = self._row_content(row, inner_w)
            out.write(ansi.V + line + ansi.V)

            if self.active and inner_w > 0:
                if self.wrap:
                    cur_row, cur_col = divmod(self.cursor, inner_w)
                else:
                    cur_row, cur_col = 0, min(self.cursor, inner_w - 1)
                if row == cur_row and cur_col < inner_w:
                    out.write(ansi.SAVE_CURSOR)
                    ansi.move_cursor(y + 1 + cur_row, x + 1 + cur_col)
                    out.write(ansi.INVERSE + line[cur_col] + ansi.RESET)
                    out.write(ansi.RESTORE_CURSOR)

        ansi.move_cursor(y + h - 1, x)
        out.write(ansi.BL + ansi.H * inner_w + ansi.BR)