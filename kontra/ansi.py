"""ANSI escape sequences and helpers for cursor and screen control."""

import shutil
import sys

# Box drawing characters (plain ASCII so every terminal shows them).
TL = "+"
TR = "+"
BL = "+"
BR = "+"
H = "-"
V = "|"

# Cursor control
CLEAR_SCREEN = "\033[2J"
CURSOR_HOME = "\033[H"
SAVE_CURSOR = "\033[s"
RESTORE_CURSOR = "\033[u"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

# Screen clearing
CLEAR_TO_END = "\033[J"
CLEAR_TO_START = "\033[1J"
CLEAR_LINE = "\033[K"
CLEAR_LINE_TO_START = "\033[1K"
CLEAR_ENTIRE_LINE = "\033[2K"

# Text styles
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
ITALIC = "\033[3m"
UNDERLINE = "\033[4m"
INVERSE = "\033[7m"
STRIKETHROUGH = "\033[9m"

# Foreground colours
FG_BLACK = "\033[30m"
FG_RED = "\033[31m"
FG_GREEN = "\033[32m"
FG_YELLOW = "\033[33m"
FG_BLUE = "\033[34m"
FG_MAGENTA = "\033[35m"
FG_CYAN = "\033[36m"
FG_WHITE = "\033[37m"

FG_BRIGHT_BLACK = "\033[90m"
FG_BRIGHT_RED = "\033[91m"
FG_BRIGHT_GREEN = "\033[92m"
FG_BRIGHT_YELLOW = "\033[93m"
FG_BRIGHT_BLUE = "\033[94m"
FG_BRIGHT_MAGENTA = "\033[95m"
FG_BRIGHT_CYAN = "\033[96m"
FG_BRIGHT_WHITE = "\033[97m"

FG_DEFAULT = "\033[39m"

# Background colours
BG_BLACK = "\033[40m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"
BG_YELLOW = "\033[43m"
BG_BLUE = "\033[44m"
BG_MAGENTA = "\033[45m"
BG_CYAN = "\033[46m"
BG_WHITE = "\033[47m"

BG_BRIGHT_BLACK = "\033[100m"
BG_BRIGHT_RED = "\033[101m"
BG_BRIGHT_GREEN = "\033[102m"
BG_BRIGHT_YELLOW = "\033[103m"
BG_BRIGHT_BLUE = "\033[104m"
BG_BRIGHT_MAGENTA = "\033[105m"
BG_BRIGHT_CYAN = "\033[106m"
BG_BRIGHT_WHITE = "\033[107m"

BG_DEFAULT = "\033[49m"


def _write(text):
    sys.stdout.write(text)


def move_cursor(row, col):
    """Move the cursor to a 1-based row and column."""
    _write(f"\033[{row};{col}H")


def move_up(n=1):
    _write(f"\033[{n}A")


def move_down(n=1):
    _write(f"\033[{n}B")


def move_right(n=1):
    _write(f"\033[{n}C")


def move_left(n=1):
    _write(f"\033[{n}D")


def clear_screen():
    """Clear the whole screen and put the cursor at the top left."""
    _write(CLEAR_SCREEN + CURSOR_HOME)


def clear_line():
    _write(CLEAR_ENTIRE_LINE)


def hide_cursor():
    _write(HIDE_CURSOR)


def show_cursor():
    _write(SHOW_CURSOR)


def save_cursor():
    _write(SAVE_CURSOR)


def restore_cursor():
    _write(RESTORE_CURSOR)


def get_terminal_size():
    """Return the terminal size as (columns, rows)."""
    size = shutil.get_terminal_size()
    return size.columns, size.lines