"""The event loop that reads keys and redraws a screen when needed."""

import os
import select
import sys
import time

from . import ansi

FRAME_DELAY = 0.016
SCREEN_WIDTH_PERCENT = 100
SCREEN_HEIGHT_PERCENT = 95


def init():
    """Prepare the terminal for drawing by hiding the cursor."""
    ansi.hide_cursor()
    sys.stdout.flush()


def shutdown():
    """Reset text attributes and show the cursor again."""
    sys.stdout.write(ansi.RESET + ansi.SHOW_CURSOR)
    sys.stdout.flush()


def _read_key_windows():
    import msvcrt

    if msvcrt.kbhit():
        return msvcrt.getwch()
    return None


def _read_byte_raw(fd):
    import termios

    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        return os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def read_key():
    """Return one pending key from standard input, or None if none is waiting."""
    if os.name == "nt":
        return _read_key_windows()
    fd = sys.stdin.fileno()
    ready, _, _ = select.select([fd], [], [], 0)
    if not ready:
        return None
    data = _read_byte_raw(fd) if os.isatty(fd) else os.read(fd, 1)
    if not data:
        return None
    return chr(data[0])


def run(screen, on_input=None, read_key=read_key):
    """Poll for keys, pass them to on_input and redraw the screen after each one.

    The loop runs until on_input (or read_key) raises. SystemExit and
    KeyboardInterrupt propagate; any other exception is reported on
    standard error and ends the loop. The terminal is restored either way.
    """
    init()
    dirty = True
    try:
        while True:
            key = read_key()
            if key is not None:
                if on_input is not None:
                    on_input(key)
                dirty = True
            if dirty:
                ansi.clear_screen()
                screen.render(1, 1, SCREEN_WIDTH_PERCENT, SCREEN_HEIGHT_PERCENT)
                sys.stdout.flush()
                dirty = False
            time.sleep(FRAME_DELAY)
    except Exception as exc:  # noqa: BLE001 - report and leave the loop
        sys.stderr.write(
            f"{ansi.BG_RED}{ansi.FG_BLACK}\n[Runtime Error] {exc}\n{ansi.RESET}"
        )
        sys.stderr.flush()
    finally:
        shutdown()