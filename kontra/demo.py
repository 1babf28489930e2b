"""Two small interactive demos: switching buttons and a pair of input boxes."""

import argparse

from . import ansi, runtime
from .border import Border
from .button import Button, ButtonStyle
from .flex import Flex, FlexDirection
from .input_box import InputBox
from .screen import Screen
from .stack import List
from .text import Text, TextStyle
from .utils import chain

KEY_QUIT = chr(17)  # Ctrl+Q
KEY_TAB = "\t"


def _submit_style():
    return ButtonStyle(
        background_color=ansi.BG_BLACK,
        background_color_active=ansi.BG_BLUE,
        color=ansi.FG_WHITE,
        color_active=ansi.FG_BLACK,
        bold=True,
    )


def build_button_demo():
    """Build a title and two buttons; Tab switches, Enter clicks.

    Returns the screen and the key handler to pass to the runtime.
    """
    title_text = "lmao"

    def set_title(value):
        nonlocal title_text
        title_text = value

    title = Text(lambda: title_text, TextStyle(ansi.FG_BLACK, ansi.BG_GREEN, True, True))
    button_1 = Button("Submit", lambda: set_title("clicked "), _submit_style())
    button_2 = Button("Submit", lambda: set_title("clicked 2"), _submit_style())
    button_1.active = True
    button_2.active = False
    active_button = button_1

    layout = Flex(FlexDirection.ROW, title, List(button_1, button_2))
    screen = Screen(Border(layout))

    def on_input(ch):
        nonlocal active_button
        if ch == KEY_QUIT:
            raise SystemExit(0)
        if ch == KEY_TAB:
            other = button_2 if active_button is button_1 else button_1
            active_button.active = False
            other.active = True
            active_button = other
        if ch in ("\n", "\r"):
            active_button.click()

    return screen, on_input


def build_input_demo():
    """Build two input boxes whose text is echoed in titles; Tab switches.

    Returns the screen and the key handler to pass to the runtime.
    """
    titles = ["", ""]
    title_1 = Text(lambda: titles[0], TextStyle(ansi.FG_BLACK, ansi.BG_GREEN, True, True))
    title_2 = Text(lambda: titles[1], TextStyle(ansi.FG_BLACK, ansi.BG_BRIGHT_CYAN, True, True))

    input_1 = InputBox()
    input_2 = InputBox()
    input_1.active = True
    input_1.wrap = True
    input_2.active = False
    active_input = input_1

    layout = Flex(
        FlexDirection.ROW,
        chain(List(title_1, title_2), lambda stack: stack.set_gap(3)),
        chain(List(input_1, input_2), lambda stack: stack.set_gap(3)),
    )
    layout.set_gap(5)
    screen = Screen(chain(Border(layout), lambda border: border.set_padding(0)))

    def on_input(ch):
        nonlocal active_input
        if ch == KEY_QUIT:
            raise SystemExit(0)
        if ch == KEY_TAB:
            input_1.active = not input_1.active
            input_2.active = not input_2.active
            active_input = input_1 if input_1.active else input_2
        else:
            active_input.handle_input(ch)
            titles[0 if active_input is input_1 else 1] = active_input.text

    return screen, on_input


_DEMOS = {"button": build_button_demo, "input": build_input_demo}


def main(argv=None):
    """Run one of the demos until Ctrl+Q is pressed."""
    parser = argparse.ArgumentParser(prog="kontra", description="Terminal UI demos.")
    parser.add_argument("demo", nargs="?", choices=sorted(_DEMOS), default="button")
    args = parser.parse_args(argv)
    screen, on_input = _DEMOS[args.demo]()
    runtime.run(screen, on_input)
    return 0