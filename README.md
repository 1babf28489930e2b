# kontra

kontra builds terminal user interfaces out of small components that draw
themselves with ANSI escape sequences. A screen holds a tree of components;
containers split the space they are given among their children, and leaf
components draw text, buttons and input boxes into the area they receive.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Components

| Module             | What it provides                                                        |
|--------------------|-------------------------------------------------------------------------|
| `kontra.component` | `Component`, the abstract base every component derives from             |
| `kontra.text`      | `Text` and `TextStyle`: static or computed text, wrapped to width       |
| `kontra.button`    | `Button` and `ButtonStyle`: a label with an active state and a click    |
| `kontra.input_box` | `InputBox`: a bordered, editable field, optionally wrapped              |
| `kontra.flex`      | `Flex` and `FlexDirection`: split space evenly in a row or column       |
| `kontra.stack`     | `List`: stack children vertically at their preferred heights            |
| `kontra.border`    | `Border`: draw a box around children                                    |
| `kontra.screen`    | `Screen`: the root; clears the terminal and sizes to it                 |
| `kontra.runtime`   | `init`, `shutdown`, `read_key` and the `run` event loop                 |
| `kontra.ansi`      | escape-sequence constants, cursor helpers and `get_terminal_size`       |
| `kontra.utils`     | `chain`, to configure a component inline and get it back                |
| `kontra.demo`      | `build_button_demo`, `build_input_demo` and the `main` demo command     |

Every component has `render(x, y, w, h)`, which writes it to standard output
with its top-left corner at column `x`, row `y` (both counted from 1), and
`get_preferred_height(width)`, which says how many rows it wants for a given
width (1 unless a component says otherwise).

### Layout

- `Flex(direction, *components)` divides its width (`FlexDirection.ROW`) or
  height (`FlexDirection.COLUMN`) evenly among its children, leaving `gap`
  cells between them. `set_gap` and `set_padding` return the container, so
  calls can be chained; `add` and `clear` change the children.
- `List(*components)` places children one below another, each at the height
  returned by its `get_preferred_height`, with `gap` rows between them. It
  raises `RuntimeError` when the row a child would start on is not less than
  the height it was given.
- `Border(*components)` draws an ASCII frame (`+`, `-`, `|`) and splits the
  inside evenly among its children, shifting and shrinking each by `padding`.
  Given less than two cells in either direction it draws no frame and just
  stacks its children.
- `Screen(*components)` clears the terminal and renders each child over a
  share of the terminal: its `w` and `h` are percentages of the terminal's
  columns and rows.

### Widgets

- `Text(value, style=None)` takes a string or a function returning one. The
  text is cut into rows of the given width, padded with spaces, and the rest
  of the area is blanked.
- `Button(label, on_click=None, style=None)` draws its label like `Text`,
  using `color`/`background_color` from its `ButtonStyle`, or the `_active`
  variants while `active` is true. `click()` calls `on_click`.
- `InputBox()` keeps `text` and `cursor`. While `active` is true,
  `handle_input(ch)` inserts printable characters at the cursor, deletes
  before it on backspace (`"\b"` or DEL), and ignores Escape. With `wrap`
  set, the text flows over all inner rows and `get_preferred_height` grows
  with it; otherwise one row scrolls to keep the cursor in view.

## Example

```python
from kontra import ansi
from kontra.border import Border
from kontra.button import Button, ButtonStyle
from kontra.flex import Flex, FlexDirection
from kontra.runtime import run
from kontra.screen import Screen
from kontra.stack import List
from kontra.text import Text, TextStyle
from kontra.utils import chain

state = {"title": "press enter"}

title = Text(lambda: state["title"], TextStyle(color=ansi.FG_BLACK, background_color=ansi.BG_GREEN, bold=True))

def clicked():
    state["title"] = "clicked"

submit = Button(
    "Submit",
    clicked,
    ButtonStyle(
        color=ansi.FG_WHITE,
        color_active=ansi.FG_BLACK,
        background_color=ansi.BG_BLACK,
        background_color_active=ansi.BG_BLUE,
        bold=True,
    ),
)
submit.active = True

layout = Flex(FlexDirection.ROW, title, chain(List(submit), lambda stack: stack.set_gap(1)))
screen = Screen(Border(layout))

def on_input(key):
    if key == chr(17):  # Ctrl+Q
        raise SystemExit(0)
    if key in ("\n", "\r"):
        submit.click()

run(screen, on_input)
```

`Text` and `Button` accept either a plain string or a function returning a
string; a function is called again on every redraw, so the display follows
whatever state it reads.

## The event loop

`run(screen, on_input=None, read_key=read_key)` hides the cursor, then polls
for keys about every 16 ms. Each key is passed to `on_input`, and the screen
is redrawn (at 100% of the terminal's width and 95% of its height) once at
the start and after every key. The loop only ends when `on_input` or
`read_key` raises: `SystemExit` and `KeyboardInterrupt` pass through, any
other exception is printed on standard error and ends the loop. The terminal
attributes are reset and the cursor shown again in every case.

`read_key()` returns one waiting character from standard input, or `None` if
there is none. A different function can be passed as `read_key`, for
instance to feed keys from a script.

## Demo

Two demos are included: a title with two buttons, and two input boxes whose
text is echoed in titles above them.

```
kontra-demo
kontra-demo input
```

The first runs the button demo (also `kontra-demo button`). Tab moves between
the widgets, Enter presses the active button, and Ctrl+Q quits.

## Limitations

- There is no focus handling: the program moves `active` between widgets
  itself, as the demos do.
- `InputBox` treats `"K"` and `"M"` as the left and right arrow codes, so
  those two letters move the cursor instead of being typed.
- `padding` on `Flex` and `List` is stored but not used when rendering.
- Each render writes the whole tree again; there is no diffing of the
  terminal contents.