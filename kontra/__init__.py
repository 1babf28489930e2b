"""Composable components for drawing terminal user interfaces with ANSI escapes."""

__version__ = "0.1.0"

__all__ = [
    "ansi",
    "border",
    "button",
    "component",
    "demo",
    "flex",
    "input_box",
    "runtime",
    "screen",
    "stack",
    "text",
    "utils",
]