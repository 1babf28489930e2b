"""Base class for everything that can be drawn on the terminal."""

from abc import ABC, abstractmethod


class Component(ABC):
    """A drawable element placed in a rectangle of terminal cells."""

    @abstractmethod
    def render(self, x, y, w, h):
        """Draw the component with its top-left cell at column x, row y."""

    def get_preferred_height(self, width):
        """Return how many rows the component wants for the given width."""
        return 1