"""Plot border options."""

from __future__ import annotations

from gnuspecs.line import LineSpecsMixin
from gnuspecs.specs import Specs, remove_extra_whitespaces

DEFAULT_BORDER_LINETYPE = 1
DEFAULT_BORDER_LINEWIDTH = 2
DEFAULT_BORDER_LINECOLOR = "#404040"

_NUM_EDGES = 13


class BorderSpecs(LineSpecsMixin, Specs):
    """Which border edges are drawn, where they are placed, and their line style."""

    def __init__(self) -> None:
        self._encoding = 0
        self._depth = ""
        self.left()
        self.bottom()
        self.line_type(DEFAULT_BORDER_LINETYPE)
        self.line_width(DEFAULT_BORDER_LINEWIDTH)
        self.line_color(DEFAULT_BORDER_LINECOLOR)
        self.front()

    def _set(self, bit: int) -> BorderSpecs:
        if not 0 <= bit < _NUM_EDGES:
            raise IndexError(f"border edge {bit} out of range")
        self._encoding |= 1 << bit
        return self

    def front(self) -> BorderSpecs:
        """Draw the border in front of the plotted elements."""
        self._depth = "front"
        return self

    def back(self) -> BorderSpecs:
        """Draw the border behind the plotted elements."""
        self._depth = "back"
        return self

    def behind(self) -> BorderSpecs:
        """Draw the border behind everything, including the grid."""
        self._depth = "behind"
        return self

    def clear(self) -> BorderSpecs:
        """Remove all border edges."""
        self._encoding = 0
        return self

    def none(self) -> BorderSpecs:
        """Remove all border edges (same as clear)."""
        return self.clear()

    def bottom(self) -> BorderSpecs:
        """Activate the bottom edge of a 2D plot."""
        return self._set(0)

    def left(self) -> BorderSpecs:
        """Activate the left edge of a 2D plot."""
        return self._set(1)

    def top(self) -> BorderSpecs:
        """Activate the top edge of a 2D plot."""
        return self._set(2)

    def right(self) -> BorderSpecs:
        """Activate the right edge of a 2D plot."""
        return self._set(3)

    def bottom_left_front(self) -> BorderSpecs:
        """Activate the bottom edge from the left corner to the front corner (3D)."""
        return self._set(0)

    def bottom_left_back(self) -> BorderSpecs:
        """Activate the bottom edge from the left corner to the back corner (3D)."""
        return self._set(1)

    def bottom_right_front(self) -> BorderSpecs:
        """Activate the bottom edge from the right corner to the front corner (3D)."""
        return self._set(2)

    def bottom_right_back(self) -> BorderSpecs:
        """Activate the bottom edge from the right corner to the back corner (3D)."""
        return self._set(3)

    def left_vertical(self) -> BorderSpecs:
        """Activate the left vertical edge (3D)."""
        return self._set(4)

    def back_vertical(self) -> BorderSpecs:
        """Activate the back vertical edge (3D)."""
        return self._set(5)

    def right_vertical(self) -> BorderSpecs:
        """Activate the right vertical edge (3D)."""
        return self._set(6)

    def front_vertical(self) -> BorderSpecs:
        """Activate the front vertical edge (3D)."""
        return self._set(7)

    def top_left_back(self) -> BorderSpecs:
        """Activate the top edge from the left corner to the back corner (3D)."""
        return self._set(8)

    def top_right_back(self) -> BorderSpecs:
        """Activate the top edge from the right corner to the back corner (3D)."""
        return self._set(9)

    def top_left_front(self) -> BorderSpecs:
        """Activate the top edge from the left corner to the front corner (3D)."""
        return self._set(10)

    def top_right_front(self) -> BorderSpecs:
        """Activate the top edge from the right corner to the front corner (3D)."""
        return self._set(11)

    def polar(self) -> BorderSpecs:
        """Activate the border used by polar plots."""
        return self._set(2)

    def repr(self) -> str:
        return remove_extra_whitespaces(
            f"set border {self._encoding} {self._depth} {self.line_repr()}"
        )