"""Frame options, as used around a legend."""

from __future__ import annotations

from typing import TypeVar

from gnuspecs.line import LineSpecs
from gnuspecs.specs import Specs, remove_extra_whitespaces

DEFAULT_LEGEND_FRAME_SHOW = False
DEFAULT_LEGEND_FRAME_LINEWIDTH = 1
DEFAULT_LEGEND_FRAME_LINECOLOR = "#404040"
DEFAULT_LEGEND_FRAME_LINETYPE = 1

_T = TypeVar("_T", bound="FrameSpecsMixin")


class FrameSpecsMixin:
    """Adds frame visibility and line options to a specification class."""

    _frame_visible: bool = DEFAULT_LEGEND_FRAME_SHOW
    _frame_line: LineSpecs | None = None

    def _frame_line_specs(self) -> LineSpecs:
        if self._frame_line is None:
            self._frame_line = (
                LineSpecs()
                .line_width(DEFAULT_LEGEND_FRAME_LINEWIDTH)
                .line_color(DEFAULT_LEGEND_FRAME_LINECOLOR)
                .line_type(DEFAULT_LEGEND_FRAME_LINETYPE)
            )
        return self._frame_line

    def frame_show(self: _T, value: bool = True) -> _T:
        """Show or hide the frame."""
        self._frame_visible = bool(value)
        return self

    def frame_hide(self: _T) -> _T:
        """Hide the frame."""
        return self.frame_show(False)

    def frame_line_style(self: _T, value: int) -> _T:
        """Set the line style of the frame."""
        self._frame_line_specs().line_style(value)
        return self

    def frame_line_type(self: _T, value: int) -> _T:
        """Set the line type of the frame."""
        self._frame_line_specs().line_type(value)
        return self

    def frame_line_width(self: _T, value: int) -> _T:
        """Set the line width of the frame."""
        self._frame_line_specs().line_width(value)
        return self

    def frame_line_color(self: _T, value: str) -> _T:
        """Set the line colour of the frame."""
        self._frame_line_specs().line_color(value)
        return self

    def frame_dash_type(self: _T, value: int) -> _T:
        """Set the dash type of the frame."""
        self._frame_line_specs().dash_type(value)
        return self

    def frame_repr(self) -> str:
        """Return the frame options as a gnuplot string."""
        if not self._frame_visible:
            return "nobox"
        return remove_extra_whitespaces(f"box {self._frame_line_specs().repr()}")


class FrameSpecs(FrameSpecsMixin, Specs):
    """Stand-alone frame options."""

    def repr(self) -> str:
        return self.frame_repr()