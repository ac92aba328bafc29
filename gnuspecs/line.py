"""Line options: style, type, width, colour and dash type."""

from __future__ import annotations

from typing import TypeVar

from gnuspecs.specs import Specs, format_number, remove_extra_whitespaces

_T = TypeVar("_T", bound="LineSpecsMixin")


class LineSpecsMixin:
    """Adds line options to a specification class."""

    _linestyle: str = ""
    _linetype: str = ""
    _linewidth: str = ""
    _linecolor: str = ""
    _dashtype: str = ""

    def line_style(self: _T, value: int) -> _T:
        """Set the line style."""
        self._linestyle = "linestyle " + format_number(value)
        return self

    def line_type(self: _T, value: int) -> _T:
        """Set the line type."""
        self._linetype = "linetype " + format_number(value)
        return self

    def line_width(self: _T, value: int) -> _T:
        """Set the line width."""
        self._linewidth = "linewidth " + format_number(value)
        return self

    def line_color(self: _T, value: str) -> _T:
        """Set the line colour."""
        self._linecolor = f"linecolor '{value}'"
        return self

    def dash_type(self: _T, value: int) -> _T:
        """Set the dash type."""
        self._dashtype = "dashtype " + format_number(value)
        return self

    def line_repr(self) -> str:
        """Return the line options as a gnuplot string."""
        parts = (
            self._linestyle,
            self._linetype,
            self._linewidth,
            self._linecolor,
            self._dashtype,
        )
        return remove_extra_whitespaces(" ".join(parts))


class LineSpecs(LineSpecsMixin, Specs):
    """Stand-alone line options."""

    def repr(self) -> str:
        return self.line_repr()