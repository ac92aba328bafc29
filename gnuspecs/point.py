"""Point options: point type and size."""

from __future__ import annotations

from typing import TypeVar

from gnuspecs.specs import Specs, format_number, remove_extra_whitespaces

_T = TypeVar("_T", bound="PointSpecsMixin")


class PointSpecsMixin:
    """Adds point options to a specification class."""

    _pointtype: str = ""
    _pointsize: str = ""

    def point_type(self: _T, value: int) -> _T:
        """Set the point type."""
        self._pointtype = "pointtype " + format_number(value)
        return self

    def point_size(self: _T, value: int) -> _T:
        """Set the point size."""
        self._pointsize = "pointsize " + format_number(value)
        return self

    def point_repr(self) -> str:
        """Return the point options as a gnuplot string."""
        return remove_extra_whitespaces(f"{self._pointtype} {self._pointsize}")


class PointSpecs(PointSpecsMixin, Specs):
    """Stand-alone point options."""

    def repr(self) -> str:
        return self.point_repr()