"""Options for gnuplot filled curves."""

from __future__ import annotations

from typing import TypeVar

from gnuspecs.specs import Specs, remove_extra_whitespaces

_T = TypeVar("_T", bound="FilledCurvesSpecsMixin")


class FilledCurvesSpecsMixin:
    """Adds filled-curve mode options to a specification class."""

    _fill_mode: str = ""

    def above(self: _T) -> _T:
        """Limit the filled area to above the curves."""
        self._fill_mode = "above"
        return self

    def below(self: _T) -> _T:
        """Limit the filled area to below the curves."""
        self._fill_mode = "below"
        return self

    def filled_curves_repr(self) -> str:
        """Return the filled-curve options as a gnuplot string."""
        return remove_extra_whitespaces(" " + self._fill_mode)


class FilledCurvesSpecs(FilledCurvesSpecsMixin, Specs):
    """Stand-alone filled-curve options."""

    def repr(self) -> str:
        return self.filled_curves_repr()