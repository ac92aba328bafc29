"""Options for a single plotted element."""

from __future__ import annotations

from gnuspecs.filled import FilledCurvesSpecsMixin
from gnuspecs.line import LineSpecsMixin
from gnuspecs.point import PointSpecsMixin
from gnuspecs.specs import Specs, option_value_str, remove_extra_whitespaces
from gnuspecs.types import ColumnIndex

DEFAULT_LINEWIDTH = 2


def _column(icol: ColumnIndex | int | str) -> ColumnIndex:
    return icol if isinstance(icol, ColumnIndex) else ColumnIndex(icol)


class DrawSpecs(LineSpecsMixin, PointSpecsMixin, FilledCurvesSpecsMixin, Specs):
    """What is plotted, how its columns are used, and how it is drawn."""

    def __init__(self, what: str, use: str, with_: str) -> None:
        self._what = what
        self._using = use
        self._with = with_
        self._title = ""
        self._xtic = ""
        self._ytic = ""
        self.line_width(DEFAULT_LINEWIDTH)

    def label(self, text: str) -> DrawSpecs:
        """Set the legend label of the element."""
        self._title = f"title '{text}'"
        return self

    def label_from_column_header(self, icolumn: int | None = None) -> DrawSpecs:
        """Take the legend label from a column header, optionally a given one."""
        if icolumn is None:
            self._title = "title columnheader"
        else:
            self._title = f"title columnheader({int(icolumn)})"
        return self

    def label_none(self) -> DrawSpecs:
        """Leave the element out of the legend."""
        self._title = "notitle"
        return self

    def label_default(self) -> DrawSpecs:
        """Let gnuplot derive the label from the plot expression."""
        self._title = ""
        return self

    def xtics(self, icol: ColumnIndex | int | str) -> DrawSpecs:
        """Use the given data column for the x tic labels."""
        self._xtic = f"xtic(stringcolumn({_column(icol).value}))"
        return self

    def ytics(self, icol: ColumnIndex | int | str) -> DrawSpecs:
        """Use the given data column for the y tic labels."""
        self._ytic = f"ytic(stringcolumn({_column(icol).value}))"
        return self

    def repr(self) -> str:
        use = self._using
        if self._xtic:
            use += ":" + self._xtic
        if self._ytic:
            use += ":" + self._ytic
        text = (
            f"{self._what} "
            f"{option_value_str('using', use)}"
            f"{self._title} "
            f"{option_value_str('with', self._with)}"
            f"{self.filled_curves_repr()} "
            f"{self.line_repr()} "
            f"{self.point_repr()} "
        )
        return remove_extra_whitespaces(text)