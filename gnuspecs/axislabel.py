"""Axis label options."""

from __future__ import annotations

from gnuspecs.specs import Specs, remove_extra_whitespaces
from gnuspecs.text import TextSpecsMixin


class AxisLabelSpecs(TextSpecsMixin, Specs):
    """The label of one axis (x, y, z, ...)."""

    def __init__(self, axis: str) -> None:
        self._axis = axis
        self._text = ""
        self._rotate = ""

    def text(self, text: str) -> AxisLabelSpecs:
        """Set the label text."""
        self._text = f"'{text}'"
        return self

    def rotate_by(self, degrees: int) -> AxisLabelSpecs:
        """Rotate the label by the given angle in degrees."""
        self._rotate = f"rotate by {int(degrees)}"
        return self

    def rotate_axis_parallel(self) -> AxisLabelSpecs:
        """Rotate the label parallel to its axis (3D plots)."""
        self._rotate = "rotate parallel"
        return self

    def rotate_none(self) -> AxisLabelSpecs:
        """Do not rotate the label."""
        self._rotate = "norotate"
        return self

    def repr(self) -> str:
        if not self._text and not self._rotate:
            return ""
        rotate = f"{self._rotate} " if self._rotate else ""
        return remove_extra_whitespaces(
            f"set {self._axis}label {self._text} {self.text_repr()} {rotate}"
        )