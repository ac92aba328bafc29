"""Small value types shared by the plotting specifications."""

from __future__ import annotations

from enum import Enum


class ColumnIndex:
    """A data column reference, either by number or by header name."""

    __slots__ = ("value",)

    def __init__(self, col: int | str = 0) -> None:
        if isinstance(col, str):
            self.value = f"'{col}'"
        elif isinstance(col, int):
            self.value = str(int(col))
        else:
            raise TypeError(
                f"column index must be an int or a str, not {type(col).__name__}"
            )

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"ColumnIndex({self.value})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColumnIndex):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)


class Extension(Enum):
    """File formats a plot can be saved to."""

    EMF = "emf"
    PNG = "png"
    SVG = "svg"
    PDF = "pdf"
    EPS = "eps"


def linspace(x0: float, x1: float, numintervals: int) -> list[float]:
    """Return numintervals + 1 evenly spaced values from x0 to x1."""
    if numintervals < 1:
        raise ValueError("numintervals must be at least 1")
    step_span = x1 - x0
    return [x0 + i * step_span / float(numintervals) for i in range(numintervals + 1)]


def unit_range(x0: int, x1: int) -> list[float]:
    """Return the values from x0 to x1 inclusive in unit steps."""
    incr = 1 if x1 > x0 else -1
    return [float(v) for v in range(x0, x1 + incr, incr)]