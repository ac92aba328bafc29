"""Minor tic options for one axis."""

from __future__ import annotations

from gnuspecs.specs import Specs, format_number, remove_extra_whitespaces


class TicsSpecsMinor(Specs):
    """The minor tics of a specific axis."""

    def __init__(self, axis: str) -> None:
        if not axis:
            raise ValueError(
                "You have provided an empty string in `axis` argument of TicsSpecsMinor."
            )
        self._axis = axis
        self._frequency = ""
        self._visible = True

    def show(self, value: bool = True) -> TicsSpecsMinor:
        """Show or hide the minor tics."""
        self._visible = bool(value)
        return self

    def hide(self) -> TicsSpecsMinor:
        """Hide the minor tics."""
        return self.show(False)

    def is_hidden(self) -> bool:
        """Return True if the minor tics are hidden."""
        return not self._visible

    def automatic(self) -> TicsSpecsMinor:
        """Let gnuplot choose the number of minor tics."""
        self._frequency = ""
        return self

    def number(self, value: int) -> TicsSpecsMinor:
        """Set the number of minor tics between major tics."""
        self._frequency = format_number(max(int(value), 0) + 1)
        return self

    def repr(self) -> str:
        if self.is_hidden():
            return f"unset m{self._axis}tics"
        return remove_extra_whitespaces(f"set m{self._axis}tics {self._frequency}")