"""Title and offset options."""

from __future__ import annotations

from typing import TypeVar

from gnuspecs.specs import Specs, format_number, remove_extra_whitespaces
from gnuspecs.text import TextSpecs

_T = TypeVar("_T", bound="TitleSpecsMixin")


class OffsetSpecs(Specs):
    """An offset of a text element along x and y."""

    def __init__(self) -> None:
        self._x = ""
        self._y = ""

    def shift_along_x(self, chars: float) -> OffsetSpecs:
        """Shift along x by the given number of characters."""
        self._x = "character " + format_number(float(chars))
        return self

    def shift_along_y(self, chars: float) -> OffsetSpecs:
        """Shift along y by the given number of characters."""
        self._y = "character " + format_number(float(chars))
        return self

    def shift_along_graph_x(self, val: float) -> OffsetSpecs:
        """Shift along x in graph coordinates."""
        self._x = "graph " + format_number(float(val))
        return self

    def shift_along_graph_y(self, val: float) -> OffsetSpecs:
        """Shift along y in graph coordinates."""
        self._y = "graph " + format_number(float(val))
        return self

    def shift_along_screen_x(self, val: float) -> OffsetSpecs:
        """Shift along x in screen coordinates."""
        self._x = "screen " + format_number(float(val))
        return self

    def shift_along_screen_y(self, val: float) -> OffsetSpecs:
        """Shift along y in screen coordinates."""
        self._y = "screen " + format_number(float(val))
        return self

    def repr(self) -> str:
        if not self._x and not self._y:
            return ""
        x = self._x or "character 0"
        y = self._y or "character 0"
        return f"offset {x}, {y}"


class TitleSpecsMixin:
    """Adds title text, text style and offset options to a specification class."""

    _title_value: str = "''"
    _title_text: TextSpecs | None = None
    _title_offset: OffsetSpecs | None = None

    def _text_specs(self) -> TextSpecs:
        if self._title_text is None:
            self._title_text = TextSpecs()
        return self._title_text

    def _offset_specs(self) -> OffsetSpecs:
        if self._title_offset is None:
            self._title_offset = OffsetSpecs()
        return self._title_offset

    def title(self: _T, title: str) -> _T:
        """Set the title text."""
        self._title_value = f"'{title}'"
        return self

    def title_shift_along_x(self: _T, chars: float) -> _T:
        """Shift the title along x by a number of characters."""
        self._offset_specs().shift_along_x(chars)
        return self

    def title_shift_along_y(self: _T, chars: float) -> _T:
        """Shift the title along y by a number of characters."""
        self._offset_specs().shift_along_y(chars)
        return self

    def title_shift_along_graph_x(self: _T, val: float) -> _T:
        """Shift the title along x in graph coordinates."""
        self._offset_specs().shift_along_graph_x(val)
        return self

    def title_shift_along_graph_y(self: _T, val: float) -> _T:
        """Shift the title along y in graph coordinates."""
        self._offset_specs().shift_along_graph_y(val)
        return self

    def title_shift_along_screen_x(self: _T, val: float) -> _T:
        """Shift the title along x in screen coordinates."""
        self._offset_specs().shift_along_screen_x(val)
        return self

    def title_shift_along_screen_y(self: _T, val: float) -> _T:
        """Shift the title along y in screen coordinates."""
        self._offset_specs().shift_along_screen_y(val)
        return self

    def title_text_color(self: _T, color: str) -> _T:
        """Set the colour of the title text."""
        self._text_specs().text_color(color)
        return self

    def title_font_name(self: _T, name: str) -> _T:
        """Set the font name of the title text."""
        self._text_specs().font_name(name)
        return self

    def title_font_size(self: _T, size: int) -> _T:
        """Set the font point size of the title text."""
        self._text_specs().font_size(size)
        return self

    def title_repr(self) -> str:
        """Return the title options, or an empty string when there is no title."""
        if self._title_value == "''":
            return ""
        return remove_extra_whitespaces(
            f"title {self._title_value} {self._text_specs().repr()} "
            f"{self._offset_specs().repr()}"
        )


class TitleSpecs(TitleSpecsMixin, Specs):
    """Stand-alone title options."""

    def repr(self) -> str:
        return self.title_repr()