"""Font and text options."""

from __future__ import annotations

from typing import TypeVar

from gnuspecs.specs import Specs, format_number, remove_extra_whitespaces

DEFAULT_TEXTCOLOR = "#404040"

_F = TypeVar("_F", bound="FontSpecsMixin")
_T = TypeVar("_T", bound="TextSpecsMixin")


class FontSpecsMixin:
    """Adds font name and size options to a specification class."""

    _font_name: str = ""
    _font_size: str = ""

    def font_name(self: _F, name: str) -> _F:
        """Set the font name (e.g. Helvetica, Times)."""
        self._font_name = name
        return self

    def font_size(self: _F, size: int) -> _F:
        """Set the font point size."""
        self._font_size = format_number(size)
        return self

    def font_repr(self) -> str:
        """Return the font option, or an empty string when unset."""
        if not self._font_name and not self._font_size:
            return ""
        return f"font '{self._font_name},{self._font_size}'"


class TextSpecsMixin(FontSpecsMixin):
    """Adds text colour and enhanced-mode options to a specification class."""

    _enhanced: str = "enhanced"
    _text_color: str = f"'{DEFAULT_TEXTCOLOR}'"

    def text_color(self: _T, color: str) -> _T:
        """Set the text colour (e.g. "blue", "#404040")."""
        self._text_color = f"'{color}'"
        return self

    def enhanced(self: _T, value: bool = True) -> _T:
        """Turn enhanced text mode on or off."""
        self._enhanced = "enhanced" if value else "noenhanced"
        return self

    def text_repr(self) -> str:
        """Return the text options as a gnuplot string."""
        return remove_extra_whitespaces(
            f"{self._enhanced} textcolor {self._text_color} {self.font_repr()}"
        )


class TextSpecs(TextSpecsMixin, Specs):
    """Stand-alone text options."""

    def repr(self) -> str:
        return self.text_repr()