"""Base class for specification objects and gnuplot string helpers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

_EXTRA_SPACES = re.compile(r" {2,}")
_FORBIDDEN_PATH_CHARS = str.maketrans("", "", ':*?!"<>|')


class Specs(ABC):
    """An object that renders itself as a gnuplot command fragment."""

    @abstractmethod
    def repr(self) -> str:
        """Return the gnuplot formatted string for this object."""

    def __str__(self) -> str:
        return self.repr()


def format_number(value: object) -> str:
    """Format a value the way a default output stream would."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def remove_extra_whitespaces(text: str) -> str:
    """Collapse runs of spaces into one and trim both ends."""
    return _EXTRA_SPACES.sub(" ", text).strip()


def option_value_str(option: str, value: str) -> str:
    """Return "option value " or an empty string when value is empty."""
    return f"{option} {value} " if value else ""


def title_str(word: str) -> str:
    """Quote a title unless it is the columnheader keyword."""
    return word if word == "columnheader" else f"'{word}'"


def clean_path(path: str) -> str:
    """Strip characters that are not allowed in file paths."""
    return path.translate(_FORBIDDEN_PATH_CHARS)