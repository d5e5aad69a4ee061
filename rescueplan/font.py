"""Styled fonts: family, style, size and colour."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from enum import Enum

from rescueplan.color import Color

__all__ = ["FontFamily", "FontStyle", "Font"]


class FontFamily(Enum):
    SERIF = "serif"
    SANS_SERIF = "sans_serif"
    MONOSPACE = "monospace"
    UNICODE_SERIF = "unicode_serif"
    UNICODE_SANS_SERIF = "unicode_sans_serif"
    UNICODE_MONOSPACE = "unicode_monospace"


class FontStyle(Enum):
    NORMAL = "<normal>"
    BOLD = "BOLD"
    ITALIC = "ITALIC"
    BOLD_ITALIC = "BOLDITALIC"


# Per platform: (macOS, Windows, other).
_FAMILY_NAMES = {
    FontFamily.SERIF: ("Didot", "Serif", "Serif"),
    FontFamily.SANS_SERIF: ("Helvetica", "Sans Serif", "Sans Serif"),
    FontFamily.MONOSPACE: ("Monaco", "Monospace", "Monospace"),
    FontFamily.UNICODE_SERIF: ("Times", "Times New Roman", "Serif"),
    FontFamily.UNICODE_SANS_SERIF: ("Lucida Grande", "Lucida Sans Unicode", "Sans Serif"),
    FontFamily.UNICODE_MONOSPACE: ("Lucida Grande", "Lucida Sans Unicode", "Monospace"),
}


def _family_name(family: FontFamily) -> str:
    mac, windows, other = _FAMILY_NAMES[family]
    if sys.platform == "darwin":
        return mac
    if sys.platform == "win32":
        return windows
    return other


@dataclass(frozen=True)
class Font:
    """An immutable font description."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = field(default_factory=lambda: Color.BLACK)

    def with_family(self, family: FontFamily) -> Font:
        return replace(self, family=family)

    def with_style(self, style: FontStyle) -> Font:
        return replace(self, style=style)

    def with_size(self, size: int) -> Font:
        return replace(self, size=size)

    def with_color(self, color: Color) -> Font:
        return replace(self, color=color)

    def library_string(self) -> str:
        """Return the ``Family-STYLE-size`` string used by the graphics layer."""
        result = _family_name(self.family)
        if self.style is not FontStyle.NORMAL:
            result += "-" + self.style.value
        return f"{result}-{self.size}"