"""RGB colours with a few named presets."""

from __future__ import annotations

import math
import random as _random
from functools import total_ordering

__all__ = ["Color"]


@total_ordering
class Color:
    """An immutable 24-bit RGB colour; defaults to black."""

    __slots__ = ("_value",)

    WHITE: Color
    BLACK: Color
    RED: Color
    GREEN: Color
    BLUE: Color
    YELLOW: Color
    CYAN: Color
    MAGENTA: Color
    GRAY: Color

    def __init__(self, red: int = 0, green: int = 0, blue: int = 0) -> None:
        if not all(0 <= component < 256 for component in (red, green, blue)):
            raise ValueError("Color values out of range.")
        self._value = (int(red) << 16) + (int(green) << 8) + int(blue)

    @classmethod
    def from_hex(cls, hex_value: int) -> Color:
        """Build a colour from a 0xRRGGBB value."""
        if not 0 <= hex_value <= 0xFFFFFF:
            raise ValueError("Color.from_hex(): Value out of range.")
        return cls((hex_value >> 16) & 0xFF, (hex_value >> 8) & 0xFF, hex_value & 0xFF)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> Color:
        """Build a colour from hue, saturation and value, each in [0, 1]."""
        if not (0 <= h <= 1 and 0 <= s <= 1 and 0 <= v <= 1):
            raise ValueError("Color.from_hsv(): Values out of range.")

        def channel(n: int) -> int:
            k = math.fmod(n + h * 6, 6)
            return int(255 * (v - v * s * max(0.0, min(k, 4 - k, 1.0))))

        return cls(channel(5), channel(3), channel(1))

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Color:
        """Return a uniformly random colour."""
        source = rng if rng is not None else _random
        return cls(source.randint(0, 255), source.randint(0, 255), source.randint(0, 255))

    @property
    def red(self) -> int:
        return (self._value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self._value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self._value & 0xFF

    def to_rgb(self) -> int:
        """Return the colour as a 0xRRGGBB integer."""
        return self._value

    def to_html(self) -> str:
        """Return the colour as an HTML ``#rrggbb`` string."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Color) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        for name in _NAMED:
            if getattr(Color, name) == self:
                return f"Color.{name}"
        return self.to_html()

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


_NAMED = ("BLACK", "BLUE", "CYAN", "GRAY", "GREEN", "MAGENTA", "RED", "WHITE", "YELLOW")

Color.WHITE = Color.from_hex(0xFFFFFF)
Color.BLACK = Color.from_hex(0x000000)
Color.RED = Color.from_hex(0xFF0000)
Color.GREEN = Color.from_hex(0x00FF00)
Color.BLUE = Color.from_hex(0x0000FF)
Color.YELLOW = Color.from_hex(0xFFFF00)
Color.CYAN = Color.from_hex(0x00FFFF)
Color.MAGENTA = Color.from_hex(0xFF00FF)
Color.GRAY = Color.from_hex(0x808080)