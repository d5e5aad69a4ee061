"""A text console that records styled text and renders it as HTML."""

from __future__ import annotations

import html
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import IntFlag

from rescueplan.color import Color

__all__ = ["ConsoleStyle", "TextStyle", "ColorConsole", "DEFAULT_FONT_SIZE"]

DEFAULT_FONT_SIZE = 11

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """


class ConsoleStyle(IntFlag):
    """Font effects that can be combined with ``|``."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


@dataclass(frozen=True)
class TextStyle:
    """Colour, font effects and point size applied to a run of text."""

    color: Color = field(default_factory=lambda: Color.BLACK)
    font_style: ConsoleStyle = ConsoleStyle.NORMAL
    font_size: int = DEFAULT_FONT_SIZE

    def __post_init__(self) -> None:
        if self.font_size < 0:
            raise ValueError("Font size cannot be negative.")
        object.__setattr__(self, "font_style", ConsoleStyle(self.font_style))

    def css(self) -> str:
        """Return the inline CSS for this style."""
        parts = [f"color:{self.color.to_html()};"]
        if self.font_style & ConsoleStyle.BOLD:
            parts.append("font-weight:bold;")
        if self.font_style & ConsoleStyle.ITALIC:
            parts.append("font-style:italic;")
        parts.append(f"font-size:{self.font_size}pt;")
        return "".join(parts)


class ColorConsole:
    """A writable text stream whose output keeps the style it was written in.

    Text written is buffered until the style changes or the console is
    rendered, at which point it is stored as one run in the current style.
    """

    def __init__(self) -> None:
        self._style = TextStyle()
        self._buffer: list[str] = []
        self._contents: list[tuple[TextStyle, str]] = []

    @property
    def style(self) -> TextStyle:
        """The style applied to text written from now on."""
        return self._style

    @property
    def contents(self) -> tuple[tuple[TextStyle, str], ...]:
        """All runs of text written so far, each with its style."""
        self._flush_buffer()
        return tuple(self._contents)

    def write(self, text: str) -> int:
        """Append ``text`` in the current style; return its length."""
        self._buffer.append(text)
        return len(text)

    def flush(self) -> None:
        """Move buffered text into the recorded contents."""
        self._flush_buffer()

    def _flush_buffer(self) -> None:
        text = "".join(self._buffer)
        self._buffer.clear()
        if text:
            self._contents.append((self._style, text))

    def set_style(
        self,
        color: Color | None = None,
        style: ConsoleStyle = ConsoleStyle.NORMAL,
        size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        """Switch to a new style; text already written keeps its old style."""
        new_style = TextStyle(Color.BLACK if color is None else color, style, size)
        self._flush_buffer()
        self._style = new_style

    @contextmanager
    def styled(
        self,
        color: Color | None = None,
        style: ConsoleStyle | None = None,
        size: int | None = None,
    ) -> Iterator[ColorConsole]:
        """Temporarily change the style; omitted settings keep their values."""
        old = self._style
        self.set_style(
            old.color if color is None else color,
            old.font_style if style is None else style,
            old.font_size if size is None else size,
        )
        try:
            yield self
        finally:
            self.set_style(old.color, old.font_style, old.font_size)

    def clear(self) -> None:
        """Discard everything written so far."""
        self._flush_buffer()
        self._contents.clear()

    def render_html(self) -> str:
        """Return all text as an HTML document, one styled span per run."""
        self._flush_buffer()
        spans = "".join(
            f'<span style="{style.css()}">{html.escape(text)}</span>'
            for style, text in self._contents
        )
        return _HTML_HEADER + spans + _HTML_FOOTER