import sys
from unittest import mock

import pytest

from rescueplan.color import Color
from rescueplan.font import Font, FontFamily, FontStyle


def test_defaults():
    font = Font()
    assert (font.family, font.style, font.size, font.color) == (
        FontFamily.SANS_SERIF,
        FontStyle.NORMAL,
        13,
        Color.BLACK,
    )


def test_with_methods_leave_original_unchanged():
    base = Font()
    changed = (
        base.with_family(FontFamily.SERIF)
        .with_style(FontStyle.ITALIC)
        .with_size(24)
        .with_color(Color.BLUE)
    )
    assert changed == Font(FontFamily.SERIF, FontStyle.ITALIC, 24, Color.BLUE)
    assert base == Font()


def test_font_is_frozen():
    with pytest.raises(AttributeError):
        Font().size = 20


@mock.patch.object(sys, "platform", "linux")
def test_library_string_bold_monospace():
    font = Font(FontFamily.MONOSPACE, FontStyle.BOLD, 12, Color.WHITE)
    assert font.library_string() == "Monospace-BOLD-12"


@mock.patch.object(sys, "platform", "linux")
def test_library_string_normal_omits_style():
    assert Font().library_string() == "Sans Serif-13"


@mock.patch.object(sys, "platform", "darwin")
def test_library_string_bold_italic_on_mac():
    font = Font(FontFamily.SERIF, FontStyle.BOLD_ITALIC, 36)
    assert font.library_string() == "Didot-BOLDITALIC-36"


@mock.patch.object(sys, "platform", "win32")
def test_library_string_unicode_on_windows():
    font = Font(FontFamily.UNICODE_SERIF, FontStyle.NORMAL, 10)
    assert font.library_string().startswith("Times New Roman")
    assert font.library_string().endswith("-10")


def test_library_string_ends_with_size_for_all_families():
    for family in FontFamily:
        for style in FontStyle:
            text = Font(family, style, 17).library_string()
            assert text.endswith("-17")
            assert ("-" + style.value in text) == (style is not FontStyle.NORMAL)