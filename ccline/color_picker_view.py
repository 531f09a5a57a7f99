"""Text and layout helpers for drawing the colour picker."""

from __future__ import annotations

from ccline.color_picker import ColorPicker, ColorPickerMode, RgbField
from ccline.models import Color16, Color256, Rgb

_BASIC_CELL_WIDTH = 6
_EXTENDED_CELL_WIDTH = 7
_EXTENDED_COUNT = 256

_COLOR_NAMES = (
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "White",
    "DarkGray",
    "LightRed",
    "LightGreen",
    "LightYellow",
    "LightBlue",
    "LightMagenta",
    "LightCyan",
    "Gray",
)

_MODE_TEXTS = {
    ColorPickerMode.BASIC16: "[•] Basic (ANSI 16)  [ ] Extended (256)  [ ] RGB",
    ColorPickerMode.EXTENDED256: "[ ] Basic (ANSI 16)  [•] Extended (256)  [ ] RGB",
    ColorPickerMode.RGB_INPUT: "[ ] Basic (ANSI 16)  [ ] Extended (256)  [•] RGB",
}


def color_name(index: int) -> str:
    """Name of a basic ANSI colour, or "Unknown" outside 0-15."""
    if 0 <= index < len(_COLOR_NAMES):
        return _COLOR_NAMES[index]
    return "Unknown"


def mode_text(picker: ColorPicker) -> str:
    """The mode selector line, marking the active mode."""
    return _MODE_TEXTS[picker.mode]


def preview_text(picker: ColorPicker) -> str:
    """Description of the currently selected colour."""
    match picker.current_color:
        case None:
            return "████ No color selected"
        case Color16(c16=c16):
            return f"████ Color 16: {c16} ({color_name(c16)})"
        case Color256(c256=c256):
            return f"████ Color 256: {c256}"
        case Rgb(r=r, g=g, b=b):
            return f"████ RGB: ({r}, {g}, {b})"
    raise TypeError(f"not a colour: {picker.current_color!r}")


def _field(value: str, active: bool) -> str:
    return f"> {value} <" if active else value


def rgb_text(picker: ColorPicker) -> str:
    """The R, G and B fields, with the one being edited marked."""
    rgb = picker.rgb_input
    red = _field(rgb.r, rgb.editing_field is RgbField.RED)
    green = _field(rgb.g, rgb.editing_field is RgbField.GREEN)
    blue = _field(rgb.b, rgb.editing_field is RgbField.BLUE)
    return f"R[{red}] G[{green}] B[{blue}]"


def hex_text(picker: ColorPicker) -> str:
    """The hex field, marked when it is being edited."""
    rgb = picker.rgb_input
    return "#" + _field(rgb.hex, rgb.editing_field is RgbField.HEX)


def basic_columns(width: int) -> int:
    """How many basic colour cells fit in a row of the given width."""
    return max(width // _BASIC_CELL_WIDTH, 1)


def extended_columns(width: int) -> int:
    """How many extended colour cells fit in a row of the given width."""
    return max(width // _EXTENDED_CELL_WIDTH, 1)


def extended_page(picker: ColorPicker, width: int, height: int) -> range:
    """Indices of the extended colours shown on the page holding the selection.

    Each logical row takes two display lines and two lines are kept for the
    info text, so an area of two lines or fewer shows nothing.
    """
    cols = extended_columns(width)
    rows = (height - 2) // 2 if height > 3 else 1
    per_page = cols * rows
    start = (picker.selected_extended // per_page) * per_page
    if height <= 2:
        return range(start, start)
    return range(start, min(start + per_page, _EXTENDED_COUNT))