"""Colour picker dialog state: basic, extended and RGB selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from ccline.models import AnsiColor, Color16, Color256, Rgb

_BASIC_COUNT = 16
_EXTENDED_COUNT = 256
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class NavDirection(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class ColorPickerMode(Enum):
    BASIC16 = auto()
    EXTENDED256 = auto()
    RGB_INPUT = auto()


class RgbField(Enum):
    RED = auto()
    GREEN = auto()
    BLUE = auto()
    HEX = auto()


_FIELD_ORDER = [RgbField.RED, RgbField.GREEN, RgbField.BLUE, RgbField.HEX]

_MODE_CYCLE = {
    ColorPickerMode.BASIC16: ColorPickerMode.EXTENDED256,
    ColorPickerMode.EXTENDED256: ColorPickerMode.RGB_INPUT,
    ColorPickerMode.RGB_INPUT: ColorPickerMode.BASIC16,
}


@dataclass
class RgbInput:
    """Text typed into the RGB and hex fields."""

    r: str = ""
    g: str = ""
    b: str = ""
    hex: str = ""
    editing_field: RgbField = RgbField.RED


def _parse_byte(text: str) -> int | None:
    if not text or not text.isascii() or not text.isdigit():
        return None
    value = int(text)
    return value if value <= 255 else None


def _grid_move(selected: int, cols: int, count: int, direction: NavDirection) -> int:
    """Move within a grid of ``count`` cells laid out ``cols`` per row."""
    row, col = divmod(selected, cols)
    last = count - 1
    match direction:
        case NavDirection.UP:
            return min((row - 1) * cols + col, last) if row > 0 else selected
        case NavDirection.DOWN:
            total_rows = -(-count // cols)
            return min((row + 1) * cols + col, last) if row + 1 < total_rows else selected
        case NavDirection.LEFT:
            return selected - 1 if selected > 0 else last
        case NavDirection.RIGHT:
            return selected + 1 if selected < last else 0
    raise ValueError(f"unknown direction: {direction!r}")


@dataclass
class ColorPicker:
    """State of the colour picker popup."""

    is_open: bool = False
    mode: ColorPickerMode = ColorPickerMode.BASIC16
    selected_basic: int = 0
    selected_extended: int = 0
    rgb_input: RgbInput = field(default_factory=RgbInput)
    current_color: AnsiColor | None = None
    show_extended: bool = False
    cached_basic_cols: int = 4
    cached_extended_cols: int = 16

    def open(self) -> None:
        self.is_open = True
        self.mode = ColorPickerMode.BASIC16
        self.selected_basic = 0

    def close(self) -> None:
        self.is_open = False

    def toggle_extended(self) -> None:
        self.show_extended = not self.show_extended
        self.mode = (
            ColorPickerMode.EXTENDED256 if self.show_extended else ColorPickerMode.BASIC16
        )

    def switch_to_rgb(self) -> None:
        self.mode = ColorPickerMode.RGB_INPUT

    def cycle_mode(self) -> None:
        self.mode = _MODE_CYCLE[self.mode]
        self.show_extended = self.mode is ColorPickerMode.EXTENDED256

    def move_selection(self, delta: int) -> None:
        """Move the selection linearly, or step between RGB fields."""
        match self.mode:
            case ColorPickerMode.BASIC16:
                self.selected_basic = max(0, min(self.selected_basic + delta, _BASIC_COUNT - 1))
                self.current_color = Color16(self.selected_basic)
            case ColorPickerMode.EXTENDED256:
                self.selected_extended = max(
                    0, min(self.selected_extended + delta, _EXTENDED_COUNT - 1)
                )
                self.current_color = Color256(self.selected_extended)
            case ColorPickerMode.RGB_INPUT:
                index = _FIELD_ORDER.index(self.rgb_input.editing_field)
                if delta > 0 and index < len(_FIELD_ORDER) - 1:
                    self.rgb_input.editing_field = _FIELD_ORDER[index + 1]
                elif delta < 0 and index > 0:
                    self.rgb_input.editing_field = _FIELD_ORDER[index - 1]

    def move_direction(self, direction: NavDirection) -> None:
        """Move within the colour grid, or cycle RGB fields left and right."""
        match self.mode:
            case ColorPickerMode.BASIC16:
                self.selected_basic = _grid_move(
                    self.selected_basic, self.cached_basic_cols, _BASIC_COUNT, direction
                )
                self.current_color = Color16(self.selected_basic)
            case ColorPickerMode.EXTENDED256:
                self.selected_extended = _grid_move(
                    self.selected_extended,
                    self.cached_extended_cols,
                    _EXTENDED_COUNT,
                    direction,
                )
                self.current_color = Color256(self.selected_extended)
            case ColorPickerMode.RGB_INPUT:
                index = _FIELD_ORDER.index(self.rgb_input.editing_field)
                if direction is NavDirection.LEFT:
                    self.rgb_input.editing_field = _FIELD_ORDER[index - 1]
                elif direction is NavDirection.RIGHT:
                    self.rgb_input.editing_field = _FIELD_ORDER[(index + 1) % len(_FIELD_ORDER)]

    def input_char(self, c: str) -> None:
        """Type a character into the current RGB or hex field."""
        if self.mode is not ColorPickerMode.RGB_INPUT:
            return
        rgb = self.rgb_input
        is_digit = c.isascii() and c.isdigit() and len(c) == 1
        match rgb.editing_field:
            case RgbField.RED:
                if len(rgb.r) < 3 and is_digit:
                    rgb.r += c
            case RgbField.GREEN:
                if len(rgb.g) < 3 and is_digit:
                    rgb.g += c
            case RgbField.BLUE:
                if len(rgb.b) < 3 and is_digit:
                    rgb.b += c
            case RgbField.HEX:
                if len(rgb.hex) < 6 and len(c) == 1 and c in _HEX_DIGITS:
                    rgb.hex += c.upper()
        self._update_rgb_color()

    def backspace(self) -> None:
        if self.mode is not ColorPickerMode.RGB_INPUT:
            return
        rgb = self.rgb_input
        match rgb.editing_field:
            case RgbField.RED:
                rgb.r = rgb.r[:-1]
            case RgbField.GREEN:
                rgb.g = rgb.g[:-1]
            case RgbField.BLUE:
                rgb.b = rgb.b[:-1]
            case RgbField.HEX:
                rgb.hex = rgb.hex[:-1]
        self._update_rgb_color()

    def _update_rgb_color(self) -> None:
        hex_text = self.rgb_input.hex
        if len(hex_text) == 6:
            self.current_color = Rgb(
                int(hex_text[0:2], 16), int(hex_text[2:4], 16), int(hex_text[4:6], 16)
            )
            return
        parts = [_parse_byte(t) for t in (self.rgb_input.r, self.rgb_input.g, self.rgb_input.b)]
        if all(p is not None for p in parts):
            self.current_color = Rgb(*parts)

    def selected_color(self) -> AnsiColor | None:
        """The colour currently chosen, if any."""
        return self.current_color