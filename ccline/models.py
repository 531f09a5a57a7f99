"""Configuration data model: colours, segments, styles and whole configs."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def _check_byte(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{name} must be an integer between 0 and 255, got {value!r}")


@dataclass(frozen=True, slots=True)
class Color16:
    """One of the 16 basic ANSI colours."""

    c16: int

    def __post_init__(self) -> None:
        _check_byte(self.c16, "c16")


@dataclass(frozen=True, slots=True)
class Color256:
    """One of the 256 indexed terminal colours."""

    c256: int

    def __post_init__(self) -> None:
        _check_byte(self.c256, "c256")


@dataclass(frozen=True, slots=True)
class Rgb:
    """A 24-bit true colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte(self.r, "r")
        _check_byte(self.g, "g")
        _check_byte(self.b, "b")


AnsiColor = Color16 | Color256 | Rgb


def color_to_dict(color: AnsiColor | None) -> dict[str, int] | None:
    """Serialise a colour to its mapping form, or None for no colour."""
    match color:
        case None:
            return None
        case Color16(c16=c16):
            return {"c16": c16}
        case Color256(c256=c256):
            return {"c256": c256}
        case Rgb(r=r, g=g, b=b):
            return {"r": r, "g": g, "b": b}
    raise TypeError(f"not a colour: {color!r}")


def color_from_dict(data: dict[str, Any] | None) -> AnsiColor | None:
    """Build a colour from its mapping form; None stays None."""
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"colour must be a mapping, got {data!r}")
    if "c16" in data:
        return Color16(data["c16"])
    if "c256" in data:
        return Color256(data["c256"])
    if {"r", "g", "b"} <= data.keys():
        return Rgb(data["r"], data["g"], data["b"])
    raise ValueError(f"unrecognised colour: {data!r}")


class SegmentId(Enum):
    MODEL = "model"
    DIRECTORY = "directory"
    GIT = "git"
    CONTEXT_WINDOW = "context_window"
    USAGE = "usage"
    COST = "cost"
    SESSION = "session"
    OUTPUT_STYLE = "output_style"
    UPDATE = "update"

    def display_name(self) -> str:
        """Human-readable name of the segment."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    SegmentId.MODEL: "Model",
    SegmentId.DIRECTORY: "Directory",
    SegmentId.GIT: "Git",
    SegmentId.CONTEXT_WINDOW: "Context Window",
    SegmentId.USAGE: "Usage",
    SegmentId.COST: "Cost",
    SegmentId.SESSION: "Session",
    SegmentId.OUTPUT_STYLE: "Output Style",
    SegmentId.UPDATE: "Update",
}


class StyleMode(Enum):
    PLAIN = "plain"
    NERD_FONT = "nerd_font"
    POWERLINE = "powerline"


@dataclass
class IconConfig:
    plain: str
    nerd_font: str


@dataclass
class ColorConfig:
    icon: AnsiColor | None = None
    text: AnsiColor | None = None
    background: AnsiColor | None = None


@dataclass
class TextStyleConfig:
    text_bold: bool = False


@dataclass
class SegmentConfig:
    id: SegmentId
    enabled: bool
    icon: IconConfig
    colors: ColorConfig = field(default_factory=ColorConfig)
    styles: TextStyleConfig = field(default_factory=TextStyleConfig)
    options: dict[str, Any] = field(default_factory=dict)

    def current_icon(self, mode: StyleMode) -> str:
        """The icon shown under the given style mode."""
        return self.icon.plain if mode is StyleMode.PLAIN else self.icon.nerd_font


@dataclass
class StyleConfig:
    mode: StyleMode
    separator: str


def _segment_to_dict(segment: SegmentConfig) -> dict[str, Any]:
    colors = {
        name: color_to_dict(value)
        for name, value in (
            ("icon", segment.colors.icon),
            ("text", segment.colors.text),
            ("background", segment.colors.background),
        )
        if value is not None
    }
    return {
        "id": segment.id.value,
        "enabled": segment.enabled,
        "icon": {"plain": segment.icon.plain, "nerd_font": segment.icon.nerd_font},
        "colors": colors,
        "styles": {"text_bold": segment.styles.text_bold},
        "options": copy.deepcopy(segment.options),
    }


def _segment_from_dict(data: dict[str, Any]) -> SegmentConfig:
    colors = data.get("colors", {})
    styles = data.get("styles", {})
    return SegmentConfig(
        id=SegmentId(data["id"]),
        enabled=bool(data["enabled"]),
        icon=IconConfig(plain=data["icon"]["plain"], nerd_font=data["icon"]["nerd_font"]),
        colors=ColorConfig(
            icon=color_from_dict(colors.get("icon")),
            text=color_from_dict(colors.get("text")),
            background=color_from_dict(colors.get("background")),
        ),
        styles=TextStyleConfig(text_bold=bool(styles.get("text_bold", False))),
        options=copy.deepcopy(dict(data.get("options", {}))),
    )


@dataclass
class Config:
    style: StyleConfig
    segments: list[SegmentConfig]
    theme: str

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping suitable for TOML or JSON; absent colours are omitted."""
        return {
            "theme": self.theme,
            "style": {"mode": self.style.mode.value, "separator": self.style.separator},
            "segments": [_segment_to_dict(segment) for segment in self.segments],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config from its mapping form, raising ValueError when malformed."""
        try:
            style = data["style"]
            return cls(
                style=StyleConfig(
                    mode=StyleMode(style["mode"]), separator=style["separator"]
                ),
                segments=[_segment_from_dict(item) for item in data["segments"]],
                theme=data["theme"],
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid configuration: {exc!r}") from exc