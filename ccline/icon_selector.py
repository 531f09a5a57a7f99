"""Icon selector dialog state: emoji and Nerd Font icon lists plus custom entry."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from ccline.models import StyleMode


class IconStyle(Enum):
    PLAIN = auto()
    NERD_FONT = auto()


@dataclass(frozen=True, slots=True)
class IconInfo:
    icon: str
    name: str


_PLAIN_ICONS = (
    IconInfo("🤖", "Robot (Model)"),
    IconInfo("💻", "Laptop (Computer)"),
    IconInfo("🖥️", "Desktop"),
    IconInfo("⚙️", "Gear (Settings)"),
    IconInfo("📁", "Folder"),
    IconInfo("📂", "Open Folder"),
    IconInfo("🗿", "Card Index"),
    IconInfo("📊", "Bar Chart"),
    IconInfo("🌿", "Branch (Git)"),
    IconInfo("🌱", "Seedling"),
    IconInfo("🔧", "Wrench"),
    IconInfo("⚡", "Lightning (Usage)"),
    IconInfo("⭐", "Star"),
    IconInfo("✨", "Sparkles"),
    IconInfo("🔥", "Fire"),
    IconInfo("💎", "Gem"),
    IconInfo("✓", "Check Mark"),
    IconInfo("✗", "X Mark"),
    IconInfo("●", "Circle (Dirty)"),
    IconInfo("○", "Open Circle"),
    IconInfo("▶", "Play"),
    IconInfo("▼", "Down Triangle"),
    IconInfo("►", "Right Triangle"),
    IconInfo("◄", "Left Triangle"),
)

_NERD_FONT_ICONS = (
    IconInfo("\ue26d", "Robot (Model)"),
    IconInfo("\U000f02a2", "Git Branch"),
    IconInfo("\U000f024b", "Folder"),
    IconInfo("\uf111", "Circle"),
    IconInfo("\uf135", "Rocket"),
    IconInfo("\uf49b", "Chart"),
    IconInfo("\uf0c6", "Database"),
    IconInfo("\uf0c9", "List"),
    IconInfo("\uf013", "Cog"),
    IconInfo("\uf015", "Home"),
    IconInfo("\uf07b", "Folder Open"),
    IconInfo("\uf0e7", "Lightning"),
    IconInfo("\uf121", "Code"),
    IconInfo("\uf126", "Code Fork"),
    IconInfo("\uf1c0", "Database"),
    IconInfo("\uf251", "Headphones"),
    IconInfo("\uf252", "Terminal"),
    IconInfo("\uf269", "Map"),
    IconInfo("\uf2d0", "Chrome"),
    IconInfo("\uf31b", "Github"),
)


def plain_icons() -> list[IconInfo]:
    """The emoji and plain-text icons on offer."""
    return list(_PLAIN_ICONS)


def nerd_font_icons() -> list[IconInfo]:
    """The Nerd Font icons on offer."""
    return list(_NERD_FONT_ICONS)


def _scrolled_offset(selected: int, offset: int, view_height: int) -> int:
    view = max(view_height, 1)
    if selected >= offset + view:
        return selected + 1 - view
    if selected < offset:
        return selected
    return offset


@dataclass
class IconSelector:
    """State of the icon selector popup."""

    is_open: bool = False
    icon_style: IconStyle = IconStyle.PLAIN
    selected_plain: int = 0
    selected_nerd: int = 0
    custom_input: str = ""
    editing_custom: bool = False
    current_icon: str | None = None
    plain_offset: int = 0
    nerd_offset: int = 0

    def open(self, style_mode: StyleMode) -> None:
        """Open the selector on the icon set matching the style mode."""
        self.is_open = True
        self.icon_style = IconStyle.PLAIN if style_mode is StyleMode.PLAIN else IconStyle.NERD_FONT
        self._update_current_icon()

    def close(self) -> None:
        self.is_open = False
        self.editing_custom = False

    def toggle_style(self) -> None:
        self.icon_style = (
            IconStyle.NERD_FONT if self.icon_style is IconStyle.PLAIN else IconStyle.PLAIN
        )
        self._update_current_icon()

    def start_custom_input(self) -> None:
        self.editing_custom = True
        self.custom_input = ""

    def finish_custom_input(self) -> bool:
        """End custom entry; True when a non-empty custom icon was taken."""
        self.editing_custom = False
        if self.custom_input:
            self.current_icon = self.custom_input
            return True
        return False

    def input_char(self, c: str) -> None:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if self.editing_custom:
            self.custom_input += c

    def backspace(self) -> None:
        if self.editing_custom:
            self.custom_input = self.custom_input[:-1]

    def _icons(self) -> tuple[IconInfo, ...]:
        return _PLAIN_ICONS if self.icon_style is IconStyle.PLAIN else _NERD_FONT_ICONS

    def move_selection(self, delta: int) -> None:
        """Move the selection in the current list, clamped to its ends."""
        if self.editing_custom:
            return
        last = len(self._icons()) - 1
        if self.icon_style is IconStyle.PLAIN:
            self.selected_plain = max(0, min(self.selected_plain + delta, last))
        else:
            self.selected_nerd = max(0, min(self.selected_nerd + delta, last))
        self._update_current_icon()

    def adjust_offset(self, view_height: int) -> int:
        """Scroll the current list so the selection is visible; return the offset."""
        if self.icon_style is IconStyle.PLAIN:
            self.plain_offset = _scrolled_offset(
                self.selected_plain, self.plain_offset, view_height
            )
            return self.plain_offset
        self.nerd_offset = _scrolled_offset(self.selected_nerd, self.nerd_offset, view_height)
        return self.nerd_offset

    def item_lines(self) -> list[str]:
        """One line per icon in the current list: the icon then its name."""
        return [f"{info.icon} {info.name}" for info in self._icons()]

    def _update_current_icon(self) -> None:
        icons = self._icons()
        selected = (
            self.selected_plain if self.icon_style is IconStyle.PLAIN else self.selected_nerd
        )
        if 0 <= selected < len(icons):
            self.current_icon = icons[selected].icon