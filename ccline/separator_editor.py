"""Separator editor dialog state with presets."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SeparatorPreset:
    name: str
    value: str
    description: str


def _default_presets() -> list[SeparatorPreset]:
    return [
        SeparatorPreset("Pipe", " | ", "Classic pipe separator"),
        SeparatorPreset("Thin", " │ ", "Thin vertical line"),
        SeparatorPreset("Arrow", "\ue0b0", "Powerline arrow (seamless transition)"),
        SeparatorPreset("Space", "  ", "Double space"),
        SeparatorPreset("Dot", " • ", "Middle dot"),
    ]


@dataclass
class SeparatorEditor:
    """State of the separator editor popup; ``input`` is the separator."""

    is_open: bool = False
    input: str = ""
    presets: list[SeparatorPreset] = field(default_factory=_default_presets)
    selected_preset: int | None = None

    def open(self, current_separator: str) -> None:
        self.is_open = True
        self.input = current_separator
        self.selected_preset = next(
            (i for i, preset in enumerate(self.presets) if preset.value == current_separator),
            None,
        )

    def close(self) -> None:
        self.is_open = False
        self.input = ""
        self.selected_preset = None

    def input_char(self, c: str) -> None:
        """Append any non-control character, clearing the preset choice."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if unicodedata.category(c) != "Cc":
            self.input += c
            self.selected_preset = None

    def backspace(self) -> None:
        self.input = self.input[:-1]
        self.selected_preset = None

    def move_preset_selection(self, delta: int) -> None:
        """Step through presets, loading the chosen one into the input."""
        last = len(self.presets) - 1
        if self.selected_preset is not None:
            index = max(0, min(self.selected_preset + delta, last))
        elif delta > 0:
            index = 0
        else:
            index = last
        self.selected_preset = index
        self.input = self.presets[index].value

    def preset_lines(self) -> list[str]:
        """One line per preset, marking the selected one."""
        return [
            f"{'[•]' if i == self.selected_preset else '[ ]'} {p.name} - {p.description}"
            for i, p in enumerate(self.presets)
        ]