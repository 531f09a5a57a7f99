"""Single-line name entry dialog state."""

from __future__ import annotations

from dataclasses import dataclass

_ALLOWED_PUNCTUATION = frozenset("_-. :/+")


@dataclass
class NameInput:
    is_open: bool = False
    input: str = ""
    title: str = "Input Name"
    placeholder: str = "Enter name..."

    def open(self, title: str, placeholder: str) -> None:
        self.open_with_value(title, placeholder, "")

    def open_with_value(self, title: str, placeholder: str, value: str) -> None:
        self.is_open = True
        self.input = value
        self.title = title
        self.placeholder = placeholder

    def close(self) -> None:
        self.is_open = False
        self.input = ""

    def input_char(self, c: str) -> None:
        """Append a character if it may appear in a model id or display name."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if (c.isascii() and c.isalnum()) or c in _ALLOWED_PUNCTUATION:
            self.input += c

    def backspace(self) -> None:
        self.input = self.input[:-1]

    def result(self) -> str | None:
        """The trimmed input, or None when it is blank."""
        return self.input.strip() or None

    def display_text(self) -> str:
        """Text of the input field: the input, or the placeholder when empty."""
        return f"> {self.input or self.placeholder} <"