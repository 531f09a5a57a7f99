"""Mapping of key presses to configurator actions."""

from __future__ import annotations

from enum import Enum, auto


class AppEvent(Enum):
    QUIT = auto()
    SAVE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    EDIT = auto()
    TOGGLE = auto()
    SWITCH_PANEL = auto()
    OPEN_COLOR_PICKER = auto()
    OPEN_ICON_SELECTOR = auto()
    UNKNOWN = auto()


_CHAR_EVENTS = {
    "q": AppEvent.QUIT,
    "s": AppEvent.SAVE,
    " ": AppEvent.TOGGLE,
    "c": AppEvent.OPEN_COLOR_PICKER,
    "i": AppEvent.OPEN_ICON_SELECTOR,
}

_NAMED_EVENTS = {
    "up": AppEvent.MOVE_UP,
    "down": AppEvent.MOVE_DOWN,
    "enter": AppEvent.EDIT,
    "tab": AppEvent.SWITCH_PANEL,
}


def handle_key(key: str) -> AppEvent:
    """Translate a key into an event.

    Single characters are matched exactly; longer strings are key names
    such as ``"up"`` or ``"enter"``, matched without regard to case.
    """
    if len(key) == 1:
        return _CHAR_EVENTS.get(key, AppEvent.UNKNOWN)
    return _NAMED_EVENTS.get(key.lower(), AppEvent.UNKNOWN)