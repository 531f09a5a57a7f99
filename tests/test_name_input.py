import pytest

from ccline.name_input import NameInput


def test_defaults():
    dialog = NameInput()
    assert not dialog.is_open
    assert dialog.title == "Input Name"
    assert dialog.display_text() == "> Enter name... <"


def test_open_clears_input():
    dialog = NameInput()
    dialog.open_with_value("Alias", "Model id", "sonnet")
    dialog.open("Theme", "Theme name")
    assert dialog.is_open
    assert dialog.input == ""
    assert dialog.title == "Theme"
    assert dialog.placeholder == "Theme name"


def test_open_with_value():
    dialog = NameInput()
    dialog.open_with_value("Alias", "Model id", "sonnet")
    assert dialog.input == "sonnet"
    assert dialog.display_text() == "> sonnet <"


def test_input_filters_characters():
    dialog = NameInput()
    for c in "a1_-. :/+!é#":
        dialog.input_char(c)
    assert dialog.input == "a1_-. :/+"


def test_input_char_rejects_strings():
    with pytest.raises(ValueError):
        NameInput().input_char("ab")


def test_backspace():
    dialog = NameInput()
    for c in "ab":
        dialog.input_char(c)
    dialog.backspace()
    assert dialog.input == "a"
    dialog.backspace()
    dialog.backspace()
    assert dialog.input == ""


def test_result_trims_and_rejects_blank():
    dialog = NameInput()
    dialog.open_with_value("t", "p", "  my-theme  ")
    assert dialog.result() == "my-theme"
    dialog.open_with_value("t", "p", "   ")
    assert dialog.result() is None


def test_close_resets():
    dialog = NameInput()
    dialog.open_with_value("t", "p", "value")
    dialog.close()
    assert not dialog.is_open
    assert dialog.input == ""
    assert dialog.result() is None