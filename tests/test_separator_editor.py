import pytest

from ccline.separator_editor import SeparatorEditor


def test_default_presets():
    editor = SeparatorEditor()
    assert [p.name for p in editor.presets] == ["Pipe", "Thin", "Arrow", "Space", "Dot"]
    assert editor.presets[0].value == " | "


def test_open_matches_preset():
    editor = SeparatorEditor()
    editor.open(" | ")
    assert editor.is_open
    assert editor.input == " | "
    assert editor.selected_preset == 0


def test_open_unknown_separator_has_no_preset():
    editor = SeparatorEditor()
    editor.open(" / ")
    assert editor.selected_preset is None
    assert editor.input == " / "


def test_close_clears():
    editor = SeparatorEditor()
    editor.open(" • ")
    editor.close()
    assert not editor.is_open
    assert editor.input == ""
    assert editor.selected_preset is None


def test_input_char_clears_preset():
    editor = SeparatorEditor()
    editor.open(" | ")
    editor.input_char(">")
    assert editor.input == " | >"
    assert editor.selected_preset is None


def test_control_characters_rejected():
    editor = SeparatorEditor()
    editor.open("x")
    editor.input_char("\n")
    editor.input_char("\t")
    assert editor.input == "x"


def test_input_char_requires_single_character():
    with pytest.raises(ValueError):
        SeparatorEditor().input_char("ab")


def test_backspace():
    editor = SeparatorEditor()
    editor.open(" | ")
    editor.backspace()
    assert editor.input == " |"
    assert editor.selected_preset is None


def test_move_without_selection_goes_to_ends():
    editor = SeparatorEditor()
    editor.move_preset_selection(1)
    assert editor.selected_preset == 0
    editor.selected_preset = None
    editor.move_preset_selection(-1)
    assert editor.selected_preset == len(editor.presets) - 1
    assert editor.input == editor.presets[-1].value


def test_move_clamps_and_loads_value():
    editor = SeparatorEditor()
    editor.open(" | ")
    editor.move_preset_selection(-1)
    assert editor.selected_preset == 0
    editor.move_preset_selection(100)
    assert editor.selected_preset == len(editor.presets) - 1
    editor.move_preset_selection(-2)
    assert editor.input == editor.presets[-3].value


def test_preset_lines_mark_selection():
    editor = SeparatorEditor()
    editor.open(" | ")
    lines = editor.preset_lines()
    assert lines[0] == "[•] Pipe - Classic pipe separator"
    assert all(line.startswith("[ ]") for line in lines[1:])
    assert len(lines) == len(editor.presets)