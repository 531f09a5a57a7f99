# ccline

Building blocks for configuring a powerline-style status line. The package has
typed configuration models, a set of colour themes, and the state behind the
interactive editors: colour picker, icon selector, separator editor and name
input. It has no dependencies beyond the standard library.

The editors hold state only. They do not draw anything, so any terminal front
end can sit in front of them.

## Configuration model

`ccline.models` describes a status line configuration:

- `Config` holds a `StyleConfig` (a `StyleMode` and a separator string), an
  ordered list of `SegmentConfig` entries and a theme name.
- Each `SegmentConfig` has a `SegmentId`, an enabled flag, an `IconConfig`
  (plain and Nerd Font icons), a `ColorConfig` (icon, text and optional
  background colours), a `TextStyleConfig` (bold or not) and free-form
  options.
- `SegmentId.display_name()` gives a readable name such as `"Context Window"`.
  `SegmentConfig.current_icon(mode)` gives the plain icon under
  `StyleMode.PLAIN` and the Nerd Font icon under the other modes.
- Colours are `Color16`, `Color256` or `Rgb`. Each component must be an
  integer from 0 to 255, or `ValueError` is raised.
  `color_to_dict` and `color_from_dict` convert a colour to and from a mapping
  such as `{"c16": 14}`, `{"c256": 208}` or `{"r": 46, "g": 52, "b": 64}`.

`Config.to_dict()` returns a plain dictionary that can be written as TOML or
JSON. Colours that are not set are left out. `Config.from_dict(data)` builds a
config from such a dictionary and raises `ValueError` when the data is
malformed.

## Themes

Each module in `ccline.themes` has a `segments()` function. It returns that
theme's eight segments in display order: model, directory, git, context window,
usage, cost, session and output style. The modules are:

- `cometix`: bold basic ANSI colours
- `default`: basic ANSI colours, no bold
- `minimal`: plain symbols and basic colours
- `gruvbox`: bold 256-colour gruvbox palette
- `nord`: dark text on Nord backgrounds
- `powerline_light`: light text on bright backgrounds
- `powerline_rose_pine`: Rosé Pine colours on dark backgrounds

```python
from ccline.models import Config, StyleConfig, StyleMode
from ccline.themes import gruvbox

config = Config(
    style=StyleConfig(mode=StyleMode.NERD_FONT, separator=" | "),
    segments=gruvbox.segments(),
    theme="gruvbox",
)
for segment in config.segments:
    print(segment.id.display_name(), segment.current_icon(StyleMode.PLAIN))

data = config.to_dict()
assert Config.from_dict(data) == config
```

## Interactive components

- `ccline.color_picker.ColorPicker` picks an ANSI 16, 256 or RGB/hex colour.
  It supports grid navigation with `move_direction(NavDirection...)`, linear
  moves with `move_selection(delta)`, mode changes with `cycle_mode()`,
  `toggle_extended()` and `switch_to_rgb()`, and typed input with
  `input_char` and `backspace`. `selected_color()` returns the current choice.
- `ccline.color_picker_view` turns picker state into display text:
  `color_name`, `mode_text`, `preview_text`, `rgb_text` and `hex_text`. It also
  has the grid helpers `basic_columns`, `extended_columns` and `extended_page`.
- `ccline.icon_selector.IconSelector` picks from the emoji list
  (`plain_icons()`) or the Nerd Font list (`nerd_font_icons()`), or takes a
  custom icon you type. `adjust_offset(view_height)` scrolls the list so the
  selection stays visible.
- `ccline.separator_editor.SeparatorEditor` lets you type a separator or step
  through its `SeparatorPreset` entries. `preset_lines()` lists the presets
  and marks the selected one.
- `ccline.name_input.NameInput` is a small text field for theme and model
  names. `result()` gives the trimmed input, or `None` when it is blank.
- `ccline.editor.EditorComponent` tracks which segment is being edited.
- `ccline.events.handle_key(key)` maps a key to an `AppEvent`. Single
  characters such as `"q"` or `"s"` are matched exactly. Key names such as
  `"up"`, `"down"`, `"enter"` and `"tab"` are matched without regard to case.

```python
from ccline.color_picker import ColorPicker, NavDirection

picker = ColorPicker()
picker.open()
picker.move_direction(NavDirection.RIGHT)
print(picker.selected_color())  # Color16(c16=1)
```

## What it does not do

- It has no registry of themes by name. To use a theme, import its module.
- It does not read or write theme or configuration files. `Config.to_dict()`
  and `Config.from_dict()` stop at plain dictionaries, and writing them to
  disk is up to you.
- It has no dark powerline or Tokyo Night theme.
- It provides no command and draws no screen. It supplies the state and the
  text that a terminal interface would display.