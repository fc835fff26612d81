# deskbits

A handful of small desktop programs, built as plain Python objects so that
their logic can be driven, tested and scripted without a windowing toolkit:

- **a notepad core** – an editor buffer with undo/redo, file open/save,
  bracket pairing, indentation of selections, syntax detection by file name,
  a line-number gutter with brace-based code folding, tabs, a "sticky note"
  mode and a JSON settings file;
- **a snake game** played on a grid loaded from a text file;
- **a signal/slot toolkit** – connect callables to a `Signal` and emit it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

### Notepad

```
deskbits-notepad [-c config.json] [source]
deskbits-notepad --version
```

Loads the settings, builds the editor window state and, if `source` is
given, opens that file. It then prints the window title, the status line
(character and line counts) and a welcome line, and exits. A file that
cannot be read is reported on standard error.

Without `-c`, settings are read from `~/.config/notepanda/config.json`; that
directory is created if it does not exist. A missing or unparsable settings
file counts as empty, and missing settings fall back to their defaults:
style theme `Fusion`, font family `monospace`, font size `16`, colour theme
`Default`, tab size `4`, indent mode `Spaces`.

Settings are stored as a flat JSON object whose keys are `Group/Key` names:

```json
{
    "Editor/ColorTheme": "Default",
    "Editor/FontFamily": "monospace",
    "Editor/FontSize": 16,
    "Editor/IndentMode": "Spaces",
    "Editor/TabSize": 4,
    "StyleTheme": "Fusion"
}
```

### Snake

```
deskbits-snake board.txt [--picture-size N]
```

Plays in the terminal. The board is drawn with `@` for the head, `o` for the
body, `*` for food and `.` for grass. Type one move per line: `w`, `a`, `s`,
`d` or `up`, `down`, `left`, `right`; other lines are ignored. The program
stops with "Game is over!!" when the game ends, or at the end of input.

The board file's first line holds the number of rows and columns; each
following line holds one row of cells, where `0` is grass, `1` is the snake
and `2` is food. Running into a wall or into the snake's own body ends the
game. Eating food grows the snake and places new food on a random free cell.

### Signals

```
deskbits-signals
```

A tiny demonstration: `Tom` miaows, and `Jerry`, connected to Tom's `miao`
signal, runs away. Both write their lines to standard error.

## Using the library

### Signals

```python
from deskbits.signals import Signal

changed = Signal()
changed.connect(print)
changed.emit("hello")      # prints "hello"
changed.disconnect(print)  # ValueError if it was not connected
```

### Snake

```python
from deskbits.snake import Snake

game = Snake()
game.load_file("board.txt")
over = game.play("D")      # True once the game is over
print(game.render())       # tile names, row by row
```

`deskbits.snake.Model` and `deskbits.snake.Control` expose the board and the
movement rules directly; a malformed board raises `SnakeDataError`.
`deskbits.snake_game.SnakeGame` adds a window's view of the game:
`window_size()`, `key_press("up" | "down" | "left" | "right")` and `paint()`,
which returns one draw command (x, y, width, height, tile) per cell.

### Editor

```python
from deskbits.config import ConfigManager
from deskbits.editor import TextEditor, syntax_for_file

config = ConfigManager("config.json")
editor = TextEditor(config)
editor.open_file("notes.py")
editor.set_selection(0, 10)
editor.indent_selection("    ")
editor.save_as("notes-copy.py")

print(syntax_for_file("notes.md"))  # a syntax name, or None
```

Saving writes through a temporary file that replaces the target. `save()`
raises `ValueError` when no file name is known; reading and writing errors
are raised as `OSError`. `maybe_save(ask)` calls `ask()` for "save",
"discard" or "cancel" when there are unsaved changes.

Supporting modules:

- `deskbits.config` – `ConfigManager` plus `read_json` / `write_json`;
- `deskbits.preferences` – `Preferences`, the preferences form's choices and
  its reset logic;
- `deskbits.about` – `version_string` and `read_version_string`, which reads
  `VERSION`, `VERSIONSUFFIX` and `BUILDVERSION` from a directory;
- `deskbits.gutter` – `LineNumberArea`: line numbers, gutter width and
  folding of regions opened by `{`;
- `deskbits.tabs` – `TabSet` and `TabData` for several documents sharing one
  editor;
- `deskbits.window` – `MainWindow` with title, status line, normal and
  sticky-note modes, pin-to-top, read-only mode, preview content and
  accepting or rejecting preferences.

## What this package does not do

There is no graphical interface. The notepad command does not open an
editing window: it reports the state of the loaded document and exits, and
editing is done through the library. Nothing is painted on screen: syntax
detection only names the syntax, the gutter and the snake game describe what
would be drawn, and the preview only returns the text and whether it is
Markdown. Printing and the clipboard are not provided.