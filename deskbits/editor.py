"""A plain-text editing buffer with undo, file handling and editor key rules."""

from __future__ import annotations

import logging
import os
import tempfile
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .config import ConfigManager
from .signals import Signal

logger = logging.getLogger(__name__)

GENERAL_FONT_FAMILY = "sans-serif"
MARKDOWN_SYNTAX = "Markdown"

_PAIRS = {"(": "()", "{": "{}", "[": "[]"}
_TAB_KEYS = frozenset({"\t", "Tab", "tab"})


class EditorMode(int, Enum):
    """How the editor presents itself."""

    NORMAL = 0
    STICKY = 1


def syntax_for_file(file_name: str | os.PathLike) -> str | None:
    """The name of the syntax that fits ``file_name``, or None if none does."""
    name = os.fspath(file_name)
    if not name:
        return None
    try:
        return get_lexer_for_filename(os.path.basename(name)).name
    except ClassNotFound:
        return None


class TextEditor:
    """Text, cursor and selection, with undo history and the current file."""

    def __init__(self, config: ConfigManager, mode: EditorMode = EditorMode.NORMAL) -> None:
        self.config = config
        self.current_file = ""
        self.current_file_name = ""
        self.read_only = False
        self.syntax: str | None = None
        self.color_theme = config.editor_color_theme
        self.font_family = config.editor_font_family
        self.font_size = config.editor_font_size
        self.line_numbers_visible = True
        self.mode = EditorMode.NORMAL

        self.change_title = Signal()
        self.modified_false = Signal()
        self.read_only_changed = Signal()
        self.open_file_in_new_tab = Signal()

        self._text = ""
        self._anchor = 0
        self._cursor = 0
        self._history: list[tuple[str, int]] = [("", 0)]
        self._index = 0
        self._clean = 0

        self.set_current_file("")
        if mode != EditorMode.NORMAL:
            self.switch_mode(mode)

    # --- text and selection -------------------------------------------------

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def anchor(self) -> int:
        return self._anchor

    @property
    def selection(self) -> tuple[int, int]:
        """The selected range as (start, end), start <= end."""
        return min(self._anchor, self._cursor), max(self._anchor, self._cursor)

    @property
    def has_selection(self) -> bool:
        return self._anchor != self._cursor

    @property
    def selected_text(self) -> str:
        start, end = self.selection
        return self._text[start:end]

    @property
    def modified(self) -> bool:
        return self._index != self._clean

    @modified.setter
    def modified(self, value: bool) -> None:
        self._clean = -1 if value else self._index

    def set_plain_text(self, text: str) -> None:
        """Replace the whole text, clearing undo history; the cursor goes to the start."""
        self._text = text
        self._anchor = self._cursor = 0
        self._history = [(text, 0)]
        self._index = 0
        self._clean = 0

    def to_plain_text(self) -> str:
        return self._text

    def insert_text(self, text: str) -> None:
        """Replace the selection (or insert at the cursor) with ``text``."""
        start, end = self.selection
        self._commit(self._text[:start] + text + self._text[end:], start + len(text))

    def set_selection(self, start: int, end: int) -> None:
        """Put the anchor at ``start`` and the cursor at ``end``."""
        for position in (start, end):
            if not 0 <= position <= len(self._text):
                raise ValueError(f"position {position} is outside the text")
        self._anchor = start
        self._cursor = end

    def block_count(self) -> int:
        """Number of lines (blocks) in the text; never less than one."""
        return self._text.count("\n") + 1

    def _commit(self, text: str, cursor: int) -> None:
        del self._history[self._index + 1 :]
        if self._clean > self._index:
            self._clean = -1
        self._history.append((text, cursor))
        self._index += 1
        self._text = text
        self._anchor = self._cursor = cursor

    def _restore(self) -> None:
        self._text, cursor = self._history[self._index]
        self._anchor = self._cursor = cursor

    def undo(self) -> bool:
        """Step back one edit; False if there was nothing to undo."""
        if self._index == 0:
            return False
        self._index -= 1
        self._restore()
        return True

    def redo(self) -> bool:
        """Step forward one edit; False if there was nothing to redo."""
        if self._index + 1 >= len(self._history):
            return False
        self._index += 1
        self._restore()
        return True

    @property
    def undo_available(self) -> bool:
        return self._index > 0

    @property
    def redo_available(self) -> bool:
        return self._index + 1 < len(self._history)

    # --- files ----------------------------------------------------------------

    def new_document(self) -> bool:
        """Empty the editor and forget the current file."""
        self.set_plain_text("")
        self.set_current_file("")
        self.change_title.emit()
        return True

    def open_file(self, file_name: str | os.PathLike) -> None:
        """Load ``file_name``; raises OSError if it cannot be read."""
        name = os.fspath(file_name)
        try:
            with open(name, encoding="utf-8") as stream:
                text = stream.read()
        except OSError as error:
            logger.warning("Failed to open %s: %s", name, error)
            raise
        self.syntax = syntax_for_file(name)
        self.set_plain_text(text)
        self.set_current_file(name)
        self.change_title.emit()

    def _write(self, file_name: str) -> None:
        directory = os.path.dirname(os.path.abspath(file_name))
        fd, temporary = tempfile.mkstemp(dir=directory, prefix=".save-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as stream:
                stream.write(self._text)
            os.replace(temporary, file_name)
        except BaseException:
            try:
                os.unlink(temporary)
            except OSError:
                pass
            raise

    def save(self, file_name: str | os.PathLike | None = None) -> None:
        """Write to the current file, or to ``file_name`` when there is none.

        Raises ValueError when no file is known and OSError when writing fails.
        """
        name = self.current_file or (os.fspath(file_name) if file_name is not None else "")
        if not name:
            raise ValueError("no file name to save to")
        try:
            self._write(name)
        except OSError as error:
            logger.warning("Cannot save file %s: %s", name, error)
            raise
        self.set_current_file(name)
        self.change_title.emit()

    def save_as(self, file_name: str | os.PathLike) -> None:
        """Write the text to ``file_name`` and make it the current file."""
        name = os.fspath(file_name)
        if not name:
            raise ValueError("no file name to save to")
        try:
            self._write(name)
        except OSError as error:
            logger.warning("Failed to save %s: %s", name, error)
            raise
        self.set_current_file(name)
        self.change_title.emit()

    def maybe_save(self, ask: Callable[[], str]) -> bool:
        """Offer to save unsaved changes; False means the caller should stop.

        ``ask`` returns "save", "discard" or "cancel".
        """
        if not self.modified:
            return True
        answer = ask().lower()
        if answer == "save":
            self.save()
            return True
        if answer == "cancel":
            return False
        return True

    def set_current_file(self, file_name: str | os.PathLike) -> None:
        """Record the current file and mark the text unmodified."""
        name = os.fspath(file_name)
        self.current_file = name
        if name:
            self.current_file_name = Path(name).name
        self.modified = False
        self.modified_false.emit()

    def drop_files(self, paths: Iterable[str | os.PathLike]) -> None:
        """Ask for each dropped file to be opened in a new tab."""
        for path in paths:
            self.open_file_in_new_tab.emit(os.fspath(path))

    # --- editing keys ---------------------------------------------------------

    def _indent_unit(self) -> str:
        if self.config.editor_indent_mode == "Spaces":
            return " " * self.config.editor_tab_size
        return "\t"

    def key_press(self, key: str) -> None:
        """Handle one typed key: Tab indents, opening brackets are paired."""
        if self.read_only:
            return
        if key in _TAB_KEYS:
            if self.has_selection:
                self.indent_selection(self._indent_unit())
            else:
                self.insert_text(self._indent_unit())
            return
        pair = _PAIRS.get(key)
        if pair is not None:
            self.insert_text(pair)
            self._anchor = self._cursor = self._cursor - 1
            return
        if len(key) == 1:
            self.insert_text(key)

    def indent_selection(self, text: str) -> None:
        """Put ``text`` at the start of every line the selection touches."""
        source = self._text.replace("\r", "")
        start, end = self.selection
        cursor_at_end = self._cursor == end
        line_start = source.count("\n", 0, start)
        line_end = source.count("\n", 0, end)
        lines = source.split("\n")
        lines[line_start : line_end + 1] = [
            text + line for line in lines[line_start : line_end + 1]
        ]
        self._commit("\n".join(lines), self._cursor)

        first = start + len(text)
        last = end + len(text) * (line_end - line_start + 1)
        if cursor_at_end:
            self._anchor, self._cursor = first, last
        else:
            self._anchor, self._cursor = last, first

    def set_read_only(self, value: bool) -> None:
        self.read_only = value
        self.read_only_changed.emit()

    # --- appearance -------------------------------------------------------------

    def set_editor_font(self, family: str) -> None:
        self.font_family = family
        self.font_size = self.config.editor_font_size
        self.config.editor_font_family = family

    def set_editor_font_size(self, size: int) -> None:
        self.font_family = self.config.editor_font_family
        self.font_size = size
        self.config.editor_font_size = size

    def set_editor_color_theme(self, name: str) -> None:
        self.color_theme = name

    def switch_mode(self, mode: EditorMode | int) -> None:
        """Switch between the normal editor and the sticky-note look."""
        mode = EditorMode(mode)
        if mode == EditorMode.NORMAL:
            self.line_numbers_visible = True
            self.mode = mode
            self.set_editor_font(self.config.editor_font_family)
        else:
            self.line_numbers_visible = False
            self.mode = mode
            self.font_family = GENERAL_FONT_FAMILY
            self.font_size = self.config.editor_font_size
            self.syntax = MARKDOWN_SYNTAX

    def update_syntax_highlight(self) -> None:
        """Pick the syntax from the current file's name."""
        self.syntax = syntax_for_file(self.current_file)