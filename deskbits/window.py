"""The editor's main window: tabs, modes, status line, preview and preferences."""

from __future__ import annotations

import os
from enum import Enum
from typing import Callable, Iterable, NamedTuple

from .config import ConfigManager
from .editor import EditorMode, TextEditor
from .preferences import Preferences
from .tabs import TabSet

APP_NAME = "Notepanda"
UNTITLED = "Untitled"
BASE_SIZE = (800, 600)
STICKY_SCALE = 0.7
DEFAULT_NOTE_COLOR = "#AAFFFF"
READ_ONLY_FLAG = "[Read-Only]"
MARKDOWN_SUFFIXES = frozenset({"md", "markdown", "mdown"})


class NoteMode(int, Enum):
    """The window's layout."""

    NORMAL = 0
    STICKY = 1


class PreviewFormat(str, Enum):
    MARKDOWN = "markdown"
    TEXT = "text"


class Preview(NamedTuple):
    """What the preview panel shows."""

    format: PreviewFormat
    text: str


class MainWindow:
    """Window state around one shared editor."""

    def __init__(self, config: ConfigManager, style_keys: Iterable[str] = ("Fusion",)) -> None:
        self.config = config
        self.editor = TextEditor(config)
        self.tabs = TabSet(self.editor)
        self.preferences = Preferences(config, style_keys)
        self.style_theme = config.style_theme

        self.base_size = BASE_SIZE
        self.size = BASE_SIZE
        self.mode = NoteMode.NORMAL
        self.pinned = False
        self.preview_visible = False
        self.background_color = DEFAULT_NOTE_COLOR

        self.normal_toolbar_visible = True
        self.sticky_toolbar_visible = False
        self.normal_mode_enabled = False
        self.sticky_mode_enabled = True
        self.preferences_enabled = True
        self.read_only_checked = False

        self.editor.read_only_changed.connect(self._read_only_changed)
        self.editor.open_file_in_new_tab.connect(self.tabs.open_tab)

    def _read_only_changed(self) -> None:
        self.read_only_checked = self.editor.read_only

    # --- title and status -------------------------------------------------------

    def window_title(self) -> str:
        """The title, with "*" after the name while the document has unsaved edits."""
        name = self.editor.current_file_name if self.editor.current_file else UNTITLED
        marker = "*" if self.editor.modified else ""
        return f"{name}{marker} - {APP_NAME}"

    def status_message(self) -> str:
        """Character and line counts; empty in sticky-note mode."""
        if self.mode == NoteMode.STICKY:
            return ""
        flags = READ_ONLY_FLAG if self.editor.read_only else ""
        text = self.editor.to_plain_text()
        return f"Characters:{len(text)} Lines:{self.editor.block_count()}{flags}"

    # --- modes ------------------------------------------------------------------

    def normal_mode(self) -> None:
        """Restore the full editor layout."""
        self.size = self.base_size
        self.editor.switch_mode(EditorMode.NORMAL)
        self.normal_toolbar_visible = True
        self.sticky_toolbar_visible = False
        self.normal_mode_enabled = False
        self.sticky_mode_enabled = True
        self.preferences_enabled = True
        self.mode = NoteMode.NORMAL

    def sticky_note_mode(self) -> None:
        """Shrink into a coloured note without line numbers or preferences."""
        width, height = self.base_size
        self.size = (round(width * STICKY_SCALE), round(height * STICKY_SCALE))
        self.editor.switch_mode(EditorMode.STICKY)
        self.preferences_enabled = False
        self.normal_toolbar_visible = False
        self.sticky_toolbar_visible = True
        self.sticky_mode_enabled = False
        self.normal_mode_enabled = True
        self.mode = NoteMode.STICKY

    def set_background_color(self, color: str) -> None:
        self.background_color = color

    def toggle_pin_to_top(self) -> bool:
        """Keep the window above others, or stop; return the new state."""
        self.pinned = not self.pinned
        return self.pinned

    def toggle_read_only(self) -> bool:
        """Flip the editor's read-only state; return the new state."""
        self.editor.set_read_only(not self.editor.read_only)
        return self.editor.read_only

    # --- preview ----------------------------------------------------------------

    def toggle_preview_panel(self) -> bool:
        self.preview_visible = not self.preview_visible
        return self.preview_visible

    def preview(self) -> Preview | None:
        """The preview panel's content, or None while the panel is hidden."""
        if not self.preview_visible:
            return None
        suffix = self.editor.current_file_name.split(".")[-1]
        text = self.editor.to_plain_text()
        if suffix in MARKDOWN_SUFFIXES:
            return Preview(PreviewFormat.MARKDOWN, text)
        return Preview(PreviewFormat.TEXT, text)

    # --- preferences ------------------------------------------------------------

    def set_style_theme(self, name: str) -> None:
        self.style_theme = name
        self.config.style_theme = name

    def set_editor_font(self, family: str) -> None:
        self.editor.set_editor_font(family)

    def set_editor_font_size(self, size: int) -> None:
        self.editor.set_editor_font_size(size)

    def set_editor_color_theme(self, name: str) -> None:
        self.editor.set_editor_color_theme(name)
        self.config.editor_color_theme = name

    def accept_preferences(self) -> None:
        """Keep the changed preferences by writing them to the settings file."""
        self.config.save()

    def reject_preferences(self) -> None:
        """Drop unsaved preference changes and restore the stored values."""
        config = self.config
        config.read_general_settings()
        self.editor.set_editor_font(config.editor_font_family)
        self.editor.set_editor_font_size(config.editor_font_size)
        self.editor.set_editor_color_theme(config.editor_color_theme)
        self.style_theme = config.style_theme
        self.preferences.reset_all_values(False)

    # --- closing ----------------------------------------------------------------

    def open_file(self, file_name: str | os.PathLike) -> None:
        """Load ``file_name`` into the shown tab; raises OSError if unreadable."""
        self.editor.open_file(file_name)

    def close(self, ask: Callable[[], str]) -> bool:
        """True when the window may close, after offering to save changes."""
        return self.editor.maybe_save(ask)