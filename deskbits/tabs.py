"""Several documents sharing one editor, switched like tabs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .editor import TextEditor

UNTITLED = "Untitled"


@dataclass
class TabData:
    """What a tab remembers while another one is shown."""

    plain_text: str = ""
    file_name: str = ""
    is_modified: bool = False

    @property
    def title(self) -> str:
        return Path(self.file_name).name if self.file_name else UNTITLED


class TabSet:
    """The tabs of one editor; the current tab's document lives in the editor."""

    def __init__(self, editor: TextEditor) -> None:
        self.editor = editor
        self.tabs: list[TabData] = [TabData()]
        self.current = 0

    def __len__(self) -> int:
        return len(self.tabs)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.tabs):
            raise IndexError(f"tab {index} does not exist")

    def _load(self, index: int) -> None:
        data = self.tabs[index]
        editor = self.editor
        editor.set_plain_text(data.plain_text)
        editor.set_current_file(data.file_name)
        if not data.file_name:
            editor.current_file_name = ""
        editor.update_syntax_highlight()
        editor.modified = data.is_modified

    def save_tab_data(self, index: int) -> None:
        """Copy the editor's document into tab ``index``."""
        self._check(index)
        self.tabs[index] = TabData(
            self.editor.to_plain_text(), self.editor.current_file, self.editor.modified
        )

    def new_tab(self) -> int:
        """Add an empty tab and show it; return its index."""
        self.save_tab_data(self.current)
        self.editor.new_document()
        self.tabs.append(TabData())
        self.current = len(self.tabs) - 1
        self._load(self.current)
        return self.current

    def open_tab(self, file_name: str | os.PathLike) -> int:
        """Open ``file_name`` in a new tab and show it; return its index.

        Raises OSError, leaving the tabs unchanged, if the file cannot be read.
        """
        self.save_tab_data(self.current)
        self.editor.open_file(file_name)
        self.tabs.append(TabData(self.editor.to_plain_text(), self.editor.current_file, False))
        self.current = len(self.tabs) - 1
        return self.current

    def change_tab(self, index: int) -> None:
        """Keep the shown document in its tab and show tab ``index``."""
        self._check(index)
        if index == self.current:
            return
        self.save_tab_data(self.current)
        self.current = index
        self._load(index)

    def close_tab(self, index: int) -> None:
        """Drop tab ``index``; closing the last tab leaves a fresh untitled one."""
        self._check(index)
        del self.tabs[index]
        if not self.tabs:
            self.tabs.append(TabData())
            self.current = 0
            self._load(0)
        elif index == self.current:
            self.current = min(index, len(self.tabs) - 1)
            self._load(self.current)
        elif index < self.current:
            self.current -= 1

    def tab_titles(self) -> list[str]:
        """The text of every tab: the file's name, or Untitled."""
        return [tab.title for tab in self.tabs]