"""Editor settings kept in a flat JSON file of "Group/Key" entries."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import IO, Any, Mapping

logger = logging.getLogger(__name__)

DEFAULT_STYLE_THEME = "Fusion"
DEFAULT_FONT_SIZE = 16
DEFAULT_COLOR_THEME = "Default"
DEFAULT_TAB_SIZE = 4
DEFAULT_INDENT_MODE = "Spaces"
DEFAULT_FONT_FAMILY = "monospace"


def read_json(stream: IO) -> dict[str, Any]:
    """Parse a settings map from ``stream``; raise ValueError on bad JSON.

    A document whose top level is not an object yields an empty map.
    """
    data = stream.read()
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    document = json.loads(data)
    return dict(document) if isinstance(document, dict) else {}


def write_json(stream: IO, mapping: Mapping[str, Any]) -> None:
    """Write ``mapping`` to ``stream`` as indented JSON with sorted keys."""
    text = json.dumps(dict(mapping), indent=4, sort_keys=True) + "\n"
    if "b" in getattr(stream, "mode", ""):
        stream.write(text.encode("utf-8"))
    else:
        stream.write(text)


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return 0


class ConfigManager:
    """The settings store plus the editor values read from it."""

    def __init__(
        self, path: str | os.PathLike, default_font_family: str = DEFAULT_FONT_FAMILY
    ) -> None:
        self.path = Path(path)
        self.default_font_family = default_font_family
        self._settings: dict[str, Any] = self._load()

        self.editor_font_family = default_font_family
        self.style_theme = DEFAULT_STYLE_THEME
        self.editor_font_size = DEFAULT_FONT_SIZE
        self.editor_color_theme = DEFAULT_COLOR_THEME
        self.editor_tab_size = DEFAULT_TAB_SIZE
        self.editor_indent_mode = DEFAULT_INDENT_MODE
        self.read_general_settings()

        for key, value in self.all_settings().items():
            logger.debug("%s : %r", key, value)

    def _load(self) -> dict[str, Any]:
        try:
            with self.path.open(encoding="utf-8") as stream:
                return read_json(stream)
        except FileNotFoundError:
            return {}
        except ValueError as error:
            logger.warning("cannot parse settings file %s: %s", self.path, error)
            return {}

    def read_general_settings(self) -> None:
        """Reload the editor values from the stored settings, with defaults."""
        settings = self._settings
        if "Editor/FontFamily" in settings:
            self.editor_font_family = _to_str(settings["Editor/FontFamily"])
        else:
            self.editor_font_family = self.default_font_family
        self.style_theme = _to_str(settings.get("StyleTheme", DEFAULT_STYLE_THEME))
        self.editor_font_size = _to_int(settings.get("Editor/FontSize", DEFAULT_FONT_SIZE))
        self.editor_color_theme = _to_str(
            settings.get("Editor/ColorTheme", DEFAULT_COLOR_THEME)
        )
        self.editor_tab_size = _to_int(settings.get("Editor/TabSize", DEFAULT_TAB_SIZE))
        self.editor_indent_mode = _to_str(
            settings.get("Editor/IndentMode", DEFAULT_INDENT_MODE)
        )

    def save(self) -> None:
        """Store the current editor values and write the settings file."""
        self._settings.update(
            {
                "Editor/FontFamily": self.editor_font_family,
                "Editor/FontSize": self.editor_font_size,
                "Editor/ColorTheme": self.editor_color_theme,
                "Editor/TabSize": self.editor_tab_size,
                "Editor/IndentMode": self.editor_indent_mode,
                "StyleTheme": self.style_theme,
            }
        )
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as stream:
            write_json(stream, self._settings)

    def all_settings(self) -> dict[str, Any]:
        """A copy of every stored setting, ordered by key."""
        return dict(sorted(self._settings.items()))