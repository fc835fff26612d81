"""The preferences dialog's state: choices offered and values selected."""

from __future__ import annotations

from typing import Iterable

from .config import ConfigManager

HIGHLIGHT_THEMES = (
    "Breeze Dark",
    "Default",
    "Printing",
    "Solarized Dark",
    "Solarized Light",
)


class Preferences:
    """Mirrors the configuration into the dialog's selectable fields."""

    title = "Preferences - Notepanda"

    def __init__(
        self, config: ConfigManager, style_keys: Iterable[str] = ("Fusion",)
    ) -> None:
        self.config = config
        self._style_keys = tuple(style_keys)
        self.theme_options: list[str] = []
        self.highlight_theme_options: list[str] = []
        self.theme: str | None = None
        self.font_family: str | None = None
        self.font_size: int | None = None
        self.highlight_theme: str | None = None
        self.reset_all_values(True)

    @staticmethod
    def _select(options: list[str], current: str | None, wanted: str) -> str | None:
        return wanted if wanted in options else current

    def reset_all_values(self, is_first: bool) -> None:
        """Show the configuration's values; fill in the choices the first time."""
        if is_first:
            self.theme_options = list(self._style_keys)
            self.highlight_theme_options = list(HIGHLIGHT_THEMES)
            if self.theme is None and self.theme_options:
                self.theme = self.theme_options[0]
            if self.highlight_theme is None:
                self.highlight_theme = self.highlight_theme_options[0]
        self.theme = self._select(self.theme_options, self.theme, self.config.style_theme)
        self.font_family = self.config.editor_font_family
        self.font_size = self.config.editor_font_size
        self.highlight_theme = self._select(
            self.highlight_theme_options, self.highlight_theme, self.config.editor_color_theme
        )