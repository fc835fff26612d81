"""A notepad core, a grid snake game and a small signal/slot toolkit."""

__version__ = "0.1.4"

__all__ = [
    "about",
    "app",
    "config",
    "editor",
    "gutter",
    "preferences",
    "signals",
    "snake",
    "snake_game",
    "tabs",
    "window",
]