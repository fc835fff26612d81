"""The snake game window: keys in, draw commands out, and a terminal front end."""

from __future__ import annotations

import argparse
import random
import sys
from typing import NamedTuple

from .snake import Snake

_KEYS = {"up": "W", "down": "S", "left": "A", "right": "D"}

_COMMANDS = {
    "w": "up",
    "a": "left",
    "s": "down",
    "d": "right",
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
}

_GLYPHS = {"snake_head": "@", "snake_body": "o", "food": "*", "grass": "."}


class DrawCommand(NamedTuple):
    x: int
    y: int
    width: int
    height: int
    tile: str


class SnakeGame:
    """A snake game of fixed size whose every cell is a square picture."""

    title = "Snake Game"

    def __init__(
        self, data_file, picture_size: int = 100, rng: random.Random | None = None
    ) -> None:
        self.snake = Snake(rng)
        self.snake.load_file(data_file)
        self.picture_size = picture_size

    def window_size(self) -> tuple[int, int]:
        """Width and height of the window in pixels."""
        return self.snake.cols * self.picture_size, self.snake.rows * self.picture_size

    def key_press(self, key: str) -> bool:
        """Handle an arrow key by name; return True when the game is over."""
        direction = _KEYS.get(key.lower())
        if direction is None:
            return False
        return self.snake.play(direction)

    def paint(self) -> list[DrawCommand]:
        """One draw command per cell, row by row."""
        size = self.picture_size
        return [
            DrawCommand(col * size, row * size, size, size, tile)
            for row, line in enumerate(self.snake.render())
            for col, tile in enumerate(line)
        ]


def _show(game: SnakeGame) -> None:
    for line in game.snake.render():
        print("".join(_GLYPHS[tile] for tile in line))


def main(argv: list[str] | None = None) -> int:
    """Play in the terminal: one of w/a/s/d or up/down/left/right per line."""
    parser = argparse.ArgumentParser(description=SnakeGame.title)
    parser.add_argument("data_file", help="board file to start from")
    parser.add_argument("--picture-size", type=int, default=100)
    args = parser.parse_args(argv)

    game = SnakeGame(args.data_file, args.picture_size)
    _show(game)
    for line in sys.stdin:
        key = _COMMANDS.get(line.strip().lower())
        if key is None:
            continue
        over = game.key_press(key)
        _show(game)
        if over:
            print("Game is over!!")
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())