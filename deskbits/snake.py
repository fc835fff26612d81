"""Snake game model: a board of cells, the snake's body and its movement rules."""

from __future__ import annotations

import logging
import random
from collections import deque
from enum import Enum
from typing import Iterable

logger = logging.getLogger(__name__)

Position = tuple[int, int]


class Cell(str, Enum):
    """What a board position holds."""

    NOTHING = "0"
    SNAKE_BODY = "1"
    FOOD = "2"


class SnakeDataError(ValueError):
    """The game data could not be loaded or drawn."""


_TILES = {
    Cell.NOTHING: "grass",
    Cell.SNAKE_BODY: "snake_body",
    Cell.FOOD: "food",
}
HEAD_TILE = "snake_head"

_DIRECTIONS = {
    "W": (-1, 0),
    "A": (0, -1),
    "D": (0, 1),
    "S": (1, 0),
}


class Model:
    """The board and the snake's body, head first."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.board: list[list[str]] = []
        self.body: deque[Position] = deque()
        self._rng = rng if rng is not None else random.Random()

    @property
    def rows(self) -> int:
        return len(self.board)

    @property
    def cols(self) -> int:
        if not self.board:
            raise SnakeDataError("the board is empty")
        return len(self.board[0])

    def eat_food(self, position: Position) -> None:
        """Grow the snake onto ``position`` without moving the tail."""
        self.body.appendleft(position)
        row, col = position
        self.board[row][col] = Cell.SNAKE_BODY.value

    def push_food_at(self, row: int, col: int) -> bool:
        """Put food on an empty cell; return whether it was placed."""
        if self.board[row][col] == Cell.NOTHING:
            self.board[row][col] = Cell.FOOD.value
            return True
        return False

    def exist_food(self, row: int, col: int) -> bool:
        return self.board[row][col] == Cell.FOOD

    def increase_only_body(self, position: Position) -> None:
        """Add ``position`` as the new head without touching the board."""
        self.body.appendleft(position)

    def append_to_board(self, line: Iterable[str]) -> None:
        self.board.append(list(line))

    def is_game_over(self, row: int, col: int) -> bool:
        """True when moving the head to (row, col) ends the game."""
        return (
            row < 0
            or row >= self.rows
            or col < 0
            or col >= self.cols
            or self.board[row][col] == Cell.SNAKE_BODY
        )

    def next_position(self, row_step: int, column_step: int) -> Position:
        row, col = self.current_position()
        return row + row_step, col + column_step

    def current_position(self) -> Position:
        """The head of the snake."""
        return self.body[0]

    def move_one_step_to(self, position: Position) -> None:
        """Move the tail cell to ``position``, which becomes the new head."""
        tail_row, tail_col = self.body[-1]
        self.board[tail_row][tail_col] = Cell.NOTHING.value
        head_row, head_col = position
        self.board[head_row][head_col] = Cell.SNAKE_BODY.value
        self.body.appendleft(position)
        self.body.pop()

    def create_food(self) -> Position | None:
        """Place food on a random empty cell; None if the board has no room."""
        empty = [
            (row, col)
            for row, line in enumerate(self.board)
            for col, cell in enumerate(line)
            if cell == Cell.NOTHING
        ]
        if not empty:
            return None
        row, col = self._rng.choice(empty)
        self.push_food_at(row, col)
        return row, col

    def render(self) -> list[list[str]]:
        """Tile names for every cell, row by row, with the head marked."""
        head = self.current_position()
        tiles: list[list[str]] = []
        for row, line in enumerate(self.board):
            row_tiles = []
            for col, cell in enumerate(line):
                if (row, col) == head:
                    row_tiles.append(HEAD_TILE)
                    continue
                try:
                    row_tiles.append(_TILES[Cell(cell)])
                except ValueError:
                    raise SnakeDataError(
                        f"unknown cell {cell!r} at row {row}, column {col}"
                    ) from None
            tiles.append(row_tiles)
        return tiles


class Control:
    """Turns player input into moves on the model."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.model = Model(rng)

    @property
    def rows(self) -> int:
        return self.model.rows

    @property
    def cols(self) -> int:
        return self.model.cols

    def go_ahead(self, direction: str) -> bool:
        """Move by a W/A/S/D key; False when the game is over.

        Unknown keys leave the game untouched and return True.
        """
        step = _DIRECTIONS.get(direction.upper()) if len(direction) == 1 else None
        if step is None:
            return True
        return self.step(*step)

    def step(self, row_step: int, column_step: int) -> bool:
        """Move the head by the given offsets; False when the game is over."""
        row, col = self.model.next_position(row_step, column_step)
        if self.model.is_game_over(row, col):
            return False
        if self.model.exist_food(row, col):
            self.model.eat_food((row, col))
            self.model.create_food()
        else:
            self.model.move_one_step_to((row, col))
        return True

    def load(self, stream: Iterable[str]) -> None:
        """Read a header "rows cols" and then one line of cells per row."""
        self.model.board.clear()
        self.model.body.clear()
        lines = iter(stream)
        header = next(lines, "").split()
        try:
            row_count, column_count = int(header[0]), int(header[1])
        except (IndexError, ValueError):
            raise SnakeDataError("the first line must hold the row and column counts") from None

        for row in range(row_count):
            cells = "".join(next(lines, "").split())
            if len(cells) < column_count:
                raise SnakeDataError(
                    f"row {row} has {len(cells)} cells, expected {column_count}"
                )
            line = cells[:column_count]
            for col, cell in enumerate(line):
                if cell == Cell.SNAKE_BODY:
                    self.model.increase_only_body((row, col))
            self.model.append_to_board(line)

        if not self.model.body:
            raise SnakeDataError("snake body is empty! init game failed.")


class Snake:
    """The game as the window sees it: load, play and draw."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.control = Control(rng)

    @property
    def rows(self) -> int:
        return self.control.rows

    @property
    def cols(self) -> int:
        return self.control.cols

    def load_file(self, path) -> None:
        with open(path, encoding="utf-8") as stream:
            self.control.load(stream)

    def play(self, direction: str) -> bool:
        """Make one move; return True when the game is over."""
        if not self.control.go_ahead(direction):
            logger.info("Game Over!")
            return True
        return False

    def render(self) -> list[list[str]]:
        return self.control.model.render()