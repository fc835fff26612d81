import io
import random

import pytest

from deskbits.snake import Snake
from deskbits.snake_game import SnakeGame, main

BOARD = "3 4\n0 0 0 0\n0 1 0 0\n0 0 2 0\n"


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(BOARD, encoding="utf-8")
    return path


def test_window_size_follows_board(data_file):
    game = SnakeGame(data_file, picture_size=10)
    assert game.window_size() == (40, 30)
    assert game.window_size() == (game.snake.cols * 10, game.snake.rows * 10)


def test_key_press_matches_play(data_file):
    game = SnakeGame(data_file, rng=random.Random(0))
    reference = Snake(random.Random(0))
    reference.load_file(data_file)
    assert game.key_press("Right") is False
    reference.play("D")
    assert game.snake.render() == reference.render()


def test_unknown_key_does_nothing(data_file):
    game = SnakeGame(data_file)
    before = game.snake.render()
    assert game.key_press("Space") is False
    assert game.snake.render() == before


def test_key_press_into_wall_ends_game(data_file):
    game = SnakeGame(data_file)
    assert game.key_press("Up") is False
    assert game.key_press("Up") is True


def test_paint_covers_every_cell(data_file):
    game = SnakeGame(data_file, picture_size=20)
    commands = game.paint()
    assert len(commands) == game.snake.rows * game.snake.cols
    assert all(c.width == c.height == 20 for c in commands)
    heads = [c for c in commands if c.tile == "snake_head"]
    assert len(heads) == 1
    assert heads[0].x % 20 == 0 and heads[0].y % 20 == 0
    assert max(c.x for c in commands) + 20 == game.window_size()[0]


def test_main_reports_game_over(data_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("w\nw\n"))
    assert main([str(data_file)]) == 0
    assert "Game is over!!" in capsys.readouterr().out


def test_main_ends_on_input_end(data_file, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("d\n"))
    assert main([str(data_file)]) == 0
    out = capsys.readouterr().out
    assert "Game is over!!" not in out
    assert out.count("@") == 2