import io
import random

import pytest

from deskbits.snake import Cell, Control, Model, Snake, SnakeDataError

BOARD = "3 4\n0 0 0 0\n0 1 0 0\n0 0 2 0\n"


def loaded(text=BOARD, seed=0):
    control = Control(random.Random(seed))
    control.load(io.StringIO(text))
    return control


def count(board, cell):
    return sum(line.count(cell.value) for line in board)


def test_load_reads_dimensions_and_head():
    control = loaded()
    assert (control.rows, control.cols) == (3, 4)
    assert control.model.current_position() == (1, 1)


def test_load_compact_rows_same_as_spaced():
    compact = loaded("3 4\n0000\n0100\n0020\n")
    spaced = loaded()
    assert compact.model.board == spaced.model.board
    assert list(compact.model.body) == list(spaced.model.body)


def test_load_without_body_raises():
    with pytest.raises(SnakeDataError):
        loaded("2 2\n0 0\n0 2\n")


def test_load_short_row_raises():
    with pytest.raises(SnakeDataError):
        loaded("2 3\n0 1 0\n0 0\n")


def test_load_bad_header_raises():
    with pytest.raises(SnakeDataError):
        loaded("rows cols\n")


def test_step_moves_head_and_clears_old_cell():
    control = loaded()
    old = control.model.current_position()
    expected = control.model.next_position(0, 1)
    assert control.step(0, 1) is True
    assert control.model.current_position() == expected
    assert control.model.board[old[0]][old[1]] == Cell.NOTHING
    assert len(control.model.body) == 1


def test_direction_letters_match_steps():
    for letter, step in [("w", (-1, 0)), ("A", (0, -1)), ("d", (0, 1)), ("S", (1, 0))]:
        by_letter = loaded()
        by_step = loaded()
        by_letter.go_ahead(letter)
        by_step.step(*step)
        assert by_letter.model.board == by_step.model.board
        assert list(by_letter.model.body) == list(by_step.model.body)


def test_unknown_direction_changes_nothing():
    control = loaded()
    before = [list(line) for line in control.model.board]
    assert control.go_ahead("x") is True
    assert control.model.board == before


def test_leaving_board_ends_game():
    control = loaded()
    assert control.go_ahead("w") is True
    assert control.go_ahead("w") is False


def test_running_into_body_ends_game():
    control = loaded("2 2\n1 1\n1 1\n")
    assert control.go_ahead("w") is False


def test_eating_food_grows_and_replaces_food():
    control = loaded()
    control.go_ahead("d")
    target = control.model.next_position(1, 0)
    assert control.model.exist_food(*target)
    assert control.go_ahead("s") is True
    assert control.model.current_position() == target
    assert len(control.model.body) == 2
    assert count(control.model.board, Cell.FOOD) == 1
    assert count(control.model.board, Cell.SNAKE_BODY) == 2


def test_push_food_only_on_empty_cell():
    model = loaded().model
    assert model.push_food_at(1, 1) is False
    assert model.push_food_at(0, 0) is True
    assert model.exist_food(0, 0)


def test_is_game_over_on_body_cell():
    model = loaded().model
    assert model.is_game_over(*model.current_position()) is True
    assert model.is_game_over(0, 0) is False


def test_create_food_full_board_returns_none():
    model = Model(random.Random(1))
    model.append_to_board("12")
    model.increase_only_body((0, 0))
    assert model.create_food() is None


def test_create_food_uses_empty_cell():
    model = loaded().model
    position = model.create_food()
    assert model.exist_food(*position)
    assert count(model.board, Cell.FOOD) == 2


def test_render_marks_head_and_food():
    model = loaded().model
    tiles = model.render()
    row, col = model.current_position()
    assert tiles[row][col] == "snake_head"
    assert sum(line.count("food") for line in tiles) == 1
    assert sum(line.count("grass") for line in tiles) == model.rows * model.cols - 2


def test_render_unknown_cell_raises():
    model = loaded("1 2\n1 9\n").model
    with pytest.raises(SnakeDataError):
        model.render()


def test_snake_load_and_play(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text(BOARD, encoding="utf-8")
    snake = Snake(random.Random(0))
    snake.load_file(path)
    assert (snake.rows, snake.cols) == (3, 4)
    assert snake.play("W") is False
    assert snake.play("W") is True


def test_snake_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Snake().load_file(tmp_path / "missing.txt")