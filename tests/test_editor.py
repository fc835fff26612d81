import pytest

from deskbits.config import ConfigManager
from deskbits.editor import EditorMode, TextEditor, syntax_for_file


@pytest.fixture
def config(tmp_path):
    return ConfigManager(tmp_path / "config.json")


@pytest.fixture
def editor(config):
    return TextEditor(config)


def test_syntax_for_known_and_unknown_files():
    assert syntax_for_file("main.py") == "Python"
    assert syntax_for_file("README.md") == "Markdown"
    assert syntax_for_file("") is None
    assert syntax_for_file("no_such_extension.zzqq") is None


def test_plain_text_round_trip(editor):
    editor.set_plain_text("alpha\nbeta")
    assert editor.to_plain_text() == "alpha\nbeta"
    assert editor.block_count() == 2
    assert editor.modified is False


def test_insert_replaces_selection(editor):
    editor.set_plain_text("hello world")
    editor.set_selection(0, 5)
    editor.insert_text("bye")
    assert editor.to_plain_text() == "bye world"
    assert editor.cursor == 3
    assert editor.modified is True


def test_set_selection_out_of_range(editor):
    editor.set_plain_text("abc")
    with pytest.raises(ValueError):
        editor.set_selection(0, 10)


def test_undo_redo_and_clean_state(editor):
    editor.set_plain_text("x")
    editor.set_selection(1, 1)
    editor.insert_text("y")
    assert editor.undo() is True
    assert editor.to_plain_text() == "x"
    assert editor.modified is False
    assert editor.undo() is False
    assert editor.redo() is True
    assert editor.to_plain_text() == "xy"
    assert editor.redo() is False


def test_open_save_round_trip(editor, tmp_path):
    path = tmp_path / "note.py"
    path.write_text("print(1)\n", encoding="utf-8")
    titles = []
    editor.change_title.connect(lambda: titles.append(editor.current_file_name))
    editor.open_file(path)
    assert editor.to_plain_text() == "print(1)\n"
    assert editor.current_file_name == "note.py"
    assert editor.syntax == "Python"
    assert titles == ["note.py"]

    editor.set_selection(0, 0)
    editor.insert_text("# c\n")
    assert editor.modified is True
    editor.save()
    assert path.read_text(encoding="utf-8") == "# c\nprint(1)\n"
    assert editor.modified is False


def test_open_missing_file_raises(editor, tmp_path):
    with pytest.raises(OSError):
        editor.open_file(tmp_path / "missing.txt")


def test_save_without_file_name_raises(editor):
    editor.insert_text("text")
    with pytest.raises(ValueError):
        editor.save()


def test_save_as_sets_current_file(editor, tmp_path):
    editor.insert_text("content")
    target = tmp_path / "out.txt"
    editor.save_as(target)
    assert target.read_text(encoding="utf-8") == "content"
    assert editor.current_file == str(target)
    assert editor.current_file_name == "out.txt"


def test_maybe_save_choices(editor, tmp_path):
    assert editor.maybe_save(lambda: "cancel") is True
    editor.insert_text("changed")
    assert editor.maybe_save(lambda: "cancel") is False
    assert editor.maybe_save(lambda: "discard") is True
    editor.set_current_file(tmp_path / "f.txt")
    editor.insert_text("!")
    assert editor.maybe_save(lambda: "save") is True
    assert (tmp_path / "f.txt").read_text(encoding="utf-8") == editor.to_plain_text()


def test_new_document_clears(editor, tmp_path):
    editor.set_current_file(tmp_path / "a.txt")
    editor.insert_text("data")
    assert editor.new_document() is True
    assert editor.to_plain_text() == ""
    assert editor.current_file == ""
    assert editor.modified is False


def test_bracket_keys_insert_pairs(editor):
    for key in "({[":
        editor.key_press(key)
    assert editor.to_plain_text() == "({[]})"
    assert editor.cursor == 3


def test_tab_inserts_spaces_by_config(editor, config):
    editor.key_press("Tab")
    assert editor.to_plain_text() == " " * config.editor_tab_size


def test_tab_inserts_tab_character_in_tabs_mode(editor, config):
    config.editor_indent_mode = "Tabs"
    editor.key_press("\t")
    assert editor.to_plain_text() == "\t"


def test_keys_ignored_when_read_only(editor):
    editor.set_read_only(True)
    editor.key_press("a")
    assert editor.to_plain_text() == ""


def test_indent_selection_prefixes_touched_lines(editor):
    editor.set_plain_text("ab\ncd\nef")
    editor.set_selection(1, 4)
    editor.indent_selection(">")
    assert editor.to_plain_text() == ">ab\n>cd\nef"
    assert editor.selection == (2, 6)
    assert editor.cursor > editor.anchor
    assert editor.undo() is True
    assert editor.to_plain_text() == "ab\ncd\nef"


def test_tab_with_selection_indents(editor, config):
    editor.set_plain_text("one\ntwo")
    editor.set_selection(7, 0)
    editor.key_press("Tab")
    unit = " " * config.editor_tab_size
    assert editor.to_plain_text() == unit + "one\n" + unit + "two"
    assert editor.cursor < editor.anchor


def test_switch_mode(editor, config):
    editor.switch_mode(EditorMode.STICKY)
    assert editor.line_numbers_visible is False
    assert editor.syntax == "Markdown"
    editor.switch_mode(0)
    assert editor.mode is EditorMode.NORMAL
    assert editor.line_numbers_visible is True
    assert editor.font_family == config.editor_font_family


def test_update_syntax_highlight(editor, tmp_path):
    editor.set_current_file(tmp_path / "x.py")
    editor.update_syntax_highlight()
    assert editor.syntax == "Python"


def test_drop_files_emits_paths(editor):
    seen = []
    editor.open_file_in_new_tab.connect(seen.append)
    editor.drop_files(["a.txt", "b.txt"])
    assert seen == ["a.txt", "b.txt"]