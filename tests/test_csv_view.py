from pathlib import Path

import pytest

from pikaide.commands import Action, ActionKind, CommandKind
from pikaide.csv_view import CsvView, truncate


def make_csv(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "test.csv"
    path.write_text(content, encoding="utf-8")
    return path


def act(kind: ActionKind, char: str | None = None) -> Action:
    return Action(kind, char)


def test_parse_simple_csv(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "name,age\nAlice,30\nBob,25\n"))
    assert view.headers == ["name", "age"]
    assert len(view.rows) == 2
    assert view.rows[0] == ["Alice", "30"]


def test_initial_cursor(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\n1,2\n"))
    assert view.cursor_row == 0
    assert view.cursor_col == 0
    assert not view.editing
    assert not view.modified


def test_navigate_down_up(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\n1,2\n3,4\n"))
    view.handle_action(act(ActionKind.CURSOR_DOWN))
    assert view.cursor_row == 1
    view.handle_action(act(ActionKind.CURSOR_UP))
    assert view.cursor_row == 0
    view.handle_action(act(ActionKind.CURSOR_UP))
    assert view.cursor_row == 0


def test_navigate_down_stops_at_last_row(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\n1,2\n3,4\n"))
    for _ in range(5):
        view.handle_action(act(ActionKind.CURSOR_DOWN))
    assert view.cursor_row == 1


def test_navigate_right_left(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b,c\n1,2,3\n"))
    view.handle_action(act(ActionKind.CURSOR_RIGHT))
    assert view.cursor_col == 1
    view.handle_action(act(ActionKind.CURSOR_LEFT))
    assert view.cursor_col == 0
    view.handle_action(act(ActionKind.CURSOR_LEFT))
    assert view.cursor_col == 0


def test_enter_edit_mode(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nfoo,bar\n"))
    view.handle_action(act(ActionKind.INSERT_NEWLINE))
    assert view.editing
    assert view.edit_buffer == "foo"


def test_type_to_start_edit(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nfoo,bar\n"))
    view.handle_action(act(ActionKind.INSERT_CHAR, "x"))
    assert view.editing
    assert view.edit_buffer == "foox"


def test_edit_and_confirm(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nfoo,bar\n"))
    view.handle_action(act(ActionKind.INSERT_NEWLINE))
    view.handle_action(act(ActionKind.INSERT_CHAR, "z"))
    view.handle_action(act(ActionKind.INSERT_NEWLINE))
    assert not view.editing
    assert view.rows[0][0] == "fooz"
    assert view.modified


def test_confirm_unchanged_edit_is_not_a_modification(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nfoo,bar\n"))
    view.handle_action(act(ActionKind.INSERT_NEWLINE))
    view.handle_action(act(ActionKind.INSERT_NEWLINE))
    assert not view.editing
    assert view.rows[0][0] == "foo"
    assert not view.modified


def test_edit_cancel_with_undo(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nfoo,bar\n"))
    view.handle_action(act(ActionKind.INSERT_NEWLINE))
    view.handle_action(act(ActionKind.INSERT_CHAR, "x"))
    view.handle_action(act(ActionKind.UNDO))
    assert not view.editing
    assert view.rows[0][0] == "foo"
    assert not view.modified


def test_edit_backward_and_forward_delete(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nfoo,bar\n"))
    view.handle_action(act(ActionKind.INSERT_NEWLINE))
    view.handle_action(act(ActionKind.DELETE_BACKWARD))
    assert view.edit_buffer == "fo"
    view.handle_action(act(ActionKind.DELETE_FORWARD))
    assert view.edit_buffer == "o"


def test_tab_while_editing_commits_and_moves(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nfoo,bar\n"))
    view.handle_action(act(ActionKind.INSERT_CHAR, "!"))
    view.handle_action(act(ActionKind.INSERT_TAB))
    assert not view.editing
    assert view.rows[0][0] == "foo!"
    assert view.cursor_col == 1


def test_delete_clears_cell(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nfoo,bar\n"))
    view.handle_action(act(ActionKind.DELETE_BACKWARD))
    assert view.rows[0][0] == ""
    assert view.modified


def test_delete_empty_cell_is_not_a_modification(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\n,bar\n"))
    view.handle_action(act(ActionKind.DELETE_LINE))
    assert view.rows[0][0] == ""
    assert not view.modified


def test_save_roundtrip(tmp_path):
    path = make_csv(tmp_path, "a,b\nfoo,bar\n")
    view = CsvView.from_file(path)
    view.rows[0][0] = "baz"
    view.modified = True
    view.save()
    assert not view.modified
    assert CsvView.from_file(path).rows[0][0] == "baz"


def test_save_quotes_where_needed(tmp_path):
    path = make_csv(tmp_path, "a,b\nfoo,bar\n")
    view = CsvView.from_file(path)
    view.rows[0][1] = 'x, "y"'
    view.save()
    assert path.read_text(encoding="utf-8") == 'a,b\nfoo,"x, ""y"""\n'
    assert CsvView.from_file(path).rows[0] == ["foo", 'x, "y"']


def test_col_widths(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "name,age\nAlice,30\n"))
    assert view.col_widths() == [7, 5]


def test_col_widths_bounds(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\nx," + "y" * 40 + "\n"))
    assert view.col_widths() == [4, 25]


def test_tab_moves_to_next_col(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b,c\n1,2,3\n"))
    view.handle_action(act(ActionKind.INSERT_TAB))
    assert view.cursor_col == 1
    view.handle_action(act(ActionKind.INSERT_TAB))
    assert view.cursor_col == 2
    view.handle_action(act(ActionKind.INSERT_TAB))
    assert view.cursor_col == 0
    assert view.cursor_row == 0


def test_tab_wraps_to_next_row(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\n1,2\n3,4\n"))
    view.handle_action(act(ActionKind.INSERT_TAB))
    view.handle_action(act(ActionKind.INSERT_TAB))
    assert (view.cursor_row, view.cursor_col) == (1, 0)


def test_page_up_down(tmp_path):
    content = "a\n" + "".join(f"{i}\n" for i in range(20))
    view = CsvView.from_file(make_csv(tmp_path, content))
    view.update_viewport(10, 40)
    view.handle_action(act(ActionKind.PAGE_DOWN))
    assert view.cursor_row > 0
    view.handle_action(act(ActionKind.PAGE_UP))
    assert view.cursor_row == 0


def test_page_down_scrolls_and_clamps(tmp_path):
    content = "a\n" + "".join(f"{i}\n" for i in range(20))
    view = CsvView.from_file(make_csv(tmp_path, content))
    view.update_viewport(10, 40)
    view.handle_action(act(ActionKind.PAGE_DOWN))
    assert view.cursor_row == 8
    assert view.scroll_row == 1
    for _ in range(5):
        view.handle_action(act(ActionKind.PAGE_DOWN))
    assert view.cursor_row == 19


def test_file_start_and_end(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\n1,2\n3,4\n5,6\n"))
    view.handle_action(act(ActionKind.CURSOR_RIGHT))
    view.handle_action(act(ActionKind.CURSOR_FILE_END))
    assert (view.cursor_row, view.cursor_col) == (2, 1)
    view.handle_action(act(ActionKind.CURSOR_FILE_START))
    assert (view.cursor_row, view.cursor_col) == (0, 0)


def test_handle_action_returns_nothing(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\n1,2\n"))
    assert view.handle_action(act(ActionKind.CURSOR_DOWN)).kind is CommandKind.NOTHING


def test_unequal_record_lengths_raise(tmp_path):
    with pytest.raises(ValueError):
        CsvView.from_file(make_csv(tmp_path, "a,b\n1,2,3\n"))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CsvView.from_file(tmp_path / "absent.csv")


def test_name(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a\n1\n"))
    assert view.name() == "test.csv"


def test_status_text(tmp_path):
    view = CsvView.from_file(make_csv(tmp_path, "a,b\n1,2\n3,4\n"))
    assert view.status_text() == " row 1/2, col 1/2 "
    view.handle_action(act(ActionKind.INSERT_NEWLINE))
    assert view.status_text() == " EDIT  row 1/2, col 1/2 "


@pytest.mark.parametrize(
    ("text", "width", "expected"),
    [
        ("hello", 10, "hello"),
        ("hello", 5, "hello"),
        ("hello", 4, "hel…"),
        ("hello", 1, "…"),
        ("hello", 0, "…"),
    ],
)
def test_truncate(text, width, expected):
    assert truncate(text, width) == expected