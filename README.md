# pikaide

State models for the panels of a keyboard-driven terminal editor, with no
drawing code. Each panel keeps its own state, reacts to editor actions, and
hands back a command for the application to carry out.

## Installation

```
pip install pikaide
```

The package has no dependencies outside the standard library.

## Modules

- `pikaide.commands`: the actions that are fed in (`Action` with an
  `ActionKind`, plus a single character for `INSERT_CHAR` and `PALETTE_INPUT`)
  and the commands that come back (`AppCommand` with a `CommandKind`, plus a
  `path` and/or `name` where the kind needs them). A missing or unexpected
  field raises `ValueError`.
- `pikaide.tab_bar`: `TabBar` and `TabInfo`. You can add, close, find and
  rename tabs and cycle through them with wrap-around. `titles()` marks
  modified tabs with a dot.
- `pikaide.status_bar`: `StatusInfo` and `format_status_line(info, width)`.
  The function lays out the file name, language, LSP status, encoding,
  1-based cursor position and line ending on one line of the given width.
- `pikaide.confirm_dialog`: `ConfirmDialog` is the "unsaved changes" or
  "delete?" dialog. It is triggered by a `CloseTab`, `QuitApp` or `DeleteFile`
  action. `accept()` returns a `ConfirmResult`. `message()` and `buttons()`
  give the text to show.
- `pikaide.completion`: `CompletionPopup`, `CompletionItem`, `CompletionKind`
  and `kind_from_lsp(kind)`. `show_from_lsp` takes LSP completion items as
  decoded JSON mappings. `filter_by_prefix` keeps the items whose label
  contains the typed prefix, ignoring case, and hides the popup when none
  are left.
- `pikaide.command_palette`: `CommandPalette` is a fuzzy file finder.
  `collect_files(root)` lists files sorted by relative path. It skips hidden
  entries, `node_modules` and `target`, and goes at most 10 directories deep.
  `fuzzy_score(choice, pattern)` scores a subsequence match and returns
  `None` when there is no match. Matching ignores case unless the pattern
  contains an upper-case letter.
- `pikaide.project_search`: `ProjectSearch`, `SearchResult`,
  `search_project(root, query)` and `is_binary_extension(path)`. The search
  ignores case, visits entries in name order and stops after 200 results. It
  skips hidden entries, `target`, `node_modules` and files with binary
  extensions. The overlay only searches once the query is at least 2 bytes
  long.
- `pikaide.shortcuts_help`: `ShortcutsHelp` and `build_lines()` give the
  keyboard shortcut reference as text lines. The reference can be scrolled
  line by line or a page (10 lines) at a time.
- `pikaide.csv_view`: `CsvView` is a table editor for CSV files. It moves
  between cells, pages, edits a cell in place (Enter or typing starts an
  edit, Enter confirms, Undo cancels), clears cells and saves. `from_file`
  raises `OSError` if the file cannot be read and `ValueError` if a record's
  field count differs from the header's. `truncate(text, width)` shortens
  cell text with an ellipsis.

## Example

```python
from pikaide.commands import Action, ActionKind
from pikaide.tab_bar import TabBar
from pikaide.csv_view import CsvView

bar = TabBar()
bar.add_tab("main.rs", False)
bar.add_tab("app.rs", False)
bar.next_tab()
print(bar.active)  # 0, the position wraps around

view = CsvView.from_file("people.csv")
view.handle_action(Action(ActionKind.CURSOR_DOWN))
view.handle_action(Action(ActionKind.INSERT_NEWLINE))  # start editing the cell
view.handle_action(Action(ActionKind.INSERT_CHAR, "!"))
view.handle_action(Action(ActionKind.INSERT_NEWLINE))  # confirm the edit
view.save()
```

## What this package does not do

This is not a runnable editor. It has no command to start, and it does not
draw to or read keys from a terminal. It has no text buffer for editing
source files and no file-tree sidebar. It does not talk to language servers.
Completion items have to be supplied already decoded. The commands it returns,
such as opening, copying or deleting a file, are for the calling application
to carry out.

## Running the tests

```
pip install -e ".[test]"
python -m pytest
```