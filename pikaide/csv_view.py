"""Interactive table viewer and editor for CSV files."""

from __future__ import annotations

import csv
import os
from dataclasses import dataclass, field
from pathlib import Path

from pikaide.commands import Action, ActionKind, AppCommand, CommandKind

_MIN_COL_WIDTH = 4
_MAX_COL_WIDTH = 25
_COL_PADDING = 2
# Rows taken by the header row and the borders.
_CHROME_ROWS = 2
_ELLIPSIS = "…"


def truncate(text: str, width: int) -> str:
    """Fit `text` into `width` characters, ending with an ellipsis when cut."""
    if len(text) <= width:
        return text
    if width > 1:
        return text[: width - 1] + _ELLIPSIS
    return _ELLIPSIS


def _read_csv(path: Path) -> tuple[list[str], list[list[str]]]:
    with open(path, encoding="utf-8", newline="") as handle:
        records = [record for record in csv.reader(handle) if record]
    if not records:
        return [], []
    headers, *rows = records
    for number, row in enumerate(rows, start=2):
        if len(row) != len(headers):
            raise ValueError(
                f"{path}: record {number} has {len(row)} fields, "
                f"but the header has {len(headers)}"
            )
    return headers, rows


@dataclass
class CsvView:
    """Table state: cells, cursor, scroll offsets and the cell being edited."""

    path: Path
    headers: list[str]
    rows: list[list[str]]
    cursor_row: int = 0
    cursor_col: int = 0
    scroll_row: int = 0
    scroll_col: int = 0
    viewport_height: int = 24
    viewport_width: int = 80
    editing: bool = False
    edit_buffer: str = ""
    modified: bool = False
    _edit_original: str = field(default="", repr=False)

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> CsvView:
        """Load a CSV file whose first record holds the column headers.

        Raises OSError if the file cannot be read and ValueError if a record's
        field count differs from the header's.
        """
        file_path = Path(path)
        headers, rows = _read_csv(file_path)
        return cls(path=file_path, headers=headers, rows=rows)

    def name(self) -> str:
        return self.path.name or "untitled.csv"

    def save(self) -> None:
        """Write headers and rows back to the file and clear the modified flag."""
        with open(self.path, "w", encoding="utf-8", newline="") as handle:
            writer = csv.writer(handle, lineterminator="\n")
            writer.writerow(self.headers)
            writer.writerows(self.rows)
        self.modified = False

    def update_viewport(self, height: int, width: int) -> None:
        self.viewport_height = height
        self.viewport_width = width
        self._scroll_cursor_into_view()

    def col_widths(self) -> list[int]:
        """Display width per column: longest of header and data plus 2, within 4..25."""
        widths = []
        for index, header in enumerate(self.headers):
            longest = max((len(row[index]) for row in self.rows if index < len(row)), default=0)
            width = max(len(header), longest) + _COL_PADDING
            widths.append(max(_MIN_COL_WIDTH, min(width, _MAX_COL_WIDTH)))
        return widths

    def status_text(self) -> str:
        """Position summary shown next to the file name."""
        prefix = " EDIT " if self.editing else ""
        return (
            f"{prefix} row {self.cursor_row + 1}/{len(self.rows)}, "
            f"col {self.cursor_col + 1}/{len(self.headers)} "
        )

    def _visible_rows(self) -> int:
        return max(0, self.viewport_height - _CHROME_ROWS)

    def _page_step(self) -> int:
        return max(1, self._visible_rows())

    def _last_row(self) -> int:
        return max(0, len(self.rows) - 1)

    def _scroll_cursor_into_view(self) -> None:
        if self.cursor_row < self.scroll_row:
            self.scroll_row = self.cursor_row
        visible_rows = self._visible_rows()
        if self.cursor_row >= self.scroll_row + visible_rows:
            self.scroll_row = self.cursor_row + 1 - visible_rows

        if self.cursor_col < self.scroll_col:
            self.scroll_col = self.cursor_col
        used = 0
        visible_cols = 0
        for width in self.col_widths()[self.scroll_col:]:
            used += width
            if used > self.viewport_width:
                break
            visible_cols += 1
        visible_cols = max(1, visible_cols)
        if self.cursor_col >= self.scroll_col + visible_cols:
            self.scroll_col = self.cursor_col + 1 - visible_cols

    def _current_cell(self) -> str | None:
        if 0 <= self.cursor_row < len(self.rows):
            row = self.rows[self.cursor_row]
            if 0 <= self.cursor_col < len(row):
                return row[self.cursor_col]
        return None

    def _set_current_cell(self, value: str) -> None:
        current = self._current_cell()
        if current is not None and current != value:
            self.rows[self.cursor_row][self.cursor_col] = value
            self.modified = True

    def _end_edit(self) -> None:
        self.editing = False
        self.edit_buffer = ""
        self._edit_original = ""

    def _commit_edit(self) -> None:
        if self.editing:
            self._set_current_cell(self.edit_buffer)
            self._end_edit()

    def _cancel_edit(self) -> None:
        if self.editing:
            self._end_edit()

    def _start_edit(self) -> None:
        current = self._current_cell() or ""
        self._edit_original = current
        self.editing = True
        self.edit_buffer = current

    def _advance_column(self) -> None:
        columns = len(self.headers)
        if columns:
            self.cursor_col = (self.cursor_col + 1) % columns
            if self.cursor_col == 0 and self.cursor_row + 1 < len(self.rows):
                self.cursor_row += 1

    def _handle_editing(self, action: Action) -> None:
        kind = action.kind
        if kind is ActionKind.INSERT_CHAR:
            self.edit_buffer += action.char
        elif kind is ActionKind.DELETE_BACKWARD:
            self.edit_buffer = self.edit_buffer[:-1]
        elif kind is ActionKind.DELETE_FORWARD:
            self.edit_buffer = self.edit_buffer[1:]
        elif kind is ActionKind.INSERT_NEWLINE:
            # Confirming keeps the cursor on the edited cell.
            self._commit_edit()
        elif kind is ActionKind.INSERT_TAB:
            self._commit_edit()
            self._advance_column()
            self._scroll_cursor_into_view()
        elif kind is ActionKind.UNDO:
            self._cancel_edit()

    def _handle_navigation(self, action: Action) -> None:
        kind = action.kind
        if kind is ActionKind.CURSOR_UP:
            if self.cursor_row > 0:
                self.cursor_row -= 1
                self._scroll_cursor_into_view()
        elif kind is ActionKind.CURSOR_DOWN:
            if self.cursor_row + 1 < len(self.rows):
                self.cursor_row += 1
                self._scroll_cursor_into_view()
        elif kind is ActionKind.CURSOR_LEFT:
            if self.cursor_col > 0:
                self.cursor_col -= 1
                self._scroll_cursor_into_view()
        elif kind is ActionKind.CURSOR_RIGHT:
            if self.cursor_col + 1 < len(self.headers):
                self.cursor_col += 1
                self._scroll_cursor_into_view()
        elif kind is ActionKind.INSERT_TAB:
            if self.headers:
                self._advance_column()
                self._scroll_cursor_into_view()
        elif kind is ActionKind.PAGE_UP:
            self.cursor_row = max(0, self.cursor_row - self._page_step())
            self._scroll_cursor_into_view()
        elif kind is ActionKind.PAGE_DOWN:
            self.cursor_row = min(self.cursor_row + self._page_step(), self._last_row())
            self._scroll_cursor_into_view()
        elif kind is ActionKind.CURSOR_FILE_START:
            self.cursor_row = 0
            self.cursor_col = 0
            self._scroll_cursor_into_view()
        elif kind is ActionKind.CURSOR_FILE_END:
            self.cursor_row = self._last_row()
            self._scroll_cursor_into_view()
        elif kind is ActionKind.INSERT_NEWLINE:
            self._start_edit()
        elif kind is ActionKind.INSERT_CHAR:
            self._start_edit()
            self.edit_buffer += action.char
        elif kind in (
            ActionKind.DELETE_BACKWARD,
            ActionKind.DELETE_FORWARD,
            ActionKind.DELETE_LINE,
        ):
            self._set_current_cell("")

    def handle_action(self, action: Action) -> AppCommand:
        """Navigate cells, or edit the current one; never asks anything of the app."""
        if self.editing:
            self._handle_editing(action)
        else:
            self._handle_navigation(action)
        return AppCommand(CommandKind.NOTHING)