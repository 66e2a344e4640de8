"""Overlay listing every keyboard shortcut, with scrolling."""

from __future__ import annotations

from pikaide.commands import Action, ActionKind

_TITLE = "  ⚡ Pika Keyboard Shortcuts"
_SEPARATOR = "  " + "─" * 53
_KEY_WIDTH = 24
_PAGE = 10

_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...] | tuple[str, ...]], ...] = (
    (
        "Global",
        (
            ("Ctrl+B", "Toggle sidebar"),
            ("Ctrl+P", "Open file finder / command palette"),
            ("Ctrl+S", "Save current file"),
            ("Ctrl+W", "Close current tab"),
            ("Ctrl+Q", "Quit"),
            ("Alt+→", "Next tab"),
            ("Alt+←", "Previous tab"),
            ("Ctrl+Shift+F", "Project-wide search"),
            ("Esc", "Switch focus (sidebar ↔ editor)"),
        ),
    ),
    (
        "Editor — Navigation",
        (
            ("↑ / ↓ / ← / →", "Move cursor"),
            ("Ctrl+← / Ctrl+→", "Move by word"),
            ("Home", "Go to line start"),
            ("End", "Go to line end"),
            ("Ctrl+Home", "Go to file start"),
            ("Ctrl+End", "Go to file end"),
            ("Page Up / Page Down", "Scroll by page"),
            ("Ctrl+G", "Go to line number"),
        ),
    ),
    (
        "Editor — Editing",
        (
            ("Ctrl+Z", "Undo"),
            ("Ctrl+Y", "Redo"),
            ("Ctrl+C", "Copy"),
            ("Ctrl+X", "Cut"),
            ("Ctrl+V", "Paste"),
            ("Ctrl+A", "Select all"),
            ("Ctrl+D", "Select next occurrence"),
            ("Tab", "Insert tab (spaces)"),
            ("Backspace", "Delete backward"),
            ("Delete", "Delete forward"),
        ),
    ),
    (
        "Editor — Search",
        (
            ("Ctrl+F", "Find in file"),
            ("Ctrl+R", "Find and replace"),
            ("Ctrl+H", "Show/hide shortcuts help"),
        ),
    ),
    (
        "Editor — LSP / IntelliSense",
        (
            ("Ctrl+Space", "Trigger autocomplete"),
            ("F12", "Go to definition"),
            ("Shift+F12", "Find references"),
            ("F2", "Rename symbol"),
            ("Ctrl+.", "Code actions / quick fix"),
            ("Ctrl+K, Ctrl+I", "Hover info"),
            ("Ctrl+Shift+I", "Format document"),
        ),
    ),
    (
        "Sidebar — File Tree",
        (
            ("↑ / ↓", "Navigate files"),
            ("Enter", "Open file / toggle directory"),
            ("← / →", "Collapse / expand directory"),
            ("Ctrl+C", "Copy file"),
            ("Ctrl+X", "Cut file (move)"),
            ("Ctrl+V", "Paste file"),
            ("Delete", "Delete file (to trash)"),
            ("R / F2", "Rename file"),
            ("N", "New file"),
            ("Shift+N", "New directory"),
        ),
    ),
    (
        "CSV Viewer",
        (
            ("↑ / ↓", "Move between rows"),
            ("← / →", "Move between columns"),
            ("Tab", "Move to next column (wraps)"),
            ("Enter", "Edit current cell"),
            ("Any key", "Edit cell (appends to value)"),
            ("Ctrl+Z (while editing)", "Cancel edit, restore value"),
            ("Backspace / Delete", "Clear cell content"),
            ("Page Up / Page Down", "Scroll rows by page"),
            ("Ctrl+S", "Save CSV file"),
        ),
    ),
    (
        "Drag & Drop",
        (
            "    Drag files from Finder into the terminal to copy them",
            "    into the currently selected directory in the sidebar.",
        ),
    ),
    (
        "Autocomplete Popup",
        (
            ("↑ / ↓", "Navigate suggestions"),
            ("Enter / Tab", "Accept suggestion"),
            ("Esc", "Dismiss"),
        ),
    ),
    (
        "Command Palette",
        (
            ("↑ / ↓", "Navigate results"),
            ("Enter", "Open selected file"),
            ("Esc", "Dismiss"),
        ),
    ),
)

_FOOTER = "  Scroll: ↑/↓ or Page Up/Page Down"

_SCROLL_UP = frozenset(
    {ActionKind.CURSOR_UP, ActionKind.TREE_UP, ActionKind.COMPLETION_UP, ActionKind.PALETTE_UP}
)
_SCROLL_DOWN = frozenset(
    {
        ActionKind.CURSOR_DOWN,
        ActionKind.TREE_DOWN,
        ActionKind.COMPLETION_DOWN,
        ActionKind.PALETTE_DOWN,
    }
)
_CLOSE = frozenset(
    {
        ActionKind.SHOW_SHORTCUTS,
        ActionKind.FOCUS_NEXT,
        ActionKind.COMPLETION_DISMISS,
        ActionKind.PALETTE_DISMISS,
    }
)


def _shortcut(key: str, description: str) -> str:
    return f"    {key:<{_KEY_WIDTH}}{description}"


def build_lines() -> list[str]:
    """Every line of the help text, top to bottom."""
    lines = [_TITLE, ""]
    for heading, rows in _SECTIONS:
        lines.append(f"  {heading}")
        lines.append(_SEPARATOR)
        for row in rows:
            lines.append(row if isinstance(row, str) else _shortcut(*row))
        lines.append("")
    lines.append(_FOOTER)
    return lines


class ShortcutsHelp:
    """Help overlay state: whether it is shown and how far it is scrolled."""

    def __init__(self) -> None:
        self.visible = False
        self.scroll = 0

    def toggle(self) -> None:
        self.visible = not self.visible
        self.scroll = 0

    def hide(self) -> None:
        self.visible = False
        self.scroll = 0

    def scroll_up(self) -> None:
        self.scroll = max(0, self.scroll - 1)

    def scroll_down(self) -> None:
        self.scroll += 1

    def handle_action(self, action: Action) -> bool:
        """Scroll or close; returns False only for actions the app must still handle."""
        kind = action.kind
        if kind in _SCROLL_UP:
            self.scroll_up()
        elif kind in _SCROLL_DOWN:
            self.scroll_down()
        elif kind is ActionKind.PAGE_UP:
            self.scroll = max(0, self.scroll - _PAGE)
        elif kind is ActionKind.PAGE_DOWN:
            self.scroll += _PAGE
        elif kind in _CLOSE:
            self.hide()
        elif kind is ActionKind.QUIT:
            self.hide()
            return False
        return True

    def visible_lines(self) -> list[str]:
        """The help lines from the current scroll position on."""
        return build_lines()[self.scroll:]