"""User actions fed to UI components and commands they hand back to the app."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class ActionKind(enum.Enum):
    """Every kind of user action the UI components understand."""

    INSERT_CHAR = "insert_char"
    INSERT_NEWLINE = "insert_newline"
    INSERT_TAB = "insert_tab"
    DELETE_BACKWARD = "delete_backward"
    DELETE_FORWARD = "delete_forward"
    DELETE_LINE = "delete_line"
    UNDO = "undo"
    CURSOR_UP = "cursor_up"
    CURSOR_DOWN = "cursor_down"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    CURSOR_FILE_START = "cursor_file_start"
    CURSOR_FILE_END = "cursor_file_end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    NEXT_TAB = "next_tab"
    PREVIOUS_TAB = "previous_tab"
    CLOSE_TAB = "close_tab"
    FOCUS_NEXT = "focus_next"
    QUIT = "quit"
    SHOW_SHORTCUTS = "show_shortcuts"
    PALETTE_INPUT = "palette_input"
    PALETTE_BACKSPACE = "palette_backspace"
    PALETTE_UP = "palette_up"
    PALETTE_DOWN = "palette_down"
    PALETTE_ACCEPT = "palette_accept"
    PALETTE_DISMISS = "palette_dismiss"
    COMPLETION_UP = "completion_up"
    COMPLETION_DOWN = "completion_down"
    COMPLETION_ACCEPT = "completion_accept"
    COMPLETION_DISMISS = "completion_dismiss"
    TREE_UP = "tree_up"
    TREE_DOWN = "tree_down"
    TREE_EXPAND = "tree_expand"
    TREE_COLLAPSE = "tree_collapse"
    TREE_OPEN = "tree_open"
    FILE_COPY = "file_copy"
    FILE_CUT = "file_cut"
    FILE_PASTE = "file_paste"
    FILE_DELETE = "file_delete"
    FILE_RENAME = "file_rename"
    FILE_NEW = "file_new"
    DIR_NEW = "dir_new"


_CHAR_ACTIONS = frozenset({ActionKind.INSERT_CHAR, ActionKind.PALETTE_INPUT})


@dataclass(frozen=True)
class Action:
    """A user action; character-carrying kinds hold exactly one character."""

    kind: ActionKind
    char: str | None = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_ACTIONS:
            if not isinstance(self.char, str) or len(self.char) != 1:
                raise ValueError(f"{self.kind.name} needs exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.kind.name} does not carry a character")


class CommandKind(enum.Enum):
    """Every kind of command a component can send back to the app."""

    OPEN_FILE = "open_file"
    SAVE_CURRENT_FILE = "save_current_file"
    CLOSE_CURRENT_TAB = "close_current_tab"
    QUIT = "quit"
    TOGGLE_SIDEBAR = "toggle_sidebar"
    FOCUS_NEXT = "focus_next"
    REQUEST_COMPLETION = "request_completion"
    REQUEST_HOVER = "request_hover"
    REQUEST_GOTO_DEFINITION = "request_goto_definition"
    REQUEST_FIND_REFERENCES = "request_find_references"
    REQUEST_RENAME = "request_rename"
    REQUEST_CODE_ACTION = "request_code_action"
    REQUEST_FORMAT = "request_format"
    REQUEST_SIGNATURE_HELP = "request_signature_help"
    FILE_COPY = "file_copy"
    FILE_CUT = "file_cut"
    FILE_PASTE = "file_paste"
    FILE_DELETE = "file_delete"
    FILE_RENAME = "file_rename"
    FILE_NEW = "file_new"
    DIR_NEW = "dir_new"
    SHOW_COMMAND_PALETTE = "show_command_palette"
    SHOW_FILE_FINDER = "show_file_finder"
    PROJECT_SEARCH = "project_search"
    SHOW_SHORTCUTS = "show_shortcuts"
    NOTHING = "nothing"


_PATH_COMMANDS = frozenset(
    {
        CommandKind.OPEN_FILE,
        CommandKind.FILE_COPY,
        CommandKind.FILE_CUT,
        CommandKind.FILE_PASTE,
        CommandKind.FILE_DELETE,
        CommandKind.FILE_RENAME,
        CommandKind.FILE_NEW,
        CommandKind.DIR_NEW,
    }
)
_NAME_COMMANDS = frozenset({CommandKind.FILE_RENAME, CommandKind.REQUEST_RENAME})


@dataclass(frozen=True)
class AppCommand:
    """A command for the app; `path` and `name` are set only where the kind needs them.

    For FILE_RENAME, `path` is the source and `name` the new name.
    """

    kind: CommandKind
    path: Path | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind in _PATH_COMMANDS:
            if self.path is None:
                raise ValueError(f"{self.kind.name} needs a path")
            object.__setattr__(self, "path", Path(self.path))
        elif self.path is not None:
            raise ValueError(f"{self.kind.name} does not carry a path")
        if self.kind in _NAME_COMMANDS:
            if not isinstance(self.name, str):
                raise ValueError(f"{self.kind.name} needs a name")
        elif self.name is not None:
            raise ValueError(f"{self.kind.name} does not carry a name")