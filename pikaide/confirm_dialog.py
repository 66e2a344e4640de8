"""Confirmation dialog such as "Save before closing?"."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CloseTab:
    """Closing the tab at `index` triggered the dialog."""

    index: int


@dataclass(frozen=True)
class QuitApp:
    """Quitting the application triggered the dialog."""


@dataclass(frozen=True)
class DeleteFile:
    """Deleting `path` triggered the dialog."""

    path: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))


class ConfirmChoice(enum.Enum):
    SAVE = "save"
    DONT_SAVE = "dont_save"
    CANCEL = "cancel"


class ConfirmResult(enum.Enum):
    SAVE = "save"
    DONT_SAVE = "dont_save"
    CANCEL = "cancel"
    PENDING = "pending"


_ORDER = (ConfirmChoice.SAVE, ConfirmChoice.DONT_SAVE, ConfirmChoice.CANCEL)
_RESULTS = {
    ConfirmChoice.SAVE: ConfirmResult.SAVE,
    ConfirmChoice.DONT_SAVE: ConfirmResult.DONT_SAVE,
    ConfirmChoice.CANCEL: ConfirmResult.CANCEL,
}


class ConfirmDialog:
    """Dialog state: the triggering action, the file concerned and the chosen button."""

    def __init__(self) -> None:
        self.visible = False
        self.action: CloseTab | QuitApp | DeleteFile | None = None
        self.file_name = ""
        self.selected = ConfirmChoice.SAVE

    def show(self, file_name: str, action: CloseTab | QuitApp | DeleteFile) -> None:
        self.visible = True
        self.file_name = file_name
        self.action = action
        self.selected = ConfirmChoice.SAVE

    def hide(self) -> None:
        self.visible = False
        self.action = None
        self.file_name = ""

    def _step(self, offset: int) -> None:
        index = _ORDER.index(self.selected)
        self.selected = _ORDER[(index + offset) % len(_ORDER)]

    def select_next(self) -> None:
        self._step(1)

    def select_previous(self) -> None:
        self._step(-1)

    def accept(self) -> ConfirmResult:
        return _RESULTS[self.selected]

    def _is_delete(self) -> bool:
        return isinstance(self.action, DeleteFile)

    def message(self) -> str:
        """The question shown above the buttons."""
        if self._is_delete():
            return f'Delete "{self.file_name}"? (moves to trash)'
        return f'"{self.file_name}" has unsaved changes.'

    def buttons(self) -> list[tuple[str, ConfirmChoice]]:
        """Button labels with the choice each stands for."""
        if self._is_delete():
            # SAVE stands for confirming the deletion.
            return [("Delete", ConfirmChoice.SAVE), ("Cancel", ConfirmChoice.CANCEL)]
        return [
            ("Save", ConfirmChoice.SAVE),
            ("Don't Save", ConfirmChoice.DONT_SAVE),
            ("Cancel", ConfirmChoice.CANCEL),
        ]