"""File finder overlay: lists project files and narrows them by fuzzy matching."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pikaide.commands import Action, ActionKind, AppCommand, CommandKind

MAX_DEPTH = 10

_SKIPPED_NAMES = frozenset({"node_modules", "target"})

_SCORE_MATCH = 16
_BONUS_BOUNDARY = 8
_BONUS_CAMEL = 7
_BONUS_CONSECUTIVE = 8
_FIRST_CHAR_MULTIPLIER = 2
_GAP_START = 3
_GAP_EXTENSION = 1


def _char_bonus(prev: str, ch: str) -> int:
    """Bonus for a match at `ch`, given the character before it."""
    if not prev.isalnum() and ch.isalnum():
        return _BONUS_BOUNDARY
    if prev.islower() and ch.isupper():
        return _BONUS_CAMEL
    if not prev.isdigit() and ch.isdigit():
        return _BONUS_CAMEL
    return 0


def _gap_penalty(gap: int) -> int:
    return _GAP_START + (gap - 1) * _GAP_EXTENSION if gap > 0 else 0


def fuzzy_score(choice: str, pattern: str) -> int | None:
    """Score how well `pattern` matches `choice` as a subsequence, or None if it does not.

    Matching ignores case unless the pattern holds an upper-case letter. Higher
    scores mean better matches: consecutive runs and matches at word boundaries
    are rewarded, gaps between matched characters are penalised.
    """
    if not pattern:
        return 0
    case_sensitive = any(ch.isupper() for ch in pattern)
    haystack = choice if case_sensitive else choice.lower()
    needle = pattern if case_sensitive else pattern.lower()
    bonuses = [_char_bonus(prev, ch) for prev, ch in zip(" " + choice, choice)]

    previous: dict[int, int] = {}
    for pattern_index, pattern_char in enumerate(needle):
        current: dict[int, int] = {}
        for position, hay_char in enumerate(haystack):
            if hay_char != pattern_char:
                continue
            gain = _SCORE_MATCH + bonuses[position]
            if pattern_index == 0:
                current[position] = _SCORE_MATCH + bonuses[position] * _FIRST_CHAR_MULTIPLIER
                continue
            candidates = []
            if position - 1 in previous:
                candidates.append(previous[position - 1] + gain + _BONUS_CONSECUTIVE)
            candidates.extend(
                score + gain - _gap_penalty(position - end - 1)
                for end, score in previous.items()
                if end < position - 1
            )
            if candidates:
                current[position] = max(candidates)
        if not current:
            return None
        previous = current
    return max(previous.values())


@dataclass
class PaletteEntry:
    """A file in the palette: its path relative to the root, full path and match score."""

    display: str
    path: Path
    score: int = 0


def _walk(root: Path, directory: Path, depth: int, entries: list[PaletteEntry]) -> None:
    if depth > MAX_DEPTH:
        return
    try:
        with os.scandir(directory) as scan:
            children = list(scan)
    except OSError:
        return
    for child in children:
        name = child.name
        if name.startswith(".") or name in _SKIPPED_NAMES:
            continue
        path = Path(child.path)
        try:
            is_dir = child.is_dir()
        except OSError:
            is_dir = False
        if is_dir:
            _walk(root, path, depth + 1, entries)
        else:
            try:
                display = str(path.relative_to(root))
            except ValueError:
                display = str(path)
            entries.append(PaletteEntry(display, path))


def collect_files(root: str | os.PathLike[str]) -> list[PaletteEntry]:
    """Files under `root`, sorted by relative path.

    Hidden entries, `node_modules` and `target` are skipped, and the walk stops
    below a depth of MAX_DEPTH directories.
    """
    root_path = Path(root)
    entries: list[PaletteEntry] = []
    _walk(root_path, root_path, 0, entries)
    entries.sort(key=lambda entry: entry.display)
    return entries


class CommandPalette:
    """File finder state: typed input, all files, the filtered view and the selection."""

    def __init__(self) -> None:
        self.visible = False
        self.input = ""
        self.entries: list[PaletteEntry] = []
        self.filtered: list[PaletteEntry] = []
        self.selected = 0

    def show(self, root: str | os.PathLike[str]) -> None:
        """Open the palette listing every file under `root`."""
        self.visible = True
        self.input = ""
        self.selected = 0
        self.entries = collect_files(root)
        self.filtered = list(self.entries)

    def hide(self) -> None:
        self.visible = False
        self.input = ""
        self.filtered = []
        self.selected = 0

    def insert_char(self, ch: str) -> None:
        self.input += ch
        self._filter()

    def backspace(self) -> None:
        self.input = self.input[:-1]
        self._filter()

    def select_next(self) -> None:
        if self.filtered:
            self.selected = (self.selected + 1) % len(self.filtered)

    def select_previous(self) -> None:
        if self.filtered:
            self.selected = (self.selected - 1) % len(self.filtered)

    def accept(self) -> Path | None:
        """Path of the selected entry, or None when nothing is listed."""
        if 0 <= self.selected < len(self.filtered):
            return self.filtered[self.selected].path
        return None

    def _filter(self) -> None:
        if not self.input:
            self.filtered = list(self.entries)
        else:
            scored = []
            for entry in self.entries:
                score = fuzzy_score(entry.display, self.input)
                if score is not None:
                    scored.append(PaletteEntry(entry.display, entry.path, score))
            scored.sort(key=lambda entry: entry.score, reverse=True)
            self.filtered = scored
        self.selected = 0

    def handle_action(self, action: Action) -> AppCommand:
        """Edit the input, move the selection, open the selected file or close."""
        kind = action.kind
        if kind in (ActionKind.PALETTE_INPUT, ActionKind.INSERT_CHAR):
            self.insert_char(action.char)
        elif kind in (ActionKind.PALETTE_BACKSPACE, ActionKind.DELETE_BACKWARD):
            self.backspace()
        elif kind is ActionKind.PALETTE_UP:
            self.select_previous()
        elif kind is ActionKind.PALETTE_DOWN:
            self.select_next()
        elif kind is ActionKind.PALETTE_ACCEPT:
            path = self.accept()
            if path is not None:
                self.hide()
                return AppCommand(CommandKind.OPEN_FILE, path=path)
        elif kind is ActionKind.PALETTE_DISMISS:
            self.hide()
        return AppCommand(CommandKind.NOTHING)