"""Project-wide, case-insensitive text search over the files under a root."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from pathlib import Path

MAX_RESULTS = 200

_SKIPPED_NAMES = frozenset({"target", "node_modules"})

_BINARY_EXTENSIONS = frozenset(
    {
        "png", "jpg", "jpeg", "gif", "bmp", "ico", "webp",
        "pdf", "zip", "gz", "tar", "tgz", "bz2", "xz", "7z", "rar",
        "exe", "dll", "so", "dylib", "a", "lib",
        "wasm", "bin", "dat", "db", "sqlite", "sqlite3",
        "mp3", "mp4", "wav", "ogg", "flac", "avi", "mkv", "mov",
        "ttf", "otf", "woff", "woff2",
        "lock",
    }
)

_MIN_QUERY_BYTES = 2


@dataclass
class SearchResult:
    """A matching line; `line_number` counts from 1."""

    path: Path
    line_number: int
    line_content: str


def is_binary_extension(path: str | os.PathLike[str]) -> bool:
    """True if the file extension marks a file that is not searched."""
    return Path(path).suffix[1:] in _BINARY_EXTENSIONS


def _lines(content: str) -> Iterator[str]:
    """Split on newlines, dropping a final empty line and a trailing CR per line."""
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def _search_file(path: Path, query: str) -> Iterator[SearchResult]:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError):
        return
    for number, line in enumerate(_lines(content), start=1):
        if query in line.lower():
            yield SearchResult(path, number, line)


def _search_dir(directory: Path, query: str) -> Iterator[SearchResult]:
    try:
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        name = entry.name
        if name.startswith(".") or name in _SKIPPED_NAMES:
            continue
        path = Path(entry.path)
        if entry.is_dir():
            yield from _search_dir(path, query)
        elif entry.is_file() and not is_binary_extension(path):
            yield from _search_file(path, query)


def search_project(root: str | os.PathLike[str], query: str) -> list[SearchResult]:
    """Lines under `root` containing `query`, ignoring case, at most MAX_RESULTS.

    Hidden entries, `target`, `node_modules` and binary files are skipped.
    """
    return list(islice(_search_dir(Path(root), query.lower()), MAX_RESULTS))


class ProjectSearch:
    """Search overlay state: the query, its results and the selected one."""

    def __init__(self) -> None:
        self.visible = False
        self.query = ""
        self.results: list[SearchResult] = []
        self.selected = 0

    def show(self, root: str | os.PathLike[str]) -> None:
        """Open the overlay empty; searching starts once the user types."""
        self.visible = True
        self.query = ""
        self.results = []
        self.selected = 0

    def hide(self) -> None:
        self.visible = False

    def push_char(self, ch: str, root: str | os.PathLike[str]) -> None:
        self.query += ch
        self._run_search(root)

    def pop_char(self, root: str | os.PathLike[str]) -> None:
        self.query = self.query[:-1]
        self._run_search(root)

    def select_next(self) -> None:
        if self.results:
            self.selected = (self.selected + 1) % len(self.results)

    def select_previous(self) -> None:
        if self.results:
            self.selected = (self.selected - 1) % len(self.results)

    def accept(self) -> tuple[Path, int] | None:
        """The selected result's path and 0-based line, or None."""
        if 0 <= self.selected < len(self.results):
            result = self.results[self.selected]
            return result.path, result.line_number - 1
        return None

    def result_labels(self) -> list[str]:
        """Display labels: file name, line number and the trimmed line."""
        return [
            f"{result.path.name or '?'}:{result.line_number}: {result.line_content.strip()}"
            for result in self.results
        ]

    def query_too_short(self) -> bool:
        return len(self.query.encode("utf-8")) < _MIN_QUERY_BYTES

    def _run_search(self, root: str | os.PathLike[str]) -> None:
        self.results = []
        self.selected = 0
        if self.query_too_short():
            return
        self.results = search_project(root, self.query)