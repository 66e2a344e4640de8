"""Status bar contents and their layout on one line."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StatusInfo:
    """Information shown in the status bar."""

    file_name: str = ""
    language: str = ""
    encoding: str = ""
    line_ending: str = ""
    cursor_line: int = 0
    cursor_col: int = 0
    total_lines: int = 0
    modified: bool = False
    lsp_status: str | None = None


def format_status_line(info: StatusInfo, width: int) -> str:
    """Left part, padding, right part; padding fills up to `width` where room allows."""
    modified_indicator = " [+]" if info.modified else ""
    left = f" {info.file_name}{modified_indicator}  {info.language}"
    lsp = info.lsp_status if info.lsp_status is not None else "No LSP"
    right = (
        f"{lsp}  {info.encoding}  "
        f"Ln {info.cursor_line + 1}, Col {info.cursor_col + 1}  {info.line_ending} "
    )
    padding = " " * max(0, width - len(left) - len(right))
    return left + padding + right