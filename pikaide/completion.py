"""Autocomplete popup state fed from language-server completion results."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pikaide.commands import Action, ActionKind, AppCommand, CommandKind


class CompletionKind(enum.Enum):
    """Coarse kind of a completion item, shown as a short icon."""

    FUNCTION = "function"
    VARIABLE = "variable"
    KEYWORD = "keyword"
    STRUCT = "struct"
    FIELD = "field"
    MODULE = "module"
    SNIPPET = "snippet"
    OTHER = "other"

    def icon(self) -> str:
        return _ICONS[self]


_ICONS = {
    CompletionKind.FUNCTION: "fn",
    CompletionKind.VARIABLE: "var",
    CompletionKind.KEYWORD: "kw",
    CompletionKind.STRUCT: "st",
    CompletionKind.FIELD: "fd",
    CompletionKind.MODULE: "mod",
    CompletionKind.SNIPPET: "snp",
    CompletionKind.OTHER: "  ",
}

# Language Server Protocol CompletionItemKind numbers.
_LSP_KINDS = {
    2: CompletionKind.FUNCTION,  # Method
    3: CompletionKind.FUNCTION,  # Function
    5: CompletionKind.FIELD,  # Field
    6: CompletionKind.VARIABLE,  # Variable
    7: CompletionKind.STRUCT,  # Class
    9: CompletionKind.MODULE,  # Module
    10: CompletionKind.FIELD,  # Property
    14: CompletionKind.KEYWORD,  # Keyword
    15: CompletionKind.SNIPPET,  # Snippet
    22: CompletionKind.STRUCT,  # Struct
}


def kind_from_lsp(kind: int | None) -> CompletionKind:
    """Map an LSP CompletionItemKind number (or None) to a CompletionKind."""
    if kind is None:
        return CompletionKind.OTHER
    return _LSP_KINDS.get(kind, CompletionKind.OTHER)


@dataclass
class CompletionItem:
    """One entry in the completion popup."""

    label: str
    detail: str | None
    kind: CompletionKind
    insert_text: str

    @classmethod
    def from_lsp(cls, item: Mapping[str, Any]) -> CompletionItem:
        """Build from an LSP CompletionItem object as decoded from JSON."""
        label = item["label"]
        insert_text = item.get("insertText")
        return cls(
            label=label,
            detail=item.get("detail"),
            kind=kind_from_lsp(item.get("kind")),
            insert_text=insert_text if insert_text is not None else label,
        )


class CompletionPopup:
    """Popup showing completion items filtered by the typed prefix."""

    def __init__(self) -> None:
        self.visible = False
        self.items: list[CompletionItem] = []
        self.full_items: list[CompletionItem] = []
        self.selected = 0
        self.cursor_x = 0
        self.cursor_y = 0
        self.trigger_prefix = ""

    def show(self, items: Iterable[CompletionItem], cursor_x: int, cursor_y: int) -> None:
        """Show `items` at the cursor; an empty list hides the popup."""
        items = list(items)
        if not items:
            self.hide()
            return
        self.full_items = list(items)
        self.items = items
        self.selected = 0
        self.cursor_x = cursor_x
        self.cursor_y = cursor_y
        self.visible = True

    def show_from_lsp(
        self,
        items: Iterable[Mapping[str, Any]],
        cursor_x: int,
        cursor_y: int,
        trigger_prefix: str,
    ) -> None:
        """Show LSP completion items; an open popup is refiltered, keeping its selection."""
        converted = [CompletionItem.from_lsp(item) for item in items]
        if self.visible:
            old_label = self.items[self.selected].label if self.selected < len(self.items) else None
            self.full_items = converted
            self.trigger_prefix = trigger_prefix
            self.filter_by_prefix(trigger_prefix)
            if old_label is not None:
                index = next(
                    (i for i, item in enumerate(self.items) if item.label == old_label), None
                )
                if index is not None:
                    self.selected = index
        else:
            self.trigger_prefix = trigger_prefix
            self.show(converted, cursor_x, cursor_y)

    def filter_by_prefix(self, prefix: str) -> None:
        """Keep items whose label contains `prefix`, ignoring case; hide if none do."""
        if not prefix:
            self.items = list(self.full_items)
        else:
            lower = prefix.lower()
            self.items = [item for item in self.full_items if lower in item.label.lower()]
        if self.items:
            self.selected = min(self.selected, len(self.items) - 1)
            self.visible = True
        else:
            self.visible = False

    def hide(self) -> None:
        self.visible = False
        self.items = []
        self.full_items = []
        self.selected = 0

    def select_next(self) -> None:
        if self.items:
            self.selected = (self.selected + 1) % len(self.items)

    def select_previous(self) -> None:
        if self.items:
            self.selected = (self.selected - 1) % len(self.items)

    def accept(self) -> CompletionItem | None:
        """The selected item, or None when there is none."""
        if 0 <= self.selected < len(self.items):
            return self.items[self.selected]
        return None

    def handle_action(self, action: Action) -> AppCommand:
        """Navigate or dismiss; inserting an accepted item is left to the app."""
        if action.kind is ActionKind.COMPLETION_UP:
            self.select_previous()
        elif action.kind is ActionKind.COMPLETION_DOWN:
            self.select_next()
        elif action.kind is ActionKind.COMPLETION_DISMISS:
            self.hide()
        return AppCommand(CommandKind.NOTHING)