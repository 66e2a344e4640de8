"""Tab bar state: which tabs are open and which one is active."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TabInfo:
    """Name and modified flag of one open tab."""

    name: str
    modified: bool = False


@dataclass
class TabBar:
    """Ordered open tabs with an active index."""

    tabs: list[TabInfo] = field(default_factory=list)
    active: int = 0

    def __init__(self) -> None:
        self.tabs = []
        self.active = 0

    def add_tab(self, name: str, modified: bool) -> None:
        """Append a tab and make it active."""
        self.tabs.append(TabInfo(name, modified))
        self.active = len(self.tabs) - 1

    def close_tab(self, index: int) -> TabInfo | None:
        """Remove the tab at `index`; returns it, or None if there is no such tab."""
        if not 0 <= index < len(self.tabs):
            return None
        tab = self.tabs.pop(index)
        if self.tabs and self.active >= len(self.tabs):
            self.active = len(self.tabs) - 1
        return tab

    def next_tab(self) -> None:
        if self.tabs:
            self.active = (self.active + 1) % len(self.tabs)

    def previous_tab(self) -> None:
        if self.tabs:
            self.active = (self.active - 1) % len(self.tabs)

    def set_active(self, index: int) -> None:
        """Activate `index` if it names an open tab; otherwise do nothing."""
        if 0 <= index < len(self.tabs):
            self.active = index

    def update_tab(self, index: int, name: str, modified: bool) -> None:
        if 0 <= index < len(self.tabs):
            tab = self.tabs[index]
            tab.name = name
            tab.modified = modified

    def find_tab(self, name: str) -> int | None:
        """Index of the first tab called `name`, or None."""
        return next((i for i, tab in enumerate(self.tabs) if tab.name == name), None)

    def __len__(self) -> int:
        return len(self.tabs)

    def titles(self) -> list[str]:
        """Display titles, with a dot marking modified tabs."""
        return [f" {tab.name}{' ●' if tab.modified else ''} " for tab in self.tabs]