"""State models for a terminal editor's panels: tabs, status line, confirm dialog,
completion popup, file finder, project search, shortcuts help and CSV table editor."""

__version__ = "0.1.6"