"""Curses dialog boxes and a gettext message catalogue for configuration tools."""

__version__ = "0.1.0"

__all__ = [
    "checklist",
    "inputbox",
    "items",
    "menubox",
    "potext",
    "screen",
    "text",
    "textbox",
    "theme",
    "yesno",
]