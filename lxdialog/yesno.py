"""A box asking a question with Yes and No buttons."""

from __future__ import annotations

import curses
from typing import Any

from .screen import KEY_ESC, TAB, DisplayTooSmall, Screen, _acs, _safe


def next_button(button: int, key: int, count: int) -> int:
    """Button selected after TAB or an arrow key, wrapping among count buttons."""
    button = button - 1 if key == curses.KEY_LEFT else button + 1
    if button < 0:
        return count - 1
    if button > count - 1:
        return 0
    return button


def _print_buttons(screen: Screen, dialog: Any, height: int, width: int,
                   selected: int) -> None:
    x = width // 2 - 10
    y = height - 2
    screen.print_button(dialog, " Yes ", y, x, selected == 0)
    screen.print_button(dialog, "  No  ", y, x + 13, selected == 1)
    _safe(dialog.move, y, x + 1 + 13 * selected)
    dialog.refresh()


def _run(screen: Screen, title: str | None, prompt: str,
         height: int, width: int, lines: int, cols: int) -> int | None:
    y = (lines - height) // 2
    x = (cols - width) // 2
    screen.draw_shadow(screen.stdscr, y, x, height, width)

    dialog = curses.newwin(height, width, y, x)
    dialog.keypad(True)
    screen.draw_box(dialog, 0, 0, height, width,
                    screen.attrs["dialog"], screen.attrs["border"])
    dialog.attrset(screen.attrs["border"])
    _safe(dialog.move, height - 3, 0)
    _safe(dialog.addch, _acs("ACS_LTEE"))
    for _ in range(width - 2):
        _safe(dialog.addch, _acs("ACS_HLINE"))
    dialog.attrset(screen.attrs["dialog"])
    _safe(dialog.addch, _acs("ACS_RTEE"))
    screen.print_title(dialog, title, width)
    dialog.attrset(screen.attrs["dialog"])
    screen.print_autowrap(dialog, prompt, width - 2, 1, 3)

    button = 0
    _print_buttons(screen, dialog, height, width, button)

    key = 0
    while key != KEY_ESC:
        key = dialog.getch()
        if key in (ord("Y"), ord("y")):
            return 0
        if key in (ord("N"), ord("n")):
            return 1
        if key in (TAB, curses.KEY_LEFT, curses.KEY_RIGHT):
            button = next_button(button, key, 2)
            _print_buttons(screen, dialog, height, width, button)
            dialog.refresh()
        elif key in (ord(" "), ord("\n")):
            return button
        elif key == KEY_ESC:
            key = screen.on_key_esc(dialog)
        elif key == curses.KEY_RESIZE:
            screen.on_key_resize()
            return None
    return KEY_ESC


def dialog_yesno(screen: Screen, title: str | None, prompt: str,
                 height: int, width: int) -> int:
    """Ask a yes/no question: 0 for Yes, 1 for No, KEY_ESC when escaped."""
    while True:
        lines, cols = screen.stdscr.getmaxyx()
        if lines < height + 4 or cols < width + 4:
            raise DisplayTooSmall(
                f"display is {lines}x{cols}, needs {height + 4}x{width + 4}"
            )
        result = _run(screen, title, prompt, height, width, lines, cols)
        if result is not None:
            return result