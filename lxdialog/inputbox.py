"""A box that reads a line of text."""

from __future__ import annotations

import curses
from typing import Any

from .screen import KEY_ESC, TAB, DisplayTooSmall, Screen, _acs, _safe
from .text import MAX_LEN


class LineEditor:
    """A one-line text field narrower than its text, scrolled to keep the cursor in view.

    Typing always replaces everything after the cursor, which sits at the end.
    """

    def __init__(self, text: str, box_width: int) -> None:
        self.text = text
        self.box_width = box_width
        self.scroll = 0
        self.input_x = len(text)
        if self.input_x >= box_width:
            self.scroll = self.input_x - box_width + 1
            self.input_x = box_width - 1

    def insert(self, char: str) -> bool:
        """Type a character at the cursor; False when the text is full."""
        pos = self.scroll + self.input_x
        if pos >= MAX_LEN:
            return False
        self.text = self.text[:pos] + char
        if self.input_x == self.box_width - 1:
            self.scroll += 1
        else:
            self.input_x += 1
        return True

    def backspace(self) -> bool:
        """Delete before the cursor; False when there is nothing to delete."""
        if not (self.input_x or self.scroll):
            return False
        if not self.input_x:
            step = self.box_width - 1
            self.scroll = 0 if self.scroll < step else self.scroll - step
            self.input_x = len(self.text) - self.scroll
        else:
            self.input_x -= 1
        self.text = self.text[: self.scroll + self.input_x]
        return True

    def visible(self) -> str:
        """The part of the text shown in the field."""
        return self.text[self.scroll:self.scroll + self.box_width - 1]


def _print_buttons(screen: Screen, dialog: Any, height: int, width: int,
                   selected: int) -> None:
    x = width // 2 - 11
    y = height - 2
    screen.print_button(dialog, "  Ok  ", y, x, selected == 0)
    screen.print_button(dialog, " Help ", y, x + 14, selected == 1)
    _safe(dialog.move, y, x + 1 + 14 * selected)
    dialog.refresh()


def _run(screen: Screen, title: str | None, prompt: str, height: int, width: int,
         lines: int, cols: int, text: str) -> tuple[int, str] | str:
    """Run the box; a bare string means a resize happened and carries the text."""
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

    box_width = width - 6
    row, _ = dialog.getyx()
    box_y = row + 2
    box_x = (width - box_width) // 2
    screen.draw_box(dialog, row + 1, box_x - 1, 3, box_width + 2,
                    screen.attrs["dialog"], screen.attrs["border"])
    _print_buttons(screen, dialog, height, width, 0)

    editor = LineEditor(text, box_width)

    def show_field() -> None:
        dialog.attrset(screen.attrs["inputbox"])
        _safe(dialog.move, box_y, box_x)
        _safe(dialog.addstr, editor.visible().ljust(box_width - 1))
        _safe(dialog.move, box_y, box_x + editor.input_x)
        dialog.refresh()

    show_field()

    button = -1
    key = 0
    while key != KEY_ESC:
        key = dialog.getch()
        if button == -1:
            if key in (curses.KEY_LEFT, curses.KEY_RIGHT):
                continue
            if key in (curses.KEY_BACKSPACE, 127):
                if editor.backspace():
                    show_field()
                continue
            if key not in (TAB, curses.KEY_UP, curses.KEY_DOWN) and 32 <= key < 127:
                if editor.insert(chr(key)):
                    show_field()
                else:
                    curses.flash()
                continue

        if key in (ord("O"), ord("o")):
            return 0, editor.text
        if key in (ord("H"), ord("h")):
            return 1, editor.text
        if key in (curses.KEY_UP, curses.KEY_LEFT):
            if button == -1:
                button = 1
                _print_buttons(screen, dialog, height, width, 1)
            elif button == 0:
                button = -1
                _print_buttons(screen, dialog, height, width, 0)
                _safe(dialog.move, box_y, box_x + editor.input_x)
                dialog.refresh()
            else:
                button = 0
                _print_buttons(screen, dialog, height, width, 0)
        elif key in (TAB, curses.KEY_DOWN, curses.KEY_RIGHT):
            if button == -1:
                button = 0
                _print_buttons(screen, dialog, height, width, 0)
            elif button == 0:
                button = 1
                _print_buttons(screen, dialog, height, width, 1)
            else:
                button = -1
                _print_buttons(screen, dialog, height, width, 0)
                _safe(dialog.move, box_y, box_x + editor.input_x)
                dialog.refresh()
        elif key in (ord(" "), ord("\n")):
            return (0 if button == -1 else button), editor.text
        elif key in (ord("X"), ord("x")):
            key = KEY_ESC
        elif key == KEY_ESC:
            key = screen.on_key_esc(dialog)
        elif key == curses.KEY_RESIZE:
            screen.on_key_resize()
            return editor.text
    return KEY_ESC, editor.text


def dialog_inputbox(screen: Screen, title: str | None, prompt: str,
                    height: int, width: int, init: str | None = None) -> tuple[int, str]:
    """Read a line of text: returns (0 for Ok, 1 for Help or KEY_ESC, the text)."""
    text = init or ""
    while True:
        lines, cols = screen.stdscr.getmaxyx()
        if lines <= height - 2 or cols <= width - 2:
            raise DisplayTooSmall(f"display is {lines}x{cols}, too small for an input box")
        result = _run(screen, title, prompt, height, width, lines, cols, text)
        if isinstance(result, tuple):
            return result
        text = result