"""Terminal screen set-up and the drawing primitives shared by all dialogs."""

from __future__ import annotations

import curses
import os
from contextlib import contextmanager, suppress
from typing import Any, Callable, Iterator

from .text import split_button_label, title_position, wrap_prompt
from .theme import build_attributes, mono_attributes, select_theme

KEY_ESC = 27
TAB = 9
ERR = -1
MIN_LINES = 19
MIN_COLS = 80

_ACS_FALLBACK = {
    "ACS_ULCORNER": "+",
    "ACS_LLCORNER": "+",
    "ACS_URCORNER": "+",
    "ACS_LRCORNER": "+",
    "ACS_HLINE": "-",
    "ACS_VLINE": "|",
    "ACS_LTEE": "+",
    "ACS_RTEE": "+",
    "ACS_UARROW": "^",
    "ACS_DARROW": "v",
}


def _acs(name: str) -> int:
    """Line-drawing character, or its plain fallback before curses starts."""
    return getattr(curses, name, ord(_ACS_FALLBACK[name]))


def _safe(call: Callable[..., Any], *args: Any) -> None:
    """Run a window call, ignoring writes that fall off the window edge."""
    with suppress(curses.error):
        call(*args)


class DisplayTooSmall(Exception):
    """The terminal is too small for the dialog."""


class Screen:
    """The whole terminal: colours, background title and drawing helpers."""

    def __init__(self, stdscr: Any, backtitle: str | None = None,
                 theme_name: str | None = None) -> None:
        height, width = stdscr.getmaxyx()
        if height < MIN_LINES or width < MIN_COLS:
            raise DisplayTooSmall(
                f"display is {height}x{width}, needs at least "
                f"{MIN_LINES} lines by {MIN_COLS} columns"
            )
        self.stdscr = stdscr
        self.backtitle = backtitle
        if theme_name is None:
            theme_name = os.environ.get("MENUCONFIG_COLOR")
        theme = select_theme(theme_name)
        if theme is not None and curses.has_colors():
            curses.start_color()
            self.attrs = build_attributes(
                theme, curses.init_pair, curses.color_pair, curses.A_BOLD
            )
            self.use_color = True
        else:
            self.attrs = mono_attributes(
                curses.A_NORMAL, curses.A_BOLD, curses.A_REVERSE, curses.A_DIM
            )
            self.use_color = False

        stdscr.keypad(True)
        curses.cbreak()
        curses.noecho()
        self.clear()

    def set_backtitle(self, backtitle: str | None) -> None:
        self.backtitle = backtitle

    def attr_clear(self, win: Any, height: int, width: int, attr: int) -> None:
        """Fill a region with blanks in the given attribute."""
        win.attrset(attr)
        for row in range(height):
            _safe(win.move, row, 0)
            for _ in range(width):
                _safe(win.addch, " ")
        win.touchwin()

    def clear(self) -> None:
        """Repaint the background and the background title."""
        lines, cols = self.stdscr.getmaxyx()
        self.attr_clear(self.stdscr, lines, cols, self.attrs["screen"])
        if self.backtitle is not None:
            self.stdscr.attrset(self.attrs["screen"])
            _safe(self.stdscr.move, 0, 1)
            _safe(self.stdscr.addstr, self.backtitle)
            _safe(self.stdscr.move, 1, 1)
            for _ in range(1, cols - 1):
                _safe(self.stdscr.addch, _acs("ACS_HLINE"))
        self.stdscr.noutrefresh()

    def draw_box(self, win: Any, y: int, x: int, height: int, width: int,
                 box: int, border: int) -> None:
        """Draw a rectangle with line characters: border on top-left, box on bottom-right."""
        win.attrset(0)
        last_row, last_col = height - 1, width - 1
        for i in range(height):
            _safe(win.move, y + i, x)
            for j in range(width):
                if i == 0 and j == 0:
                    ch = border | _acs("ACS_ULCORNER")
                elif i == last_row and j == 0:
                    ch = border | _acs("ACS_LLCORNER")
                elif i == 0 and j == last_col:
                    ch = box | _acs("ACS_URCORNER")
                elif i == last_row and j == last_col:
                    ch = box | _acs("ACS_LRCORNER")
                elif i == 0:
                    ch = border | _acs("ACS_HLINE")
                elif i == last_row:
                    ch = box | _acs("ACS_HLINE")
                elif j == 0:
                    ch = border | _acs("ACS_VLINE")
                elif j == last_col:
                    ch = box | _acs("ACS_VLINE")
                else:
                    ch = box | ord(" ")
                _safe(win.addch, ch)

    def draw_shadow(self, win: Any, y: int, x: int, height: int, width: int) -> None:
        """Shade the cells along the right and bottom edge of a box."""
        if not curses.has_colors():
            return
        win.attrset(self.attrs["shadow"])
        _safe(win.move, y + height, x + 2)
        for _ in range(width):
            _safe(win.addch, win.inch() & curses.A_CHARTEXT)
        for row in range(y + 1, y + height + 1):
            _safe(win.move, row, x + width)
            _safe(win.addch, win.inch() & curses.A_CHARTEXT)
            _safe(win.addch, win.inch() & curses.A_CHARTEXT)
        win.noutrefresh()

    def print_title(self, win: Any, title: str | None, width: int) -> None:
        """Centre a title on the top border of a box."""
        placed = title_position(title, width)
        if placed is None:
            return
        col, text = placed
        win.attrset(self.attrs["title"])
        _safe(win.move, 0, col - 1)
        _safe(win.addch, " ")
        _safe(win.addnstr, 0, col, text, len(text))
        _safe(win.addch, " ")

    def print_button(self, win: Any, label: str, y: int, x: int, selected: bool) -> None:
        """Draw a button as <label> with its first letter highlighted."""
        spaces, key, rest = split_button_label(label)
        frame = self.attrs["button_active" if selected else "button_inactive"]
        text = self.attrs["button_label_active" if selected else "button_label_inactive"]
        hotkey = self.attrs["button_key_active" if selected else "button_key_inactive"]
        _safe(win.move, y, x)
        win.attrset(frame)
        _safe(win.addstr, "<")
        win.attrset(text)
        if spaces:
            _safe(win.addstr, " " * spaces)
        win.attrset(hotkey)
        if key:
            _safe(win.addch, key)
        win.attrset(text)
        if rest:
            _safe(win.addstr, rest)
        win.attrset(frame)
        _safe(win.addstr, ">")
        _safe(win.move, y, x + spaces + 1)

    def print_autowrap(self, win: Any, prompt: str, width: int, y: int, x: int) -> None:
        """Write a prompt, wrapping words to fit the width."""
        for row, col, word in wrap_prompt(prompt, width, y, x):
            _safe(win.move, row, col)
            if word:
                _safe(win.addstr, word)

    def on_key_esc(self, win: Any) -> int:
        """After ESC: return KEY_ESC for a second lone ESC, otherwise -1.

        Escape sequences are swallowed; a single ordinary key typed after ESC
        is pushed back for the next read.
        """
        win.nodelay(True)
        win.keypad(False)
        key = win.getch()
        key2 = win.getch()
        while win.getch() != ERR:
            pass
        win.nodelay(False)
        win.keypad(True)
        if key == KEY_ESC and key2 == ERR:
            return KEY_ESC
        if key not in (ERR, KEY_ESC) and key2 == ERR:
            curses.ungetch(key)
        return -1

    def on_key_resize(self) -> int:
        """Repaint the background after a resize."""
        self.clear()
        return curses.KEY_RESIZE

    def end(self, x: int, y: int) -> None:
        """Put the cursor back and leave curses mode."""
        _safe(self.stdscr.move, y, x)
        self.stdscr.refresh()
        curses.endwin()


@contextmanager
def open_dialog(stdscr: Any, backtitle: str | None = None,
                theme_name: str | None = None) -> Iterator[Screen]:
    """Set up a Screen and restore the terminal when the block ends."""
    saved_y, saved_x = stdscr.getyx()
    screen = Screen(stdscr, backtitle, theme_name)
    try:
        yield screen
    finally:
        screen.end(saved_x, saved_y)