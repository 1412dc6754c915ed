"""A scrollable box showing a block of text."""

from __future__ import annotations

import curses
from typing import Any

from .screen import KEY_ESC, DisplayTooSmall, Screen, _acs, _safe
from .text import MAX_LEN


class TextPager:
    """Position in a text shown page by page, with horizontal scrolling."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.page = 0
        self.begin_reached = True
        self.end_reached = False
        self.page_length = 0
        self.hscroll = 0

    def get_line(self) -> str:
        """Return the line at the current position and move past it."""
        self.end_reached = False
        end = self.text.find("\n", self.page)
        if end == -1:
            line = self.text[self.page:]
            self.page = len(self.text)
            self.end_reached = True
        else:
            line = self.text[self.page:end]
            self.page = end + 1
        return line[:MAX_LEN]

    def back_lines(self, n: int) -> None:
        """Move the position back n lines."""
        self.begin_reached = False
        for _ in range(n):
            if self.page == len(self.text) and self.end_reached:
                self.end_reached = False
                continue
            if self.page == 0:
                self.begin_reached = True
                return
            self.page -= 1
            while True:
                if self.page == 0:
                    self.begin_reached = True
                    return
                self.page -= 1
                if self.text[self.page] == "\n":
                    break
            self.page += 1

    def page_lines(self, height: int) -> list[str]:
        """Read a page of height lines, horizontally scrolled, and count its length."""
        lines: list[str] = []
        passed_end = False
        self.page_length = 0
        for _ in range(height):
            line = self.get_line()
            lines.append(line[min(len(line), self.hscroll):])
            if not passed_end:
                self.page_length += 1
            if self.end_reached and not passed_end:
                passed_end = True
        return lines

    def to_start(self) -> bool:
        """Go to the first page; return whether the position changed."""
        if self.begin_reached:
            return False
        self.begin_reached = True
        self.page = 0
        return True

    def to_end(self, height: int) -> None:
        """Go to the last page of the given height."""
        self.end_reached = True
        self.page = len(self.text)
        self.back_lines(height)

    def percent(self) -> int:
        """How far into the text the position is, in percent."""
        if not self.text:
            return 0
        return self.page * 100 // len(self.text)


def _print_line(box: Any, row: int, line: str, width: int) -> None:
    _safe(box.move, row, 0)
    _safe(box.addch, " ")
    count = max(0, min(len(line), width - 2))
    if count:
        _safe(box.addnstr, line, count)
    _safe(box.clrtoeol)


def _print_position(screen: Screen, dialog: Any, pager: TextPager) -> None:
    attr = screen.attrs["position_indicator"]
    dialog.attrset(attr)
    dialog.bkgdset(" ", attr & curses.A_COLOR)
    max_y, max_x = dialog.getmaxyx()
    _safe(dialog.move, max_y - 3, max_x - 9)
    _safe(dialog.addstr, f"({pager.percent():3d}%)")


def _run(screen: Screen, pager: TextPager, title: str | None,
         height: int, width: int, lines: int, cols: int) -> int | None:
    """Show the box until it is left; None means the terminal was resized."""
    y = (lines - height) // 2
    x = (cols - width) // 2
    screen.draw_shadow(screen.stdscr, y, x, height, width)

    dialog = curses.newwin(height, width, y, x)
    dialog.keypad(True)
    boxh, boxw = height - 4, width - 2
    box = dialog.subwin(boxh, boxw, y + 1, x + 1)
    box.attrset(screen.attrs["dialog"])
    box.bkgdset(" ", screen.attrs["dialog"] & curses.A_COLOR)
    box.keypad(True)

    screen.draw_box(dialog, 0, 0, height, width,
                    screen.attrs["dialog"], screen.attrs["border"])
    dialog.attrset(screen.attrs["border"])
    _safe(dialog.move, height - 3, 0)
    _safe(dialog.addch, _acs("ACS_LTEE"))
    for _ in range(width - 2):
        _safe(dialog.addch, _acs("ACS_HLINE"))
    dialog.attrset(screen.attrs["dialog"])
    dialog.bkgdset(" ", screen.attrs["dialog"] & curses.A_COLOR)
    _safe(dialog.addch, _acs("ACS_RTEE"))
    screen.print_title(dialog, title, width)
    screen.print_button(dialog, " Exit ", height - 2, width // 2 - 4, True)
    dialog.noutrefresh()
    cur_y, cur_x = dialog.getyx()

    def restore_cursor() -> None:
        _print_position(screen, dialog, pager)
        _safe(dialog.move, cur_y, cur_x)
        dialog.refresh()

    def refresh_page() -> None:
        for row, line in enumerate(pager.page_lines(boxh)):
            _print_line(box, row, line, boxw)
        box.noutrefresh()
        restore_cursor()

    screen.attr_clear(box, boxh, boxw, screen.attrs["dialog"])
    refresh_page()

    key = 0
    while key not in (KEY_ESC, ord("\n")):
        key = dialog.getch()
        if key in (ord("E"), ord("e"), ord("X"), ord("x")):
            return 0
        if key in (ord("g"), curses.KEY_HOME):
            if pager.to_start():
                refresh_page()
        elif key in (ord("G"), curses.KEY_END):
            pager.to_end(boxh)
            refresh_page()
        elif key in (ord("K"), ord("k"), curses.KEY_UP):
            if not pager.begin_reached:
                pager.back_lines(pager.page_length + 1)
                refresh_page()
        elif key in (ord("B"), ord("b"), curses.KEY_PPAGE):
            if not pager.begin_reached:
                pager.back_lines(pager.page_length + boxh)
                refresh_page()
        elif key in (ord("J"), ord("j"), curses.KEY_DOWN):
            if not pager.end_reached:
                pager.begin_reached = False
                box.scrollok(True)
                _safe(box.scroll, 1)
                box.scrollok(False)
                line = pager.get_line()
                _print_line(box, boxh - 1, line[min(len(line), pager.hscroll):], boxw)
                box.noutrefresh()
                restore_cursor()
        elif key in (curses.KEY_NPAGE, ord(" ")):
            if not pager.end_reached:
                pager.begin_reached = False
                refresh_page()
        elif key in (ord("0"), ord("H"), ord("h"), curses.KEY_LEFT):
            if pager.hscroll > 0:
                pager.hscroll = 0 if key == ord("0") else pager.hscroll - 1
                pager.back_lines(pager.page_length)
                refresh_page()
        elif key in (ord("L"), ord("l"), curses.KEY_RIGHT):
            if pager.hscroll < MAX_LEN:
                pager.hscroll += 1
                pager.back_lines(pager.page_length)
                refresh_page()
        elif key == KEY_ESC:
            key = screen.on_key_esc(dialog)
        elif key == curses.KEY_RESIZE:
            pager.back_lines(height)
            screen.on_key_resize()
            return None
    return key


def dialog_textbox(screen: Screen, title: str | None, text: str,
                   height: int = 0, width: int = 0) -> int:
    """Show text in a scrollable box; 0 for Exit, otherwise the key that closed it.

    A height or width of 0 fits the box to the terminal.
    """
    pager = TextPager(text)
    while True:
        lines, cols = screen.stdscr.getmaxyx()
        if lines < 8 or cols < 8:
            raise DisplayTooSmall(f"display is {lines}x{cols}, too small for a text box")
        box_height = height if height else max(lines - 4, 0)
        box_width = width if width else max(cols - 5, 0)
        result = _run(screen, pager, title, box_height, box_width, lines, cols)
        if result is not None:
            return result