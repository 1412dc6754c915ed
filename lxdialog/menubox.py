"""A scrolling menu with Select, Exit and Help buttons."""

from __future__ import annotations

import curses
from itertools import chain
from typing import Any

from .items import DialogItem, ItemList
from .screen import KEY_ESC, TAB, DisplayTooSmall, Screen, _acs, _safe
from .text import first_alpha
from .yesno import next_button

HOTKEY_EXEMPT = "YyNnMmHh"

# Keys that pick the highlighted item, with the result each one returns.
_ACTION_KEYS = {
    ord("h"): 2,
    ord("?"): 2,
    ord("s"): 3,
    ord("y"): 3,
    ord("n"): 4,
    ord("m"): 5,
    ord(" "): 6,
    ord("/"): 7,
    ord("z"): 8,
}


class MenuView:
    """Which part of a menu is visible and which visible row is highlighted."""

    def __init__(self, items: ItemList, menu_height: int, selected: Any = None,
                 scroll: int = 0) -> None:
        self.items = items
        count = len(items)
        self.max_choice = max(0, min(menu_height, count))
        max_choice = self.max_choice

        found = items.index_of_data(selected)
        choice = found if found is not None else 0
        if (scroll <= choice < scroll + max_choice and scroll >= 0
                and scroll + max_choice <= count):
            choice -= scroll
        else:
            scroll = 0
        if choice >= max_choice:
            if choice >= count - max_choice // 2:
                scroll = count - max_choice
            else:
                scroll = choice - max_choice // 2
            choice -= scroll
        self.scroll = scroll
        self.choice = choice

    def _hotkey_of(self, row: int) -> str:
        text = self.items[self.scroll + row].text
        if not text:
            return ""
        return text[first_alpha(text, HOTKEY_EXEMPT)].lower()

    def find_hotkey(self, key: int) -> int | None:
        """Visible row whose hotkey matches key, searching after the highlight first."""
        if not 0 <= key < 256:
            return None
        ch = chr(key).lower()
        if key == 0 or ch in "ynmh":
            return None
        rows = chain(range(self.choice + 1, self.max_choice), range(self.max_choice))
        for row in rows:
            if self._hotkey_of(row) == ch:
                return row
        return None

    def move_up(self) -> None:
        """Highlight the previous item, scrolling when near the top."""
        if not self.max_choice:
            return
        if self.choice < 2 and self.scroll:
            self.scroll -= 1
        else:
            self.choice = max(self.choice - 1, 0)

    def move_down(self) -> None:
        """Highlight the next item, scrolling when near the bottom."""
        if not self.max_choice:
            return
        if (self.choice > self.max_choice - 3
                and self.scroll + self.max_choice < len(self.items)):
            self.scroll += 1
        else:
            self.choice = min(self.choice + 1, self.max_choice - 1)

    def page_up(self) -> None:
        """Scroll back one page, or move the highlight up when at the top."""
        for _ in range(self.max_choice):
            if self.scroll > 0:
                self.scroll -= 1
            elif self.choice > 0:
                self.choice -= 1

    def page_down(self) -> None:
        """Scroll forward one page, or move the highlight down when at the end."""
        for _ in range(self.max_choice):
            if self.scroll + self.max_choice < len(self.items):
                self.scroll += 1
            elif self.choice + 1 < self.max_choice:
                self.choice += 1

    def current_index(self) -> int:
        """Index in the item list of the highlighted item."""
        return self.scroll + self.choice


def _print_item(screen: Screen, win: Any, item: DialogItem, row: int, selected: bool,
                menu_width: int, item_x: int) -> None:
    text = item.text[: max(menu_width - item_x, 0)]
    win.attrset(screen.attrs["menubox"])
    _safe(win.move, row, 0)
    _safe(win.clrtoeol)
    win.attrset(screen.attrs["item_selected" if selected else "item"])
    if text:
        _safe(win.addstr, row, item_x, text)
    if item.tag != ":" and text:
        j = first_alpha(text, HOTKEY_EXEMPT)
        win.attrset(screen.attrs["tag_key_selected" if selected else "tag_key"])
        _safe(win.addch, row, item_x + j, text[j])
    win.noutrefresh()


def _print_arrows(screen: Screen, win: Any, item_no: int, scroll: int,
                  y: int, x: int, height: int) -> None:
    cur_y, cur_x = win.getyx()
    _safe(win.move, y, x)
    if scroll > 0:
        win.attrset(screen.attrs["uarrow"])
        _safe(win.addch, _acs("ACS_UARROW"))
        _safe(win.addstr, "(-)")
    else:
        win.attrset(screen.attrs["menubox"])
        for _ in range(4):
            _safe(win.addch, _acs("ACS_HLINE"))
    _safe(win.move, y + height + 1, x)
    if height < item_no and scroll + height < item_no:
        win.attrset(screen.attrs["darrow"])
        _safe(win.addch, _acs("ACS_DARROW"))
        _safe(win.addstr, "(+)")
    else:
        win.attrset(screen.attrs["menubox_border"])
        for _ in range(4):
            _safe(win.addch, _acs("ACS_HLINE"))
    _safe(win.move, cur_y, cur_x)
    win.noutrefresh()


def _print_buttons(screen: Screen, win: Any, height: int, width: int,
                   selected: int) -> None:
    x = width // 2 - 16
    y = height - 2
    screen.print_button(win, "Select", y, x, selected == 0)
    screen.print_button(win, " Exit ", y, x + 12, selected == 1)
    screen.print_button(win, " Help ", y, x + 24, selected == 2)
    _safe(win.move, y, x + 1 + 12 * selected)
    win.refresh()


def _run(screen: Screen, items: ItemList, title: str | None, prompt: str,
         selected: Any, saved_scroll: int, lines: int,
         cols: int) -> tuple[int, int] | None:
    """Show the menu until it is left; None means the terminal was resized."""
    height, width = lines - 4, cols - 5
    menu_height = height - 10
    view = MenuView(items, menu_height, selected, saved_scroll)

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
    dialog.bkgdset(" ", screen.attrs["dialog"] & curses.A_COLOR)
    _safe(dialog.addch, _acs("ACS_RTEE"))
    screen.print_title(dialog, title, width)
    dialog.attrset(screen.attrs["dialog"])
    screen.print_autowrap(dialog, prompt, width - 2, 1, 3)

    menu_width = width - 6
    box_y = height - menu_height - 5
    box_x = (width - menu_width) // 2 - 1
    menu = dialog.subwin(menu_height, menu_width, y + box_y + 1, x + box_x + 1)
    menu.keypad(True)
    screen.draw_box(dialog, box_y, box_x, menu_height + 2, menu_width + 2,
                    screen.attrs["menubox_border"], screen.attrs["menubox"])
    item_x = (menu_width - 70) // 2 if menu_width >= 80 else 4

    def redraw() -> None:
        for row in range(view.max_choice):
            _print_item(screen, menu, items[view.scroll + row], row,
                        row == view.choice, menu_width, item_x)
        _print_arrows(screen, dialog, len(items), view.scroll,
                      box_y, box_x + item_x + 1, menu_height)
        _safe(menu.move, view.choice, item_x + 1)
        menu.refresh()

    redraw()
    _print_buttons(screen, dialog, height, width, 0)
    _safe(menu.move, view.choice, item_x + 1)
    menu.refresh()

    moves = {
        curses.KEY_UP: view.move_up,
        ord("-"): view.move_up,
        curses.KEY_DOWN: view.move_down,
        ord("+"): view.move_down,
        curses.KEY_PPAGE: view.page_up,
        curses.KEY_NPAGE: view.page_down,
    }

    button = 0
    key = 0
    while key != KEY_ESC:
        key = menu.getch()
        if 0 <= key < 256 and chr(key).isascii() and chr(key).isalpha():
            key = ord(chr(key).lower())

        row = view.find_hotkey(key)
        if key in moves:
            moves[key]()
            redraw()
            continue
        if row is not None:
            view.choice = row
            redraw()
            continue

        if key in (curses.KEY_LEFT, TAB, curses.KEY_RIGHT):
            button = next_button(button, key, 3)
            _print_buttons(screen, dialog, height, width, button)
            menu.refresh()
        elif key in _ACTION_KEYS or key == ord("\n"):
            if len(items):
                item = items[view.current_index()]
                item.selected = True
                items.current = item
            code = button if key == ord("\n") else _ACTION_KEYS[key]
            return code, view.scroll
        elif key in (ord("e"), ord("x")):
            key = KEY_ESC
        elif key == KEY_ESC:
            key = screen.on_key_esc(menu)
        elif key == curses.KEY_RESIZE:
            screen.on_key_resize()
            return None
    return KEY_ESC, saved_scroll


def dialog_menu(screen: Screen, items: ItemList, title: str | None, prompt: str,
                selected: Any = None, scroll: int = 0) -> tuple[int, int]:
    """Show a menu and return (result, scroll position to reuse next time).

    Results: 0 Select (or the button chosen with Enter), 1 Exit, 2 Help,
    3 yes, 4 no, 5 module, 6 toggle, 7 search, 8 show all, KEY_ESC when left.
    The picked item is marked selected and made current.
    """
    while True:
        lines, cols = screen.stdscr.getmaxyx()
        if lines < 15 or cols < 65:
            raise DisplayTooSmall(f"display is {lines}x{cols}, too small for a menu")
        result = _run(screen, items, title, prompt, selected, scroll, lines, cols)
        if result is not None:
            return result