"""A radio list: pick one of several options."""

from __future__ import annotations

import curses
from typing import Any

from .items import DialogItem, ItemList
from .screen import KEY_ESC, TAB, DisplayTooSmall, Screen, _acs, _safe
from .yesno import next_button


class ChecklistView:
    """Which part of a radio list is visible and which visible row is highlighted."""

    def __init__(self, items: ItemList, list_height: int) -> None:
        self.items = items
        self.list_height = list_height
        choice = 0
        for index, item in enumerate(items):
            if item.tag == "X":
                choice = index
            if item.selected:
                choice = index
                break
        self.max_choice = max(0, min(list_height, len(items)))
        scroll = 0
        if choice >= list_height:
            scroll = choice - list_height + 1
            choice -= scroll
        self.scroll = scroll
        self.choice = choice

    def find_hotkey(self, key: int) -> int | None:
        """Visible row whose first character matches key, ignoring case."""
        if not 0 <= key < 256:
            return None
        wanted = chr(key).upper()
        for row in range(self.max_choice):
            text = self.items[self.scroll + row].text
            first = text[0] if text else "\0"
            if first.upper() == wanted:
                return row
        return None

    def move_up(self) -> None:
        """Highlight the previous item, scrolling at the top of the window."""
        if not self.max_choice:
            return
        if self.choice == 0:
            if self.scroll:
                self.scroll -= 1
        else:
            self.choice -= 1

    def move_down(self) -> None:
        """Highlight the next item, scrolling at the bottom of the window."""
        if not self.max_choice:
            return
        if self.choice == self.max_choice - 1:
            if self.scroll + self.choice < len(self.items) - 1:
                self.scroll += 1
        else:
            self.choice += 1

    def current_index(self) -> int:
        """Index in the item list of the highlighted item."""
        return self.scroll + self.choice

    def check_column(self, list_width: int) -> int:
        """Column of the check marks that centres the widest item in the list."""
        widest = max((len(item.text) + 4 for item in self.items), default=0)
        widest = min(widest, list_width)
        return (list_width - widest) // 2


def _print_item(screen: Screen, win: Any, item: DialogItem, row: int, selected: bool,
                list_width: int, check_x: int, item_x: int) -> None:
    text = item.text[: max(list_width - item_x, 0)]
    win.attrset(screen.attrs["menubox"])
    _safe(win.move, row, 0)
    _safe(win.addstr, " " * list_width)
    _safe(win.move, row, check_x)
    win.attrset(screen.attrs["check_selected" if selected else "check"])
    if item.tag != ":":
        _safe(win.addstr, "(X)" if item.tag == "X" else "( )")
    win.attrset(screen.attrs["tag_selected" if selected else "tag"])
    if text:
        _safe(win.addch, row, item_x, text[0])
    win.attrset(screen.attrs["item_selected" if selected else "item"])
    if len(text) > 1:
        _safe(win.addstr, text[1:])
    win.noutrefresh()


def _print_arrows(screen: Screen, win: Any, choice: int, item_no: int, scroll: int,
                  y: int, x: int, height: int) -> None:
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
    if height < item_no and scroll + choice < item_no - 1:
        win.attrset(screen.attrs["darrow"])
        _safe(win.addch, _acs("ACS_DARROW"))
        _safe(win.addstr, "(+)")
    else:
        win.attrset(screen.attrs["menubox_border"])
        for _ in range(4):
            _safe(win.addch, _acs("ACS_HLINE"))
    win.noutrefresh()


def _print_buttons(screen: Screen, win: Any, height: int, width: int,
                   selected: int) -> None:
    x = width // 2 - 11
    y = height - 2
    screen.print_button(win, "Select", y, x, selected == 0)
    screen.print_button(win, " Help ", y, x + 14, selected == 1)
    _safe(win.move, y, x + 1 + 14 * selected)
    win.refresh()


def _run(screen: Screen, view: ChecklistView, title: str | None, prompt: str,
         height: int, width: int, list_height: int, lines: int,
         cols: int) -> int | None:
    """Show the list until it is left; None means the terminal was resized."""
    items = view.items
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

    list_width = width - 6
    box_y = height - list_height - 5
    box_x = (width - list_width) // 2 - 1
    win = dialog.subwin(list_height, list_width, y + box_y + 1, x + box_x + 1)
    win.keypad(True)
    screen.draw_box(dialog, box_y, box_x, list_height + 2, list_width + 2,
                    screen.attrs["menubox_border"], screen.attrs["menubox"])

    check_x = view.check_column(list_width)
    item_x = check_x + 4

    def redraw() -> None:
        for row in range(view.max_choice):
            _print_item(screen, win, items[view.scroll + row], row,
                        row == view.choice, list_width, check_x, item_x)
        _print_arrows(screen, dialog, view.choice, len(items), view.scroll,
                      box_y, box_x + check_x + 5, list_height)
        dialog.noutrefresh()
        _safe(win.move, view.choice, check_x + 1)
        win.refresh()

    redraw()
    _print_buttons(screen, dialog, height, width, 0)
    curses.doupdate()

    button = 0
    key = 0
    while key != KEY_ESC:
        key = dialog.getch()

        row = view.find_hotkey(key)
        if key in (curses.KEY_UP, ord("-")):
            view.move_up()
            redraw()
            continue
        if key in (curses.KEY_DOWN, ord("+")):
            view.move_down()
            redraw()
            continue
        if row is not None:
            view.choice = row
            redraw()
            continue

        if key in (ord("H"), ord("h"), ord("?"), ord("S"), ord("s"),
                   ord(" "), ord("\n")):
            if key in (ord("H"), ord("h"), ord("?")):
                button = 1
            items.clear_selection()
            if len(items):
                item = items[view.current_index()]
                item.selected = True
                items.current = item
            return button
        if key in (TAB, curses.KEY_LEFT, curses.KEY_RIGHT):
            button = next_button(button, key, 2)
            _print_buttons(screen, dialog, height, width, button)
            dialog.refresh()
        elif key in (ord("X"), ord("x")):
            key = KEY_ESC
        elif key == KEY_ESC:
            key = screen.on_key_esc(dialog)
        elif key == curses.KEY_RESIZE:
            screen.on_key_resize()
            return None
        curses.doupdate()
    return KEY_ESC


def dialog_checklist(screen: Screen, items: ItemList, title: str | None, prompt: str,
                     height: int, width: int, list_height: int) -> int:
    """Let the user pick one item: 0 for Select, 1 for Help, KEY_ESC when left.

    The item highlighted at the end is the only one marked selected.
    """
    view = ChecklistView(items, list_height)
    while True:
        lines, cols = screen.stdscr.getmaxyx()
        if lines < height + 6 or cols < width + 6:
            raise DisplayTooSmall(
                f"display is {lines}x{cols}, needs {height + 6}x{width + 6}"
            )
        result = _run(screen, view, title, prompt, height, width, list_height,
                      lines, cols)
        if result is not None:
            return result