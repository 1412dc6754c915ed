import curses
from unittest import mock

import pytest

from lxdialog.screen import KEY_ESC, DisplayTooSmall, Screen, open_dialog


class FakeWindow:
    def __init__(self, height=24, width=80):
        self.height = height
        self.width = width
        self.cells = {}
        self.y = 0
        self.x = 0
        self.attr = 0
        self.keys = []
        self.nodelay_flag = False
        self.keypad_flag = None
        self.touched = False
        self.refreshed = 0

    def getmaxyx(self):
        return self.height, self.width

    def getyx(self):
        return self.y, self.x

    def move(self, y, x):
        self.y, self.x = y, x

    def attrset(self, attr):
        self.attr = attr

    def addch(self, ch):
        code = ord(ch) if isinstance(ch, str) else ch
        self.cells[(self.y, self.x)] = code | self.attr
        self.x += 1

    def addstr(self, text):
        for ch in text:
            self.addch(ch)

    def addnstr(self, y, x, text, n):
        self.move(y, x)
        self.addstr(text[:n])

    def inch(self):
        return self.cells.get((self.y, self.x), ord(" "))

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def nodelay(self, flag):
        self.nodelay_flag = flag

    def keypad(self, flag):
        self.keypad_flag = flag

    def touchwin(self):
        self.touched = True

    def noutrefresh(self):
        pass

    def refresh(self):
        self.refreshed += 1

    def char_at(self, y, x):
        return chr(self.cells.get((y, x), ord(" ")) & curses.A_CHARTEXT)

    def attr_at(self, y, x):
        return self.cells.get((y, x), 0) & ~curses.A_CHARTEXT

    def row(self, y):
        return "".join(self.char_at(y, x) for x in range(self.width))


def make_screen(backtitle="Back", win=None):
    win = win or FakeWindow()
    with mock.patch("curses.cbreak"), mock.patch("curses.noecho"):
        return Screen(win, backtitle, "mono"), win


def test_too_small_display_raises():
    with mock.patch("curses.cbreak"), mock.patch("curses.noecho"):
        with pytest.raises(DisplayTooSmall):
            Screen(FakeWindow(18, 80), None, "mono")
        with pytest.raises(DisplayTooSmall):
            Screen(FakeWindow(24, 79), None, "mono")


def test_mono_attributes_used():
    screen, win = make_screen()
    assert screen.use_color is False
    assert screen.attrs["title"] == curses.A_BOLD
    assert screen.attrs["item_selected"] == curses.A_REVERSE
    assert win.keypad_flag is True


def test_colour_theme_registers_pairs():
    win = FakeWindow()
    with mock.patch("curses.cbreak"), mock.patch("curses.noecho"), \
            mock.patch("curses.has_colors", return_value=True), \
            mock.patch("curses.start_color"), \
            mock.patch("curses.init_pair") as init_pair, \
            mock.patch("curses.color_pair", side_effect=lambda n: n << 8):
        screen = Screen(win, None, "classic")
    assert screen.use_color is True
    assert screen.attrs["screen"] == (1 << 8) | curses.A_BOLD
    assert init_pair.call_count == len(screen.attrs)


def test_clear_draws_backtitle_and_rule():
    screen, win = make_screen("My Title")
    assert win.row(0)[1:9] == "My Title"
    rule = {win.char_at(1, x) for x in range(1, win.width - 1)}
    assert len(rule) == 1
    assert rule != {" "}
    assert win.char_at(1, 0) == " "


def test_attr_clear_fills_region():
    screen, win = make_screen(None)
    win.cells[(2, 3)] = ord("Z")
    screen.attr_clear(win, 4, 5, curses.A_BOLD)
    assert win.char_at(2, 3) == " "
    assert win.attr_at(2, 3) == curses.A_BOLD
    assert win.touched


def test_draw_box_attributes():
    screen, win = make_screen(None)
    screen.draw_box(win, 2, 3, 4, 5, curses.A_BOLD, curses.A_REVERSE)
    assert win.attr_at(2, 3) == curses.A_REVERSE
    assert win.attr_at(5, 7) == curses.A_BOLD
    assert win.char_at(3, 4) == " "
    assert win.attr_at(3, 4) == curses.A_BOLD
    assert win.char_at(3, 3) != " "
    assert win.char_at(2, 4) == win.char_at(5, 4)


def test_draw_shadow_without_colours_changes_nothing():
    screen, win = make_screen(None)
    before = dict(win.cells)
    with mock.patch("curses.has_colors", return_value=False):
        screen.draw_shadow(win, 2, 2, 5, 10)
    assert win.cells == before


def test_draw_shadow_keeps_text_and_applies_attribute():
    screen, win = make_screen(None)
    win.cells[(7, 4)] = ord("A") | curses.A_BOLD
    win.cells[(3, 12)] = ord("B") | curses.A_REVERSE
    with mock.patch("curses.has_colors", return_value=True):
        screen.draw_shadow(win, 2, 2, 5, 10)
    assert win.char_at(7, 4) == "A"
    assert win.attr_at(7, 4) == screen.attrs["shadow"]
    assert win.char_at(3, 12) == "B"
    assert win.attr_at(3, 12) == screen.attrs["shadow"]


def test_print_title():
    screen, win = make_screen(None)
    screen.print_title(win, "Title", 40)
    assert " Title " in win.row(0)
    before = dict(win.cells)
    screen.print_title(win, None, 40)
    assert win.cells == before


def test_print_button():
    screen, win = make_screen(None)
    screen.print_button(win, " Ok ", 5, 10, True)
    assert win.row(5)[10:16] == "< Ok >"
    assert win.attr_at(5, 12) == screen.attrs["button_key_active"]
    assert win.getyx() == (5, 12)


def test_print_autowrap_writes_every_word():
    screen, win = make_screen(None)
    prompt = "Enter the name of the configuration file you wish to load."
    screen.print_autowrap(win, prompt, 20, 1, 2)
    written = " ".join(win.row(y) for y in range(1, 10)).split()
    assert written == prompt.split()


def test_on_key_esc_double_escape():
    screen, win = make_screen(None)
    win.keys = [KEY_ESC]
    assert screen.on_key_esc(win) == KEY_ESC
    assert win.nodelay_flag is False
    assert win.keypad_flag is True


def test_on_key_esc_pushes_back_plain_key():
    screen, win = make_screen(None)
    win.keys = [ord("a")]
    with mock.patch("curses.ungetch") as ungetch:
        assert screen.on_key_esc(win) == -1
    ungetch.assert_called_once_with(ord("a"))


def test_on_key_esc_swallows_sequence():
    screen, win = make_screen(None)
    win.keys = [KEY_ESC, 91, 65, 66]
    with mock.patch("curses.ungetch") as ungetch:
        assert screen.on_key_esc(win) == -1
    assert win.keys == []
    ungetch.assert_not_called()


def test_on_key_resize():
    screen, win = make_screen("Title")
    win.cells.clear()
    assert screen.on_key_resize() == curses.KEY_RESIZE
    assert win.row(0)[1:6] == "Title"


def test_set_backtitle():
    screen, win = make_screen(None)
    screen.set_backtitle("New")
    screen.clear()
    assert win.row(0)[1:4] == "New"


def test_end_restores_cursor():
    screen, win = make_screen(None)
    with mock.patch("curses.endwin") as endwin:
        screen.end(7, 3)
    endwin.assert_called_once_with()
    assert win.getyx() == (3, 7)


def test_open_dialog_restores_terminal():
    win = FakeWindow()
    win.move(4, 6)
    with mock.patch("curses.cbreak"), mock.patch("curses.noecho"), \
            mock.patch("curses.endwin") as endwin:
        with open_dialog(win, "Back", "mono") as screen:
            assert screen.backtitle == "Back"
            win.move(10, 10)
        assert endwin.call_count == 1
    assert win.getyx() == (4, 6)