import pytest

from lxdialog.screen import DisplayTooSmall
from lxdialog.textbox import TextPager, dialog_textbox

TEXT = "alpha\nbeta\ngamma\n"


def test_get_line_walks_lines_and_flags_end():
    pager = TextPager(TEXT)
    assert pager.get_line() == "alpha"
    assert pager.get_line() == "beta"
    assert pager.get_line() == "gamma"
    assert pager.end_reached is False
    assert pager.get_line() == ""
    assert pager.end_reached is True


def test_text_without_final_newline_ends_on_last_line():
    pager = TextPager("one\ntwo")
    pager.get_line()
    assert pager.get_line() == "two"
    assert pager.end_reached is True


def test_page_lines_counts_page_length():
    pager = TextPager(TEXT)
    assert pager.page_lines(2) == ["alpha", "beta"]
    assert pager.page_length == 2


def test_page_past_end_stops_counting():
    pager = TextPager(TEXT)
    lines = pager.page_lines(6)
    assert lines[:3] == ["alpha", "beta", "gamma"]
    assert pager.page_length == 4


def test_back_lines_returns_to_page_start():
    pager = TextPager(TEXT)
    pager.get_line()
    first = pager.page_lines(2)
    pager.back_lines(pager.page_length)
    assert pager.page_lines(2) == first


def test_back_lines_stops_at_beginning():
    pager = TextPager(TEXT)
    pager.page_lines(2)
    pager.back_lines(10)
    assert pager.page == 0
    assert pager.begin_reached is True


def test_to_end_then_to_start():
    pager = TextPager(TEXT)
    assert pager.to_start() is False
    pager.to_end(2)
    assert pager.page_lines(2) == ["gamma", ""]
    assert pager.to_start() is True
    assert pager.page == 0
    assert pager.page_lines(1) == ["alpha"]


def test_hscroll_cuts_line_starts():
    pager = TextPager(TEXT)
    pager.hscroll = 2
    assert pager.page_lines(2) == ["pha", "ta"]


def test_percent_bounds():
    pager = TextPager(TEXT)
    assert pager.percent() == 0
    pager.page_lines(10)
    assert pager.percent() == 100
    assert TextPager("").percent() == 0


class _TinyStdscr:
    def getmaxyx(self):
        return (5, 40)


class _TinyScreen:
    stdscr = _TinyStdscr()


def test_dialog_textbox_rejects_tiny_display():
    with pytest.raises(DisplayTooSmall):
        dialog_textbox(_TinyScreen(), "Help", TEXT)