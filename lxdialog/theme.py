"""Colour themes for the dialog boxes."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import IntEnum
from typing import Callable


class Color(IntEnum):
    """The eight standard terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


@dataclass(frozen=True)
class ColorSpec:
    """Foreground, background and highlight of one screen element."""

    fg: int
    bg: int
    hl: bool


_PLAIN = ColorSpec(Color.BLACK, Color.BLACK, False)


@dataclass(frozen=True)
class Theme:
    """Colours of every screen element."""

    screen: ColorSpec = _PLAIN
    shadow: ColorSpec = _PLAIN
    dialog: ColorSpec = _PLAIN
    title: ColorSpec = _PLAIN
    border: ColorSpec = _PLAIN
    button_active: ColorSpec = _PLAIN
    button_inactive: ColorSpec = _PLAIN
    button_key_active: ColorSpec = _PLAIN
    button_key_inactive: ColorSpec = _PLAIN
    button_label_active: ColorSpec = _PLAIN
    button_label_inactive: ColorSpec = _PLAIN
    inputbox: ColorSpec = _PLAIN
    inputbox_border: ColorSpec = _PLAIN
    searchbox: ColorSpec = _PLAIN
    searchbox_title: ColorSpec = _PLAIN
    searchbox_border: ColorSpec = _PLAIN
    position_indicator: ColorSpec = _PLAIN
    menubox: ColorSpec = _PLAIN
    menubox_border: ColorSpec = _PLAIN
    item: ColorSpec = _PLAIN
    item_selected: ColorSpec = _PLAIN
    tag: ColorSpec = _PLAIN
    tag_selected: ColorSpec = _PLAIN
    tag_key: ColorSpec = _PLAIN
    tag_key_selected: ColorSpec = _PLAIN
    check: ColorSpec = _PLAIN
    check_selected: ColorSpec = _PLAIN
    uarrow: ColorSpec = _PLAIN
    darrow: ColorSpec = _PLAIN


COLOR_FIELDS = tuple(f.name for f in fields(Theme))

_C = ColorSpec
_BLACK, _RED, _GREEN, _YELLOW = Color.BLACK, Color.RED, Color.GREEN, Color.YELLOW
_BLUE, _CYAN, _WHITE = Color.BLUE, Color.CYAN, Color.WHITE

CLASSIC = Theme(
    screen=_C(_CYAN, _BLUE, True),
    shadow=_C(_BLACK, _BLACK, True),
    dialog=_C(_BLACK, _WHITE, False),
    title=_C(_YELLOW, _WHITE, True),
    border=_C(_WHITE, _WHITE, True),
    button_active=_C(_WHITE, _BLUE, True),
    button_inactive=_C(_BLACK, _WHITE, False),
    button_key_active=_C(_WHITE, _BLUE, True),
    button_key_inactive=_C(_RED, _WHITE, False),
    button_label_active=_C(_YELLOW, _BLUE, True),
    button_label_inactive=_C(_BLACK, _WHITE, True),
    inputbox=_C(_BLACK, _WHITE, False),
    inputbox_border=_C(_BLACK, _WHITE, False),
    searchbox=_C(_BLACK, _WHITE, False),
    searchbox_title=_C(_YELLOW, _WHITE, True),
    searchbox_border=_C(_WHITE, _WHITE, True),
    position_indicator=_C(_YELLOW, _WHITE, True),
    menubox=_C(_BLACK, _WHITE, False),
    menubox_border=_C(_WHITE, _WHITE, True),
    item=_C(_BLACK, _WHITE, False),
    item_selected=_C(_WHITE, _BLUE, True),
    tag=_C(_YELLOW, _WHITE, True),
    tag_selected=_C(_YELLOW, _BLUE, True),
    tag_key=_C(_YELLOW, _WHITE, True),
    tag_key_selected=_C(_YELLOW, _BLUE, True),
    check=_C(_BLACK, _WHITE, False),
    check_selected=_C(_WHITE, _BLUE, True),
    uarrow=_C(_GREEN, _WHITE, True),
    darrow=_C(_GREEN, _WHITE, True),
)

BLACKBG = Theme(
    screen=_C(_RED, _BLACK, True),
    shadow=_C(_BLACK, _BLACK, False),
    dialog=_C(_WHITE, _BLACK, False),
    title=_C(_RED, _BLACK, False),
    border=_C(_BLACK, _BLACK, True),
    button_active=_C(_YELLOW, _RED, False),
    button_inactive=_C(_YELLOW, _BLACK, False),
    button_key_active=_C(_YELLOW, _RED, True),
    button_key_inactive=_C(_RED, _BLACK, False),
    button_label_active=_C(_WHITE, _RED, False),
    button_label_inactive=_C(_BLACK, _BLACK, True),
    inputbox=_C(_YELLOW, _BLACK, False),
    inputbox_border=_C(_YELLOW, _BLACK, False),
    searchbox=_C(_YELLOW, _BLACK, False),
    searchbox_title=_C(_YELLOW, _BLACK, True),
    searchbox_border=_C(_BLACK, _BLACK, True),
    position_indicator=_C(_RED, _BLACK, False),
    menubox=_C(_YELLOW, _BLACK, False),
    menubox_border=_C(_BLACK, _BLACK, True),
    item=_C(_WHITE, _BLACK, False),
    item_selected=_C(_WHITE, _RED, False),
    tag=_C(_RED, _BLACK, False),
    tag_selected=_C(_YELLOW, _RED, True),
    tag_key=_C(_RED, _BLACK, False),
    tag_key_selected=_C(_YELLOW, _RED, True),
    check=_C(_YELLOW, _BLACK, False),
    check_selected=_C(_YELLOW, _RED, True),
    uarrow=_C(_RED, _BLACK, False),
    darrow=_C(_RED, _BLACK, False),
)

BLUETITLE = replace(
    CLASSIC,
    title=_C(_BLUE, _WHITE, True),
    button_key_active=_C(_YELLOW, _BLUE, True),
    button_label_active=_C(_WHITE, _BLUE, True),
    searchbox_title=_C(_BLUE, _WHITE, True),
    position_indicator=_C(_BLUE, _WHITE, True),
    tag=_C(_BLUE, _WHITE, True),
    tag_key=_C(_BLUE, _WHITE, True),
)


def select_theme(name: str | None) -> Theme | None:
    """Theme for a name; None for "mono".

    No name gives the bluetitle theme. An unknown name gives a theme whose
    colours are all left at black on black.
    """
    if name is None or name == "bluetitle":
        return BLUETITLE
    if name == "classic":
        return CLASSIC
    if name == "blackbg":
        return BLACKBG
    if name == "mono":
        return None
    return Theme()


def build_attributes(
    theme: Theme,
    init_pair: Callable[[int, int, int], None],
    color_pair: Callable[[int], int],
    bold: int,
) -> dict[str, int]:
    """Register one colour pair per element and return each element's attribute."""
    attributes: dict[str, int] = {}
    for pair, name in enumerate(COLOR_FIELDS, start=1):
        spec: ColorSpec = getattr(theme, name)
        init_pair(pair, int(spec.fg), int(spec.bg))
        attr = color_pair(pair)
        if spec.hl:
            attr |= bold
        attributes[name] = attr
    return attributes


def mono_attributes(normal: int, bold: int, reverse: int, dim: int) -> dict[str, int]:
    """Attributes for a terminal without colour."""
    return {
        "screen": normal,
        "shadow": normal,
        "dialog": normal,
        "title": bold,
        "border": normal,
        "button_active": reverse,
        "button_inactive": dim,
        "button_key_active": reverse,
        "button_key_inactive": bold,
        "button_label_active": reverse,
        "button_label_inactive": normal,
        "inputbox": normal,
        "inputbox_border": normal,
        "searchbox": normal,
        "searchbox_title": bold,
        "searchbox_border": normal,
        "position_indicator": bold,
        "menubox": normal,
        "menubox_border": normal,
        "item": normal,
        "item_selected": reverse,
        "tag": bold,
        "tag_selected": reverse,
        "tag_key": bold,
        "tag_key_selected": reverse,
        "check": bold,
        "check_selected": reverse,
        "uarrow": bold,
        "darrow": bold,
    }