"""Layout of text inside dialog boxes, independent of the terminal."""

from __future__ import annotations

MAX_LEN = 2048


def first_alpha(string: str, exempt: str) -> int:
    """Index of the first letter outside brackets that is not in exempt, else 0."""
    in_paren = 0
    for index, ch in enumerate(string):
        c = ch.lower()
        if c in "<[(":
            in_paren += 1
        if c in ">])" and in_paren > 0:
            in_paren -= 1
        if not in_paren and c.isascii() and c.isalpha() and c not in exempt:
            return index
    return 0


def wrap_prompt(prompt: str, width: int, y: int, x: int) -> list[tuple[int, int, str]]:
    """Lay out a prompt as (row, column, text) pieces.

    Newlines become spaces. A prompt that fits is centred on one line;
    otherwise words are wrapped, and a short first word of a sentence moves
    to the next line together with the word after it when that does not fit.
    """
    text = prompt[:MAX_LEN].replace("\n", " ")
    if len(text) <= width - x * 2:
        return [(y, (width - len(text)) // 2, text)]

    placements: list[tuple[int, int, str]] = []
    cur_y, cur_x = y, x
    newl = True
    pos: int | None = 0
    while pos is not None and pos < len(text):
        space = text.find(" ", pos)
        if space == -1:
            word, rest = text[pos:], None
        else:
            word, rest = text[pos:space], space + 1

        room = width - cur_x
        wlen = len(word)
        wrap = wlen > room
        if not wrap and newl and wlen < 4 and rest is not None:
            if wlen + 1 + len(text) - rest > room:
                next_space = text.find(" ", rest)
                if next_space == -1 or wlen + 1 + (next_space - rest) > room:
                    wrap = True
        if wrap:
            cur_y += 1
            cur_x = x

        placements.append((cur_y, cur_x, word))
        cur_x += wlen + 1

        if rest is not None and rest < len(text) and text[rest] == " ":
            cur_x += 1
            while rest < len(text) and text[rest] == " ":
                rest += 1
            newl = True
        else:
            newl = False
        pos = rest
    return placements


def split_button_label(label: str) -> tuple[int, str, str]:
    """Split a button label into leading spaces, hotkey letter and the rest."""
    stripped = label.lstrip(" ")
    spaces = len(label) - len(stripped)
    return spaces, stripped[:1], stripped[1:]


def title_position(title: str | None, width: int) -> tuple[int, str] | None:
    """Column and text of a title centred in a box, cut to width - 2."""
    if title is None:
        return None
    length = min(width - 2, len(title))
    return (width - length) // 2, title[:length]