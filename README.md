# lxdialog

Curses dialog boxes for terminal configuration tools, plus a helper that
collects translatable strings into gettext `msgid`/`msgstr` entries.

The package needs nothing beyond the standard library.

## Modules

- `lxdialog.screen`: `open_dialog(stdscr, backtitle, theme_name)` is a
  context manager that yields a `Screen` and puts the cursor back and
  leaves curses mode when the block ends. `Screen` raises
  `DisplayTooSmall` when the terminal is under 19 lines by 80 columns. It
  picks a colour theme (from `theme_name` or, when that is `None`, from the
  `MENUCONFIG_COLOR` environment variable), falls back to monochrome
  attributes on terminals without colour, and draws boxes, shadows, titles,
  buttons and word-wrapped prompts. `Screen.on_key_esc()` tells a lone
  second ESC apart from escape sequences.
- `lxdialog.theme`: the `classic`, `bluetitle` (the default), `blackbg` and
  `mono` themes. `select_theme(name)` returns a `Theme` of `ColorSpec`
  values, or `None` for `mono`; `build_attributes()` and
  `mono_attributes()` turn them into curses attributes.
- `lxdialog.items`: `ItemList`, an ordered list of `DialogItem` entries
  (text of at most 199 characters, a one-character tag, attached data and a
  selected flag) with a current item that `add_str`, `set_tag`, `set_data`
  and `set_selected` apply to.
- `lxdialog.menubox`: `dialog_menu(screen, items, title, prompt, selected,
  scroll)` returns `(result, scroll)`. Results are 0 for Select (or the
  button chosen with Enter), 1 Exit, 2 Help, 3 `y`/`s`, 4 `n`, 5 `m`,
  6 space, 7 `/`, 8 `z`, and `KEY_ESC` when the menu is left. Letters jump
  to items by their hotkey. `MenuView` holds the scrolling logic.
- `lxdialog.checklist`: `dialog_checklist(...)` is a radio list returning
  0 for Select, 1 for Help or `KEY_ESC`; the highlighted item ends up the
  only selected one. `ChecklistView` holds the scrolling logic.
- `lxdialog.inputbox`: `dialog_inputbox(...)` returns `(result, text)` with
  result 0 for Ok, 1 for Help or `KEY_ESC`. `LineEditor` is the scrolled
  one-line field, holding at most 2048 characters.
- `lxdialog.yesno`: `dialog_yesno(...)` returns 0 for Yes, 1 for No or
  `KEY_ESC`. `next_button()` cycles the selected button.
- `lxdialog.textbox`: `dialog_textbox(screen, title, text, height, width)`
  pages through text with vi-like keys; a height or width of 0 fits the
  terminal. It returns 0 when left with E or X, otherwise the key that
  closed it. `TextPager` is the paging model.
- `lxdialog.text`: terminal-independent layout helpers `first_alpha()`,
  `wrap_prompt()`, `split_button_label()` and `title_position()`.
- `lxdialog.potext`: `escape()` quotes text as a gettext string;
  `MessageCatalog.add()` records messages with their file and line,
  merging identical ones, and `render()` prints the entries, skipping
  empty messages.

Every dialog raises `DisplayTooSmall` when the terminal cannot hold it.

## Example

```python
import curses

from lxdialog.items import ItemList
from lxdialog.menubox import dialog_menu
from lxdialog.screen import open_dialog


def run(stdscr):
    with open_dialog(stdscr, "Example setup", None) as screen:
        items = ItemList()
        items.make("[*] Enable networking")
        items.set_tag("t")
        items.make("    Drivers  --->")
        items.set_tag("m")
        return dialog_menu(screen, items, "Main Menu", "Pick an entry.", None, 0)


print(curses.wrapper(run))
```

Building template entries:

```python
from lxdialog.potext import MessageCatalog

catalog = MessageCatalog()
catalog.add("Enable networking", None, "net/Kconfig", 12)
print(catalog.render())
```

## What it does not do

The package provides the dialog boxes and the message catalogue only. It
has no configuration front-end of its own: it does not read or write
configuration files, parse option definitions, search for options or walk
a menu tree, and it installs no command. `MessageCatalog` is filled by the
caller; nothing here scans source files for strings.

## Running the tests

```
pip install -e .[test]
pytest
```