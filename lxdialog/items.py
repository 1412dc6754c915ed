"""The list of entries shown by the menu and checklist boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

MAXITEMSTR = 200


def _clip(text: str) -> str:
    """Cut a string to what fits in an item's text buffer."""
    return text[: MAXITEMSTR - 1]


@dataclass
class DialogItem:
    """One entry of a menu or checklist."""

    text: str = ""
    tag: str = ""
    data: Any = None
    selected: bool = False


class ItemList:
    """An ordered list of dialog items with a current item that edits apply to."""

    def __init__(self) -> None:
        self._items: list[DialogItem] = []
        self.current: DialogItem | None = None

    def _require_current(self) -> DialogItem:
        if self.current is None:
            raise IndexError("no current item")
        return self.current

    def reset(self) -> None:
        """Remove every item."""
        self._items.clear()
        self.current = None

    def make(self, text: str) -> DialogItem:
        """Append a new item and make it current."""
        item = DialogItem(text=_clip(text))
        self._items.append(item)
        self.current = item
        return item

    def add_str(self, text: str) -> None:
        """Append text to the current item."""
        item = self._require_current()
        item.text = _clip(item.text + text)

    def set_tag(self, tag: str) -> None:
        self._require_current().tag = tag

    def set_data(self, data: Any) -> None:
        self._require_current().data = data

    def set_selected(self, value: bool) -> None:
        self._require_current().selected = bool(value)

    def activate_selected(self) -> DialogItem | None:
        """Make the first selected item current and return it, or None if none is."""
        for item in self._items:
            if item.selected:
                self.current = item
                return item
        self.current = None
        return None

    def clear_selection(self) -> None:
        """Mark every item as not selected."""
        for item in self._items:
            item.selected = False

    def index_of_data(self, data: Any) -> int | None:
        """Index of the last item carrying exactly this data object."""
        if data is None:
            return None
        found = None
        for index, item in enumerate(self._items):
            if item.data is data:
                found = index
        return found

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[DialogItem]:
        return iter(self._items)

    def __getitem__(self, index: int) -> DialogItem:
        return self._items[index]