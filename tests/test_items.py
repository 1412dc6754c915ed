import pytest

from lxdialog.items import MAXITEMSTR, DialogItem, ItemList


def test_make_appends_and_sets_current():
    items = ItemList()
    first = items.make("first")
    second = items.make("second")
    assert len(items) == 2
    assert items.current is second
    assert [item.text for item in items] == ["first", "second"]
    assert items[0] is first


def test_add_str_extends_current_item():
    items = ItemList()
    items.make("[*]")
    items.add_str(" Networking")
    assert items[0].text == "[*] Networking"


def test_text_is_clipped_to_buffer_size():
    items = ItemList()
    items.make("x" * (MAXITEMSTR + 50))
    assert len(items[0].text) == MAXITEMSTR - 1
    items.reset()
    items.make("a" * (MAXITEMSTR - 3))
    items.add_str("bcdef")
    assert len(items[0].text) == MAXITEMSTR - 1
    assert items[0].text.endswith("bc")


def test_setters_apply_to_current_item():
    items = ItemList()
    payload = object()
    items.make("one")
    items.make("two")
    items.set_tag("t")
    items.set_data(payload)
    items.set_selected(1)
    assert items[1] == DialogItem(text="two", tag="t", data=payload, selected=True)
    assert items[0] == DialogItem(text="one")


def test_setters_without_items_raise():
    items = ItemList()
    with pytest.raises(IndexError):
        items.set_tag("m")
    with pytest.raises(IndexError):
        items.add_str("x")


def test_activate_selected_finds_first_selected():
    items = ItemList()
    for name in ("a", "b", "c"):
        items.make(name)
    items[1].selected = True
    items[2].selected = True
    chosen = items.activate_selected()
    assert chosen is items[1]
    assert items.current is items[1]


def test_activate_selected_without_selection():
    items = ItemList()
    items.make("a")
    assert items.activate_selected() is None
    assert items.current is None


def test_clear_selection():
    items = ItemList()
    for name in ("a", "b"):
        items.make(name)
        items.set_selected(True)
    items.clear_selection()
    assert not any(item.selected for item in items)


def test_index_of_data_returns_last_match():
    items = ItemList()
    target = object()
    for name in ("a", "b", "c"):
        items.make(name)
    items[0].data = target
    items[2].data = target
    assert items.index_of_data(target) == 2
    assert items.index_of_data(object()) is None
    assert items.index_of_data(None) is None


def test_reset_empties_list():
    items = ItemList()
    items.make("a")
    items.reset()
    assert len(items) == 0
    assert list(items) == []
    assert items.current is None