import pytest

from lxdialog.potext import Message, MessageCatalog, escape


def test_escape_plain_text_is_quoted():
    assert escape("abc") == '"abc"'


def test_escape_quote_and_backslash():
    assert escape('a"b') == '"a\\"b"'
    assert escape("a\\b") == '"a\\\\b"'


def test_escape_multiline_splits_into_pieces():
    assert escape("a\nb") == '""\n"a\\n"\n"b"'


def test_escape_trailing_newline_drops_empty_piece():
    assert escape("a\n") == '""\n"a\\n"'


def test_escape_truncates_to_limit():
    assert escape("abcdef", 4) == '"ab"'


def test_escape_empty():
    assert escape("") == '""'


@pytest.mark.parametrize("text", ["hello", "x y z", "one\ntwo\nthree", 'q"q'])
def test_escape_is_wrapped_in_quotes(text):
    result = escape(text)
    assert result.startswith('"') and result.endswith('"')


def test_add_merges_same_text_newest_location_first():
    catalog = MessageCatalog()
    catalog.add("Hello", None, "Kconfig", 3)
    message = catalog.add("Hello", None, "Kconfig", 7)
    assert len(catalog) == 1
    assert message.files == [("Kconfig", 7), ("Kconfig", 3)]


def test_iteration_is_newest_first():
    catalog = MessageCatalog()
    catalog.add("First", None, "a", 1)
    catalog.add("Second", None, "b", 2)
    assert [m.msg for m in catalog] == ['"Second"', '"First"']


def test_first_option_is_kept():
    catalog = MessageCatalog()
    catalog.add("Help", "FOO", "a", 1)
    message = catalog.add("Help", "BAR", "a", 2)
    assert message.option == "FOO"


def test_render_entry_format():
    catalog = MessageCatalog()
    catalog.add("Hello", None, "Kconfig", 3)
    catalog.add("Hello", None, "Kconfig", 7)
    assert catalog.render() == '\n#: Kconfig:7, Kconfig:3\nmsgid "Hello"\nmsgstr ""\n'


def test_render_with_option_line():
    message = Message('"Help"', "FOO", [("Kconfig", 5)])
    assert message.render() == '\n# FOO:00000\n#: Kconfig:5\nmsgid "Help"\nmsgstr ""\n'


def test_render_skips_empty_messages():
    catalog = MessageCatalog()
    catalog.add("", None, "Root Menu", 0)
    assert len(catalog) == 1
    assert catalog.render() == ""


def test_render_keeps_short_nonempty_message_out_when_too_short():
    catalog = MessageCatalog()
    catalog.add("a", None, "f", 1)
    catalog.add("ab", None, "f", 2)
    rendered = catalog.render()
    assert 'msgid "ab"' in rendered
    assert 'msgid "a"\n' not in rendered