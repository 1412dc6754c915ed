"""Collect prompt and help texts into a gettext message template."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

DEFAULT_LIMIT = 16384

# Length of the escaped form of an empty string: two quotes plus the terminator.
_EMPTY_ESCAPED_SIZE = len('""') + 1


def escape(text: str, limit: int = DEFAULT_LIMIT) -> str:
    """Quote text as a gettext string, splitting it into one quoted piece per line.

    limit is the size of the buffer the escaped text is built in; longer
    text is cut short.
    """
    multiline = "\n" in text
    eol = text.endswith("\n")
    out = ['"']
    room = limit - 1
    if multiline:
        out.append('"\n"')
        room -= 3

    for ch in text:
        if room <= 1:
            break
        if ch == "\n":
            out.append('\\n"\n"')
            room -= 5
        else:
            if ch == '"':
                out.append("\\")
            elif ch == "\\":
                out.append("\\")
                room -= 1
            out.append(ch)
        room -= 1

    body = "".join(out)
    if multiline and eol:
        body = body[:-3]
    return body + '"'


@dataclass
class Message:
    """One escaped message with the places it comes from, newest first."""

    msg: str
    option: str | None = None
    files: list[tuple[str, int]] = field(default_factory=list)

    def render(self) -> str:
        """The catalogue entry for this message."""
        lines = [""]
        if self.option is not None:
            lines.append(f"# {self.option}:00000")
        lines.append("#: " + ", ".join(f"{name}:{lineno}" for name, lineno in self.files))
        lines.append(f"msgid {self.msg}")
        lines.append('msgstr ""')
        return "\n".join(lines) + "\n"


class MessageCatalog:
    """Messages keyed by their escaped text, most recently added first."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._by_text: dict[str, Message] = {}

    def add(self, msg: str, option: str | None, file: str, lineno: int) -> Message:
        """Record msg at file:lineno, merging with an existing identical message."""
        escaped = escape(msg)
        message = self._by_text.get(escaped)
        if message is not None:
            message.files.insert(0, (file, lineno))
            return message
        message = Message(escaped, option, [(file, lineno)])
        self._messages.insert(0, message)
        self._by_text[escaped] = message
        return message

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def render(self) -> str:
        """The catalogue text, leaving out empty messages."""
        return "".join(
            message.render()
            for message in self._messages
            if len(message.msg) > _EMPTY_ESCAPED_SIZE
        )