"""Parser for INI files.

Lines starting with ``;`` or ``#`` are comments, as is anything following a
space and ``;`` or ``#``.  ``[name]`` starts a section; ``key = value`` or
``key : value`` defines an item.  An indented line after an item continues
it: it is reported as another value of the same key.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator

MAX_LINE_LEN = 1024
_NAME_MAX = 255
_WS = " \t\n\v\f\r"
_COMMENT = re.compile(r" [;#]")


@dataclass(frozen=True)
class IniItem:
    """One value found in the input, with the line it was on."""

    line: int
    section: str
    key: str
    value: str


class IniSyntaxError(ValueError):
    """A line could not be parsed."""

    def __init__(self, line: int, text: str = "") -> None:
        super().__init__(f"syntax error on line {line}: {text!r}")
        self.line = line
        self.text = text


def _trim_comment(text: str) -> str:
    if not text or text[0] in ";#":
        return ""
    match = _COMMENT.search(text)
    if match:
        return text[: match.start() + 1]
    return text


def parse_lines(lines: Iterable[str]) -> Iterator[IniItem]:
    """Yield the items of INI ``lines``; raise IniSyntaxError on a bad line.

    Lines longer than ``MAX_LINE_LEN - 1`` characters are truncated.
    """
    section = ""
    key = ""
    for number, raw in enumerate(lines, start=1):
        if raw.endswith("\n"):
            raw = raw[:-1]
        raw = raw[: MAX_LINE_LEN - 1]
        if number == 1 and raw.startswith("\ufeff"):
            raw = raw[1:]

        text = _trim_comment(raw)
        head = text.lstrip(_WS)
        indented = len(head) < len(text)
        head = head.rstrip(_WS)
        if not head:
            continue

        if indented and key:
            yield IniItem(number, section, key, head)
        elif head[0] == "[":
            end = head.find("]")
            if end < 0:
                raise IniSyntaxError(number, raw)
            key = ""
            section = head[1:end][:_NAME_MAX]
        else:
            match = re.search("[=:]", head)
            if match is None:
                raise IniSyntaxError(number, raw)
            name = head[: match.start()].strip(_WS)
            key = name[:_NAME_MAX]
            value = head[match.start() + 1:].strip(_WS)
            yield IniItem(number, section, name, value)


def parse_string(text: str | None) -> Iterator[IniItem]:
    """Yield the items of the INI document ``text``.

    Parsing stops at the first NUL character, if any.
    """
    if not text:
        return
    text = text.split("\0", 1)[0]
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    yield from parse_lines(lines)


def parse_file(path: str | os.PathLike) -> Iterator[IniItem]:
    """Yield the items of the INI file at ``path``.

    The file is read as UTF-8; undecodable bytes are kept as surrogate
    escapes.  Errors opening or reading the file raise OSError.
    """
    with open(path, "rb") as fp:
        lines = (raw.decode("utf-8", "surrogateescape") for raw in fp)
        yield from parse_lines(lines)