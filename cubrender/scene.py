"""Reader for the identifier lines of a scene description."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["SceneError", "SceneConfig", "pack_rgb"]

BAD_COLOR = 10
TRAILING_GARBAGE = 11

_BLANKS = " \t"
_DIGITS = "0123456789"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_PATH_KINDS = frozenset("sNSWE")


class SceneError(ValueError):
    """A scene description line could not be accepted."""

    def __init__(self, code: int, message: str = "") -> None:
        self.code = code
        self.detail = message
        text = f"Error{code}"
        super().__init__(f"{text}: {message}" if message else text)


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack three 0..255 channels into 0xRRGGBB."""
    if not all(0 <= channel <= 0xFF for channel in (r, g, b)):
        raise SceneError(BAD_COLOR, f"colour channel out of range: {r},{g},{b}")
    return (r << 16) | (g << 8) | b


class _Cursor:
    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def skip(self, chars: str) -> None:
        while (char := self.peek()) and char in chars:
            self.pos += 1

    def atoi(self) -> int:
        match = _LEADING_INT.match(self.text, self.pos)
        return int(match.group(1)) if match else 0

    def take_printable(self) -> str:
        start = self.pos
        while (char := self.peek()) and "!" <= char <= "~":
            self.pos += 1
        return self.text[start:self.pos]


def _skip_separator(cur: _Cursor) -> None:
    cur.skip(_DIGITS)
    seen = False
    while (char := cur.peek()) and char in " \t,":
        if char == "," and seen:
            raise SceneError(BAD_COLOR, f"misplaced comma in {cur.text!r}")
        seen = True
        cur.pos += 1


def _check_trailing(cur: _Cursor) -> None:
    cur.skip(_DIGITS + _BLANKS)
    char = cur.peek()
    if char and 33 <= ord(char) <= 126:
        raise SceneError(TRAILING_GARBAGE, f"unexpected text in {cur.text!r}")


def _identify(line: str) -> str | None:
    kind = None
    if line.startswith("S"):
        kind = "s"
    for prefix, name in (("NO", "N"), ("SO", "S"), ("WE", "W"), ("EA", "E")):
        if line.startswith(prefix):
            kind = name
    if kind is not None:
        return kind
    if line[:1] in ("R", "F", "C") and line:
        return line[0]
    return None


_PATH_FIELDS = {"s": "sprite", "N": "north", "S": "south", "W": "west", "E": "east"}


@dataclass
class SceneConfig:
    """Resolution, colours and texture paths read from a scene file."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    sprite: str | None = None
    floor: int | None = None
    ceiling: int | None = None
    width: int = 0
    height: int = 0

    def is_complete(self) -> bool:
        """True once everything the renderer needs before the map is known."""
        return (
            self.north is not None
            and self.south is not None
            and self.west is not None
            and self.east is not None
            and self.floor is not None
            and self.ceiling is not None
            and bool(self.width)
            and bool(self.height)
        )

    def feed_line(self, line: str) -> bool:
        """Read one line; return False when the configuration was already complete."""
        if self.is_complete():
            return False
        kind = _identify(line)
        if kind is None:
            return True
        cur = _Cursor(line, 1 if kind in ("s", "R", "F", "C") else 2)
        cur.skip(_BLANKS)
        if kind in _PATH_KINDS:
            setattr(self, _PATH_FIELDS[kind], cur.take_printable())
        elif kind in ("F", "C"):
            r = cur.atoi()
            _skip_separator(cur)
            g = cur.atoi()
            _skip_separator(cur)
            b = cur.atoi()
            _check_trailing(cur)
            color = pack_rgb(r, g, b)
            if kind == "F":
                self.floor = color
            else:
                self.ceiling = color
        else:
            self.width = cur.atoi()
            _skip_separator(cur)
            self.height = cur.atoi()
            _check_trailing(cur)
        return True

    def feed_lines(self, lines: Iterable[str]) -> list[str]:
        """Read lines until complete; return the lines not consumed."""
        rows = iter(lines)
        for line in rows:
            if not self.feed_line(line):
                return [line, *rows]
        return []