"""Reader for XPM images, from files or from in-memory string arrays."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from cubrender.colors import text_to_rgb
from cubrender.textutil import find_substring, find_unquoted, split_words

__all__ = [
    "XpmError",
    "Image",
    "strip_comments",
    "extract_strings",
    "parse_xpm",
    "xpm_to_image",
    "load_xpm_file",
]

TRANSPARENT = 0xFF000000

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


@dataclass(frozen=True)
class Image:
    """A decoded image: row-major 32-bit pixels (0xAARRGGBB)."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _blank(text: str, start: int, length: int) -> str:
    end = min(len(text), start + max(length, 0))
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The result has the same length as ``text``.
    """
    size = len(text)
    while (begin := find_unquoted(text, "/*", size)) != -1:
        end = find_substring(text[begin + 2:], "*/", size - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", size)) != -1:
        end = find_substring(text[begin + 2:], "\n", size - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def extract_strings(text: str) -> Iterator[str]:
    """Yield the contents of each double-quoted string in ``text``, in order."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(rows: Iterator[str], what: str) -> str:
    line = next(rows, None)
    if line is None:
        raise XpmError(f"missing {what}")
    return line


def _pixel_value(color: int) -> int:
    if color == -1:
        return TRANSPARENT
    return color & 0xFFFFFFFF


def _read_palette(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        value = text_to_rgb(words[index + 1], extra)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)
    return palette


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colours, then pixel rows."""
    rows = iter(lines)
    fields = split_words(_next_line(rows, "header"))
    if len(fields) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(field) for field in fields[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid header {fields[:4]!r}")
    palette = _read_palette(rows, ncolors, cpp)
    pixels: list[int] = []
    for y in range(height):
        line = _next_line(rows, f"pixel row {y}")
        pixels.extend(
            _pixel_value(palette.get(line[start:start + cpp], 0))
            for start in range(0, width * cpp, cpp)
        )
    return Image(width, height, tuple(pixels))


def xpm_to_image(xpm_data: Iterable[str]) -> Image:
    """Decode an in-memory XPM string array."""
    return parse_xpm(xpm_data)


def load_xpm_file(path: str | PathLike[str]) -> Image:
    """Read and decode an XPM file."""
    text = Path(path).read_bytes().decode("latin-1")
    return parse_xpm(extract_strings(strip_comments(text)))