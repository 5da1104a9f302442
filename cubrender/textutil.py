"""Small text scanning helpers used by the XPM reader."""

from __future__ import annotations

import re

__all__ = ["find_substring", "find_unquoted", "split_words"]

_BLANKS = re.compile(r"[ \t]+")


def _c_string(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    return text.split("\0", 1)[0]


def find_substring(text: str, find: str, limit: int) -> int:
    """Return the position of ``find`` in ``text``, or -1.

    When ``find`` is longer than ``limit`` the search fails at once.
    """
    if len(find) > limit:
        return -1
    return _c_string(text).find(find)


def find_unquoted(text: str, find: str, limit: int) -> int:
    """Return the position of ``find`` outside double-quoted parts of ``text``.

    A double quote toggles the quoted state before the match is tried at
    its position. Returns -1 when there is no such occurrence or when
    ``find`` is longer than ``limit``.
    """
    if len(find) > limit:
        return -1
    text = _c_string(text)
    last = len(text) - len(find)
    quoted = False
    for pos, char in enumerate(text):
        if pos > last:
            break
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _BLANKS.split(_c_string(text)) if word]