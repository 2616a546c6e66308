"""Length, search, compare and bounded-copy operations on strings.

Strings behave as NUL-terminated text: anything from the first ``"\\0"``
onwards is ignored. Search functions return an index into the string, or
None when nothing is found. Bounded copies return the text a buffer of
the given size would hold, together with the length the caller asked for.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _terminated(s: str) -> str:
    """Return s up to, not including, its first NUL character."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _char(c: CharLike) -> str:
    """Turn an int code (low byte only) or a one-character str into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of c, or None.

    Searching for NUL finds the terminator, at index strlen(s).
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of c, or None.

    Searching for NUL finds the terminator, at index strlen(s).
    """
    text = _terminated(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find little wholly inside the first length characters of big.

    An empty needle matches at index 0.
    """
    _check_size(length, "length")
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big)[:length].find(needle)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the code difference of the first differing pair, a character
    past the end of a string counting as NUL; 0 when they agree.
    """
    _check_size(n, "n")
    first = _terminated(s1)[:n]
    second = _terminated(s2)[:n]
    for x, y in zip_longest(first, second, fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text and strlen(src); with size 0 nothing is copied.
    """
    _check_size(size, "size")
    text = _terminated(src)
    if size == 0:
        return "", len(text)
    return text[:size - 1], len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full concatenation would
    have. When size does not exceed strlen(dst), dst is left unchanged and
    the length reported is size + strlen(src).
    """
    _check_size(size, "size")
    head = _terminated(dst)
    tail = _terminated(src)
    if size <= len(head):
        return head, size + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], len(head) + len(tail)


def strdup(s: str) -> str:
    """Return a copy of s up to its first NUL."""
    return _terminated(s)