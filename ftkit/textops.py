"""String building, splitting, mapping and integer conversion.

Inputs behave as NUL-terminated text: anything from the first ``"\\0"``
onwards is ignored. Functions return new strings rather than changing
their arguments, except :func:`striteri`, which rewrites a list of
characters in place.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from .text import strdup

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"
_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1


def _sep_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _wrap_int(value: int) -> int:
    """Reduce value to a signed 32-bit integer, two's complement."""
    value &= (1 << _INT_BITS) - 1
    return value - (1 << _INT_BITS) if value > _INT_MAX else value


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at index start.

    A start at or past the end of the text yields the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = strdup(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return strdup(s1) + strdup(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    text = strdup(s)
    chars = strdup(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: CharLike) -> List[str]:
    """Split s on sep, dropping the empty pieces between repeated separators."""
    text = strdup(s)
    ch = _sep_char(sep)
    return [word for word in text.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(strdup(s)))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Apply f(index, character) to each character of chars, in place.

    Stops at the first NUL element. When f returns a character it replaces
    the one at that index; when it returns None the character is kept.
    """
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = replacement


def atoi(s: str) -> int:
    """Parse a leading decimal integer, as the classic C routine does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    The result wraps around to a signed 32-bit integer.
    """
    text = strdup(s)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    end = pos
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    magnitude = int(text[pos:end]) if end > pos else 0
    return _wrap_int(sign * magnitude)


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise ValueError(f"{n} is outside the signed 32-bit range")
    return str(n)