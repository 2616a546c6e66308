"""ASCII character classification and case conversion.

Every function takes either an integer character code or a one-character
string. Classification is strictly ASCII: codes outside the ranges
listed here are never letters or digits.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_A, _UPPER_Z = ord("A"), ord("Z")
_LOWER_A, _LOWER_Z = ord("a"), ord("z")
_DIGIT_0, _DIGIT_9 = ord("0"), ord("9")
_CASE_OFFSET = _LOWER_A - _UPPER_A


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return _UPPER_A <= code <= _UPPER_Z or _LOWER_A <= code <= _LOWER_Z


def is_digit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return _DIGIT_0 <= _code(c) <= _DIGIT_9


def is_alnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """Return True for a code in the range 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """Return True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lowercase letter to uppercase; leave anything else alone."""
    code = _code(c)
    if _LOWER_A <= code <= _LOWER_Z:
        code -= _CASE_OFFSET
    return _same_kind(c, code)


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII uppercase letter to lowercase; leave anything else alone."""
    code = _code(c)
    if _UPPER_A <= code <= _UPPER_Z:
        code += _CASE_OFFSET
    return _same_kind(c, code)