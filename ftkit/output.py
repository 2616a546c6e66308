"""Writing characters, strings and numbers to text streams, plus printf.

Every writer takes an optional text stream, standard output by default,
and returns the number of characters it wrote. :func:`render` formats
into a string. :func:`printf` formats and writes to a stream.
Conversions: ``%c %s %p %d %i %u %x %X %%``.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Union

CharLike = Union[int, str]

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_UINT_MAX = (1 << _INT_BITS) - 1
_ULONG_MAX = (1 << 64) - 1

_NULL_STR = "(null)"
_NULL_PTR = "(nil)"


def _out(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _emit(text: str, stream: Optional[TextIO]) -> int:
    _out(stream).write(text)
    return len(text)


def _require_int(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return n


def _char_text(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c) & 0xFF)


def _signed_text(n: int) -> str:
    if not _INT_MIN <= _require_int(n) <= _INT_MAX:
        raise ValueError(f"{n} is outside the signed 32-bit range")
    return str(n)


def _unsigned_text(n: int) -> str:
    if not 0 <= _require_int(n) <= _UINT_MAX:
        raise ValueError(f"{n} is outside the unsigned 32-bit range")
    return str(n)


def _hex_text(n: int, upper: bool) -> str:
    if not 0 <= _require_int(n) <= _ULONG_MAX:
        raise ValueError(f"{n} is outside the unsigned 64-bit range")
    return format(n, "X" if upper else "x")


def _ptr_text(address: Optional[int]) -> str:
    if address is None or _require_int(address) == 0:
        return _NULL_PTR
    return "0x" + _hex_text(address, False)


def _str_text(s: Optional[str]) -> str:
    return _NULL_STR if s is None else s


def _as_int32(value: Any) -> int:
    value = _require_int(value) & _UINT_MAX
    return value - (1 << _INT_BITS) if value > _INT_MAX else value


def _as_uint32(value: Any) -> int:
    return _require_int(value) & _UINT_MAX


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> int:
    """Write one character (an int code uses its low byte)."""
    return _emit(_char_text(c), stream)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s; None is written as ``(null)``."""
    return _emit(_str_text(s), stream)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write s followed by a newline; None writes only the newline."""
    return _emit(("" if s is None else s) + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a signed 32-bit integer in decimal."""
    return _emit(_signed_text(n), stream)


def put_unsigned(n: int, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 32-bit integer in decimal."""
    return _emit(_unsigned_text(n), stream)


def put_hex(n: int, upper: bool = False, stream: Optional[TextIO] = None) -> int:
    """Write an unsigned 64-bit integer in hexadecimal, without prefix."""
    return _emit(_hex_text(n, upper), stream)


def put_ptr(address: Optional[int], stream: Optional[TextIO] = None) -> int:
    """Write an address as ``0x`` plus lowercase hex; None or 0 gives ``(nil)``."""
    return _emit(_ptr_text(address), stream)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char_text,
    "s": _str_text,
    "p": _ptr_text,
    "d": lambda v: str(_as_int32(v)),
    "i": lambda v: str(_as_int32(v)),
    "u": lambda v: str(_as_uint32(v)),
    "x": lambda v: _hex_text(_as_uint32(v), False),
    "X": lambda v: _hex_text(_as_uint32(v), True),
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield convert(value)


def render(fmt: str, *args: Any) -> str:
    """Format args according to fmt and return the text.

    Integer arguments are reduced to the C type of their conversion.
    Unknown conversions and a trailing lone ``%`` produce nothing.
    """
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format args according to fmt, write the text and return its length."""
    return _emit(render(fmt, *args), stream)