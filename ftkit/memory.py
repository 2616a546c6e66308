"""Byte-buffer operations on bytearray and bytes-like objects.

Mutating functions work in place on a bytearray and return it. Counts
that reach past the end of a buffer raise ValueError.
"""

from __future__ import annotations

from typing import Optional


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")


def _check_span(length: int, offset: int, n: int, what: str) -> None:
    if offset < 0 or offset + n > length:
        raise ValueError(
            f"{what} span [{offset}, {offset + n}) exceeds buffer of length {length}"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of c."""
    _check_count(n)
    _check_span(len(buf), 0, n, "target")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Set the first n bytes of buf to zero."""
    return memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dest."""
    _check_count(n)
    if n == 0:
        return dest
    _check_span(len(dest), 0, n, "destination")
    _check_span(len(src), 0, n, "source")
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy n bytes within buf from src_offset to dest_offset; regions may overlap."""
    _check_count(n)
    if n == 0:
        return buf
    _check_span(len(buf), dest_offset, n, "destination")
    _check_span(len(buf), src_offset, n, "source")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within the first n bytes, or None."""
    _check_count(n)
    _check_span(len(data), 0, n, "search")
    index = bytes(memoryview(data)[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n)
    _check_span(len(a), 0, n, "first operand")
    _check_span(len(b), 0, n, "second operand")
    for x, y in zip(memoryview(a)[:n].tobytes(), memoryview(b)[:n].tobytes()):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of nmemb * size bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)