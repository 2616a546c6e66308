import io

import pytest

from ftkit.output import (
    printf,
    put_char,
    put_endl,
    put_hex,
    put_nbr,
    put_ptr,
    put_str,
    put_unsigned,
    render,
)


@pytest.fixture
def buf():
    return io.StringIO()


def test_put_char_str_and_code(buf):
    assert put_char("a", buf) == 1
    assert put_char(ord("b"), buf) == 1
    assert buf.getvalue() == "ab"


def test_put_char_rejects_long_string(buf):
    with pytest.raises(ValueError):
        put_char("ab", buf)


def test_put_str_returns_length(buf):
    text = "hello world"
    assert put_str(text, buf) == len(text)
    assert buf.getvalue() == text


def test_put_str_none(buf):
    assert put_str(None, buf) == 6
    assert buf.getvalue() == "(null)"


def test_put_endl(buf):
    put_endl("abc", buf)
    put_endl(None, buf)
    assert buf.getvalue() == "abc\n\n"


@pytest.mark.parametrize("n", [0, 7, 42, -42, 123456, -98765, 2147483647])
def test_put_nbr_round_trip(buf, n):
    count = put_nbr(n, buf)
    out = buf.getvalue()
    assert int(out) == n
    assert count == len(out)


def test_put_nbr_minimum(buf):
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_put_nbr_out_of_range(buf, n):
    with pytest.raises(ValueError):
        put_nbr(n, buf)


@pytest.mark.parametrize("n", [0, 9, 10, 4294967295])
def test_put_unsigned_round_trip(buf, n):
    count = put_unsigned(n, buf)
    assert int(buf.getvalue()) == n
    assert count == len(buf.getvalue())


def test_put_unsigned_negative(buf):
    with pytest.raises(ValueError):
        put_unsigned(-1, buf)


@pytest.mark.parametrize("n", [0, 15, 16, 255, 0xDEADBEEF, 2**64 - 1])
@pytest.mark.parametrize("upper", [False, True])
def test_put_hex_round_trip(n, upper):
    buf = io.StringIO()
    count = put_hex(n, upper, buf)
    out = buf.getvalue()
    assert int(out, 16) == n
    assert count == len(out)
    assert out == (out.upper() if upper else out.lower())


def test_put_hex_rejects_negative(buf):
    with pytest.raises(ValueError):
        put_hex(-5, False, buf)


def test_put_ptr_nil(buf):
    put_ptr(None, buf)
    put_ptr(0, buf)
    assert buf.getvalue() == "(nil)(nil)"


def test_put_ptr_address(buf):
    count = put_ptr(0x7FFE1234, buf)
    out = buf.getvalue()
    assert out.startswith("0x")
    assert int(out[2:], 16) == 0x7FFE1234
    assert count == len(out)


def test_render_mixed():
    assert render("%s is %d", "x", 5) == "x is 5"
    assert render("%i%%", 42) == "42%"


def test_render_null_string_and_pointer():
    assert render("%s %p", None, None) == "(null) (nil)"


def test_render_char():
    assert render("%c%c", "A", ord("B")) == "AB"


def test_render_int_wraps_to_32_bits():
    assert render("%d", 2**31) == "-2147483648"


def test_render_unsigned_and_hex_wrap():
    assert int(render("%u", -1)) == 2**32 - 1
    assert int(render("%x", -1), 16) == 2**32 - 1
    assert render("%X", -1) == render("%x", -1).upper()


def test_render_unknown_conversion_and_trailing_percent():
    assert render("abc%q") == "abc"
    assert render("abc%") == "abc"


def test_render_missing_argument():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_printf_to_stream(buf):
    count = printf("%s-%u", "n", 17, stream=buf)
    assert buf.getvalue() == "n-17"
    assert count == len(buf.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("hi %d", 3)
    captured = capsys.readouterr().out
    assert captured == "hi 3"
    assert count == len(captured)