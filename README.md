# ftkit

A small collection of low-level helpers with C-library-style semantics:
ASCII character classification, byte-buffer operations, NUL-terminated
string functions, a singly linked list and a printf-style formatter.

## Installation

```
pip install ftkit
```

To run the test suite:

```
pip install "ftkit[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
`to_lower`. Each accepts an integer character code or a one-character
string. Classification is strictly ASCII. `to_upper` and `to_lower` return
the same kind they were given (code in, code out; string in, string out).

### `ftkit.memory`

Operations on `bytearray` and bytes-like objects:

- `memset(buf, c, n)`, `bzero(buf, n)` fill the first `n` bytes in place.
- `memcpy(dest, src, n)` copies the first `n` bytes of `src` into `dest`.
- `memmove(buf, dest_offset, src_offset, n)` copies within one buffer;
  the regions may overlap.
- `memchr(data, c, n)` returns the index of a byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or 0.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`.

Mutating functions return the buffer. Negative counts and spans that run
past the end of a buffer raise `ValueError`.

### `ftkit.text`

`strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`, `strlcat`,
`strdup`. Strings are treated as NUL-terminated: anything from the first
`"\0"` on is ignored. Search functions return an index or `None`.
`strlcpy(src, size)` and `strlcat(dst, src, size)` return a tuple of the
text a buffer of `size` characters would hold and the length the caller
tried to create.

### `ftkit.textops`

- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`.
- `split(s, sep)` splits on one character and drops empty pieces.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(chars, f)` applies `f(index, char)` to a mutable sequence of
  characters in place; a non-`None` return replaces the character.
- `atoi(s)` parses a leading decimal integer (leading whitespace, one
  optional sign), wrapping to a signed 32-bit value.
- `itoa(n)` returns the decimal text of a signed 32-bit integer and raises
  `ValueError` outside that range.

### `ftkit.linked`

`Node` (with `content` and `next`) and `LinkedList`:

- `LinkedList(items)` builds a list from any iterable.
- `push_front(content)`, `push_back(content)` return the new node.
- `last()` returns the last node or `None`.
- `len()` and iteration (over contents, front to back).
- `for_each(f)` calls `f` on each content.
- `map(f, delete)` returns a new list; if `f` raises, contents produced so
  far are passed to `delete` and the exception propagates.
- `remove(node, delete)` unlinks a node (`ValueError` if it is not in the list).
- `clear(delete)` empties the list, passing each content to `delete`.

### `ftkit.output`

`put_char`, `put_str`, `put_endl`, `put_nbr`, `put_unsigned`, `put_hex`,
`put_ptr` write to a text stream (standard output by default) and return
the number of characters written. `render(fmt, *args)` formats into a
string and `printf(fmt, *args, stream=None)` writes it, supporting
`%c %s %p %d %i %u %x %X %%`. Integer arguments are reduced to the
corresponding 32-bit C type; `None` prints as `(null)` for `%s` and
`(nil)` for `%p`. Unknown conversions produce nothing. There are no
width, precision or flag modifiers.

## Example

```python
from ftkit.textops import split, atoi, itoa
from ftkit.linked import LinkedList
from ftkit.output import render

split("  hello  world ", " ")      # ['hello', 'world']
atoi("  -42abc")                   # -42
itoa(-98765)                       # '-98765'

words = LinkedList(["spero", "sia", "giusto"])
upper = words.map(str.upper, None)
list(upper)                        # ['SPERO', 'SIA', 'GIUSTO']

render("%s is %d (0x%x)", "answer", 42, 42)   # 'answer is 42 (0x2a)'
```

## Scope

This is a library only: it has no command-line program. Output goes to
Python text streams rather than to raw file descriptors.