"""Writing characters, strings and numbers to a text stream, and a small printf.

Every writer returns the number of characters it wrote. When no stream is
given, standard output is used.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, TextIO

_UINT_MODULUS = 2 ** 32
_ULONG_MODULUS = 2 ** 64
_CONVERSIONS = "csdpiuxX%"


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _write(text: str, stream: Optional[TextIO]) -> int:
    _target(stream).write(text)
    return len(text)


def _char_text(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c % 256)


def _int_value(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    return value


def _unsigned_text(n: int) -> str:
    return str(_int_value(n) % _UINT_MODULUS)


def _hex_text(n: int, upper: bool) -> str:
    text = format(_int_value(n) % _UINT_MODULUS, "x")
    return text.upper() if upper else text


def _pointer_text(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return "0x" + format(_int_value(value) % _ULONG_MODULUS, "x")


def _string_text(value: Any) -> str:
    return "(null)" if value is None else str(value)


_FORMATTERS: Dict[str, Callable[[Any], str]] = {
    "c": _char_text,
    "s": _string_text,
    "d": lambda v: str(_int_value(v)),
    "i": lambda v: str(_int_value(v)),
    "p": _pointer_text,
    "u": _unsigned_text,
    "x": lambda v: _hex_text(v, upper=False),
    "X": lambda v: _hex_text(v, upper=True),
}


def put_char(c: Any, stream: Optional[TextIO] = None) -> int:
    """Write one character, given as a one-character str or a code."""
    return _write(_char_text(c), stream)


def put_str(text: str, stream: Optional[TextIO] = None) -> int:
    """Write text as it is."""
    return _write(text, stream)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write text followed by a newline."""
    return _write(text + "\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write n in decimal, with a leading '-' when negative."""
    return _write(str(_int_value(n)), stream)


def put_nbr_unsigned(n: int, stream: Optional[TextIO] = None) -> int:
    """Write n as a 32-bit unsigned decimal; negative values wrap around."""
    return _write(_unsigned_text(n), stream)


def put_hex(n: int, stream: Optional[TextIO] = None, upper: bool = False) -> int:
    """Write n as a 32-bit unsigned hexadecimal number without prefix."""
    return _write(_hex_text(n, upper), stream)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions %c %s %d %i %p %u %x %X and %% in fmt.

    A '%' followed by any other character, or at the end, is kept literally.
    Raises ValueError when fmt needs more arguments than were given.
    """
    pieces = []
    remaining = iter(args)
    i = 0
    while i < len(fmt):
        char = fmt[i]
        spec = fmt[i + 1] if i + 1 < len(fmt) else ""
        if char == "%" and spec and spec in _CONVERSIONS:
            i += 2
            if spec == "%":
                pieces.append("%")
                continue
            try:
                value = next(remaining)
            except StopIteration:
                raise ValueError(f"not enough arguments for format {fmt!r}") from None
            pieces.append(_FORMATTERS[spec](value))
        else:
            pieces.append(char)
            i += 1
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Format like format_printf and write the result; return its length."""
    return _write(format_printf(fmt, *args), stream)