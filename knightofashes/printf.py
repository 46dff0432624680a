"""A small printf with the conversions %c %s %d %i %u %x %X %b %o %p %S %%."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any

_ACCEPTED = re.compile(r"%([csdbSiluopxX%])")


def _digits(nb: int, base: int, alphabet: str) -> str:
    out = []
    while nb > 0:
        nb, rest = divmod(nb, base)
        out.append(alphabet[rest])
    return "".join(reversed(out))


def to_binary(nb: int) -> str:
    """Binary digits of a positive number; empty for zero or less."""
    return _digits(nb, 2, "01")


def to_octal(nb: int) -> str:
    """Octal digits of a positive number; empty for zero or less."""
    return _digits(nb, 8, "01234567")


def to_hexa(nb: int, upper: bool = False) -> str:
    """Hexadecimal digits of a positive number; empty for zero or less."""
    alphabet = "0123456789ABCDEF" if upper else "0123456789abcdef"
    return _digits(nb, 16, alphabet)


def _as_int32(value: int) -> int:
    return (int(value) + 2 ** 31) % 2 ** 32 - 2 ** 31


def _char(value: Any) -> str:
    return value if isinstance(value, str) else chr(int(value) % 256)


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": str,
    "d": lambda v: str(_as_int32(v)),
    "i": lambda v: str(_as_int32(v)),
    "u": lambda v: str(int(v) % 2 ** 32),
    "x": lambda v: to_hexa(_as_int32(v), False),
    "X": lambda v: to_hexa(_as_int32(v), True),
    "b": lambda v: to_binary(int(v)),
    "o": lambda v: to_octal(int(v)),
    "p": lambda v: "0x" + to_hexa(int(v), False),
    "S": lambda v: "\\" + to_octal(int(v)),
}


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order."""
    values: Iterator[Any] = iter(args)

    def replace(match: re.Match[str]) -> str:
        conversion = match.group(1)
        if conversion == "%":
            return "%"
        if conversion == "l":
            raise ValueError("conversion %l is not supported")
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        return _HANDLERS[conversion](value)

    return _ACCEPTED.sub(replace, fmt)


def my_printf(fmt: str, *args: Any) -> None:
    """Write the formatted text to standard output."""
    sys.stdout.write(format_printf(fmt, *args))