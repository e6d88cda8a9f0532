"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_INT_HALF = 1 << 31
_NEEDS_ARGUMENT = frozenset("cspdiuxX")


def to_base(number: int, digits: str) -> str:
    """Write *number* using *digits* as the digit alphabet, with a leading '-' if negative."""
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    base = len(digits)
    sign = "-" if number < 0 else ""
    remaining = abs(int(number))
    out: list[str] = []
    while True:
        remaining, digit = divmod(remaining, base)
        out.append(digits[digit])
        if not remaining:
            break
    return sign + "".join(reversed(out))


def _as_signed(value: int) -> int:
    return (int(value) + _INT_HALF) % (1 << 32) - _INT_HALF


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(conversion: str, values: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in _NEEDS_ARGUMENT:
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise ValueError(f"missing argument for %{conversion}") from None
    if conversion == "c":
        return _as_char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        if not value:
            return "(nil)"
        return "0x" + to_base(int(value), _HEX_LOWER)
    if conversion in "di":
        return to_base(_as_signed(value), _DECIMAL)
    if conversion == "u":
        return to_base(int(value) & _UINT_MASK, _DECIMAL)
    if conversion == "x":
        return to_base(int(value) & _UINT_MASK, _HEX_LOWER)
    return to_base(int(value) & _UINT_MASK, _HEX_UPPER)


def format_text(template: str, *args: Any) -> str:
    """Expand *template* with *args*.

    Spaces between '%' and the conversion letter are skipped. Unknown
    conversions produce nothing. A template ending inside a conversion
    raises ValueError.
    """
    chars = iter(template)
    values = iter(args)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next((c for c in chars if c != " "), None)
        if conversion is None:
            raise ValueError("template ends inside a conversion")
        pieces.append(_convert(conversion, values))
    return "".join(pieces)


def print_formatted(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded template to *stream* (standard output by default).

    Returns the number of characters written.
    """
    text = format_text(template, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)