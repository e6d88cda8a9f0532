"""Small character and string helpers with C-library semantics."""

from __future__ import annotations

from itertools import zip_longest

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_INT_BITS = 32


def _code(char: str | int) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return int(char)


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. The result wraps to a 32-bit signed int.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + _DIGITS.index(char)
    return _wrap_int(-value if negative else value)


def itoa(number: int) -> str:
    """Return the decimal representation of *number*."""
    return f"{int(number):d}"


def is_alpha(char: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(char)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(char: str | int) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(char) <= 57


def is_alnum(char: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(char) <= 127


def is_print(char: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(char) <= 126


def _same_kind(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def to_lower(char: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is unchanged."""
    code = _code(char)
    if 65 <= code <= 90:
        code += 32
    return _same_kind(char, code)


def to_upper(char: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is unchanged."""
    code = _code(char)
    if 97 <= code <= 122:
        code -= 32
    return _same_kind(char, code)


def trim(text: str, charset: str) -> str:
    """Remove characters in *charset* from both ends of *text*."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* from *start* on."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Index of the first *needle* lying wholly in the first *limit* characters.

    An empty needle is found at index 0. ``None`` means no match.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index == -1 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most *count* characters, as C ``strncmp`` does.

    Returns zero when equal, otherwise the code difference of the first
    differing characters, a shorter string counting as ending in code 0.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    for left, right in zip_longest(first[:count], second[:count], fillvalue="\0"):
        if left != right:
            return ord(left) - ord(right)
    return 0