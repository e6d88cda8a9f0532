"""Splitting of strings into words, with optional single-quote grouping."""

from __future__ import annotations

QUOTE = "'"


def _check_separator(separator: str) -> None:
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError("separator must be a single character")


def split_words(text: str, separator: str = " ") -> list[str]:
    """Return the non-empty runs of *text* between occurrences of *separator*."""
    _check_separator(separator)
    return [word for word in text.split(separator) if word]


def split_command(text: str, separator: str = " ") -> list[str]:
    """Split a command line into its arguments.

    Words are separated by *separator*. A word that directly follows a single
    quote runs up to the next single quote, so ``'a b'`` stays one argument.
    Quote characters themselves are never part of the returned words.
    """
    _check_separator(separator)
    skippable = separator + QUOTE
    words: list[str] = []
    position = 0
    while position < len(text):
        rest = text[position:]
        start = position + len(rest) - len(rest.lstrip(skippable))
        if start == len(text):
            break
        quoted = start > 0 and text[start - 1] == QUOTE
        stop = text.find(QUOTE if quoted else separator, start)
        if stop == -1:
            stop = len(text)
        words.append(text[start:stop])
        position = stop
    return words