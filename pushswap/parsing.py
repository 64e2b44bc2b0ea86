"""Reading, checking and ranking the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_MAX_DIGITS = 19


class ParseError(ValueError):
    """The arguments do not describe a valid list of distinct numbers."""


def _wrap32(number: int) -> int:
    return (number + 2**31) % 2**32 - 2**31


def is_blank(text: str) -> bool:
    """True when ``text`` holds nothing but spaces (or nothing at all)."""
    return all(ch == " " for ch in text)


def join_args(args: Iterable[str]) -> str:
    """Join the arguments, each followed by one space.

    Raises ParseError if any argument is empty or made only of spaces.
    """
    parts = []
    for arg in args:
        if is_blank(arg):
            raise ParseError("blank argument")
        parts.append(arg + " ")
    return "".join(parts)


def _overflow_check(text: str) -> int:
    """1 if the number may be read, 0 or -1 for the value to return at once."""
    rest = text.lstrip("".join(_WHITESPACE))
    unsigned = rest.lstrip("+-")
    if len(rest) - len(unsigned) > 1:
        return 0
    unsigned = unsigned.lstrip("0")
    count = 0
    for ch in unsigned:
        if ch not in _DIGITS:
            break
        count += 1
    if count > _MAX_DIGITS:
        return 0 if text[:1] == "-" else -1
    return 1


def parse_int(text: str) -> int:
    """Read a leading integer from ``text`` as a 32-bit signed value.

    Leading whitespace and one sign are accepted. Two or more signs give 0;
    more than nineteen significant digits give -1, or 0 when the text starts
    with '-'. Larger values wrap around to 32 bits.
    """
    check = _overflow_check(text)
    if check != 1:
        return check
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and text[pos] in _DIGITS:
        result = _wrap32(result * 10 + int(text[pos]))
        pos += 1
    return _wrap32(result * sign)


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Split the arguments on spaces and read every word as a number.

    Every word must consist of decimal digits only; otherwise ParseError.
    """
    words = [word for word in join_args(args).split(" ") if word]
    values = []
    for word in words:
        if not all(ch in _DIGITS for ch in word):
            raise ParseError(f"not a number: {word!r}")
        values.append(parse_int(word))
    return values


def check_duplicates(values: Iterable[int]) -> None:
    """Raise ParseError if any value appears more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ParseError(f"duplicate value: {value}")
        seen.add(value)


def is_sorted(values: Iterable[int]) -> bool:
    """True when no value is greater than the one after it."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def index_values(values: Sequence[int]) -> list[int]:
    """Rank of each value among all values, 0 for the smallest."""
    ranks = {value: rank for rank, value in enumerate(sorted(values))}
    return [ranks[value] for value in values]