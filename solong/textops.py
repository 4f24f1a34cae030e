"""String helpers: integer parsing and formatting, splitting, trimming, mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

_INT_BITS = 32
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed machine int, the way the result type would hold it."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text with no digits gives 0. The result is
    reduced to a signed 32-bit int.
    """
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < end and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    while pos < end and _is_ascii_digit(text[pos]):
        number = number * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return _wrap_int(number * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``, with a leading '-' if negative."""
    return str(int(n))


def _single_char(value: str, name: str) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


Element = Union[str, int]


def striteri(
    text: MutableSequence[Element],
    func: Callable[[int, Element], Optional[Element]],
) -> None:
    """Call ``func(index, item)`` on each item of a mutable sequence, in place.

    When ``func`` returns something other than None, that value replaces the
    item. Immutable strings are rejected: pass a list of characters or a
    bytearray instead.
    """
    if isinstance(text, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence, not an immutable string")
    for index, item in enumerate(list(text)):
        replacement = func(index, item)
        if replacement is not None:
            text[index] = replacement