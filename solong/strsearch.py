"""String searching, comparison and bounded copying.

Positions are returned as indices into the text, or None where nothing is
found. Bounded copies return the resulting string with the length the
operation would have produced without a bound.
"""

from __future__ import annotations

from typing import Optional

_NUL = "\0"


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def _single_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the terminator character '\\0' gives the end of the text.
    """
    _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the terminator character '\\0' gives the end of the text.
    """
    _single_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference between the codes of the first differing pair,
    the end of a string counting as code 0, or 0 when they match.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for index in range(n):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the concatenation tried to
    create: ``len(src)`` plus the smaller of ``size`` and ``len(dst)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    room = max(0, size - len(dst) - 1)
    result = dst + src[:room]
    return result, len(src) + min(size, len(dst))