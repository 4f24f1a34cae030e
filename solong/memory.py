"""Byte-buffer operations over bytearray and other bytes-like objects."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_span(data, offset: int, length: int, name: str) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if offset < 0 or offset + length > len(data):
        raise IndexError(
            f"{name}: span [{offset}, {offset + length}) outside buffer of size {len(data)}"
        )


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (as a byte)."""
    _check_span(buffer, 0, length, "memset")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def memcpy(dst: Optional[bytearray], src, length: int) -> Optional[bytearray]:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``; return ``dst``."""
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source")
    _check_span(src, 0, length, "memcpy source")
    _check_span(dst, 0, length, "memcpy destination")
    dst[:length] = bytes(src[:length])
    return dst


def memmove(
    buffer: bytearray, dst_offset: int, src_offset: int, length: int
) -> bytearray:
    """Copy ``length`` bytes within ``buffer``, correct even when the spans overlap."""
    _check_span(buffer, src_offset, length, "memmove source")
    _check_span(buffer, dst_offset, length, "memmove destination")
    buffer[dst_offset : dst_offset + length] = bytes(
        buffer[src_offset : src_offset + length]
    )
    return buffer


def memchr(data, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``length`` bytes, or None."""
    _check_span(data, 0, length, "memchr")
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first, second, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair, else 0."""
    _check_span(first, 0, length, "memcmp first")
    _check_span(second, 0, length, "memcmp second")
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product would overflow a machine-sized length.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise MemoryError(f"{count} * {size} bytes overflows the size limit")
    return bytearray(count * size)