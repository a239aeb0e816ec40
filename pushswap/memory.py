"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

from typing import Optional

_INT_MAX = 2147483647


def _check_span(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of size {len(buffer)}")


def mem_set(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first n bytes of buffer to the low byte of value."""
    _check_span(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buffer."""
    return mem_set(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count * size bytes.

    Raises OverflowError when the total would exceed the signed 32-bit limit.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > _INT_MAX // size:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)


def mem_cpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first n bytes of src into dest."""
    _check_span(n, dest, src)
    dest[:n] = src[:n]
    return dest


def mem_ccpy(dest: bytearray, src: bytes, stop: int, n: int) -> Optional[int]:
    """Copy bytes from src to dest, stopping after the first byte equal to stop.

    Returns the offset in dest just past the copied stop byte, or None when
    stop does not occur in the first n bytes (all n bytes are then copied).
    """
    _check_span(n, dest, src)
    target = stop & 0xFF
    for offset, byte in enumerate(src[:n]):
        dest[offset] = byte
        if byte == target:
            return offset + 1
    return None


def mem_move(dest: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move n bytes within dest from src_offset to dest_offset; regions may overlap."""
    if min(dest_offset, src_offset) < 0:
        raise ValueError("offsets must not be negative")
    _check_span(n, dest[dest_offset:], dest[src_offset:])
    dest[dest_offset:dest_offset + n] = bytes(dest[src_offset:src_offset + n])
    return dest


def mem_chr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value within n bytes, or None."""
    _check_span(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(first: bytes, second: bytes, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_span(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0