"""String helpers: conversion, splitting, searching, bounded copies and mapping.

Positions are returned as indices rather than pointers, and a failed search
returns None. Looking for the NUL character finds the end of the text, as
with a C string's terminator.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def itoa(n: int) -> str:
    """Return the decimal representation of n, with a leading '-' when negative."""
    return str(n)


def split_words(text: str, sep: str) -> List[str]:
    """Split text on the separator character, dropping empty pieces."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def str_chr(text: str, c: str) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for NUL yields len(text).
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def str_rchr(text: str, c: str) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for NUL yields len(text).
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def str_nstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle within the first length characters of haystack, or None.

    An empty needle is found at index 0. The needle must fit entirely inside
    the searched span.
    """
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def str_ncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference between the first pair of unequal characters, the
    end of a string counting as code 0; returns 0 when they match.
    """
    _check_size("n", n)
    for i in range(n):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def str_lcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters) and len(src),
    the length the copy tried to create.
    """
    _check_size("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def str_lcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a buffer of size characters, terminator included.

    Returns the resulting text and the length the concatenation tried to
    create. When dest already fills the buffer it is returned unchanged and
    the length reported is len(src) + size.
    """
    _check_size("size", size)
    if len(dest) >= size:
        return dest, len(src) + size
    room = size - len(dest)
    copied, _ = str_lcpy(src, room)
    return dest + copied, len(dest) + len(src)


def str_join(first: Optional[str], second: Optional[str]) -> str:
    """Concatenate two strings; a missing string counts as empty."""
    return (first or "") + (second or "")


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text from start; empty when start is past the end."""
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def str_trim(text: str, charset: str) -> str:
    """Strip characters found in charset from both ends of text."""
    return text.strip(charset)


def str_iteri(text: str, func: Optional[Callable[[int, str], object]]) -> None:
    """Call func(index, character) for each character of text, in order."""
    if func is None:
        return
    for index, char in enumerate(text):
        func(index, char)


def str_mapi(text: str, func: Optional[Callable[[int, str], str]]) -> str:
    """Build a new string from func(index, character); without func, copy text."""
    if func is None:
        return text
    return "".join(func(index, char) for index, char in enumerate(text))