"""String helpers used by the shell: number parsing, splitting, searching and slicing.

Comparisons work on the UTF-8 bytes of their arguments, so that ordering and
the reported differences match byte-wise string comparison.
"""

from __future__ import annotations

from typing import Callable

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_ATOI_SPACE = frozenset(" \t\n\v\f\r")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _terminated(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    end = s.find("\0")
    return s if end == -1 else s[:end]


def atoi(s: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted; parsing stops at the first non-digit.
    Text without digits gives 0. The result wraps like a 32-bit signed int.
    """
    pos = 0
    length = len(s)
    while pos < length and s[pos] in _ATOI_SPACE:
        pos += 1
    sign = 1
    if pos < length and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and "0" <= s[pos] <= "9":
        pos += 1
    digits = s[start:pos]
    return _wrap_int(sign * int(digits)) if digits else 0


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    return str(n)


def split_words(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _single_char(sep)
    return [word for word in _terminated(s).split(sep) if word]


def index_of(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    _single_char(c)
    s = _terminated(s)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index == -1 else index


def last_index_of(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    _single_char(c)
    s = _terminated(s)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index == -1 else index


def _byte_diff(b1: bytes, b2: bytes) -> int:
    for x, y in zip(b1, b2):
        if x != y:
            return x - y
    if len(b1) == len(b2):
        return 0
    return b1[len(b2)] if len(b1) > len(b2) else -b2[len(b1)]


def compare(s1: str, s2: str) -> int:
    """Byte-wise comparison: 0 if equal, else the difference of the first differing bytes."""
    return _byte_diff(
        _terminated(s1).encode("utf-8"), _terminated(s2).encode("utf-8")
    )


def ncompare(s1: str, s2: str, n: int) -> int:
    """Like :func:`compare`, but looking at no more than the first ``n`` bytes."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _byte_diff(
        _terminated(s1).encode("utf-8")[:n], _terminated(s2).encode("utf-8")[:n]
    )


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    haystack = _terminated(haystack)
    needle = _terminated(needle)
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _terminated(s1) + _terminated(s2)


def trim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    return _terminated(s).strip(_terminated(charset))


def substring(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty if ``start`` is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    s = _terminated(s)
    if start >= len(s):
        return ""
    return s[start : start + length]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(_terminated(s)))