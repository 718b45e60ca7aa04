"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer code point.
"""

from __future__ import annotations

from typing import TypeVar

_Char = TypeVar("_Char", str, int)

_BLANKS = frozenset((9, 11, 12, 32))


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _upper_letter(code: int) -> bool:
    return 65 <= code <= 90


def _lower_letter(code: int) -> bool:
    return 97 <= code <= 122


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _upper_letter(code) or _lower_letter(code)


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_blank(c: str | int) -> bool:
    """True for a token separator: space, tab, vertical tab or form feed."""
    return _code(c) in _BLANKS


def _convert(c: _Char, code: int) -> _Char:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _Char) -> _Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    return _convert(c, code - 32) if _lower_letter(code) else c


def to_lower(c: _Char) -> _Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    return _convert(c, code + 32) if _upper_letter(code) else c