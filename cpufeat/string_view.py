"""Scanning helpers for ``key : value`` style system text such as /proc/cpuinfo.

The functions work on plain ``str`` views. Character searches stop at the
first NUL character, so text after an embedded ``"\\0"`` is never matched.
"""

from __future__ import annotations

import string

_WHITESPACE = " \t\n\v\f\r"
_HEX_PREFIX = "0x"
_ATTRIBUTE_SEPARATOR = ": "


def _searchable(view: str) -> str:
    """Return the part of ``view`` before its first NUL character."""
    nul = view.find("\0")
    return view if nul < 0 else view[:nul]


def index_of_char(view: str, c: str) -> int:
    """Return the index of ``c`` in ``view`` or -1 when it is absent."""
    if not view:
        return -1
    return _searchable(view).find(c)


def index_of(view: str, sub: str) -> int:
    """Return the index of ``sub`` in ``view`` or -1; an empty ``sub`` is never found."""
    if not sub:
        return -1
    offset = 0
    while len(view) - offset >= len(sub):
        found = index_of_char(view[offset:], sub[0])
        if found < 0:
            break
        offset += found
        if view.startswith(sub, offset):
            return offset
        offset += 1
    return -1


def starts_with(a: str, b: str) -> bool:
    """Tell whether ``a`` begins with the non-empty prefix ``b``."""
    return bool(b) and a.startswith(b)


def pop_front(view: str, count: int) -> str:
    """Drop ``count`` characters from the front; too many gives an empty view."""
    if count < 0 or count > len(view):
        return ""
    return view[count:]


def pop_back(view: str, count: int) -> str:
    """Drop ``count`` characters from the back; too many gives an empty view."""
    if count < 0 or count > len(view):
        return ""
    return view[: len(view) - count]


def keep_front(view: str, count: int) -> str:
    """Keep the first ``count`` characters; too many keeps the whole view."""
    if 0 <= count <= len(view):
        return view[:count]
    return view


def trim_whitespace(view: str) -> str:
    """Strip C-locale whitespace from both ends."""
    return view.strip(_WHITESPACE)


def _digit_value(ch: str) -> int:
    return int(ch, 16) if ch in string.hexdigits else -1


def parse_positive_number(view: str) -> int:
    """Parse a decimal number, or a hexadecimal one prefixed with ``0x``.

    Raises ValueError when ``view`` is empty or holds a character that is not
    a digit of the base in use.
    """
    if not view:
        raise ValueError("cannot parse a number from an empty string")
    if starts_with(view, _HEX_PREFIX):
        digits, base = pop_front(view, len(_HEX_PREFIX)), 16
    else:
        digits, base = view, 10
    result = 0
    for ch in digits:
        value = _digit_value(ch)
        if value < 0 or value >= base:
            raise ValueError(f"invalid digit {ch!r} in {view!r}")
        result = result * base + value
    return result


def copy_string(src: str, dst_size: int) -> str:
    """Return ``src`` cut to fit a terminated buffer of ``dst_size`` characters."""
    if dst_size <= 0:
        return ""
    return src[: dst_size - 1]


def has_word(line: str, word: str, separator: str) -> bool:
    """Tell whether ``word`` appears in ``line`` bounded by ``separator`` or the ends."""
    start = 0
    while True:
        found = index_of(line[start:], word)
        if found < 0:
            return False
        position = start + found
        end = position + len(word)
        valid_before = position == 0 or line[position - 1] == separator
        valid_after = end == len(line) or line[end] == separator
        if valid_before and valid_after:
            return True
        start = end


def get_attribute_key_value(line: str) -> tuple[str, str] | None:
    """Split ``"key : value"`` into trimmed ``(key, value)``, or None without ``": "``."""
    index = index_of(line, _ATTRIBUTE_SEPARATOR)
    if index < 0:
        return None
    key = trim_whitespace(keep_front(line, index))
    value = trim_whitespace(pop_front(line, index + len(_ATTRIBUTE_SEPARATOR)))
    return key, value