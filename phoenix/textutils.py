"""String helpers with the semantics of the classic C string routines."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_INT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= _INT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit int.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit.  Text without digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        result = (result * 10 + ord(char) - ord("0")) & _INT32_MASK
    return _to_int32(sign * result)


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return str(number)


def split(text: str, separator: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(separator) > 1:
        raise ValueError("separator must be a single character")
    if not separator:
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if length <= 0 or not haystack:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; NUL ends a string.

    Returns the difference of the first differing code points, or 0.
    """
    for position in range(max(count, 0)):
        a = first[position] if position < len(first) else "\0"
        b = second[position] if position < len(second) else "\0"
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def strrchr(text: str, char: str) -> int | None:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for NUL finds the terminator, at ``len(text)``.
    """
    if len(char) != 1:
        raise ValueError("char must be a single character")
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index