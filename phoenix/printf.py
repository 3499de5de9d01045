"""A small printf supporting the %c %s %d %i %u %x %X %p %% conversions."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_DIGITS = "0123456789ABCDEF"
_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_NULL_STRING = "(null)"


def convert_number(number: int, base: int, lowercase: bool = False) -> str:
    """Render a non-negative integer in ``base`` (2 to 16)."""
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base: {base}")
    if number < 0:
        raise ValueError("number must not be negative")
    digits = []
    while True:
        number, remainder = divmod(number, base)
        digits.append(_DIGITS[remainder])
        if number == 0:
            break
    text = "".join(reversed(digits))
    return text.lower() if lowercase else text


def _signed_int(value: int) -> str:
    value &= _UINT32_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    if value < 0:
        return "-" + convert_number(-value, 10)
    return convert_number(value, 10)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(value & 0xFF)


def _convert(spec: str, value: Any) -> str:
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _NULL_STRING if value is None else str(value)
    if spec == "X":
        return convert_number(value & _UINT32_MASK, 16)
    if spec == "x":
        return convert_number(value & _UINT32_MASK, 16, lowercase=True)
    if spec in ("d", "i"):
        return _signed_int(value)
    if spec == "u":
        return convert_number(value & _UINT32_MASK, 10)
    if spec == "p":
        return "0x" + convert_number(value & _POINTER_MASK, 16, lowercase=True)
    raise AssertionError(spec)


_CONVERSIONS = frozenset("csXxdiup")


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the result.

    Unknown conversions and a trailing lone ``%`` produce no output.
    """
    pieces = []
    values = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            pieces.append(_convert(spec, value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write formatted output to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)