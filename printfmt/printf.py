"""Formatting of whole format strings and printing them."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from .numeric import format_hex, format_int, format_ptr, format_unsigned
from .spec import FormatSpec, parse_spec
from .text import format_char, format_str

_CONVERSIONS = frozenset("cspdiuxX%")


def _to_int32(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"integer conversion expects an int, got {type(value).__name__}")
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def render(spec: FormatSpec, value: Any = None) -> str:
    """Render one argument according to *spec*.

    ``%d`` and ``%i`` take their argument as a 32-bit signed integer.
    Raises ValueError for an unknown conversion.
    """
    conversion = spec.type
    if conversion == "c":
        return format_char(value, spec)
    if conversion == "s":
        return format_str(value, spec)
    if conversion == "p":
        return format_ptr(value, spec)
    if conversion in ("d", "i"):
        return format_int(_to_int32(value), spec)
    if conversion == "u":
        return format_unsigned(value, spec)
    if conversion == "x":
        return format_hex(value, spec, False)
    if conversion == "X":
        return format_hex(value, spec, True)
    if conversion == "%":
        return format_char("%", spec)
    raise ValueError(f"unknown conversion {conversion!r}")


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with each directive replaced by its rendered argument.

    Raises TypeError when arguments run out and ValueError on a directive
    without a known conversion. Surplus arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError("format must be a string")
    pending = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            parts.append(fmt[pos:])
            break
        parts.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1)
        if spec.type not in _CONVERSIONS or not spec.type:
            raise ValueError(f"unknown conversion {spec.type!r} at index {percent}")
        if spec.type == "%":
            parts.append(render(spec))
            continue
        try:
            value = next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        parts.append(render(spec, value))
    return "".join(parts)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to *file* (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)