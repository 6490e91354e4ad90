"""Rendering of integer, hexadecimal and pointer conversions."""

from __future__ import annotations

from .spec import FormatSpec

UINT_MASK = 0xFFFFFFFF


def _require_int(value: object, what: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def _digits(magnitude: int, spec: FormatSpec, code: str) -> str:
    """Digits of *magnitude*, zero-extended to the precision.

    A zero value with an explicit precision of zero yields no digits at all.
    """
    if magnitude == 0 and spec.dot and spec.precision == 0:
        return ""
    return format(magnitude, code).rjust(spec.precision, "0")


def _pad(prefix: str, body: str, spec: FormatSpec) -> str:
    """Pad ``prefix + body`` to the spec's width.

    Zero padding goes between the prefix and the digits and applies only to
    right-aligned output without a precision.
    """
    fill = spec.width - len(prefix) - len(body)
    if fill <= 0:
        return prefix + body
    if spec.left:
        return prefix + body + " " * fill
    if spec.zero and not spec.dot:
        return prefix + "0" * fill + body
    return " " * fill + prefix + body


def format_int(value: int, spec: FormatSpec) -> str:
    """Render a signed decimal integer."""
    number = _require_int(value, "integer conversion")
    if number < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    return _pad(sign, _digits(abs(number), spec, "d"), spec)


def format_unsigned(value: int, spec: FormatSpec) -> str:
    """Render an unsigned decimal integer, reduced modulo 2**32.

    The plus and space flags still add their sign character.
    """
    number = _require_int(value, "unsigned conversion")
    return format_int(number & UINT_MASK, spec)


def format_hex(value: int, spec: FormatSpec, upper: bool = False) -> str:
    """Render an unsigned hexadecimal integer, reduced modulo 2**32.

    The hash flag adds a ``0x`` (or ``0X``) prefix to non-zero values.
    """
    number = _require_int(value, "hexadecimal conversion") & UINT_MASK
    code = "X" if upper else "x"
    prefix = ("0X" if upper else "0x") if spec.hash and number else ""
    return _pad(prefix, _digits(number, spec, code), spec)


def format_ptr(address: int | None, spec: FormatSpec) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits.

    ``None`` is the null address. Precision is ignored; the zero flag pads
    between the prefix and the digits unless the output is left-aligned.
    """
    if address is None:
        address = 0
    number = _require_int(address, "pointer conversion")
    if number < 0:
        raise ValueError(f"address must not be negative, got {number}")
    digits = format(number, "x")
    if spec.left:
        return ("0x" + digits).ljust(spec.width)
    if spec.zero:
        return "0x" + digits.rjust(spec.width - 2, "0")
    return ("0x" + digits).rjust(spec.width)