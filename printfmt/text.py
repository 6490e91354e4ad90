"""Rendering of character and string conversions."""

from __future__ import annotations

from .spec import FormatSpec

NULL_TEXT = "(null)"


def _as_char(char: str | int) -> str:
    if isinstance(char, bool):
        raise TypeError("a character must be a one-character string or an int")
    if isinstance(char, int):
        return chr(char & 0xFF)
    if isinstance(char, str) and len(char) == 1:
        return char
    if isinstance(char, str):
        raise ValueError(f"expected a single character, got {char!r}")
    raise TypeError("a character must be a one-character string or an int")


def format_char(char: str | int, spec: FormatSpec) -> str:
    """Render one character padded with spaces to the spec's width.

    An int is taken as a byte value, keeping only its low eight bits.
    """
    ch = _as_char(char)
    if spec.width <= 1:
        return ch
    if spec.left:
        return ch.ljust(spec.width)
    return ch.rjust(spec.width)


def format_str(value: str | None, spec: FormatSpec) -> str:
    """Render a string, truncated by precision and padded to width.

    ``None`` renders as ``(null)``. Right-aligned output is padded with
    zeros when the zero flag is set and no precision is given.
    """
    text = NULL_TEXT if value is None else value
    if spec.dot and spec.precision < len(text):
        text = text[: spec.precision]
    width = max(spec.width, 0)
    if spec.left:
        return text.ljust(width)
    pad = "0" if spec.zero and not spec.dot else " "
    return text.rjust(width, pad)