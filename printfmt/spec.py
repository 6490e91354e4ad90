"""Parsing of conversion specifications such as ``-08.3d``."""

from __future__ import annotations

from dataclasses import dataclass

FIRST_FLAGS = frozenset("#+0- ")
VALID_FLAGS = frozenset(" #+0-123456789.")


@dataclass(frozen=True)
class FormatSpec:
    """Flags, width, precision and conversion type of one directive.

    ``width`` is ``-1`` when the directive names no width; ``type`` is the
    empty string when the format ends before a conversion character.
    """

    hash: bool = False
    plus: bool = False
    zero: bool = False
    left: bool = False
    space: bool = False
    width: int = 0
    dot: bool = False
    precision: int = 0
    type: str = ""


def is_first_flag(char: str) -> bool:
    """Return True if *char* is one of the leading flags ``# + 0 - space``."""
    return char in FIRST_FLAGS


def is_valid_flag(char: str) -> bool:
    """Return True if *char* may appear between ``%`` and the conversion."""
    return len(char) == 1 and char in VALID_FLAGS


def _read_digits(text: str, pos: int) -> tuple[int | None, int]:
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    if end == pos:
        return None, pos
    return int(text[pos:end]), end


def parse_spec(text: str, start: int) -> tuple[FormatSpec, int]:
    """Parse the directive that begins at *start* (just after the ``%``).

    Returns the spec and the index of the first character after the
    directive. The directive is taken to run over every character that may
    appear in a specification, plus the one character that follows them.
    """
    if not 0 <= start <= len(text):
        raise ValueError(f"start {start} is outside the format string")

    flags = {"hash": False, "plus": False, "zero": False, "left": False, "space": False}
    names = {"#": "hash", "+": "plus", "0": "zero", "-": "left", " ": "space"}
    pos = start
    while pos < len(text) and is_first_flag(text[pos]):
        flags[names[text[pos]]] = True
        pos += 1

    width, pos = _read_digits(text, pos)
    dot = pos < len(text) and text[pos] == "."
    if dot:
        pos += 1
    precision, pos = _read_digits(text, pos)
    conversion = text[pos] if pos < len(text) else ""

    spec = FormatSpec(
        width=-1 if width is None else width,
        dot=dot,
        precision=precision or 0,
        type=conversion,
        **flags,
    )

    end = start
    while end < len(text) and is_valid_flag(text[end]):
        end += 1
    return spec, min(end + 1, len(text))