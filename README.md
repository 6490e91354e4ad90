# printfmt

A compact printf-style formatter. It understands a small, fixed set of
conversions and flags. It either returns the formatted text or writes it and
returns how many characters were written.

## Supported conversions

| Conversion | Argument                        | Output                               |
|------------|---------------------------------|--------------------------------------|
| `%c`       | a one-character string, or int  | the character (an int keeps its low 8 bits) |
| `%s`       | a string, or `None`             | the string; `None` is `(null)`       |
| `%p`       | a non-negative int, or `None`   | `0x` followed by lowercase hex       |
| `%d`, `%i` | an int                          | decimal, read as a 32-bit signed value |
| `%u`       | an int                          | decimal, reduced modulo 2**32        |
| `%x`, `%X` | an int                          | lower- or uppercase hex, modulo 2**32 |
| `%%`       | none                            | a literal `%`                        |

A conversion may be preceded by the flags `#`, `+`, `0`, `-` and a space,
then a field width, then `.` and a precision:

- `-` left-aligns in the field; otherwise output is right-aligned.
- `0` pads numbers with zeros between the sign or prefix and the digits,
  unless a precision is given. For `%s` without a precision it pads with
  zeros as well. For `%p` it pads between `0x` and the digits.
- `+` and a space put a sign character before non-negative `%d`, `%i` and
  `%u` values.
- `#` adds `0x` or `0X` to non-zero `%x` and `%X` values.
- A precision sets the minimum number of digits for numbers (a zero value
  with precision `0` prints no digits) and the maximum length for `%s`.
  It is ignored by `%p`.

## Usage

```python
from printfmt.printf import sprintf, printf

sprintf("%5d|%-5s|%#x", 42, "ab", 255)
# '   42|ab   |0xff'

sprintf("%.3d %+d % d", 7, 5, 5)
# '007 +5  5'

count = printf("%s, %c!\n", "hello", "w")  # writes to stdout, returns 10
```

`printf` takes a keyword-only `file` argument to write somewhere other than
standard output.

`sprintf` raises `TypeError` when the arguments run out and `ValueError` on a
directive without a known conversion (including a `%` at the end of the
format). Surplus arguments are ignored.

## Lower-level helpers

- `printfmt.spec`: `FormatSpec` (a frozen dataclass of flags, width,
  precision and conversion type), `parse_spec(text, start)` which returns the
  spec and the index just past the directive, and the predicates
  `is_first_flag` and `is_valid_flag`.
- `printfmt.text`: `format_char(char, spec)` and `format_str(value, spec)`.
- `printfmt.numeric`: `format_int`, `format_unsigned`, `format_hex(value,
  spec, upper)` and `format_ptr(address, spec)`.
- `printfmt.printf`: `render(spec, value)` renders one argument for one spec.

## What it does not do

There are no floating-point conversions, no length modifiers such as `l` or
`h`, no `*` widths, and no command-line tool; it is a library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```