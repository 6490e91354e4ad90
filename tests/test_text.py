import pytest
from hypothesis import given
from hypothesis import strategies as st

from printfmt.spec import FormatSpec
from printfmt.text import format_char, format_str


def test_char_without_width():
    assert format_char("a", FormatSpec()) == "a"


def test_char_from_int_value():
    assert format_char(ord("z"), FormatSpec()) == "z"


def test_char_int_keeps_low_byte():
    assert format_char(ord("q") + 256, FormatSpec()) == "q"


def test_char_right_aligned():
    result = format_char("a", FormatSpec(width=5))
    assert len(result) == 5
    assert result.lstrip(" ") == "a"


def test_char_left_aligned():
    result = format_char("b", FormatSpec(width=4, left=True))
    assert len(result) == 4
    assert result.rstrip(" ") == "b"
    assert result[0] == "b"


def test_char_ignores_zero_flag():
    result = format_char("c", FormatSpec(width=6, zero=True))
    assert "0" not in result
    assert result.endswith("c")


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab", FormatSpec())


def test_char_rejects_other_types():
    with pytest.raises(TypeError):
        format_char(1.5, FormatSpec())


def test_str_none_renders_null():
    assert format_str(None, FormatSpec()) == "(null)"


def test_str_none_truncated_by_precision():
    assert format_str(None, FormatSpec(dot=True, precision=3)) == "(null)"[:3]


def test_str_precision_truncates():
    assert format_str("hello", FormatSpec(dot=True, precision=2)) == "hello"[:2]


def test_str_width_smaller_than_text_is_ignored():
    assert format_str("hello", FormatSpec(width=2)) == "hello"


def test_str_zero_padding_when_right_aligned():
    result = format_str("hi", FormatSpec(width=5, zero=True))
    assert len(result) == 5
    assert result.endswith("hi")
    assert set(result[:-2]) == {"0"}


def test_str_zero_with_precision_pads_with_spaces():
    result = format_str("hi", FormatSpec(width=5, zero=True, dot=True, precision=9))
    assert result.lstrip(" ") == "hi"
    assert len(result) == 5


def test_str_left_alignment_ignores_zero():
    result = format_str("hi", FormatSpec(width=5, zero=True, left=True))
    assert result.rstrip(" ") == "hi"
    assert "0" not in result


@given(
    st.one_of(st.none(), st.text(alphabet=st.characters(blacklist_characters="\0"))),
    st.integers(min_value=-1, max_value=40),
    st.booleans(),
    st.integers(min_value=0, max_value=40),
    st.booleans(),
)
def test_str_length_invariant(value, width, dot, precision, left):
    spec = FormatSpec(width=width, dot=dot, precision=precision, left=left)
    result = format_str(value, spec)
    text = "(null)" if value is None else value
    shown = text[:precision] if dot else text
    assert len(result) == max(width, len(shown))
    if left:
        assert result.startswith(shown)
    else:
        assert result.endswith(shown)