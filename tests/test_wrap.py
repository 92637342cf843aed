import pytest

from md2smol import ConfigError, truncate, wrap
from md2smol.wrap import wrap_lines


def test_wrap_breaks_at_whitespace():
    assert wrap("aaa bbb ccc", 7) == "aaa bbb\nccc"


def test_long_word_is_not_split():
    assert wrap("abcdefghij xy", 5) == "abcdefghij\nxy"


def test_zero_width_passes_through():
    text = "a   b\n\n  c"
    assert wrap(text, 0) == text


def test_blank_lines_survive_wrapping():
    assert wrap("one two\n\nthree", 3) == "one\ntwo\n\nthree"


def test_width_counts_codepoints():
    assert wrap("äää ööö", 7) == "äää ööö"


def test_wrap_lines_prefixes():
    lines = wrap_lines("alpha beta gamma", 10, initial="* ", subsequent="  ")
    assert lines == ["* alpha", "  beta", "  gamma"]


@pytest.mark.parametrize(
    "text, width, expected",
    [
        ("hello", 5, "hello"),
        ("hello world", 8, "hello..."),
        ("hello world", 3, "..."),
        ("hello world", 2, ".."),
        ("hello world", 0, ""),
        ("héllo wörld", 6, "hél..."),
    ],
)
def test_truncate(text, width, expected):
    assert truncate(text, width) == expected


def test_negative_width_is_a_config_error():
    with pytest.raises(ConfigError):
        wrap("x", -1)
    with pytest.raises(ConfigError):
        truncate("x", -1)
