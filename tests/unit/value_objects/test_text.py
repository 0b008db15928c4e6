import pytest

from nexus_kernel.domain.value_objects import Code, Color, Slug
from nexus_kernel.exceptions import InvalidValueError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Café & Pão", "cafe-pao"),
        ("  Hello   World  ", "hello-world"),
        ("ação--rápida", "acao-rapida"),
        ("Ñandú_2024!", "nandu2024"),
        ("---x---", "x"),
    ],
)
def test_slug_normalization(text, expected):
    assert str(Slug(text)) == expected


@pytest.mark.parametrize("text", ["", "   ", "!!!", "---", "漢字"])
def test_slug_empty_after_processing(text):
    with pytest.raises(InvalidValueError):
        Slug(text)


def test_slug_length_limit():
    assert len(str(Slug("a" * 100))) == 100
    with pytest.raises(InvalidValueError):
        Slug("a" * 101)


def test_color_normalization():
    assert str(Color("ff8800")) == "#FF8800"
    assert str(Color(" #abcdef ")) == "#ABCDEF"
    assert Color("#FF8800").rgb() == (255, 136, 0)


@pytest.mark.parametrize("raw", ["#FFF", "#GGGGGG", "FF88001", ""])
def test_invalid_color(raw):
    with pytest.raises(InvalidValueError):
        Color(raw)


def test_color_luminance():
    assert Color("#FFFFFF").is_light
    assert not Color("#000000").is_light
    assert not Color("#808080").is_light  # brightness exactly 128
    assert Color("#818181").is_light


def test_code():
    assert str(Code(" ab12 ", min_length=2, max_length=6)) == "AB12"


@pytest.mark.parametrize("raw, min_length, max_length", [("A", 2, 5), ("ABCDEF", 2, 5), ("AB-1", 1, 10), ("", 1, 5)])
def test_invalid_code(raw, min_length, max_length):
    with pytest.raises(InvalidValueError):
        Code(raw, min_length=min_length, max_length=max_length)


def test_code_bounds_must_be_sane():
    with pytest.raises(InvalidValueError):
        Code("AB", min_length=5, max_length=2)
