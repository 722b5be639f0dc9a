import math

import pytest

from chromaparse.parsing import (
    Angle,
    AngleUnit,
    InvalidColor,
    SeparatorStyle,
    alpha_separator,
    alpha_value,
    angle,
    number,
    percentage,
    percentage_or_number,
    separator,
)
from chromaparse.parsing.primitives import alternative, one_of_words, optional_alpha


def test_number_forms():
    assert number("12", 0) == (12.0, 2)
    assert number("-24.3", 0) == (-24.3, 5)
    assert number("+.5", 0) == (0.5, 3)
    assert number("7.", 0) == (7.0, 2)
    assert number("1e2", 0) == (100.0, 3)
    assert number("2.5E-1", 0) == (0.25, 6)


def test_number_stops_before_incomplete_exponent():
    assert number("04oeeooe", 0) == (4.0, 2)
    assert number("3e", 0) == (3.0, 1)


def test_number_respects_position():
    assert number("ab12", 2) == (12.0, 4)


def test_number_rejects_non_numbers():
    with pytest.raises(InvalidColor) as excinfo:
        number("x", 0)
    assert excinfo.value.position == 0
    with pytest.raises(InvalidColor):
        number(".", 0)


def test_number_rejects_nan_and_inf():
    for text in ("nan", "inf", "-inf", "Infinity", "NaN"):
        with pytest.raises(InvalidColor):
            number(text, 0)


def test_number_accepts_ascii_digits_only():
    for text in ("\u0661\u0662", "\u0968", "\uff11\uff10"):
        with pytest.raises(InvalidColor):
            number(text, 0)
    assert number("1\u0662", 0) == (1.0, 1)


def test_separators_accept_ascii_whitespace_only():
    assert separator("1\t2", 1, SeparatorStyle.SPACE) == 2
    for space in ("\u00a0", "\u2003", "\u3000"):
        with pytest.raises(InvalidColor):
            separator(f"1{space}2", 1, SeparatorStyle.SPACE)
        with pytest.raises(InvalidColor):
            separator(f"1{space},2", 1, SeparatorStyle.COMMA)
        with pytest.raises(InvalidColor):
            alpha_separator(f"3{space}/ 0.5", 1, SeparatorStyle.SPACE)


def test_percentage_keeps_value():
    assert percentage("42%", 0) == (42.0, 3)
    with pytest.raises(InvalidColor) as excinfo:
        percentage("42", 0)
    assert excinfo.value.position == 2


def test_percentage_or_number():
    assert percentage_or_number("12%", 0) == (12.0, 3)
    assert percentage_or_number("12", 0) == (12.0, 2)


def test_alpha_value_scales_percentages():
    assert alpha_value("30%", 0) == (0.3, 3)
    assert alpha_value("0.3", 0) == (0.3, 3)
    assert alpha_value("1", 0) == (1.0, 1)


def test_angle_units():
    assert angle("90", 0) == (Angle(90.0), 2)
    assert angle("90deg", 0) == (Angle(90.0, AngleUnit.DEGREES), 5)
    assert angle("2turn", 0) == (Angle(2.0, AngleUnit.TURNS), 5)
    assert angle("1rad", 0) == (Angle(1.0, AngleUnit.RADIANS), 4)
    assert angle("100grad", 0) == (Angle(100.0, AngleUnit.GRADIANS), 7)


def test_angle_rejects_unknown_unit():
    with pytest.raises(InvalidColor) as excinfo:
        angle("90foo", 0)
    assert excinfo.value.position == 2
    assert excinfo.value.reason == "unknown angle unit"


def test_angle_to_degrees():
    assert Angle(90.0).to_degrees() == 90.0
    assert Angle(0.5, AngleUnit.TURNS).to_degrees() == 180.0
    assert Angle(math.pi, AngleUnit.RADIANS).to_degrees() == pytest.approx(180.0)


def test_gradians_are_not_converted():
    with pytest.raises(NotImplementedError):
        Angle(100.0, AngleUnit.GRADIANS).to_degrees()


def test_separators():
    assert separator("1 , 2", 1, SeparatorStyle.COMMA) == 4
    assert separator("1,2", 1, SeparatorStyle.COMMA) == 2
    assert separator("1   2", 1, SeparatorStyle.SPACE) == 4
    with pytest.raises(InvalidColor):
        separator("1,2", 1, SeparatorStyle.SPACE)
    with pytest.raises(InvalidColor):
        separator("1 2", 1, SeparatorStyle.COMMA)


def test_alpha_separators():
    assert alpha_separator("3 / 0.5", 1, SeparatorStyle.SPACE) == 4
    assert alpha_separator("3/0.5", 1, SeparatorStyle.SPACE) == 2
    assert alpha_separator("3, 0.5", 1, SeparatorStyle.COMMA) == 3
    with pytest.raises(InvalidColor):
        alpha_separator("3, 0.5", 1, SeparatorStyle.SPACE)


def test_optional_alpha():
    assert optional_alpha("3 / 50%", 1, SeparatorStyle.SPACE) == (0.5, 7)
    assert optional_alpha("3)", 1, SeparatorStyle.SPACE) == (None, 1)
    assert optional_alpha("3 / x", 1, SeparatorStyle.SPACE) == (None, 1)


def test_one_of_words_prefers_listed_order():
    assert one_of_words("hsla(", 0, ("hsla", "hsl")) == ("hsla", 4)
    assert one_of_words("hsl(", 0, ("hsla", "hsl")) == ("hsl", 3)
    with pytest.raises(InvalidColor):
        one_of_words("rgb(", 0, ("hsla", "hsl"))


def test_alternative_returns_first_success():
    assert alternative("12%", 0, (number, percentage)) == (12.0, 2)


def test_alternative_raises_furthest_error():
    def fails_late(text, pos):
        raise InvalidColor(text, pos + 5, "late")

    def fails_early(text, pos):
        raise InvalidColor(text, pos, "early")

    with pytest.raises(InvalidColor) as excinfo:
        alternative("abcdefgh", 1, (fails_early, fails_late, fails_early))
    assert excinfo.value.reason == "late"
    assert excinfo.value.position == 6


def test_invalid_color_message():
    error = InvalidColor("rgb(1,2,3", 9, "expected ')'")
    assert isinstance(error, ValueError)
    assert str(error) == "expected ')' at offset 9 in 'rgb(1,2,3'"
