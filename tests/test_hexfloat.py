import math

import pytest

from quirkprintf.hexfloat import (
    count_power_two,
    format_hex_float,
    power_two,
    render_hex_float,
)


def test_one_and_zero_are_fixed_strings():
    assert format_hex_float(1.0) == "0x1p+0"
    assert format_hex_float(0.0) == "0x0p+0"
    assert format_hex_float(-0.0) == "0x0p+0"


@pytest.mark.parametrize(
    "value",
    [3.0, 10.0, 100.5, 0.75, 0.3, 1e10, 123.456, 1e-7, 4.0, 0.5, 0.25, 2.0, 1024.0, 5e-324],
)
def test_round_trip_through_fromhex(value):
    assert float.fromhex(format_hex_float(value)) == value


@pytest.mark.parametrize("value", [-3.0, -0.75, -1.0, -1024.0])
def test_negative_values_carry_sign(value):
    text = format_hex_float(value)
    assert text.startswith("-0x")
    assert float.fromhex(text) == value


def test_values_between_one_and_two_use_zero_lead():
    text = format_hex_float(1.5)
    assert text.startswith("0x0.")
    assert "p" not in text


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_values_raise(value):
    with pytest.raises(ValueError):
        format_hex_float(value)


def test_count_power_two_of_one_is_zero():
    assert count_power_two(1.0) == 0


@pytest.mark.parametrize("value", [3.0, 100.5, 0.3, 0.75, 1e-7])
def test_count_power_two_brackets_value(value):
    exponent = count_power_two(value)
    assert 2.0**exponent <= value < 2.0 ** (exponent + 1)


def test_exact_power_counts_like_value_just_below():
    assert count_power_two(8.0) == count_power_two(7.9)


def test_count_power_two_rejects_negative():
    with pytest.raises(ValueError):
        count_power_two(-2.0)


@pytest.mark.parametrize("value", [3.0, 100.5, 0.3, 0.75, 0.5])
def test_power_two_matches_exponent(value):
    assert power_two(value) == 2.0 ** count_power_two(value)


def test_power_two_zero_exponent_gives_starting_value():
    assert power_two(1.5) == 2.0
    assert power_two(2.0) == 2.0


def test_render_hex_float_result():
    fmt = "x=%a!"
    rendered = render_hex_float(fmt, 2, 100.5)
    assert rendered.text == format_hex_float(100.5)
    assert rendered.count == 0
    assert rendered.index == fmt.index("a")