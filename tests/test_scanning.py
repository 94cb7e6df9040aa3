import pytest

from quirkprintf.scanning import (
    Flags,
    Specifier,
    check_format,
    find_hashtag,
    find_minus,
    find_plus,
    find_space,
    find_zero,
    is_flag,
    is_number,
    is_specifier,
    next_char_offset,
    specifier_of,
)


@pytest.mark.parametrize("char", list("discpoxXnfFueEbSa%"))
def test_known_specifiers(char):
    assert is_specifier(char) is True
    assert specifier_of(char).value == char


@pytest.mark.parametrize("char", ["q", "?", "", "z", "1"])
def test_unknown_specifiers(char):
    assert is_specifier(char) is False
    assert specifier_of(char) is None


@pytest.mark.parametrize("char", list("-+# 0."))
def test_flags(char):
    assert is_flag(char) is True


@pytest.mark.parametrize("char", ["1", "?", "", "d"])
def test_not_flags(char):
    assert is_flag(char) is False


def test_is_number():
    assert all(is_number(c) for c in "0123456789")
    assert is_number("a") is False
    assert is_number("") is False


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("%d", Specifier.D),
        ("%-8s salut", Specifier.S),
        ("%015o", Specifier.O),
        ("%#x", Specifier.X_LOWER),
        ("%S", Specifier.S_UPPER),
        ("%%", Specifier.PERCENT),
    ],
)
def test_check_format_valid(fmt, expected):
    assert check_format(fmt, 0) is expected


@pytest.mark.parametrize("fmt", ["%q", "%8-d", "%#-x", "%5", "%"])
def test_check_format_invalid(fmt):
    assert check_format(fmt, 0) is None


def test_check_format_zero_after_width_allowed():
    assert check_format("%80d", 0) is Specifier.D


def test_check_format_at_offset():
    fmt = "Hello %s\n"
    assert check_format(fmt, fmt.index("%")) is Specifier.S


@pytest.mark.parametrize("fmt", ["%d", "%-8s", "%015o", "%+ d"])
def test_next_char_offset_lands_on_specifier(fmt):
    offset = next_char_offset(fmt, 0)
    assert is_specifier(fmt[offset])
    assert not any(is_specifier(c) for c in fmt[1:offset])


def test_next_char_offset_plain():
    assert next_char_offset("%d", 0) == 1


def test_find_plus():
    assert find_plus("%+d", 0) is True
    assert find_plus("%d", 0) is False
    assert find_plus("%d+", 0) is False


def test_find_space():
    assert find_space("% d", 0) is True
    assert find_space("%5 d", 0) is False
    assert find_space("%d", 0) is False


def test_find_hashtag():
    assert find_hashtag("%#o", 0) is Specifier.O
    assert find_hashtag("%#5o", 0) is None
    assert find_hashtag("%o", 0) is None


def test_find_minus_with_width():
    assert find_minus("%-8s salut\n", 0) == 8


def test_find_minus_bare_and_absent():
    assert find_minus("%-s", 0) == 1
    assert find_minus("%s", 0) == 0
    assert find_minus("%8s", 0) == 0


def test_find_minus_at_offset():
    fmt = "abc %-8s"
    assert find_minus(fmt, fmt.index("%")) == 8


def test_find_zero_with_width():
    assert find_zero("%015s\n", 0) == 15
    assert find_zero("%015o\n", 0) == 15


def test_find_zero_absent():
    assert find_zero("%-8s", 0) == 0
    assert find_zero("%s", 0) == 0


def test_flags_parse():
    flags = Flags.parse("%+-8d", 0)
    assert flags == Flags(plus=True, space=False, hashtag=None, minus=8, zero=0)


def test_flags_parse_matches_finders():
    fmt = "%015o"
    flags = Flags.parse(fmt, 0)
    assert flags.zero == find_zero(fmt, 0)
    assert flags.minus == find_minus(fmt, 0)
    assert flags.plus == find_plus(fmt, 0)