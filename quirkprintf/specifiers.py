"""Rendering of each conversion specifier.

Every renderer takes the format string, the position of the '%' that opens
the conversion and the argument. It returns the text to write, how much the
output count grows, and the position the scan goes on from.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

from quirkprintf.digits import (
    count_power,
    count_power_ten,
    format_int,
    format_pointer,
    format_unsigned,
    get_digit,
    nb_length,
    upcase_letters,
)
from quirkprintf.floats import exponent_suffix, float_length, format_float
from quirkprintf.padding import (
    float_zero_padding,
    int_sign_prefix,
    int_zero_padding,
    leading_zero_padding,
    string_sign_prefix,
    string_zero_padding,
    trailing_minus_padding,
    trailing_spaces,
)
from quirkprintf.scanning import Flags, find_hashtag, find_minus, find_zero, next_char_offset

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_UINT32 = 2**32
_ULONG = 2**64
_OCTAL_DIGITS = "012345678"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_BINARY_DIGITS = "01"


@dataclass(frozen=True)
class Rendered:
    """Output of one conversion.

    ``text`` is what gets written, ``count`` is what is added to the running
    output count and ``index`` is the position the scan resumes from.
    """

    text: str
    count: int
    index: int


def _int32(value: int) -> int:
    return (value - _INT_MIN) % _UINT32 + _INT_MIN


def _as_long(value: int) -> int:
    """Read an argument the way a long picks up a promoted int."""
    if value < 0:
        return value % _UINT32
    return value % _ULONG


def _truncate(value: float) -> int:
    """Truncate a float to a 32-bit integer; unrepresentable values give the minimum."""
    if math.isnan(value) or math.isinf(value):
        return _INT_MIN
    truncated = math.trunc(value)
    if not _INT_MIN <= truncated <= _INT_MAX:
        return _INT_MIN
    return truncated


def _decimal_digits(value: int) -> int:
    return len(str(abs(_int32(value))))


def _digit_run(value: int, base: int, alphabet: str) -> str:
    """Write ``value`` digit by digit from the highest power of ``base`` below it."""
    power = 1
    while power < value:
        power *= base
    power //= base
    digits = []
    while power > 0:
        digit = get_digit(value, power)
        if not 0 <= digit < len(alphabet):
            raise ValueError(f"value {value} cannot be rendered in base {base}")
        digits.append(alphabet[digit])
        value -= power * digit
        power //= base
    return "".join(digits)


def _after_specifier(fmt: str, index: int) -> int:
    return index + next_char_offset(fmt, index)


def _require_text(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError("a string argument is required")
    return value


def render_integer(fmt: str, index: int, value: int) -> Rendered:
    """Render %d and %i with the '+', ' ', '-' and '0' flags."""
    value = _int32(int(value))
    flags = Flags.parse(fmt, index)
    digits = _decimal_digits(value)
    text = (
        int_sign_prefix(flags.space, flags.plus, value)
        + int_zero_padding(flags, value)
        + format_int(value)
        + trailing_spaces(flags.minus, flags.plus, flags.space, digits)
    )
    return Rendered(text, digits, _after_specifier(fmt, index))


def render_string(fmt: str, index: int, value: str) -> Rendered:
    """Render %s, padded with spaces on the left ('0') or the right ('-')."""
    text = _require_text(value)
    minus = find_minus(fmt, index)
    zero = find_zero(fmt, index)
    count = 0
    pieces = []
    if zero > 0 and minus == 0:
        padding = " " * max(zero - len(text), 0)
        pieces.append(padding)
        count += len(padding)
    pieces.append(text)
    count += len(text)
    if minus > 0:
        padding = " " * max(minus - len(text), 0)
        pieces.append(padding)
        count += len(padding)
    return Rendered("".join(pieces), count, _after_specifier(fmt, index))


def render_char(fmt: str, index: int, value: int | str) -> Rendered:
    """Render %c, followed by spaces for a '-' width."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("a single character is required")
        char = value
    else:
        char = chr(int(value) & 0xFF)
    minus = find_minus(fmt, index)
    padding = " " * max(minus - 1, 0) if minus > 0 else ""
    return Rendered(char + padding, 1 + len(padding), _after_specifier(fmt, index))


def render_percent(fmt: str, index: int, value: object = None) -> Rendered:
    """Render %% as a single '%'; the output count is left unchanged."""
    return Rendered("%", 0, index + 1)


def render_pointer(fmt: str, index: int, value: int | None) -> Rendered:
    """Render %p as '0x' and lowercase hex digits."""
    text = format_pointer(0 if value is None else int(value))
    return Rendered(text, len(text), index + 1)


def _render_digit_run(
    fmt: str, index: int, value: int, base: int, alphabet: str, prefix: str = ""
) -> Rendered:
    digits = _digit_run(_as_long(int(value)), base, alphabet)
    leading = leading_zero_padding(fmt, index, len(digits))
    trailing = trailing_minus_padding(fmt, index, len(digits))
    return Rendered(
        leading + prefix + digits + trailing,
        len(leading) + len(trailing),
        _after_specifier(fmt, index),
    )


def render_octal(fmt: str, index: int, value: int) -> Rendered:
    """Render %o; '#' puts a '0' before the digits."""
    prefix = "0" if find_hashtag(fmt, index) is not None else ""
    return _render_digit_run(fmt, index, value, 8, _OCTAL_DIGITS, prefix)


def render_unsigned(fmt: str, index: int, value: int) -> Rendered:
    """Render %u as an unsigned 32-bit decimal."""
    text = format_unsigned(int(value))
    return Rendered(text, len(text), index + 1)


def render_hex_lower(fmt: str, index: int, value: int) -> Rendered:
    """Render %x in lowercase hexadecimal."""
    return _render_digit_run(fmt, index, value, 16, _HEX_LOWER)


def render_hex_upper(fmt: str, index: int, value: int) -> Rendered:
    """Render %X in uppercase hexadecimal."""
    return _render_digit_run(fmt, index, value, 16, _HEX_UPPER)


def render_binary(fmt: str, index: int, value: int) -> Rendered:
    """Render %b; negative values get a '-' before their magnitude."""
    number = _int32(int(value))
    sign = ""
    if number < 0:
        sign = "-"
        if number != _INT_MIN:
            number = -number
    digits = _digit_run(number, 2, _BINARY_DIGITS)
    leading = leading_zero_padding(fmt, index, len(digits))
    trailing = trailing_minus_padding(fmt, index, len(digits))
    return Rendered(
        sign + leading + digits + trailing,
        len(leading) + len(trailing),
        _after_specifier(fmt, index),
    )


def _render_fixed(fmt: str, index: int, value: float, upper: bool) -> Rendered:
    number = float(value)
    flags = Flags.parse(fmt, index)
    if upper:
        flags = dataclasses.replace(flags, zero=flags.zero - 1)
    else:
        flags = dataclasses.replace(flags, minus=flags.minus - 1)
    printed = float_length(abs(number), upper)
    text = (
        int_sign_prefix(flags.space, flags.plus, _truncate(number))
        + float_zero_padding(flags, number)
        + format_float(number, upper)
        + trailing_spaces(flags.minus, flags.plus, flags.space, printed)
    )
    return Rendered(text, printed, _after_specifier(fmt, index))


def render_float_lower(fmt: str, index: int, value: float) -> Rendered:
    """Render %f with six decimals."""
    return _render_fixed(fmt, index, value, False)


def render_float_upper(fmt: str, index: int, value: float) -> Rendered:
    """Render %F with six decimals; infinity is written 'INF'."""
    return _render_fixed(fmt, index, value, True)


def _exponent_count(power: int) -> int:
    exponent = count_power_ten(power)
    return 2 + (2 if exponent < 10 else 0) + nb_length(exponent)


def _render_scientific(fmt: str, index: int, value: float, upper: bool) -> Rendered:
    number = float(value)
    power = count_power(number)
    new_index = _after_specifier(fmt, index)
    sign = ""
    if number < 0:
        sign = "-"
        number = -number
    if number == 0:
        letter = "E" if upper else "e"
        return Rendered(sign + "0.000000" + letter + "+00", 4, new_index)
    if number > 1:
        mantissa = number / power
        positive = True
    elif number < 1:
        power *= 10
        mantissa = number * power
        positive = False
    else:
        return Rendered(sign, 0, new_index)
    text = sign + format_float(mantissa, False) + exponent_suffix(power, positive, upper)
    count = float_length(mantissa, False) + _exponent_count(power)
    return Rendered(text, count, new_index)


def render_e_lower(fmt: str, index: int, value: float) -> Rendered:
    """Render %e in scientific notation with a lowercase 'e'."""
    return _render_scientific(fmt, index, value, False)


def render_e_upper(fmt: str, index: int, value: float) -> Rendered:
    """Render %E in scientific notation with an uppercase 'E'."""
    return _render_scientific(fmt, index, value, True)


def render_upcase(fmt: str, index: int, value: str) -> Rendered:
    """Render %S: the lowercase letters of the string, upper-cased."""
    text = _require_text(value)
    flags = Flags.parse(fmt, index)
    printed = len(text)
    rendered = (
        string_sign_prefix(flags.space, flags.plus)
        + string_zero_padding(flags, text)
        + upcase_letters(text)
        + trailing_spaces(flags.minus, flags.plus, flags.space, printed)
    )
    return Rendered(rendered, printed, _after_specifier(fmt, index))