"""Fixed-point float rendering and the exponent suffix of scientific form."""

from __future__ import annotations

import math

from quirkprintf.digits import count_power_ten, format_int, nb_length

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MAX_LEADING_ZEROS = 5


def _c_int(value: float) -> int:
    """Truncate to a 32-bit integer; out-of-range and NaN give the minimum."""
    if math.isnan(value) or math.isinf(value):
        return _INT_MIN
    truncated = math.trunc(value)
    if not _INT_MIN <= truncated <= _INT_MAX:
        return _INT_MIN
    return truncated


def _c_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _zeros_after_point(nb: float) -> int:
    """Count the zeros written right after the decimal point (at most five)."""
    difference = nb - _c_int(nb)
    power_of_ten = 1.0
    count = 0
    while count < _MAX_LEADING_ZEROS and power_of_ten / 10 > difference:
        power_of_ten /= 10
        count += 1
    return count


def _rounded_fraction(fraction: float) -> int:
    for _ in range(7):
        fraction *= 10
    digits = _c_int(fraction)
    if _c_mod(digits, 10) >= 5:
        return _c_div(digits, 10) + 1
    return _c_div(digits, 10)


def format_float(nb: float, upper: bool = False) -> str:
    """Render ``nb`` with six decimals the way the formatter writes it."""
    sign = ""
    if nb < 0:
        nb = -nb
        sign = "-"
    if nb == math.inf:
        return sign + ("INF" if upper else "inf")
    scaled = _c_int(nb * 1000000)
    if _c_mod(scaled, 10) == 0:
        return (
            sign
            + format_int(_c_int(nb))
            + "."
            + "0" * _zeros_after_point(nb)
            + format_int(_c_mod(scaled, 1000000))
        )
    whole = _c_int(nb)
    fraction = nb - whole
    if fraction == 0:
        return sign + format_int(whole) + ".000000"
    return (
        sign
        + format_int(whole)
        + "."
        + "0" * _zeros_after_point(nb)
        + format_int(_rounded_fraction(fraction))
    )


def float_length(nb: float, upper: bool = False) -> int:
    """Return the width the formatter assumes for ``format_float(nb)``.

    This count leaves out the sign and the zeros right after the point, and
    the decimal point too when the value is not a multiple of 1e-5; positive
    infinity counts as zero.
    """
    if nb == math.inf:
        return 0
    scaled = _c_int(nb * 1000000)
    if _c_mod(scaled, 10) == 0:
        return nb_length(_c_int(nb)) + 1 + nb_length(_c_mod(scaled, 1000000))
    if nb < 0:
        nb = -nb
    whole = _c_int(nb)
    fraction = nb - whole
    if fraction == 0:
        return nb_length(whole) + 7
    return nb_length(whole) + nb_length(_rounded_fraction(fraction))


def exponent_suffix(power: int, positive: bool, upper: bool = False) -> str:
    """Return the 'e+NN' style suffix for the given power of ten."""
    exponent = count_power_ten(power)
    letter = "E" if upper else "e"
    sign = "+" if positive else "-"
    padding = "0" if exponent < 10 else ""
    return letter + sign + padding + format_int(exponent)