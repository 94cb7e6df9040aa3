"""Hexadecimal floating-point rendering for the %a conversion."""

from __future__ import annotations

import math

from quirkprintf.digits import format_int
from quirkprintf.scanning import next_char_offset
from quirkprintf.specifiers import Rendered, render_hex_lower

_PRECISION = 12


def count_power_two(nb: float) -> int:
    """Return the binary exponent used to scale ``nb`` for hex output.

    Above one this is one less than the smallest power of two not below
    ``nb``; below one it is the exponent of the largest power of two not
    above ``nb``. One gives zero.
    """
    if nb < 0:
        raise ValueError("the value must not be negative")
    exponent = 0
    power = 1.0
    if nb > 1:
        while power < nb:
            power *= 2
            exponent += 1
        exponent -= 1
    elif nb < 1:
        while power > nb:
            power /= 2
            exponent += 1
        exponent = -exponent
    return exponent


def power_two(nb: float) -> float:
    """Return two raised to ``count_power_two(nb)``.

    When that exponent is zero the unscaled starting value 2 is returned.
    """
    exponent = count_power_two(nb)
    if exponent == 0:
        return 2.0
    return math.ldexp(1.0, exponent)


def _hex_digit(value: int) -> str:
    return render_hex_lower("%x", 0, value).text


def _exponent_text(nb: float, exact: bool, offset: int) -> str:
    exponent = offset + count_power_two(nb) + (1 if exact else 0)
    if exponent > 0:
        return "p+" + format_int(exponent)
    if exponent < 0:
        return "p" + format_int(exponent)
    return ""


def _exact_power_text(power: float, nb: float) -> str | None:
    if nb == 2:
        power /= 2
    if nb == power * 2 or nb == power:
        return "1" + _exponent_text(nb, True, -1 if nb < 1 else 0)
    return None


def _hex_magnitude(nb: float) -> str:
    power = power_two(nb)
    exact = _exact_power_text(power, nb)
    if exact is not None:
        return "0x" + exact
    scaled = nb / power
    left = int(scaled)
    pieces = ["0x", format_int(left), "."]
    scaled = (scaled - left) * 16
    left = int(scaled)
    precision = _PRECISION
    while precision > -1 and scaled != 0:
        pieces.append(format_int(left) if left <= 9 else _hex_digit(left))
        scaled = (scaled - left) * 16
        left = int(scaled)
        precision -= 1
    if scaled != 0:
        pieces.append(_hex_digit(int(scaled)))
    pieces.append(_exponent_text(nb, False, 0))
    return "".join(pieces)


def format_hex_float(value: float) -> str:
    """Render ``value`` in hexadecimal floating-point notation."""
    nb = float(value)
    if math.isnan(nb) or math.isinf(nb):
        raise ValueError("only finite values can be rendered in hex")
    sign = ""
    if nb < 0:
        nb = -nb
        sign = "-"
    if nb == 1:
        return sign + "0x1p+0"
    if nb == 0:
        return sign + "0x0p+0"
    return sign + _hex_magnitude(nb)


def render_hex_float(fmt: str, index: int, value: float) -> Rendered:
    """Render %a; the output count is left unchanged."""
    text = format_hex_float(value)
    return Rendered(text, 0, index + next_char_offset(fmt, index))