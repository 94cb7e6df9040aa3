"""Sign prefixes and padding produced by the formatting flags."""

from __future__ import annotations

import math
import struct

from quirkprintf.digits import nb_length
from quirkprintf.floats import float_length
from quirkprintf.scanning import Flags, find_minus, find_zero

_FLOAT_MAX = 3.4028234663852886e38


def _as_single(value: float) -> float:
    """Round a double to single precision, overflowing to infinity."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def int_sign_prefix(space: bool, plus: bool, value: int) -> str:
    """Return the '+' or ' ' written before an integer."""
    if plus:
        return "+" if value >= 0 else ""
    if space:
        return " "
    return ""


def int_zero_padding(flags: Flags, value: int) -> str:
    """Return the zeros written before an integer for the '0' flag."""
    if flags.zero <= 0 or flags.minus != 0:
        return ""
    room = 1 if flags.plus or flags.space else 0
    count = flags.zero - nb_length(value) - room
    return "0" * max(count, 0)


def float_zero_padding(flags: Flags, value: float) -> str:
    """Return the zeros written before a float for the '0' flag.

    The width is measured on the value rounded to single precision.
    """
    if flags.zero <= 0 or flags.minus != 0:
        return ""
    width = float_length(_as_single(value), False)
    room = 1 if flags.plus or flags.space else 0
    count = flags.zero - width - room
    return "0" * max(count, 0)


def trailing_spaces(minus: int, plus: bool, space: bool, printed: int) -> str:
    """Return the spaces written after a value for the '-' flag."""
    if minus <= 0:
        return ""
    room = 1 if plus or space else 0
    count = minus - printed - room
    return " " * max(count, 0)


def string_sign_prefix(space: bool, plus: bool) -> str:
    """Return the '+' or ' ' written before an upper-cased string."""
    if plus:
        return "+"
    if space:
        return " "
    return ""


def string_zero_padding(flags: Flags, text: str) -> str:
    """Return the zeros written before a string for the '0' flag."""
    if flags.zero <= 0 or flags.minus != 0:
        return ""
    room = 1 if flags.plus or flags.space else 0
    count = flags.zero - len(text) - room
    return "0" * max(count, 0)


def leading_zero_padding(fmt: str, index: int, length: int) -> str:
    """Return the zeros written before a digit run of ``length`` characters."""
    minus = find_minus(fmt, index)
    zero = find_zero(fmt, index)
    if zero > 0 and minus == 0:
        return "0" * max(zero - length, 0)
    return ""


def trailing_minus_padding(fmt: str, index: int, length: int) -> str:
    """Return the spaces written after a digit run of ``length`` characters."""
    minus = find_minus(fmt, index)
    if minus > 0:
        return " " * max(minus - length, 0)
    return ""