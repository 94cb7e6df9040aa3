"""Integer helpers: digit extraction, powers, lengths and integer rendering."""

from __future__ import annotations

import math

_INT_MIN = -(2**31)
_UINT32 = 2**32
_ULONG = 2**64
_HEX_DIGITS = "0123456789abcdef"
_MAX_PARSED_DIGITS = 11


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - _INT_MIN) % _UINT32 + _INT_MIN


def count_power(nb: float) -> int:
    """Return the power of ten used to bring ``nb`` into scientific form.

    For magnitudes above one this is the largest power of ten not above
    ``nb``; for magnitudes below one it is one, and the caller scales up.
    """
    if nb == 0:
        return 0
    if math.isinf(nb):
        raise ValueError("cannot take the power of ten of an infinite value")
    if nb < 0:
        nb = -nb
    power = 1
    while nb <= 1:
        nb *= 10
        power *= 10
    if nb > 1:
        while power <= nb:
            power *= 10
    return power // 10


def count_power_ten(power: int) -> int:
    """Return the exponent written for a power of ten (at least one)."""
    exponent = 1
    while power > 10:
        power //= 10
        exponent += 1
    return exponent


def get_digit(value: int, power: int) -> int:
    """Return how many times ``power`` fits in ``value`` (-1 if ``value`` is negative)."""
    if power <= 0:
        raise ValueError("power must be positive")
    if value < 0:
        return -1
    return value // power


def compute_power(nb: int, p: int) -> int:
    """Raise ``nb`` to ``p`` with 32-bit wrap-around; negative exponents give 0."""
    if p < 0:
        return 0
    result = 1
    for _ in range(p):
        result = _to_int32(result * nb)
    return result


def nb_length(nb: int) -> int:
    """Return the number of decimal digits of a 32-bit integer, sign excluded.

    The most negative 32-bit value cannot be negated and counts as one digit.
    """
    nb = _to_int32(nb)
    if nb == _INT_MIN:
        return 1
    return len(str(abs(nb)))


def get_number(text: str) -> int:
    """Read the first run of digits in ``text`` as a 32-bit integer.

    Every '-' seen before the digits flips the sign. Returns -1 when no digit
    is found and 0 when the run is longer than eleven digits. Reading stops at
    a NUL or a non-ASCII character.
    """
    minus = 0
    digits = ""
    for char in text:
        if char == "\0" or ord(char) > 127:
            break
        is_digit = "0" <= char <= "9"
        if digits:
            if not is_digit:
                break
            digits += char
        elif char == "-":
            minus += 1
        elif is_digit:
            digits = char
    if not digits:
        return -1
    if len(digits) > _MAX_PARSED_DIGITS:
        return 0
    value = _to_int32(int(digits))
    if minus % 2:
        value = _to_int32(-value)
    return value


def format_int(nb: int) -> str:
    """Render a signed 32-bit integer in decimal."""
    return str(_to_int32(nb))


def format_unsigned(nb: int) -> str:
    """Render an unsigned 32-bit integer in decimal."""
    return str(nb % _UINT32)


def format_pointer(address: int) -> str:
    """Render an address as '0x' followed by lowercase hex digits.

    Addresses of 0 and 1 give a bare '0x'; exact powers of sixteen from 16 up
    have no valid leading digit and raise ValueError.
    """
    address %= _ULONG
    power = 1
    while power < address:
        power *= 16
    power //= 16
    pieces = ["0x"]
    while power > 0:
        digit = get_digit(address, power)
        if not 0 <= digit < len(_HEX_DIGITS):
            raise ValueError(f"address {address:#x} cannot be rendered")
        pieces.append(_HEX_DIGITS[digit])
        address -= power * digit
        power //= 16
    return "".join(pieces)


def upcase_letters(text: str) -> str:
    """Return the lowercase ASCII letters of ``text`` in upper case.

    Every other character is dropped.
    """
    return "".join(char.upper() for char in text if "a" <= char <= "z")