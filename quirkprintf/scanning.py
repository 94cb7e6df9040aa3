"""Scanning of conversion specifications: validity checks and flag lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quirkprintf.digits import get_number

_INT_MIN = -(2**31)
_FLAG_CHARS = "-+# 0."


class Specifier(Enum):
    """Conversion characters the formatter understands."""

    D = "d"
    I = "i"  # noqa: E741
    S = "s"
    C = "c"
    PERCENT = "%"
    P = "p"
    O = "o"  # noqa: E741
    U = "u"
    X_LOWER = "x"
    X_UPPER = "X"
    N = "n"
    F_LOWER = "f"
    F_UPPER = "F"
    E_LOWER = "e"
    E_UPPER = "E"
    B = "b"
    S_UPPER = "S"
    A = "a"


def is_flag(char: str) -> bool:
    """Return True for one of the flag characters '-', '+', '#', ' ', '0', '.'."""
    return len(char) == 1 and char in _FLAG_CHARS


def is_specifier(char: str) -> bool:
    """Return True when ``char`` is a conversion character."""
    return specifier_of(char) is not None


def is_number(char: str) -> bool:
    """Return True for an ASCII decimal digit."""
    return len(char) == 1 and "0" <= char <= "9"


def specifier_of(char: str) -> Specifier | None:
    """Return the specifier named by ``char``, or None."""
    try:
        return Specifier(char)
    except ValueError:
        return None


def _absolute(nb: int) -> int:
    """Absolute value of a 32-bit integer; the minimum stays as it is."""
    if nb < 0 and nb != _INT_MIN:
        return -nb
    return nb


def _conversion_end(fmt: str, index: int) -> int:
    """Return the position of the specifier after ``index``, or len(fmt)."""
    position = index + 1
    while position < len(fmt) and not is_specifier(fmt[position]):
        position += 1
    return position


def _between(fmt: str, index: int) -> range:
    """Positions between the '%' at ``index`` and its specifier."""
    return range(index + 1, _conversion_end(fmt, index))


def check_format(fmt: str, index: int) -> Specifier | None:
    """Validate the specification starting at the '%' at ``index``.

    Returns its specifier, or None when the specification is malformed:
    an unknown character, a flag other than '0' after a width digit, a '#'
    not directly before the specifier, or no specifier at all.
    """
    number_found = False
    end = _conversion_end(fmt, index)
    for position in range(index + 1, end):
        char = fmt[position]
        flag = is_flag(char)
        if not flag and not is_number(char):
            return None
        if not flag:
            number_found = True
            continue
        if number_found and char != "0":
            return None
        if char == "#" and not is_specifier(fmt[position + 1 : position + 2]):
            return None
    if end >= len(fmt):
        return None
    return specifier_of(fmt[end])


def next_char_offset(fmt: str, index: int) -> int:
    """Return the distance from the '%' at ``index`` to its specifier."""
    return _conversion_end(fmt, index) - index


def find_plus(fmt: str, index: int) -> bool:
    """Return True when a '+' flag is present."""
    return any(fmt[position] == "+" for position in _between(fmt, index))


def find_space(fmt: str, index: int) -> bool:
    """Return True when a ' ' flag comes before any digit."""
    for position in _between(fmt, index):
        char = fmt[position]
        if is_number(char):
            return False
        if char == " ":
            return True
    return False


def find_hashtag(fmt: str, index: int) -> Specifier | None:
    """Return the specifier right after a '#' flag, or None."""
    for position in _between(fmt, index):
        if fmt[position] == "#":
            following = specifier_of(fmt[position + 1 : position + 2])
            if following is not None:
                return following
    return None


def _width_after(fmt: str, index: int, marker: str) -> int:
    found = False
    for position in _between(fmt, index):
        char = fmt[position]
        if char == marker:
            found = True
        if found and is_number(char):
            return _absolute(get_number(fmt[position:]))
    return 1 if found else 0


def find_minus(fmt: str, index: int) -> int:
    """Return the width following a '-' flag, 1 for a bare '-', 0 if absent."""
    return _width_after(fmt, index, "-")


def find_zero(fmt: str, index: int) -> int:
    """Return the width starting at a '0' flag, 1 if nothing is read, 0 if absent."""
    return _width_after(fmt, index, "0")


@dataclass(frozen=True)
class Flags:
    """Flags found in one conversion specification."""

    plus: bool = False
    space: bool = False
    hashtag: Specifier | None = None
    minus: int = 0
    zero: int = 0

    @classmethod
    def parse(cls, fmt: str, index: int) -> Flags:
        """Collect every flag of the specification at ``index``."""
        return cls(
            plus=find_plus(fmt, index),
            space=find_space(fmt, index),
            hashtag=find_hashtag(fmt, index),
            minus=find_minus(fmt, index),
            zero=find_zero(fmt, index),
        )