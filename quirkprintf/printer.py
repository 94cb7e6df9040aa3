"""The formatter: walks a format string and writes its conversions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from quirkprintf.hexfloat import render_hex_float
from quirkprintf.scanning import Specifier, check_format
from quirkprintf.specifiers import (
    Rendered,
    render_binary,
    render_char,
    render_e_lower,
    render_e_upper,
    render_float_lower,
    render_float_upper,
    render_hex_lower,
    render_hex_upper,
    render_integer,
    render_octal,
    render_percent,
    render_pointer,
    render_string,
    render_unsigned,
    render_upcase,
)


@dataclass
class CountRef:
    """Receives the output count for a %n conversion."""

    value: int = 0


_RENDERERS: dict[Specifier, Callable[[str, int, Any], Rendered]] = {
    Specifier.D: render_integer,
    Specifier.I: render_integer,
    Specifier.S: render_string,
    Specifier.C: render_char,
    Specifier.P: render_pointer,
    Specifier.O: render_octal,
    Specifier.U: render_unsigned,
    Specifier.X_LOWER: render_hex_lower,
    Specifier.X_UPPER: render_hex_upper,
    Specifier.F_LOWER: render_float_lower,
    Specifier.F_UPPER: render_float_upper,
    Specifier.E_LOWER: render_e_lower,
    Specifier.E_UPPER: render_e_upper,
    Specifier.B: render_binary,
    Specifier.S_UPPER: render_upcase,
    Specifier.A: render_hex_float,
}

Converter = Callable[[Specifier, Any], Any]


def _take(pending: Iterator[Any], spec: Specifier, convert: Converter | None) -> Any:
    try:
        raw = next(pending)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return convert(spec, raw) if convert is not None else raw


def _render(fmt: str, args: Iterable[Any], convert: Converter | None = None) -> tuple[str, int]:
    """Return the formatted text and the output count."""
    fmt = fmt.split("\0", 1)[0]
    pending = iter(args)
    pieces: list[str] = []
    count = 0
    position = 0
    while position < len(fmt):
        char = fmt[position]
        if char != "%" or position + 1 >= len(fmt):
            pieces.append(char)
            count += 1
            position += 1
            continue
        spec = check_format(fmt, position)
        if spec is None:
            pieces.append("%" + fmt[position + 1])
            position += 2
            continue
        if spec is Specifier.PERCENT:
            rendered = render_percent(fmt, position)
        elif spec is Specifier.N:
            target = _take(pending, spec, convert)
            if not isinstance(target, CountRef):
                raise TypeError("%n requires a CountRef argument")
            target.value = count
            position += 2
            continue
        else:
            rendered = _RENDERERS[spec](fmt, position, _take(pending, spec, convert))
        pieces.append(rendered.text)
        count += rendered.count
        position = rendered.index + 1
    return "".join(pieces), count


def format_string(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write."""
    text, _ = _render(fmt, args)
    return text


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the output count."""
    text, count = _render(fmt, args)
    sys.stdout.write(text)
    return count


_INTEGER_SPECS = {
    Specifier.D,
    Specifier.I,
    Specifier.O,
    Specifier.U,
    Specifier.X_LOWER,
    Specifier.X_UPPER,
    Specifier.B,
}
_FLOAT_SPECS = {
    Specifier.F_LOWER,
    Specifier.F_UPPER,
    Specifier.E_LOWER,
    Specifier.E_UPPER,
    Specifier.A,
}


def _convert_cli(spec: Specifier, raw: str) -> Any:
    if spec in _INTEGER_SPECS:
        return int(raw)
    if spec in _FLOAT_SPECS:
        return float(raw)
    if spec is Specifier.P:
        return int(raw, 0)
    if spec is Specifier.C:
        return raw if len(raw) == 1 else int(raw)
    if spec is Specifier.N:
        return CountRef()
    return raw


def main(argv: list[str] | None = None) -> int:
    """Format command-line arguments and write them to standard output."""
    parser = argparse.ArgumentParser(
        prog="quirkprintf",
        description="Format arguments and write them to standard output.",
    )
    parser.add_argument("format", help="format string")
    parser.add_argument("arguments", nargs="*", help="values for the conversions")
    namespace = parser.parse_args(argv)
    try:
        text, _ = _render(namespace.format, namespace.arguments, _convert_cli)
    except (TypeError, ValueError) as error:
        print(f"quirkprintf: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(text)
    return 0