# quirkprintf

`quirkprintf` is a printf-style formatter. It has its own set of conversions
and its own rules for flags. It is not a stand-in for Python's `%` operator or
`str.format`. The output follows this package's rules exactly, odd corners
included.

It has no third-party dependencies.

## Installation

```
pip install quirkprintf
```

To run the test suite:

```
pip install "quirkprintf[test]"
pytest
```

## Usage

```python
from quirkprintf.printer import format_string, printf

format_string("If you multiply %d by %d, the result is %i.\n", 21, 2, 42)
# 'If you multiply 21 by 2, the result is 42.\n'

format_string("%-8s salut\n", "salut")   # 'salut    salut\n'
format_string("%o %x %X", 610, 1515, 1515)  # '1142 5eb 5EB'
format_string("%e", 0.215487)            # '2.154870e-01'
format_string("%S", "salutT")            # 'SALUT'

count = printf("Hello %s\n", "world")  # writes to stdout, returns the count
```

- `format_string(fmt, *args)` returns the formatted text.
- `printf(fmt, *args)` writes the text to standard output and returns the
  output count.

The output count is kept by the formatter's own rules and is not always the
length of the text written. Plain characters, `%d`/`%i`, `%s`, `%c`, `%u` and
`%p` count what they write. `%%` and `%a` add nothing. `%o`, `%x`, `%X` and
`%b` count only their padding, not their digits.

### Conversions

| Specifier | Meaning                                                   |
|-----------|-----------------------------------------------------------|
| `%d` `%i` | signed 32-bit decimal integer                             |
| `%u`      | unsigned 32-bit decimal integer                           |
| `%o`      | octal (`#` writes a leading `0`)                          |
| `%x` `%X` | hexadecimal, lower / upper case                           |
| `%b`      | binary; negative values get a `-` before their magnitude  |
| `%c`      | single character (a one-character string or a code)       |
| `%s`      | string                                                    |
| `%S`      | only the lowercase ASCII letters of a string, upper-cased |
| `%f` `%F` | fixed point with six decimals; infinity is `inf` / `INF`  |
| `%e` `%E` | scientific notation                                       |
| `%a`      | hexadecimal floating point (finite values only)           |
| `%p`      | address as `0x` and lowercase hex digits                  |
| `%n`      | stores the count so far in a `CountRef`                   |
| `%%`      | a literal percent sign                                    |

Negative integers given to `%o`, `%x` and `%X` are shown as their unsigned
32-bit value, so `format_string("%x", -610)` gives `'fffffd9e'`.

### Flags

The flag characters are `-`, `+`, `#`, a space, `0` and `.`.

- `-` followed by a width pads on the right with spaces.
- `0` followed by a width pads on the left: with zeros for numbers, and with
  spaces for `%s`.
- `+` and a space put a sign or a space before `%d`, `%i`, `%f`, `%F` and `%S`.
- `#` applies to `%o`.
- `.` is accepted but has no effect.

A sequence that is not a valid conversion is written as `%` followed by the
character after it, and the scan goes on from there.

### Errors

- Too few arguments raise `TypeError`.
- `%s` and `%S` with a non-string argument raise `TypeError`.
- `%n` with anything but a `CountRef` raises `TypeError`.
- `%a` with an infinite or NaN value raises `ValueError`.

### Capturing the count with `%n`

```python
from quirkprintf.printer import CountRef, format_string

ref = CountRef()
format_string("abc%n", ref)
# ref.value is now 3
```

### Lower-level modules

- `quirkprintf.specifiers` has one `render_*` function for each conversion.
  Each returns a `Rendered` holding `text`, `count` and `index`.
- `quirkprintf.hexfloat` has `format_hex_float` and `render_hex_float`.
- `quirkprintf.scanning` has the `Specifier` enum, the `Flags` dataclass with
  `Flags.parse`, `check_format` and the `find_*` flag lookups.
- `quirkprintf.padding` builds the sign prefixes and the padding.
- `quirkprintf.floats` has `format_float`, `float_length` and
  `exponent_suffix`.
- `quirkprintf.digits` has the integer helpers: `format_int`,
  `format_unsigned`, `format_pointer`, `get_number`, `nb_length`,
  `compute_power`, `count_power`, `count_power_ten`, `get_digit` and
  `upcase_letters`.

## Command line

```
quirkprintf FORMAT [ARG ...]
```

This formats `FORMAT` with the given arguments and writes the result to
standard output. Arguments are converted to suit each conversion:

- integers for `%d %i %o %u %x %X %b`;
- floats for `%f %F %e %E %a`;
- any base-prefixed integer for `%p`;
- a character or a code for `%c`.

A `%n` still takes an argument, and its value is discarded. On a bad or
missing argument the command prints an error to standard error and exits
with status 1.

## What it does not do

- There is no precision field: the `.` flag is ignored and fixed-point output
  always has six decimals.
- There are no length modifiers.
- There is no `%g`.
- NaN is not written as `nan` by `%f`/`%F`.