# ftformat

`ftformat` is a compact printf-style formatter. It covers a small set of
conversions and handles flags, field width and precision the way a C
`printf` does, including its 32-bit integer wrap-around.

## Supported directives

A directive has the form `%[flags][width][.precision]conversion`.

- Flags: `#`, `0`, `-`, ` ` (space) and `+`. If both `-` and `0` are given,
  `0` is ignored. If both `+` and space are given, space is ignored.
- Width: a decimal number, or `*` to take the width from the argument list.
  A negative `*` width turns on left alignment.
- Precision: `.` followed by a decimal number, or `.*` to take it from the
  argument list. A negative `*` precision counts as no precision.
- Conversions:
  - `c`: a single character, given as a one-character `str` or as an
    integer byte value
  - `s`: a `str`; `None` prints as `(null)`
  - `p`: a pointer, given as an integer address (or `None` for null)
  - `d` and `i`: a signed 32-bit integer
  - `u`: an unsigned 32-bit integer
  - `x` and `X`: an unsigned 32-bit integer in lower or upper case hex;
    `#` adds `0x` / `0X` to non-zero values
  - `%`: a literal percent sign

A precision on `d`, `i`, `u`, `x` and `X` sets the minimum number of digits
and turns off the `0` flag; a value of zero with precision zero prints no
digits.

A directive with an unknown conversion character writes nothing, and the
character is then copied as ordinary text. A `%` (with any options) at the
very end of the format writes nothing. Running out of arguments raises
`ValueError`; a `%s` value that is neither `str` nor `None` raises
`TypeError`.

A few results depend on the platform style. Pass `macos=True` to get the
macOS style and `macos=False` to get the glibc style; by default the style
follows the running platform. The differences:

- a null pointer prints `0x0` on macOS and `(nil)` otherwise;
- `%s` with `None` and a precision from 1 to 5 prints nothing in the glibc
  style;
- `%%` is padded to the field width only in the macOS style.

## Usage

```python
from ftformat.printf import format_string, ft_printf

format_string("%5d|%-5s|%#x", 42, "ab", 255)
# '   42|ab   |0xff'

format_string("%.3d %+d % d", 7, 5, 5)
# '007 +5  5'

count = ft_printf("hello %s\n", "world")  # writes to stdout, returns 12
```

`ft_printf` writes to standard output, or to the `file` you pass, and returns
the number of characters counted. That count is the length of the written
text, with one exception: for a null `%p` with a precision, the precision is
added to the count although no zeros are written. `format_string` returns
the formatted text and prints nothing.

The lower-level pieces can be used on their own as well:

- `ftformat.spec.parse_spec(fmt, pos, args)` reads the flags, width and
  precision of one directive starting just after the `%`, and returns a
  `Spec` and the index of the conversion character.
- `ftformat.conversions.render(spec, conversion, args, macos)` turns one
  parsed directive into text, taking its value from the `args` iterator; it
  returns `None` for an unknown conversion. The `render_char`,
  `render_string`, `render_pointer`, `render_signed`, `render_unsigned`,
  `render_hex` and `render_percent` functions handle one conversion each.
- `ftformat.libft` has small string helpers: `atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr` and `strncmp`.

## What it does not do

There are no floating-point conversions (`f`, `e`, `g`), no length
modifiers (`l`, `h`, `ll`) and no command-line tool; the package is a
library only.

## Running the tests

```
pip install -e ".[test]"
pytest
```