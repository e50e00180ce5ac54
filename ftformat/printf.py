"""The formatting loop: literal text, conversions and the character count."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from ftformat.conversions import render, render_pointer
from ftformat.spec import parse_spec


def _default_macos() -> bool:
    return sys.platform == "darwin"


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format string") from None


def _format(fmt: str, args: tuple[Any, ...], macos: bool) -> tuple[str, int]:
    """Format ``fmt`` and return the text and the character count reported.

    The count equals the length of the text except for a null %p with a
    precision, where the precision is counted although no zeros are written.
    """
    values = iter(args)
    pieces: list[str] = []
    count = 0
    pos = 0
    length = len(fmt)
    while pos < length:
        percent = fmt.find("%", pos)
        if percent < 0:
            percent = length
        literal = fmt[pos:percent]
        pieces.append(literal)
        count += len(literal)
        pos = percent
        if pos >= length:
            break
        spec, pos = parse_spec(fmt, pos + 1, values)
        if pos >= length:
            break
        conversion = fmt[pos]
        if conversion == "p":
            value = _take(values)
            text = render_pointer(spec, value, macos)
            extra = spec.precision if value is None or value == 0 else 0
        else:
            text = render(spec, conversion, values, macos)
            extra = 0
        if text is None:
            # Unknown conversion: nothing is written and the character
            # itself is then copied as ordinary text.
            continue
        pieces.append(text)
        count += len(text) + extra
        pos += 1
    return "".join(pieces), count


def format_string(fmt: str, *args: Any, macos: bool | None = None) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``.

    ``macos`` selects the platform variant for %p, %s and %%; by default
    it follows the running platform.
    """
    if macos is None:
        macos = _default_macos()
    text, _ = _format(fmt, args, macos)
    return text


def ft_printf(
    fmt: str,
    *args: Any,
    file: TextIO | None = None,
    macos: bool | None = None,
) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters the formatter counted.
    """
    if macos is None:
        macos = _default_macos()
    text, count = _format(fmt, args, macos)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return count