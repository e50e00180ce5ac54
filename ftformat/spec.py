"""Parsing of the flags, width and precision of one conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from ftformat.libft import atoi

_FLAG_CHARS = "#0- +"


@dataclass
class Spec:
    """Options of one conversion: flags, field width and precision."""

    hash: bool = False
    zero: bool = False
    minus: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int = 0
    point: bool = False


def _next_int(args: Iterator[Any]) -> int:
    try:
        return int(next(args))
    except StopIteration:
        raise ValueError("not enough arguments for '*'") from None


def _skip_digits(fmt: str, pos: int) -> int:
    while pos < len(fmt) and "0" <= fmt[pos] <= "9":
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[Spec, int]:
    """Parse the options that start at ``fmt[pos]`` (just after the '%').

    ``args`` is an iterator from which a '*' width or precision is taken.
    Returns the spec and the index of the conversion character.
    """
    spec = Spec()

    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        ch = fmt[pos]
        if ch == "#":
            spec.hash = True
        elif ch == "0":
            spec.zero = True
        elif ch == "-":
            spec.minus = True
        elif ch == " ":
            spec.space = True
        else:
            spec.plus = True
        pos += 1
    if spec.zero and spec.minus:
        spec.zero = False
    if spec.space and spec.plus:
        spec.space = False

    end = _skip_digits(fmt, pos)
    if end > pos:
        spec.width = atoi(fmt[pos:end])
    pos = end
    if pos < len(fmt) and fmt[pos] == "*":
        width = _next_int(args)
        if width < 0:
            spec.minus = True
            width = -width
        spec.width = width
        pos += 1

    if pos < len(fmt) and fmt[pos] == ".":
        spec.point = True
        pos += 1
        end = _skip_digits(fmt, pos)
        if end > pos:
            spec.precision = atoi(fmt[pos:end])
        pos = end
        if pos < len(fmt) and fmt[pos] == "*":
            precision = _next_int(args)
            if precision < 0:
                spec.point = False
                precision = 0
            spec.precision = precision
            pos += 1

    return spec, pos