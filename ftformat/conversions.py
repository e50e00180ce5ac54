"""Rendering of single conversions: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

from operator import index
from typing import Any, Iterator

from ftformat.libft import strncmp, substr
from ftformat.spec import Spec

_NULL_STRING = "(null)"
_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF

CONVERSIONS = "cspdiuxX%"


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format string") from None


def _to_int32(value: Any) -> int:
    n = index(value) & _UINT_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def _to_uint32(value: Any) -> int:
    return index(value) & _UINT_MASK


def _layout(spec: Spec, prefix: str, digits: str, diff: int, zero: bool) -> str:
    """Assemble prefix, precision zeros and digits inside the field width."""
    length = len(prefix) + diff + len(digits)
    fill = "0" if zero else " "
    padding = fill * max(spec.width - length, 0)
    left = "" if spec.minus else padding
    head = prefix + left if zero else left + prefix
    tail = padding if spec.minus else ""
    return head + "0" * diff + digits + tail


def render_char(spec: Spec, value: Any) -> str:
    """Render a %c conversion; an int is taken as a byte value."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        ch = value
    else:
        ch = chr(index(value) & 0xFF)
    padding = " " * max(spec.width - 1, 0)
    return ch + padding if spec.minus else padding + ch


def render_string(spec: Spec, value: str | None, macos: bool) -> str:
    """Render a %s conversion; None prints as "(null)"."""
    source = _NULL_STRING if value is None else value
    if not isinstance(source, str):
        raise TypeError("%s needs a str or None")
    if spec.point:
        precision = spec.precision
        if (
            not macos
            and 0 < precision < 6
            and strncmp(source, _NULL_STRING, 6) == 0
        ):
            precision = 0
        text = substr(source, 0, precision)
    else:
        text = source
    padding = " " * max(spec.width - len(text), 0)
    return text + padding if spec.minus else padding + text


def render_pointer(spec: Spec, value: int | None, macos: bool) -> str:
    """Render a %p conversion; a null address is "0x0" or "(nil)"."""
    address = 0 if value is None else index(value) & _POINTER_MASK
    if address == 0:
        body = "0x0" if macos else "(nil)"
        counted = len(body) + max(spec.precision, 0)
    else:
        digits = format(address, "x")
        diff = max(spec.precision - len(digits), 0)
        body = "0x" + "0" * diff + digits
        counted = len(body)
    padding = " " * max(spec.width - counted, 0)
    return body + padding if spec.minus else padding + body


def render_signed(spec: Spec, value: Any) -> str:
    """Render a %d or %i conversion of a 32-bit signed value."""
    nb = _to_int32(value)
    digits = str(abs(nb))
    diff = max(spec.precision - len(digits), 0)
    if nb == 0 and spec.point and spec.precision == 0:
        digits = ""
    if nb < 0:
        sign = "-"
    else:
        sign = (" " if spec.space else "") + ("+" if spec.plus else "")
    zero = spec.zero and not spec.point
    return _layout(spec, sign, digits, diff, zero)


def render_unsigned(spec: Spec, value: Any) -> str:
    """Render a %u conversion of a 32-bit unsigned value."""
    nb = _to_uint32(value)
    digits = str(nb)
    if nb == 0 and spec.point and spec.precision == 0:
        digits = ""
    diff = max(spec.precision - len(digits), 0)
    zero = spec.zero and not spec.point
    return _layout(spec, "", digits, diff, zero)


def render_hex(spec: Spec, value: Any, upper: bool) -> str:
    """Render a %x (or %X when ``upper``) conversion of a 32-bit value."""
    nb = _to_uint32(value)
    digits = format(nb, "X" if upper else "x")
    if nb == 0 and spec.point and spec.precision == 0:
        digits = ""
    diff = max(spec.precision - len(digits), 0)
    prefix = ("0X" if upper else "0x") if spec.hash and nb != 0 else ""
    zero = spec.zero and not spec.point
    return _layout(spec, prefix, digits, diff, zero)


def render_percent(spec: Spec, macos: bool) -> str:
    """Render a %% conversion; the field width applies on macOS only."""
    if not macos:
        return "%"
    fill = "0" if spec.zero else " "
    padding = fill * max(spec.width - 1, 0)
    return "%" + padding if spec.minus else padding + "%"


def render(spec: Spec, conversion: str, args: Iterator[Any], macos: bool) -> str | None:
    """Render one conversion, taking its value from ``args`` when it needs one.

    Returns None when ``conversion`` is not a known conversion character;
    no argument is taken in that case.
    """
    if conversion == "c":
        return render_char(spec, _take(args))
    if conversion == "s":
        return render_string(spec, _take(args), macos)
    if conversion == "p":
        return render_pointer(spec, _take(args), macos)
    if conversion in ("d", "i"):
        return render_signed(spec, _take(args))
    if conversion == "u":
        return render_unsigned(spec, _take(args))
    if conversion in ("x", "X"):
        return render_hex(spec, _take(args), conversion == "X")
    if conversion == "%":
        return render_percent(spec, macos)
    return None